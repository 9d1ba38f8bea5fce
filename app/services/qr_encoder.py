import base64
import io
import json
import logging

import qrcode
from PIL import Image
from qrcode.constants import ERROR_CORRECT_M
from qrcode.exceptions import DataOverflowError

from app.exceptions import EncodingError
from app.schemas.satellite_nft import SatelliteRecord

logger = logging.getLogger(__name__)

IMAGE_WIDTH_PX = 400
QUIET_ZONE_MODULES = 2
FILL_COLOR = "#000000"
BACK_COLOR = "#FFFFFF"
DATA_URL_PREFIX = "data:image/png;base64,"


def serialize_record(record: SatelliteRecord) -> str:
    return json.dumps(record.model_dump(), indent=2, ensure_ascii=False)


def render_qr_png(payload: str) -> bytes:
    qr = qrcode.QRCode(
        version=None,
        error_correction=ERROR_CORRECT_M,
        box_size=10,
        border=QUIET_ZONE_MODULES,
    )
    try:
        qr.add_data(payload)
        qr.make(fit=True)
    except (DataOverflowError, ValueError) as e:
        raise EncodingError(f"Failed to generate QR code: {e}")

    img = qr.make_image(fill_color=FILL_COLOR, back_color=BACK_COLOR).get_image()
    img = img.convert("RGB").resize((IMAGE_WIDTH_PX, IMAGE_WIDTH_PX), Image.Resampling.NEAREST)

    buf = io.BytesIO()
    img.save(buf, format="PNG")
    logger.debug("Rendered QR version %s, %d bytes", qr.version, buf.tell())
    return buf.getvalue()


def encode_record(record: SatelliteRecord) -> bytes:
    return render_qr_png(serialize_record(record))


def to_data_url(png: bytes) -> str:
    return DATA_URL_PREFIX + base64.b64encode(png).decode("ascii")
