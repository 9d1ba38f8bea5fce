import base64
import io
import json

import pytest
from PIL import Image

from app.exceptions import EncodingError
from app.schemas.satellite_nft import SatelliteRecord
from app.services.qr_encoder import encode_record, render_qr_png, serialize_record, to_data_url


@pytest.fixture
def record(record_b):
    return SatelliteRecord(**record_b)


def test_serialize_record_is_indented_and_ordered(record):
    text = serialize_record(record)
    assert text.startswith('{\n  "timestamp": "2024-06-01T00:00:00Z",\n  "temperature": 25,')
    assert list(json.loads(text).keys()) == ["timestamp", "temperature", "humidity", "light", "air_quality"]


def test_encode_record_renders_square_png(record):
    png = encode_record(record)
    assert png[:8] == b"\x89PNG\r\n\x1a\n"

    img = Image.open(io.BytesIO(png))
    assert img.format == "PNG"
    assert img.size == (400, 400)
    colors = {c for _, c in img.convert("RGB").getcolors()}
    assert colors == {(0, 0, 0), (255, 255, 255)}


def test_quiet_zone_is_white(record):
    img = Image.open(io.BytesIO(encode_record(record))).convert("RGB")
    for x in range(0, 400, 7):
        assert img.getpixel((x, 0)) == (255, 255, 255)
        assert img.getpixel((0, x)) == (255, 255, 255)


def test_oversized_payload_raises():
    with pytest.raises(EncodingError, match="Failed to generate QR code"):
        render_qr_png("x" * 5000)


def test_to_data_url():
    url = to_data_url(b"\x89PNG-bytes")
    assert url.startswith("data:image/png;base64,")
    assert base64.b64decode(url.split(",", 1)[1]) == b"\x89PNG-bytes"


def test_round_trip_decodes_to_serialized_text(record):
    cv2 = pytest.importorskip("cv2")
    np = pytest.importorskip("numpy")

    png = encode_record(record)
    img = cv2.imdecode(np.frombuffer(png, dtype=np.uint8), cv2.IMREAD_GRAYSCALE)
    # detector is happier with the standard four-module quiet zone
    img = cv2.copyMakeBorder(img, 40, 40, 40, 40, cv2.BORDER_CONSTANT, value=255)

    decoded, _, _ = cv2.QRCodeDetector().detectAndDecode(img)
    assert decoded == serialize_record(record)
