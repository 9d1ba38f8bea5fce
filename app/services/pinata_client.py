import logging
from typing import Dict

import requests

from app.config import Settings
from app.exceptions import PublishError

logger = logging.getLogger(__name__)

PIN_FILE_PATH = "/pinning/pinFileToIPFS"
TEST_AUTH_PATH = "/data/testAuthentication"


class PinataClient:
    """Pins files on the IPFS pinning gateway. One attempt per call, no retry."""

    def __init__(self, settings: Settings, session: requests.Session = None):
        self.settings = settings
        self.http = session or requests.Session()

    def _url(self, path: str) -> str:
        return self.settings.pinata_api_url.rstrip("/") + path

    def _headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self.settings.pinata_jwt}"}

    def pin_file(self, content: bytes, file_name: str, content_type: str = "image/png") -> str:
        files = {"file": (file_name, content, content_type)}
        try:
            resp = self.http.post(
                self._url(PIN_FILE_PATH),
                files=files,
                headers=self._headers(),
                timeout=self.settings.http_timeout,
            )
        except requests.Timeout as e:
            raise PublishError(f"Failed to upload to Pinata: timeout ({e})", retryable=True)
        except requests.RequestException as e:
            raise PublishError(f"Failed to upload to Pinata: {e}", retryable=True)

        if resp.status_code != 200:
            raise PublishError(
                f"Pinata upload failed with status: {resp.status_code}",
                retryable=resp.status_code >= 500 or resp.status_code == 429,
                details={"status_code": resp.status_code},
            )

        try:
            body = resp.json()
        except ValueError:
            raise PublishError("Pinata returned non-JSON")

        ipfs_hash = body.get("IpfsHash") if isinstance(body, dict) else None
        if not ipfs_hash:
            raise PublishError("Pinata response missing IpfsHash")

        logger.info("Pinned %s as %s", file_name, ipfs_hash)
        return f"ipfs://{ipfs_hash}"

    def probe(self) -> requests.Response:
        return self.http.get(self._url(TEST_AUTH_PATH), headers=self._headers(), timeout=(2, 2))
