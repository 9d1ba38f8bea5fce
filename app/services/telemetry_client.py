import logging
from typing import Any

import requests

from app.config import Settings
from app.exceptions import TelemetryStoreError

logger = logging.getLogger(__name__)


class TelemetryClient:
    """Reads the raw telemetry tree from the realtime database REST endpoint."""

    def __init__(self, settings: Settings, session: requests.Session = None):
        self.settings = settings
        self.http = session or requests.Session()

    def _url(self) -> str:
        return self.settings.firebase_url.rstrip("/") + ".json"

    def fetch_tree(self) -> Any:
        try:
            resp = self.http.get(
                self._url(),
                params={"auth": self.settings.firebase_secret},
                timeout=self.settings.http_timeout,
            )
        except requests.Timeout as e:
            raise TelemetryStoreError(f"Telemetry store timed out: {e}", retryable=True)
        except requests.RequestException as e:
            raise TelemetryStoreError(f"Telemetry store unreachable: {e}", retryable=True)

        if resp.status_code < 200 or resp.status_code >= 300:
            raise TelemetryStoreError(
                f"Telemetry store returned HTTP {resp.status_code}",
                retryable=resp.status_code >= 500,
            )

        try:
            return resp.json()
        except ValueError:
            raise TelemetryStoreError("Telemetry store returned non-JSON")

    def probe(self) -> requests.Response:
        # shallow=true keeps the health check from downloading the whole tree
        return self.http.get(
            self._url(),
            params={"auth": self.settings.firebase_secret, "shallow": "true"},
            timeout=(2, 2),
        )
