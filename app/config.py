import os
from typing import Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

from app.exceptions import ConfigError

load_dotenv()

REQUIRED_VARS = ("FIREBASE_URL", "FIREBASE_SECRET", "PINATA_JWT", "NFT_CONTRACT_ADDRESS")


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    firebase_url: str
    firebase_secret: str
    pinata_jwt: str
    nft_contract_address: str

    pinata_api_url: str = "https://api.pinata.cloud"
    http_connect_timeout_s: float = 3.0
    http_read_timeout_s: float = 30.0
    log_level: str = "INFO"

    @property
    def http_timeout(self):
        return (self.http_connect_timeout_s, self.http_read_timeout_s)


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """Build the settings object once at startup; fails fast on missing values."""
    env = os.environ if env is None else env

    missing = [name for name in REQUIRED_VARS if not env.get(name)]
    if missing:
        raise ConfigError(f"Missing required configuration: {', '.join(missing)} must be set")

    try:
        connect_t = float(env.get("HTTP_CONNECT_TIMEOUT_S", "3.0"))
        read_t = float(env.get("HTTP_READ_TIMEOUT_S", "30.0"))
    except ValueError as e:
        raise ConfigError(f"Invalid HTTP timeout: {e}")

    return Settings(
        firebase_url=env["FIREBASE_URL"],
        firebase_secret=env["FIREBASE_SECRET"],
        pinata_jwt=env["PINATA_JWT"],
        nft_contract_address=env["NFT_CONTRACT_ADDRESS"],
        pinata_api_url=env.get("PINATA_API_URL", "https://api.pinata.cloud"),
        http_connect_timeout_s=connect_t,
        http_read_timeout_s=read_t,
        log_level=env.get("LOG_LEVEL", "INFO").upper(),
    )
