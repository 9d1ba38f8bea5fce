from typing import Optional

from fastapi import FastAPI

from app.config import Settings, load_settings
from app.logging_config import configure_logging
from app.routers import health, satellite_nft

def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or load_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="Satellite NFT Gateway")
    app.state.settings = settings

    app.include_router(satellite_nft.router, prefix="/api")
    app.include_router(health.router, prefix="/api")
    return app

app = create_app()
