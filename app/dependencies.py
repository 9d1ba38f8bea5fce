import requests
from fastapi import Depends, Request

from app.config import Settings
from app.services.orchestrator_service import OrchestratorService
from app.services.pinata_client import PinataClient
from app.services.record_selector import RecordSelector
from app.services.telemetry_client import TelemetryClient

def get_settings(request: Request) -> Settings:
    return request.app.state.settings

def get_http_session():
    with requests.Session() as session:
        yield session

def get_telemetry_client(
    settings: Settings = Depends(get_settings),
    session: requests.Session = Depends(get_http_session),
) -> TelemetryClient:
    return TelemetryClient(settings, session=session)

def get_pinata_client(
    settings: Settings = Depends(get_settings),
    session: requests.Session = Depends(get_http_session),
) -> PinataClient:
    return PinataClient(settings, session=session)

def get_selector(client: TelemetryClient = Depends(get_telemetry_client)) -> RecordSelector:
    return RecordSelector(client)

def get_orchestrator(
    settings: Settings = Depends(get_settings),
    selector: RecordSelector = Depends(get_selector),
    publisher: PinataClient = Depends(get_pinata_client),
) -> OrchestratorService:
    return OrchestratorService(selector, publisher, settings.nft_contract_address)
