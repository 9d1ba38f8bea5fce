from fastapi import APIRouter, Depends
import requests

from app.dependencies import get_pinata_client, get_telemetry_client
from app.services.pinata_client import PinataClient
from app.services.telemetry_client import TelemetryClient

router = APIRouter()

@router.get("/health")
def health():
    return {"ok": True}

@router.get("/health/services")
def health_services(
    telemetry: TelemetryClient = Depends(get_telemetry_client),
    pinata: PinataClient = Depends(get_pinata_client),
):
    out = {}
    for name, probe in (("telemetry_store", telemetry.probe), ("pinata", pinata.probe)):
        try:
            r = probe()
            out[name] = {"ok": r.status_code == 200, "status_code": r.status_code}
        except requests.RequestException as e:
            out[name] = {"ok": False, "error": str(e)}
    return out
