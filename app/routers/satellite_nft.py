from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse

from app.dependencies import get_orchestrator, get_selector
from app.exceptions import NotFound, TelemetryStoreError
from app.schemas.satellite_nft import NFTGenerationRequest, SatelliteRecord
from app.services.orchestrator_service import OrchestratorService
from app.services.record_selector import RecordSelector

router = APIRouter()

@router.post("/generate-nft")
def generate_nft(req: NFTGenerationRequest, orchestrator: OrchestratorService = Depends(get_orchestrator)):
    result = orchestrator.generate(req)
    return JSONResponse(status_code=200 if result.success else 500, content=result.to_body())

@router.get("/satellite/latest", response_model=SatelliteRecord)
def latest_record(selector: RecordSelector = Depends(get_selector)):
    try:
        return selector.latest()
    except NotFound as e:
        raise HTTPException(404, str(e))
    except TelemetryStoreError as e:
        raise HTTPException(502, str(e))
