import logging
import time
from typing import Callable

from app.exceptions import PipelineError
from app.schemas.satellite_nft import NFTGenerationRequest, NFTGenerationResponse, SatelliteRecord
from app.services.pinata_client import PinataClient
from app.services.qr_encoder import encode_record, to_data_url
from app.services.record_selector import RecordSelector

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Satellite NFT generated successfully!"
FAILURE_MESSAGE = "Failed to generate satellite NFT"


class OrchestratorService:
    """Runs select -> encode -> publish for one request and builds the response.

    Stages run strictly in order. Any stage failure turns into the failure
    envelope; nothing is retried. A pinned file is not unpinned if a later
    step fails, so adding a stage after publishing needs a compensation step.
    """

    def __init__(
        self,
        selector: RecordSelector,
        publisher: PinataClient,
        contract_address: str,
        encoder: Callable[[SatelliteRecord], bytes] = encode_record,
        clock: Callable[[], float] = time.time,
    ):
        self.selector = selector
        self.publisher = publisher
        self.contract_address = contract_address
        self.encoder = encoder
        self.clock = clock

    def _file_name(self) -> str:
        return f"satellite-nft-{int(self.clock() * 1000)}.png"

    def generate(self, req: NFTGenerationRequest) -> NFTGenerationResponse:
        # payment fields are logged only; nothing checks them against a ledger yet
        logger.info("Starting NFT generation tx=%s wallet=%s amount=%s",
                    req.transaction_hash, req.wallet_address, req.amount)
        try:
            record = self.selector.latest()
            logger.info("Latest satellite record: %s", record.model_dump())

            png = self.encoder(record)

            ipfs_url = self.publisher.pin_file(png, self._file_name())

        except PipelineError as e:
            logger.error("NFT generation failed [%s]: %s", e.code, e)
            return self._failure(str(e))

        except Exception as e:
            logger.exception("NFT generation failed unexpectedly")
            return self._failure(str(e) or "Unknown error")

        logger.info("NFT generation completed: %s", ipfs_url)
        return NFTGenerationResponse(
            success=True,
            message=SUCCESS_MESSAGE,
            qr_code_url=to_data_url(png),
            ipfs_url=ipfs_url,
            satellite_data=record,
            contract_address=self.contract_address,
        )

    def _failure(self, error: str) -> NFTGenerationResponse:
        return NFTGenerationResponse(success=False, message=FAILURE_MESSAGE, error=error)
