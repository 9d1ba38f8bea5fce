from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field

Number = Union[int, float]


class SatelliteRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    timestamp: str
    temperature: Number
    humidity: Number
    light: Number
    air_quality: Number


class NFTGenerationRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    transaction_hash: str = Field(alias="transactionHash")
    wallet_address: str = Field(alias="walletAddress")
    amount: str


class NFTGenerationResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool
    message: str
    qr_code_url: Optional[str] = Field(default=None, alias="qrCodeUrl")
    ipfs_url: Optional[str] = Field(default=None, alias="ipfsUrl")
    satellite_data: Optional[SatelliteRecord] = Field(default=None, alias="satelliteData")
    contract_address: Optional[str] = Field(default=None, alias="contractAddress")
    error: Optional[str] = None

    def to_body(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)
