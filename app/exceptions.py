from typing import Optional


class ConfigError(RuntimeError):
    """Required configuration is missing or invalid. Raised at startup only."""


class PipelineError(RuntimeError):
    code = "PIPELINE_ERROR"

    def __init__(self, message: str, retryable: bool = False, details: Optional[dict] = None):
        super().__init__(message)
        self.retryable = retryable
        self.details = details


class NotFound(PipelineError):
    code = "NO_TELEMETRY"


class TelemetryStoreError(PipelineError):
    code = "TELEMETRY_UNAVAILABLE"


class EncodingError(PipelineError):
    code = "ENCODING_FAILED"


class PublishError(PipelineError):
    code = "PUBLISH_FAILED"
