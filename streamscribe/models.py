from typing import Optional
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

SUPPORTED_MIME_TYPES = ("audio/pcm", "audio/mp3", "audio/wav", "audio/m4a")
ERROR_PREFIX = "Error: "


class WireModel(BaseModel):
    # snake_case in Python, camelCase on the wire
    model_config = ConfigDict(
        alias_generator=to_camel,
        validate_by_name=True,
        validate_by_alias=True,
        serialize_by_alias=True
    )


class AudioChunk(WireModel):
    model_config = ConfigDict(frozen=True)

    data: str   # Base64 encoded audio
    mime_type: str
    timestamp: int  # Milliseconds from the start of recording


class TranscriptionRequest(WireModel):
    audio_data: str
    mime_type: str


class TranscriptionChunk(WireModel):
    text: str = ""
    is_complete: bool = False


class TranscriptionResult(WireModel):
    text: str = ""
    is_complete: bool = False
    timestamp: int = 0

    @property
    def is_error(self) -> bool:
        return self.text.startswith(ERROR_PREFIX)


class ApiError(WireModel):
    message: str
    code: Optional[str] = None


class StreamScribeException(Exception):
    pass


class TranscriptionValidationError(StreamScribeException):
    pass


class UpstreamError(StreamScribeException):
    pass


class TransportError(StreamScribeException):
    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.status_code = status_code
