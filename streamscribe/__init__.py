import logging
from .models import (
    AudioChunk,
    TranscriptionRequest,
    TranscriptionChunk,
    TranscriptionResult,
    ApiError,
    StreamScribeException,
    TranscriptionValidationError,
    UpstreamError,
    TransportError,
    SUPPORTED_MIME_TYPES,
)
from .validator import validate_transcription_request, is_valid_transcription_request

logger = logging.getLogger(__name__)
