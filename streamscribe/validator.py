from collections.abc import Mapping
from typing import Any, Optional
from .models import TranscriptionRequest, SUPPORTED_MIME_TYPES


def validate_transcription_request(request: Any) -> Optional[TranscriptionRequest]:
    """
    Check an untyped request payload and return a TranscriptionRequest, or None if invalid.
    Never raises; the caller decides how to reject invalid requests.
    """
    if not request or not isinstance(request, Mapping):
        return None

    audio_data = request.get("audioData")
    if not isinstance(audio_data, str) or not audio_data:
        return None

    mime_type = request.get("mimeType")
    if not isinstance(mime_type, str) or not mime_type:
        return None

    if mime_type not in SUPPORTED_MIME_TYPES:
        return None

    return TranscriptionRequest(audio_data=audio_data, mime_type=mime_type)


def is_valid_transcription_request(request: Any) -> bool:
    return validate_transcription_request(request) is not None
