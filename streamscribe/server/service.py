import logging
from typing import Any, AsyncGenerator
from ..models import TranscriptionValidationError
from ..stt import StreamSpeechRecognizer
from ..validator import validate_transcription_request

logger = logging.getLogger(__name__)


class TranscriptionService:
    def __init__(self, *, stt: StreamSpeechRecognizer, debug: bool = False):
        self.stt = stt
        self.debug = debug

    def transcribe_stream(self, request: Any) -> AsyncGenerator[str, None]:
        # Validate eagerly so that invalid requests fail before any streaming starts
        transcription_request = validate_transcription_request(request)
        if transcription_request is None:
            logger.info("Invalid transcription request")
            raise TranscriptionValidationError("Invalid transcription request")

        if self.debug:
            logger.info(f"Transcription request accepted: mime_type={transcription_request.mime_type}")

        return self.stt.transcribe_stream(transcription_request)
