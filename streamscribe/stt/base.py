from abc import ABC, abstractmethod
import base64
from contextlib import aclosing
import logging
from typing import AsyncGenerator
from ..models import TranscriptionRequest, UpstreamError

logger = logging.getLogger(__name__)


class StreamSpeechRecognizer(ABC):
    def __init__(self, *, debug: bool = False):
        self.debug = debug

    async def transcribe_stream(self, request: TranscriptionRequest) -> AsyncGenerator[str, None]:
        """
        Stream text fragments for the audio in the request.

        One upstream call per invocation, no retries. Empty fragments are passed through.
        Any failure ends the stream with UpstreamError.
        """
        try:
            audio_bytes = base64.b64decode(request.audio_data)

            if self.debug:
                logger.info(f"Start transcription: {len(audio_bytes)} bytes ({request.mime_type})")

            # Closing this generator closes the upstream stream as well
            async with aclosing(self.stream_fragments(audio_bytes, request.mime_type)) as fragments:
                async for fragment in fragments:
                    if self.debug:
                        logger.info(f"Fragment: {fragment}")
                    yield fragment

        except Exception as ex:
            logger.error(f"Error at transcription: {ex}", exc_info=True)
            raise UpstreamError(f"Transcription failed: {ex}") from ex

    @abstractmethod
    def stream_fragments(self, audio_bytes: bytes, mime_type: str) -> AsyncGenerator[str, None]:
        pass

    async def close(self):
        pass
