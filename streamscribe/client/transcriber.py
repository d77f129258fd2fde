from enum import Enum
import logging
import time
from typing import AsyncGenerator
from ..models import AudioChunk, TranscriptionChunk, TranscriptionResult
from .http import TranscriptionHttpClient

logger = logging.getLogger(__name__)


class AccumulatorState(str, Enum):
    IDLE = "idle"
    ACCUMULATING = "accumulating"


class TranscriptionAccumulator:
    """
    Running transcript of one in-flight transcription.

    Single writer: feed chunks from one transcription at a time.
    The transcript is cleared as soon as a complete chunk has been accumulated.
    """

    def __init__(self):
        self.text = ""
        self.state = AccumulatorState.IDLE

    def accumulate(self, chunk: TranscriptionChunk) -> TranscriptionResult:
        if chunk.text:
            self.text += chunk.text
        self.state = AccumulatorState.ACCUMULATING

        result = TranscriptionResult(
            text=self.text,
            is_complete=chunk.is_complete,
            timestamp=int(time.time() * 1000)
        )

        if chunk.is_complete:
            self.reset()

        return result

    def reset(self):
        self.text = ""
        self.state = AccumulatorState.IDLE


class StreamTranscriber:
    def __init__(
        self,
        *,
        api_client: TranscriptionHttpClient,
        accumulator: TranscriptionAccumulator = None,
        debug: bool = False
    ):
        self.api_client = api_client
        self.accumulator = accumulator or TranscriptionAccumulator()
        self.debug = debug

    async def transcribe(self, audio_chunk: AudioChunk) -> AsyncGenerator[TranscriptionResult, None]:
        # Callers must not run transcribe concurrently on the same instance
        # Drop text left over from a previous stream that ended without a complete chunk
        self.accumulator.reset()
        async for chunk in self.api_client.transcribe_stream(audio_chunk):
            result = self.accumulator.accumulate(chunk)
            if self.debug:
                logger.info(f"Transcription: {result.text} (complete={result.is_complete})")
            yield result

    def reset(self):
        self.accumulator.reset()
