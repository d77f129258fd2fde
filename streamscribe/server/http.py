import json
import logging
from typing import Awaitable, Callable, Optional
from fastapi import APIRouter, Request
from sse_starlette.sse import EventSourceResponse   # pip install sse-starlette
from ..models import TranscriptionChunk, TranscriptionValidationError
from ..stt import StreamSpeechRecognizer, GeminiStreamSpeechRecognizer
from .encoder import encode_chunks, to_server_sent_event, FRAME_SEPARATOR
from .service import TranscriptionService

logger = logging.getLogger(__name__)


class TranscriptionHttpServer:
    def __init__(
        self,
        *,
        # Quick start
        gemini_api_key: str = None,
        gemini_model: str = "gemini-2.5-flash-lite",

        # Components
        stt: StreamSpeechRecognizer = None,
        service: TranscriptionService = None,

        # Debug
        debug: bool = False
    ):
        self.stt = stt or (service.stt if service else None) or GeminiStreamSpeechRecognizer(
            gemini_api_key=gemini_api_key,
            model=gemini_model,
            debug=debug
        )
        self.service = service or TranscriptionService(stt=self.stt, debug=debug)

        # Custom logic
        self._on_response_chunk: Optional[Callable[[TranscriptionChunk], Awaitable[None]]] = None

        # Debug
        self.debug = debug

    def on_response_chunk(self, func: Callable[[TranscriptionChunk], Awaitable[None]]):
        self._on_response_chunk = func
        return func

    async def close(self):
        await self.stt.close()

    def get_api_router(self, path: str = "/api/transcription") -> APIRouter:
        router = APIRouter()

        @router.post(path)
        async def post_transcription(request: Request):
            if self.debug:
                logger.info(f"Transcription request received: {request.method} {request.url.path}")

            try:
                body = await request.json()
            except (json.JSONDecodeError, UnicodeDecodeError) as jex:
                raise TranscriptionValidationError(f"Invalid JSON body: {jex}") from jex

            # Raises before the response is committed to streaming
            fragments = self.service.transcribe_stream(body)

            async def stream_response():
                async for chunk in encode_chunks(fragments):
                    if self.debug:
                        logger.info(f"Send chunk: {chunk.model_dump_json()}")

                    if self._on_response_chunk:
                        await self._on_response_chunk(chunk)

                    yield to_server_sent_event(chunk)

            return EventSourceResponse(
                stream_response(),
                headers={"Cache-Control": "no-cache"},
                sep=FRAME_SEPARATOR
            )

        return router
