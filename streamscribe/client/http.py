import logging
import re
from typing import AsyncGenerator, List
import httpx
from pydantic import ValidationError
from ..models import AudioChunk, ApiError, TranscriptionChunk, TransportError

logger = logging.getLogger(__name__)

FRAME_PREFIX = "data: "
# SSE line endings only; JSON strings may contain raw U+2028, U+2029 and U+0085
LINE_BREAK = re.compile(r"\r\n|\r|\n")


def parse_sse(text: str) -> List[TranscriptionChunk]:
    """
    Decode `data: <json>` lines into chunks.
    Lines that can't be decoded are skipped and the rest are ignored.
    """
    chunks = []
    for line in LINE_BREAK.split(text):
        if not line.startswith(FRAME_PREFIX):
            continue
        try:
            chunks.append(TranscriptionChunk.model_validate_json(line[len(FRAME_PREFIX):]))
        except ValidationError as vex:
            logger.warning(f"Failed to parse SSE data: {line} ({vex.error_count()} errors)")
    return chunks


class TranscriptionHttpClient:
    def __init__(
        self,
        *,
        base_url: str,
        path: str = "/api/transcription",
        max_connections: int = 100,
        max_keepalive_connections: int = 20,
        timeout: float = 60.0,
        debug: bool = False
    ):
        if not base_url or not base_url.strip():
            raise ValueError(
                "STREAMSCRIBE_API_BASE_URL is not set. "
                "Example: STREAMSCRIBE_API_BASE_URL=http://<your-server-ip>:<port>"
            )

        self.base_url = base_url.rstrip("/")
        self.path = path
        self.debug = debug

        self.http_client = httpx.AsyncClient(
            follow_redirects=False,
            timeout=httpx.Timeout(timeout),
            limits=httpx.Limits(
                max_connections=max_connections,
                max_keepalive_connections=max_keepalive_connections
            )
        )

    @property
    def url(self) -> str:
        return f"{self.base_url}{self.path}"

    def get_error_message(self, response: httpx.Response) -> str:
        error_message = f"HTTP {response.status_code}: {response.reason_phrase}"
        try:
            if "application/json" in response.headers.get("content-type", ""):
                error_message = ApiError.model_validate(response.json()).message or error_message
            else:
                error_message = response.text or error_message
        except Exception as ex:
            logger.error(f"Failed to parse error response: {ex}")
        return error_message

    async def transcribe_stream(self, audio_chunk: AudioChunk) -> AsyncGenerator[TranscriptionChunk, None]:
        request_body = {
            "audioData": audio_chunk.data,
            "mimeType": audio_chunk.mime_type,
            "timestamp": audio_chunk.timestamp
        }

        if self.debug:
            logger.info(f"Send request to {self.url}: {len(audio_chunk.data)} chars ({audio_chunk.mime_type})")

        # The whole body is buffered and decoded at once
        try:
            response = await self.http_client.post(self.url, json=request_body)
        except httpx.HTTPError as herr:
            logger.error(f"Transcription request failed: {herr}")
            raise TransportError(str(herr) or type(herr).__name__) from herr

        if not response.is_success:
            error_message = self.get_error_message(response)
            logger.error(f"Error response: {error_message}")
            raise TransportError(error_message, status_code=response.status_code)

        try:
            text = response.text
        except Exception as ex:
            raise TransportError(
                f"Failed to read response body (status: {response.status_code})",
                status_code=response.status_code
            ) from ex

        if not text:
            raise TransportError(
                f"Response body is empty (status: {response.status_code})",
                status_code=response.status_code
            )

        for chunk in parse_sse(text):
            if self.debug:
                logger.info(f"Received chunk: {chunk}")
            yield chunk

            if chunk.is_complete:
                if self.debug:
                    logger.info("Transcription completed")
                return

    async def close(self):
        await self.http_client.aclose()
