from typing import AsyncGenerator, List
import httpx
import pytest
from sse_starlette import sse
from streamscribe.stt import StreamSpeechRecognizer
from streamscribe.server import TranscriptionHttpServer, create_app


class FakeSpeechRecognizer(StreamSpeechRecognizer):
    def __init__(self, fragments: List[str] = None, error: Exception = None, debug: bool = False):
        super().__init__(debug=debug)
        self.fragments = fragments or []
        self.error = error
        self.requests = []

    async def stream_fragments(self, audio_bytes: bytes, mime_type: str) -> AsyncGenerator[str, None]:
        self.requests.append((audio_bytes, mime_type))
        for f in self.fragments:
            yield f
        if self.error:
            raise self.error


def make_app(stt: StreamSpeechRecognizer):
    return create_app(TranscriptionHttpServer(stt=stt))


def make_asgi_client(app) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://testserver")


@pytest.fixture(autouse=True)
def reset_sse_app_status():
    # EventSourceResponse may keep an exit event bound to the loop of a previous test
    if hasattr(sse, "AppStatus"):
        sse.AppStatus.should_exit_event = None
    yield
    if hasattr(sse, "AppStatus"):
        sse.AppStatus.should_exit_event = None
