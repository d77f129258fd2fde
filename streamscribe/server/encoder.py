from contextlib import aclosing
import logging
from typing import AsyncGenerator
from sse_starlette import ServerSentEvent
from ..models import TranscriptionChunk, ERROR_PREFIX

logger = logging.getLogger(__name__)

FRAME_SEPARATOR = "\n"


async def encode_chunks(fragments: AsyncGenerator[str, None]) -> AsyncGenerator[TranscriptionChunk, None]:
    """
    Wrap each fragment in an incomplete chunk and finish with exactly one complete chunk.
    An error from the fragments becomes the complete chunk (`Error: <message>`) instead of propagating.
    """
    async with aclosing(fragments):
        try:
            async for fragment in fragments:
                yield TranscriptionChunk(text=fragment, is_complete=False)

        except Exception as ex:
            logger.error(f"Error while streaming transcription: {ex}")
            yield TranscriptionChunk(text=f"{ERROR_PREFIX}{ex}", is_complete=True)
            return

    yield TranscriptionChunk(text="", is_complete=True)


def to_server_sent_event(chunk: TranscriptionChunk) -> ServerSentEvent:
    # Encodes to `data: <json>\n\n`
    return ServerSentEvent(data=chunk.model_dump_json(), sep=FRAME_SEPARATOR)

