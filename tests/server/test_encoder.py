import pytest
from streamscribe import TranscriptionChunk, UpstreamError
from streamscribe.server import encode_chunks, to_server_sent_event


async def fragments_of(*fragments, error: Exception = None):
    for f in fragments:
        yield f
    if error:
        raise error


@pytest.mark.asyncio
async def test_encode_chunks_appends_complete_chunk():
    chunks = [c async for c in encode_chunks(fragments_of("こんにちは", "世界"))]

    assert chunks == [
        TranscriptionChunk(text="こんにちは", is_complete=False),
        TranscriptionChunk(text="世界", is_complete=False),
        TranscriptionChunk(text="", is_complete=True),
    ]


@pytest.mark.asyncio
async def test_encode_chunks_keeps_empty_fragments():
    chunks = [c async for c in encode_chunks(fragments_of("", "a"))]

    assert [(c.text, c.is_complete) for c in chunks] == [("", False), ("a", False), ("", True)]


@pytest.mark.asyncio
async def test_encode_chunks_without_fragments():
    chunks = [c async for c in encode_chunks(fragments_of())]

    assert chunks == [TranscriptionChunk(text="", is_complete=True)]


@pytest.mark.asyncio
async def test_encode_chunks_replaces_complete_chunk_with_error():
    fragments = fragments_of("こんにちは", error=UpstreamError("Transcription failed: quota exceeded"))

    chunks = [c async for c in encode_chunks(fragments)]

    assert chunks == [
        TranscriptionChunk(text="こんにちは", is_complete=False),
        TranscriptionChunk(text="Error: Transcription failed: quota exceeded", is_complete=True),
    ]


@pytest.mark.asyncio
async def test_encode_chunks_closes_fragments_when_closed_early():
    closed = []

    async def endless():
        try:
            while True:
                yield "a"
        finally:
            closed.append(True)

    chunks = encode_chunks(endless())
    assert (await chunks.__anext__()).text == "a"
    await chunks.aclose()

    assert closed == [True]


def test_to_server_sent_event_frame():
    frame = to_server_sent_event(TranscriptionChunk(text="こんにちは", is_complete=False)).encode()
    assert frame == 'data: {"text":"こんにちは","isComplete":false}\n\n'.encode("utf-8")

    frame = to_server_sent_event(TranscriptionChunk(text="", is_complete=True)).encode()
    assert frame == b'data: {"text":"","isComplete":true}\n\n'
