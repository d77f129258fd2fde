import asyncio
import base64
import logging
import os
import sys
import time
from streamscribe import AudioChunk
from streamscribe.client import TranscriptionHttpClient, StreamTranscriber

API_BASE_URL = os.environ.get("STREAMSCRIBE_API_BASE_URL")
MIME_TYPES = {".pcm": "audio/pcm", ".mp3": "audio/mp3", ".wav": "audio/wav", ".m4a": "audio/m4a"}

logging.basicConfig(level=logging.INFO)


async def main(audio_path: str):
    api_client = TranscriptionHttpClient(base_url=API_BASE_URL, debug=True)
    transcriber = StreamTranscriber(api_client=api_client)

    with open(audio_path, "rb") as f:
        audio_chunk = AudioChunk(
            data=base64.b64encode(f.read()).decode("utf-8"),
            mime_type=MIME_TYPES.get(os.path.splitext(audio_path)[1].lower(), "audio/wav"),
            timestamp=int(time.time() * 1000)
        )

    try:
        async for result in transcriber.transcribe(audio_chunk):
            print(f"\r{result.text}", end="", flush=True)
            if result.is_complete:
                print()
    finally:
        await api_client.close()


# Run `python client.py voice.wav`
if __name__ == "__main__":
    asyncio.run(main(sys.argv[1]))
