import logging
import os
from streamscribe.server import TranscriptionHttpServer, create_app

# Configuration
GEMINI_API_KEY = os.environ.get("GEMINI_API_KEY")
GEMINI_MODEL = os.environ.get("GEMINI_MODEL", "gemini-2.5-flash-lite")
CORS_ORIGIN = os.environ.get("CORS_ORIGIN", "*")
PORT = int(os.environ.get("PORT", "3000"))

logging.basicConfig(level=logging.INFO)

# Transcription server with Gemini
transcription_server = TranscriptionHttpServer(
    gemini_api_key=GEMINI_API_KEY,
    gemini_model=GEMINI_MODEL,
    debug=True
)

# Optional: Add callback
@transcription_server.on_response_chunk
async def on_response_chunk(chunk):
    print(f"Chunk: {chunk.text} (complete={chunk.is_complete})")


# FastAPI app
app = create_app(transcription_server, cors_origin=CORS_ORIGIN)

# Run `python server.py` or `uvicorn server:app --port ${PORT:-3000}`
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=PORT)
