import logging
from typing import AsyncGenerator
from google import genai
from google.genai import types
from .base import StreamSpeechRecognizer

logger = logging.getLogger(__name__)

DEFAULT_PROMPT = "この音声を文字起こししてください。"


class GeminiStreamSpeechRecognizer(StreamSpeechRecognizer):
    def __init__(
        self,
        *,
        gemini_api_key: str = None,
        model: str = "gemini-2.5-flash-lite",
        prompt: str = DEFAULT_PROMPT,
        temperature: float = None,
        debug: bool = False
    ):
        super().__init__(debug=debug)

        if not gemini_api_key or not gemini_api_key.strip():
            raise ValueError("GEMINI_API_KEY is not set")
        if not model or not model.strip():
            raise ValueError("Gemini model is not set")

        self.gemini_client = genai.Client(
            api_key=gemini_api_key
        )
        self.model = model
        self.prompt = prompt
        self.temperature = temperature

    def extract_text(self, chunk: types.GenerateContentResponse) -> str:
        if not chunk.candidates or not chunk.candidates[0].content or not chunk.candidates[0].content.parts:
            return ""
        return "".join(
            part.text for part in chunk.candidates[0].content.parts
            if part.text and not part.thought
        )

    async def stream_fragments(self, audio_bytes: bytes, mime_type: str) -> AsyncGenerator[str, None]:
        stream_resp = await self.gemini_client.aio.models.generate_content_stream(
            model=self.model,
            config=types.GenerateContentConfig(
                temperature=self.temperature
            ),
            contents=[types.Content(
                role="user",
                parts=[
                    types.Part.from_bytes(data=audio_bytes, mime_type=mime_type),
                    types.Part.from_text(text=self.prompt)
                ]
            )]
        )

        try:
            async for chunk in stream_resp:
                yield self.extract_text(chunk)
        finally:
            await stream_resp.aclose()
