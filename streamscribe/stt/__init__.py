from .base import StreamSpeechRecognizer
from .gemini import GeminiStreamSpeechRecognizer, DEFAULT_PROMPT
