from .http import TranscriptionHttpClient, parse_sse
from .transcriber import AccumulatorState, TranscriptionAccumulator, StreamTranscriber
