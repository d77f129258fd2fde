from .app import create_app
from .encoder import encode_chunks, to_server_sent_event
from .http import TranscriptionHttpServer
from .service import TranscriptionService
