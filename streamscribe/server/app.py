import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from ..models import ApiError, TranscriptionValidationError
from .http import TranscriptionHttpServer

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware:
    """Logs `METHOD path` for each HTTP request."""

    def __init__(self, app):
        self.app = app

    async def __call__(self, scope, receive, send):
        if scope["type"] == "http":
            logger.info(f"{scope['method']} {scope['path']}")
        await self.app(scope, receive, send)


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ApiError(message=message, code=str(status_code)).model_dump(exclude_none=True)
    )


def create_app(
    server: TranscriptionHttpServer,
    *,
    path: str = "/api/transcription",
    cors_origin: str = None,
) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        # Cleanup
        await server.close()

    app = FastAPI(title="streamscribe", lifespan=lifespan)

    app.add_middleware(RequestLoggingMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[cors_origin or "*"],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    @app.exception_handler(TranscriptionValidationError)
    async def handle_validation_error(request: Request, exc: TranscriptionValidationError):
        return error_response(status.HTTP_400_BAD_REQUEST, str(exc))

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        return error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error(f"Unexpected error: {exc}", exc_info=True)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")

    @app.get("/")
    async def hello():
        return PlainTextResponse("Hello World")

    app.include_router(server.get_api_router(path))

    logger.info(f"Registered routes: GET /, POST {path}")

    return app
