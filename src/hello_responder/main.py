"""
FastAPI/uvicorn responder (production).

Every request, whatever its method, path, headers or body, gets the same
200 JSON greeting. Meant to sit behind a reverse proxy as a smoke-test target.

Run with: uvicorn hello_responder.main:app   (or python run.py)
"""
import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import Response

from . import __version__
from .core import (
    ACCESS_LOGGER_NAME,
    CONTENT_TYPE,
    Config,
    encode_greeting,
    format_request_line,
    setup_logging,
)

# Setup logging at import so `uvicorn hello_responder.main:app` logs too
setup_logging()
logger = logging.getLogger(__name__)
access_logger = logging.getLogger(ACCESS_LOGGER_NAME)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI application"""
    logger.info(f"Server running at http://{Config.get_host()}:{Config.get_port()}/")
    yield
    logger.info("Shutting down Hello Responder")


# Docs routes are disabled; every request is answered by the middleware below
app = FastAPI(
    title="Hello Responder",
    description="Constant JSON responder for reverse-proxy smoke tests",
    version=__version__,
    lifespan=lifespan,
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)


def request_target(request: Request) -> str:
    """The request URL as sent by the client: path plus query string."""
    raw_path = request.scope.get("raw_path")
    if raw_path:
        path = raw_path.split(b"?", 1)[0].decode("latin-1")
    else:
        path = request.url.path
    query = request.scope.get("query_string", b"")
    if query:
        return f"{path}?{query.decode('latin-1')}"
    return path


def greeting_response() -> Response:
    return Response(
        content=encode_greeting(),
        status_code=200,
        media_type=CONTENT_TYPE
    )


@app.middleware("http")
async def hello(request: Request, call_next):
    """Log the request and answer with the fixed greeting, whatever the method."""
    # No call_next: routing would reject methods it has no route for
    access_logger.info(format_request_line(request.method, request_target(request)))
    return greeting_response()


def run():
    """Run with uvicorn on HOST/PORT from the environment."""
    host = Config.get_host()
    port = Config.get_port()

    uvicorn.run(
        app,
        host=host,
        port=port,
        log_level=Config.LOG_LEVEL.lower(),
        access_log=False,  # every request is already logged by hello()
        http='h11',   # Force HTTP/1.1 only
        ws='none',    # Disable WebSocket support
    )


if __name__ == "__main__":
    run()
