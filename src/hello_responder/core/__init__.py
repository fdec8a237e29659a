# Core shared modules for both FastAPI and stdlib servers
from .config import Config, ACCESS_LOGGER_NAME, DEFAULT_HOST, DEFAULT_PORT, resolve_port, setup_logging
from .responder import (
    CONTENT_TYPE,
    GREETING,
    encode_greeting,
    format_request_line,
    iso_timestamp,
)

__all__ = [
    # Config
    "Config",
    "ACCESS_LOGGER_NAME",
    "DEFAULT_HOST",
    "DEFAULT_PORT",
    "resolve_port",
    "setup_logging",
    # Responder
    "CONTENT_TYPE",
    "GREETING",
    "encode_greeting",
    "format_request_line",
    "iso_timestamp",
]
