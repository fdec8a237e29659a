"""
Shared configuration for both FastAPI and stdlib servers.
"""
import os
import sys
import logging
from typing import Optional
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000

# Raw per-request lines go here, not through the root formatter
ACCESS_LOGGER_NAME = "hello_responder.access"


def resolve_port(raw: Optional[str]) -> int:
    """Parse a PORT value, falling back to DEFAULT_PORT when unset or invalid."""
    if raw is None or not raw.strip():
        return DEFAULT_PORT
    try:
        port = int(raw.strip())
    except ValueError:
        logger.warning(f"Invalid PORT value {raw!r}, using {DEFAULT_PORT}")
        return DEFAULT_PORT
    if not 0 <= port <= 65535:
        logger.warning(f"PORT {port} out of range, using {DEFAULT_PORT}")
        return DEFAULT_PORT
    return port


class Config:
    """Centralized configuration loaded from environment variables."""

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # Read at call time so a supervisor-provided PORT is always honoured
    @classmethod
    def get_host(cls) -> str:
        """Bind address; all interfaces so a local reverse proxy can reach us."""
        return os.getenv("HOST") or DEFAULT_HOST

    @classmethod
    def get_port(cls) -> int:
        return resolve_port(os.getenv("PORT"))


def setup_logging():
    """Configure logging based on LOG_LEVEL."""
    logging.basicConfig(
        level=getattr(logging, Config.LOG_LEVEL.upper(), logging.INFO),
        format='%(asctime)s - %(levelname)s - %(message)s'
    )

    access_logger = logging.getLogger(ACCESS_LOGGER_NAME)
    access_logger.setLevel(logging.INFO)
    access_logger.propagate = False
    if not access_logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter("%(message)s"))
        access_logger.addHandler(handler)

    return logging.getLogger("hello_responder")
