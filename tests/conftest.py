"""
Pytest configuration for hello-responder tests.

Puts the src directory on the Python path so tests can import hello_responder
without an install, and provides a clean environment for config lookups.
"""
import logging
import sys
import socket
from pathlib import Path

import pytest

# Add src directory to Python path
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))


@pytest.fixture
def clean_env(monkeypatch):
    """Remove PORT/HOST so the defaults apply (a local .env may set them)."""
    monkeypatch.delenv("PORT", raising=False)
    monkeypatch.delenv("HOST", raising=False)
    return monkeypatch


@pytest.fixture
def free_port():
    """A TCP port that nothing is listening on right now."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


@pytest.fixture
def access_log(caplog):
    """Collect access lines emitted while the test runs.

    The access logger does not propagate to the root logger, so the capture
    handler is attached to it directly.
    """
    from hello_responder.core import ACCESS_LOGGER_NAME

    access_logger = logging.getLogger(ACCESS_LOGGER_NAME)
    caplog.set_level(logging.INFO, logger=ACCESS_LOGGER_NAME)
    access_logger.addHandler(caplog.handler)

    def lines():
        return [r.getMessage() for r in caplog.records if r.name == ACCESS_LOGGER_NAME]

    yield lines
    access_logger.removeHandler(caplog.handler)
