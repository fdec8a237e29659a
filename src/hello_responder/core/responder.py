"""
The constant response and the per-request access line.

Both servers answer every request with the same JSON document, so the body is
encoded once at import time.
"""
import json
from datetime import datetime, timezone
from typing import Optional

GREETING = {"message": "Hello World from Node.js!"}
CONTENT_TYPE = "application/json"

# Compact separators: {"message":"Hello World from Node.js!"}
_GREETING_BYTES = json.dumps(GREETING, separators=(",", ":")).encode()


def encode_greeting() -> bytes:
    """Return the JSON body sent for every request."""
    return _GREETING_BYTES


def iso_timestamp(now: Optional[datetime] = None) -> str:
    """ISO-8601 UTC timestamp with milliseconds, e.g. 2026-10-19T08:15:30.123Z"""
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    now = now.astimezone(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def format_request_line(method: str, url: str, now: Optional[datetime] = None) -> str:
    return f"{iso_timestamp(now)} {method} {url}"
