"""Hello Responder - constant JSON HTTP responder for reverse-proxy smoke tests."""

__version__ = "1.0.0"
