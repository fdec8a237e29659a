#!/usr/bin/env python3
"""
Hello Responder using Python stdlib http.server.

Same behaviour as the FastAPI app without uvicorn in the request path.

Run with: python -m hello_responder.stdlib_server
"""
import logging
import threading
from http.server import HTTPServer, BaseHTTPRequestHandler
from typing import Optional

from .core import (
    ACCESS_LOGGER_NAME,
    CONTENT_TYPE,
    Config,
    encode_greeting,
    format_request_line,
    setup_logging,
)

# Setup logging
logger = logging.getLogger(__name__)
setup_logging()
access_logger = logging.getLogger(ACCESS_LOGGER_NAME)

# Bodies above this are not read; the connection is closed after the reply instead
MAX_DRAIN_BYTES = 1024 * 1024
DRAIN_CHUNK_BYTES = 64 * 1024


class HelloHandler(BaseHTTPRequestHandler):
    """Answers every request with the fixed JSON greeting."""

    protocol_version = "HTTP/1.1"
    server_version = "HelloResponder/1.0"

    def __getattr__(self, name):
        # http.server dispatches to do_<METHOD>; any method at all gets the greeting
        if name.startswith("do_"):
            return self.respond
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

    def log_message(self, format, *args):
        # The access line is written by respond(); keep the library's own line quiet
        logger.debug(f"[{self.client_address[0]}] {format % args}")

    def log_error(self, format, *args):
        logger.warning(f"[{self.client_address[0]}] {format % args}")

    def discard_body(self):
        """Read and drop the request body so the connection can be reused."""
        if self.headers.get("Transfer-Encoding", "").lower() == "chunked":
            self.close_connection = True
            return
        try:
            length = int(self.headers.get("Content-Length") or 0)
        except ValueError:
            self.close_connection = True
            return
        if length < 0 or length > MAX_DRAIN_BYTES:
            self.close_connection = True
            return

        remaining = length
        while remaining > 0:
            chunk = self.rfile.read(min(remaining, DRAIN_CHUNK_BYTES))
            if not chunk:
                self.close_connection = True
                return
            remaining -= len(chunk)

    def respond(self):
        self.discard_body()
        access_logger.info(format_request_line(self.command, self.path))

        body = encode_greeting()
        self.send_response(200)
        self.send_header("Content-Type", CONTENT_TYPE)
        self.send_header("Content-Length", str(len(body)))
        if self.close_connection:
            self.send_header("Connection", "close")
        self.end_headers()
        if self.command != "HEAD":
            self.wfile.write(body)


class ThreadedHTTPServer(HTTPServer):
    """HTTP server that handles each request in a new thread."""

    def process_request(self, request, client_address):
        thread = threading.Thread(target=self.process_request_thread, args=(request, client_address))
        thread.daemon = True
        thread.start()

    def process_request_thread(self, request, client_address):
        try:
            self.finish_request(request, client_address)
        except Exception:
            self.handle_error(request, client_address)
        finally:
            self.shutdown_request(request)


def create_server(host: Optional[str] = None, port: Optional[int] = None) -> ThreadedHTTPServer:
    """Bind and listen. Raises OSError if the address cannot be bound."""
    host = Config.get_host() if host is None else host
    port = Config.get_port() if port is None else port
    try:
        return ThreadedHTTPServer((host, port), HelloHandler)
    except OSError as e:
        logger.error(f"Cannot listen on {host}:{port}: {e}")
        raise


def main():
    server = create_server()
    host, port = server.server_address[:2]
    logger.info(f"Server running at http://{host}:{port}/")

    try:
        server.serve_forever()
    except KeyboardInterrupt:
        logger.info("Shutting down...")
    finally:
        server.server_close()


if __name__ == "__main__":
    main()
