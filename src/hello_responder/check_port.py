import errno
import socket
import sys

from .core import Config


def is_port_available(host: str, port: int) -> bool:
    """Return True if we can bind host:port, i.e. nothing else is listening there."""
    # Binding to 0.0.0.0 is spelled "" for the socket API
    bind_host = "" if host == "0.0.0.0" else host

    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.settimeout(1)
    try:
        sock.bind((bind_host, port))
        return True
    except OSError as e:
        # Windows reports EADDRINUSE as 10048
        if e.errno in (errno.EADDRINUSE, 10048) or "Address already in use" in str(e):
            return False
        raise
    finally:
        sock.close()


def check_port():
    host = Config.get_host()
    port = Config.get_port()

    print(f"Checking if port {port} is available on {host}...")

    try:
        available = is_port_available(host, port)
    except OSError as e:
        print(f"Error checking port {port}: {e}")
        sys.exit(1)

    if available:
        print(f"Port {port} is available.")
        sys.exit(0)

    print(f"\n[ERROR] Port {port} is already in use!")
    print(f"Something is already listening on port {port}.")
    print(f"Please stop the existing process or change PORT in your .env file.")
    print(f"You can check what's running with: ss -ltnp | grep :{port}")
    sys.exit(1)


if __name__ == "__main__":
    check_port()
