#!/usr/bin/env python3
"""
Run Hello Responder.

Usage:
    python run.py              # FastAPI/uvicorn (production)
    python run.py --stdlib     # stdlib http.server

PORT (default 3000) and HOST (default 0.0.0.0) come from the environment or .env.
"""
import sys
import os

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))


def run_fastapi():
    """Run with FastAPI/uvicorn"""
    from hello_responder.main import run
    run()


def run_stdlib():
    """Run with stdlib http.server"""
    from hello_responder.stdlib_server import main as stdlib_main
    stdlib_main()


if __name__ == "__main__":
    use_stdlib = "--stdlib" in sys.argv or "-s" in sys.argv

    if use_stdlib:
        run_stdlib()
    else:
        run_fastapi()
