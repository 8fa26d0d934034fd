"""Entry point for the Bookmark API server.

Intended to be executed from the project root, for example under
Docker, where you only specify a single Python file to run.
Configuration such as ``HTTP_ADDR``, ``HTTP_SHUTDOWN_TIMEOUT`` and
``LOG_LEVEL`` may be placed in a ``.env`` file in the same directory.

Usage:
    python run.py
"""
import sys

from bookmark_api.app.server import main


if __name__ == "__main__":
    sys.exit(main())
