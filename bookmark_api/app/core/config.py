"""
Simple configuration management.

The ``Settings`` dataclass is filled from environment variables by
``load_settings``.  A ``.env`` file in the working directory is read
first if present, so local development does not need exported
variables; in containers the environment is used as is.

Timeouts accept Go‑style duration strings such as ``"10s"``,
``"1m30s"`` or ``"250ms"``.  An unparseable value is logged and the
default is kept.
"""

import logging
import os
import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

_DURATION_UNITS = {
    "ns": 1e-9,
    "us": 1e-6,
    "µs": 1e-6,
    "ms": 1e-3,
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
}
_DURATION_PART = re.compile(r"(\d+(?:\.\d*)?|\.\d+)(ns|us|µs|ms|s|m|h)")


def parse_duration(value: str) -> float:
    """Convert a duration string like ``"1m30s"`` to seconds.

    A bare ``"0"`` is accepted; any other number needs a unit.

    Raises
    ------
    ValueError
        If ``value`` is not a valid duration.
    """
    text = value.strip()
    sign = 1.0
    if text[:1] in {"+", "-"}:
        sign = -1.0 if text[0] == "-" else 1.0
        text = text[1:]
    if text == "0":
        return 0.0
    if not text:
        raise ValueError(f"invalid duration {value!r}")
    total = 0.0
    pos = 0
    while pos < len(text):
        match = _DURATION_PART.match(text, pos)
        if not match:
            raise ValueError(f"invalid duration {value!r}")
        total += float(match.group(1)) * _DURATION_UNITS[match.group(2)]
        pos = match.end()
    return sign * total


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = "Bookmark API"
    api_version: str = "1.0.0"
    log_level: str = "INFO"

    # Optional file that receives a copy of every log record.
    log_file: Optional[str] = None

    # Listen address in ``host:port`` form.  An empty host (``":8080"``)
    # listens on every interface.
    http_addr: str = ":8080"

    # Seconds.  uvicorn has no deadline for reading request headers; this
    # value bounds how long an idle keep‑alive connection is held open.
    read_header_timeout: float = 10.0

    # Seconds to wait for in‑flight requests after a shutdown signal.
    shutdown_timeout: float = 10.0


def _duration_from_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return parse_duration(raw)
    except ValueError:
        logger.warning("Invalid %s %r, using default", name, raw)
        return default


def load_settings(env_file: Optional[str] = None) -> Settings:
    """Read settings from the environment, after loading ``.env``.

    Parameters
    ----------
    env_file : Optional[str]
        Path of the dotenv file.  Defaults to ``.env`` in the current
        working directory.  Variables already present in the
        environment take precedence over the file.
    """
    path = env_file or os.path.join(os.getcwd(), ".env")
    if os.path.isfile(path):
        load_dotenv(path)
    else:
        logger.info("No .env file found")

    defaults = Settings()
    return Settings(
        project_name=os.getenv("PROJECT_NAME", defaults.project_name),
        api_version=os.getenv("API_VERSION", defaults.api_version),
        log_level=os.getenv("LOG_LEVEL", defaults.log_level),
        log_file=os.getenv("LOG_FILE") or defaults.log_file,
        http_addr=os.getenv("HTTP_ADDR") or defaults.http_addr,
        read_header_timeout=_duration_from_env("HTTP_READ_HEADER_TIMEOUT", defaults.read_header_timeout),
        shutdown_timeout=_duration_from_env("HTTP_SHUTDOWN_TIMEOUT", defaults.shutdown_timeout),
    )


@lru_cache()
def get_settings() -> Settings:
    """Return the process‑wide settings, loading them on first use."""
    return load_settings()
