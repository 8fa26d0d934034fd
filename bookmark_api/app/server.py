"""
Process entry point.

Loads ``Settings``, builds the application and serves it with
uvicorn.  SIGINT and SIGTERM both start a graceful shutdown: the
listener stops accepting connections and in‑flight requests get
``shutdown_timeout`` seconds to finish.

Exit status is 0 after a clean shutdown and 1 if the server could not
start or if shutdown overran the grace period.  uvicorn calls
``sys.exit`` with its own status when the address cannot be bound;
``main`` catches that and reports 1 like any other failed start.

Usage:
    bookmark-api
    python run.py
"""

import asyncio
import logging
import signal
from typing import Optional, Sequence, Tuple

from uvicorn import Config, Server

from .core.config import get_settings
from .core.logging_config import setup_logging
from .main import create_app

logger = logging.getLogger(__name__)


def parse_listen_address(addr: str) -> Tuple[str, int]:
    """Split ``host:port`` into its parts.

    An empty host (``":8080"``) means every interface.  IPv6 hosts are
    written in brackets (``"[::1]:8080"``).

    Raises
    ------
    ValueError
        If the port is missing or not a valid port number.
    """
    host, sep, port_text = addr.rpartition(":")
    if not sep or not port_text.isdigit():
        raise ValueError(f"invalid listen address {addr!r}")
    port = int(port_text)
    if port > 65535:
        raise ValueError(f"invalid listen address {addr!r}")
    host = host.strip("[]") or "0.0.0.0"
    return host, port


class BookmarkServer(Server):
    """uvicorn server whose shutdown is bounded by a grace period."""

    def __init__(self, config: Config, grace_period: float) -> None:
        super().__init__(config)
        self.grace_period = grace_period
        self.shutdown_timed_out = False

    async def shutdown(self, sockets: Optional[Sequence] = None) -> None:
        logger.info("Shutting down")
        try:
            await asyncio.wait_for(super().shutdown(sockets=sockets), timeout=self.grace_period)
        except asyncio.TimeoutError:
            self.shutdown_timed_out = True
            logger.error("Server forced to shutdown after %.1fs", self.grace_period)


def main() -> int:
    """Run the server until a termination signal arrives."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_file)
    host, port = parse_listen_address(settings.http_addr)

    config = Config(
        app=create_app(settings=settings),
        host=host,
        port=port,
        timeout_keep_alive=settings.read_header_timeout,
        log_config=None,
    )
    server = BookmarkServer(config, grace_period=settings.shutdown_timeout)

    # uvicorn re‑raises the signal it caught once it has stopped; make
    # SIGTERM surface as KeyboardInterrupt like SIGINT does.
    signal.signal(signal.SIGTERM, signal.default_int_handler)

    logger.info("Server starting on http://%s:%d", host, port)
    try:
        server.run()
    except KeyboardInterrupt:
        pass
    except SystemExit:
        if server.started:
            raise

    if not server.started:
        logger.error("Server did not start on %s", settings.http_addr)
        return 1
    if server.shutdown_timed_out:
        return 1
    logger.info("Server exited properly")
    return 0
