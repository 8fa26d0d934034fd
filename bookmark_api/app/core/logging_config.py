"""
Logging setup for the Bookmark API.

``setup_logging`` attaches this application's handlers to the root
logger: one on the console and, when ``LOG_FILE`` is configured, one
appending to that file.  uvicorn is started without its own logging
config, so its ``uvicorn.*`` loggers end up on the same handlers.

Handlers are recognised by name, so calling ``setup_logging`` again
(every ``create_app`` call does) leaves the first configuration in
place, while handlers installed by other tools (pytest's log capture,
for instance) are neither counted nor touched.
"""

import logging
from pathlib import Path
from typing import Optional

HANDLER_PREFIX = "bookmark_api."
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_level(level: str) -> int:
    """Map a level name such as ``"debug"`` or ``"WARN"`` to its number.

    Unknown names fall back to ``logging.INFO``.
    """
    value = logging.getLevelName(level.strip().upper())
    return value if isinstance(value, int) else logging.INFO


def installed_handlers(logger: logging.Logger) -> list:
    """Return the handlers on ``logger`` that ``setup_logging`` added."""
    return [h for h in logger.handlers if (h.get_name() or "").startswith(HANDLER_PREFIX)]


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger once per process.

    Parameters
    ----------
    level : str
        Logging level name, case insensitive.
    logfile : Optional[str]
        File to append log records to, in addition to the console.
        Missing parent directories are created.
    """
    root = logging.getLogger()
    if installed_handlers(root):
        return

    root.setLevel(resolve_level(level))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.set_name(HANDLER_PREFIX + "console")
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if logfile:
        log_path = Path(logfile).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.set_name(HANDLER_PREFIX + "file")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
