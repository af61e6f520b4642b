"""
Logging configuration for the planet API.

``setup_logging`` installs one formatter on the root logger and routes
uvicorn's server and access loggers through it, so the service, the
MongoDB driver and the HTTP server all log in the same format.  The
root logger is configured once per process; calling ``create_app``
repeatedly (as the test suite does) does not stack handlers.

``run.py`` starts uvicorn with ``log_config=None`` so that uvicorn
keeps this setup instead of installing its own handlers.
"""

import logging
from pathlib import Path

from .config import Settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Loggers owned by uvicorn; their own handlers are dropped and records
# propagate to the root logger instead.
SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")

# pymongo logs every command and heartbeat at DEBUG.
QUIET_LOGGERS = ("pymongo",)


def _build_handlers(settings: Settings) -> list:
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers = [logging.StreamHandler()]
    if settings.log_file:
        log_path = Path(settings.log_file).resolve()
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def setup_logging(settings: Settings) -> None:
    """Configure logging from ``settings.log_level`` and ``settings.log_file``.

    Unknown level names fall back to ``INFO``.  If the root logger
    already has handlers they are left alone, but uvicorn's loggers are
    still pointed at the root so a server started later shares them.
    """
    numeric_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    root = logging.getLogger()
    if not root.handlers:
        root.setLevel(numeric_level)
        for handler in _build_handlers(settings):
            root.addHandler(handler)

    for name in SERVER_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers.clear()
        server_logger.propagate = True
        server_logger.setLevel(numeric_level)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(numeric_level, logging.WARNING))
