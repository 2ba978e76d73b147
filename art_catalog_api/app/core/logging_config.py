"""
Logging configuration for the application and its ASGI server.

The ``setup_logging`` function configures the root logger with a
console and an optional file handler, and routes uvicorn's own
loggers through it so server and access messages share the
application's format and destinations.  ``run.py`` starts uvicorn
with ``log_config=None`` so uvicorn does not install handlers of its
own on top of these.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def _route_server_loggers(level: int) -> None:
    """Make uvicorn's loggers propagate to the root handlers."""
    for name in SERVER_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers.clear()
        server_logger.propagate = True
        server_logger.setLevel(level)


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger and the uvicorn loggers.

    uvicorn's loggers are always routed to the root logger.  Handlers
    are attached to the root logger only if it has none yet, so
    calling this repeatedly (tests, several ``create_app`` calls)
    does not duplicate output.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path to a file that receives the same records as the console.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    _route_server_loggers(numeric_level)

    root = logging.getLogger()
    if root.handlers:
        return
    root.setLevel(numeric_level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
