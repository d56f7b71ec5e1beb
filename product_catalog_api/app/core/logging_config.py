"""
Root logger setup for the product service.

Request lines from ``RequestLoggingMiddleware``, store mutations from
``ProductService`` and storage failures from the error handlers all go
through the root logger configured here.  ``LOG_LEVEL`` and
``LOG_FILE`` (see ``config.Settings``) control it.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Send log records to stderr and, when ``logfile`` is set, to that file.

    Does nothing if the root logger already has handlers, so building
    several apps in one process (as the tests do) configures it once.
    Unknown level names fall back to ``INFO``.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
