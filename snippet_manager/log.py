"""Package-wide logger.

Log output goes to a rotating file when one is configured and is discarded
otherwise, so it never interleaves with the interactive menu.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

logger = logging.getLogger("snippet_manager")
logger.addHandler(logging.NullHandler())

_FORMAT = "%(asctime)s %(levelname)s %(name)s [pid=%(process)d] %(message)s"


def configure_logging(level: str = "WARNING", log_file: Path | None = None) -> None:
    """Set the package log level and attach a file handler if requested."""
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    if log_file is None:
        return
    handler = RotatingFileHandler(
        log_file, maxBytes=2_000_000, backupCount=5, encoding="utf-8"
    )
    handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(handler)
