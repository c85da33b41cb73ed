from __future__ import annotations

"""
Handler factories.

Each handler built here carries a marker attribute, so SmartCat can later 
remove exactly the handlers it added and leave alone those of a host 
application or of pytest's log capture.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

from smartcat.infra.logging.config import (
    CONSOLE_FORMAT,
    FILE_DATE_FORMAT,
    FILE_FORMAT,
    LOG_FILE_BACKUPS,
)

_MARKER_ATTR = "_smartcat_handler"


def mark(handler: logging.Handler) -> logging.Handler:
    setattr(handler, _MARKER_ATTR, True)
    return handler


def is_marked(handler: logging.Handler) -> bool:
    return bool(getattr(handler, _MARKER_ATTR, False))


def console_handler(level: int) -> logging.Handler:
    """stderr handler; stdout stays reserved for the order and JSON output."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    return mark(handler)


def file_handler(path: str, level: int, max_bytes: int) -> Optional[logging.Handler]:
    """
    Rotating log file handler.

    The parent directory is created on demand. When the file cannot be
    opened a warning goes to stderr and None is returned, so the run
    continues with console logging only.

    Args:
        path: Log file location.
        level: Numeric logging level.
        max_bytes: Size at which the file rolls over.

    Returns:
        Optional[logging.Handler]: The handler, or None if the file is unusable.
    """
    try:
        os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)
        handler = RotatingFileHandler(
            path,
            maxBytes=max_bytes,
            backupCount=LOG_FILE_BACKUPS,
            encoding="utf-8",
        )
    except OSError as e:
        sys.stderr.write(f"WARNING: Cannot open log file '{path}': {e}\n")
        return None

    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=FILE_DATE_FORMAT))
    return mark(handler)
