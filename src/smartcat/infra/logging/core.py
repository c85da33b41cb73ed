from __future__ import annotations

"""
Logging setup and teardown.

Handlers hang directly off the root logger. SmartCat runs its stages one 
after another on a single thread, so records are written as they happen.
"""

import logging

from smartcat.infra.logging.config import LOG_FILE_MAX_BYTES, LoggingConfig
from smartcat.infra.logging.handlers import console_handler, file_handler, is_marked

# Set on the root logger once configure_logging has run
_CONFIGURED_ATTR = "_smartcat_configured"


def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Attach SmartCat's handlers to the root logger.

    A second call is a no-op unless force is set, in which case the previous
    SmartCat handlers are replaced. Foreign handlers are never touched.

    Args:
        cfg: Level, console flag and optional log file.
        force: Replace an existing configuration.

    Returns:
        logging.Logger: The root logger.
    """
    root = logging.getLogger()
    if getattr(root, _CONFIGURED_ATTR, False) and not force:
        return root

    level = cfg.level_number()
    root.setLevel(level)
    _detach_marked(root)

    if cfg.console:
        root.addHandler(console_handler(level))
    if cfg.log_file:
        handler = file_handler(cfg.log_file, level, LOG_FILE_MAX_BYTES)
        if handler is not None:
            root.addHandler(handler)

    setattr(root, _CONFIGURED_ATTR, True)
    return root


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def reset_logging() -> None:
    """Remove SmartCat's handlers so the next configure_logging starts fresh."""
    root = logging.getLogger()
    _detach_marked(root)
    if hasattr(root, _CONFIGURED_ATTR):
        delattr(root, _CONFIGURED_ATTR)


def _detach_marked(root: logging.Logger) -> None:
    for handler in list(root.handlers):
        if is_marked(handler):
            root.removeHandler(handler)
            handler.close()
