from __future__ import annotations

"""
Logging settings for one SmartCat run.

The CLI picks the level (INFO, or DEBUG with --debug) and an optional log 
file. Record formats and file rotation are fixed here.
"""

import logging
from dataclasses import dataclass
from typing import Optional

CONSOLE_FORMAT = "%(levelname)s | %(message)s"
FILE_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
FILE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# A run writes a handful of lines per file; two backups cover many runs
LOG_FILE_MAX_BYTES = 512 * 1024
LOG_FILE_BACKUPS = 2


@dataclass(frozen=True)
class LoggingConfig:
    """
    Logging choices made by the CLI.

    Attributes:
        level: Level name such as 'INFO' or 'DEBUG'.
        console: Emit records on stderr.
        log_file: Also append records to this rotating file.
    """
    level: str = "INFO"
    console: bool = True
    log_file: Optional[str] = None

    def level_number(self) -> int:
        """Numeric level; an unknown name means INFO."""
        value = logging.getLevelName(str(self.level or "").strip().upper())
        return value if isinstance(value, int) else logging.INFO
