from __future__ import annotations

"""
File Discovery Service.

Enumerates every regular file under the root directory and returns its 
canonical identifier. Directories are never nodes.
"""

import logging
import os
from typing import List

from smartcat.infra.fs import canonical_id

logger = logging.getLogger(__name__)


class ScanError(Exception):
    """The directory tree could not be enumerated."""


def scan_files(root: str) -> List[str]:
    """
    Walk the tree and list the canonical ids of all regular files.

    Enumeration is sorted per directory so that the scan order, and every
    order derived from it, is stable between runs.

    Args:
        root: Absolute path to an existing directory.

    Returns:
        List[str]: Canonical identifiers, one per regular file.

    Raises:
        ScanError: If the root or any directory below it cannot be read.
    """
    if not os.path.isdir(root):
        raise ScanError(f"Not a directory: {root}")

    def _fail(err: OSError) -> None:
        raise ScanError(f"Cannot read directory {err.filename}: {err.strerror}") from err

    file_ids: List[str] = []
    for current, dirs, files in os.walk(root, onerror=_fail):
        dirs.sort()
        files.sort()
        for file_name in files:
            path = os.path.join(current, file_name)
            # Skips broken symlinks, sockets, FIFOs
            if os.path.isfile(path):
                file_ids.append(canonical_id(path))

    logger.debug(f"Discovered {len(file_ids)} file(s) under {root}")
    return file_ids
