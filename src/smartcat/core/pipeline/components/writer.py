from __future__ import annotations

"""
Concatenated Artifact Writer.

Writes node contents, in dependency-first order, into one output artifact. 
Content is staged in a temporary file next to the destination and moved 
over it only once every node has been written, so a failed run never leaves 
a truncated artifact behind.
"""

import logging
import os
import stat
import tempfile
from typing import List, Sequence, Tuple

from smartcat.core.pipeline.components.reader import stream_file_lines
from smartcat.domain.constants import DEFAULT_ENCODING, OUTPUT_NEWLINE

logger = logging.getLogger(__name__)


def concatenate_files(
        file_paths: Sequence[str],
        output_path: str,
        encoding: str = DEFAULT_ENCODING,
) -> List[Tuple[str, str]]:
    """
    Append every file verbatim to a single artifact.

    Directive lines are copied like any other line. Each line is followed by
    exactly one normalized terminator. A file that cannot be read is logged,
    reported in the return value and skipped; the others are still written.

    Args:
        file_paths: Files in the order they must appear.
        output_path: Final artifact path.
        encoding: Encoding used for both reading and writing.

    Returns:
        List[Tuple[str, str]]: (file path, error message) for every skipped file.

    Raises:
        OSError: If the artifact cannot be staged or moved into place.
    """
    failures: List[Tuple[str, str]] = []
    out_dir = os.path.dirname(os.path.abspath(output_path))

    fd, staging_path = tempfile.mkstemp(
        prefix=".smartcat-", suffix=".tmp", dir=out_dir
    )
    try:
        with os.fdopen(fd, "w", encoding=encoding, newline="") as out:
            for path in file_paths:
                try:
                    # Materialize first so a mid-file read error writes nothing
                    lines = list(stream_file_lines(path, encoding))
                except (OSError, UnicodeDecodeError) as e:
                    logger.error(f"Skipping unreadable file {path}: {e}")
                    failures.append((path, str(e)))
                    continue

                for line in lines:
                    out.write(line)
                    out.write(OUTPUT_NEWLINE)

        os.chmod(staging_path, _artifact_mode(output_path))
        os.replace(staging_path, output_path)
    except BaseException:
        _discard(staging_path)
        raise

    logger.debug(f"Wrote {len(file_paths) - len(failures)} file(s) into {output_path}")
    return failures


def _artifact_mode(output_path: str) -> int:
    """
    Permission bits for the artifact.

    An existing artifact keeps its mode. A new one gets what a plain open()
    would give it under the current umask, not the 0600 of mkstemp.
    """
    try:
        return stat.S_IMODE(os.stat(output_path).st_mode)
    except OSError:
        pass

    # os.umask can only be read by setting it
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def _discard(path: str) -> None:
    try:
        os.remove(path)
    except OSError:
        pass
