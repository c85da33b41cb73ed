from __future__ import annotations

"""
File Reading Component.

Streams file content line by line. Line terminators are stripped so that 
the writer can re-emit every line with one normalized terminator.
"""

from typing import Iterator

from smartcat.domain.constants import DEFAULT_ENCODING


def stream_file_lines(file_path: str, encoding: str = DEFAULT_ENCODING) -> Iterator[str]:
    """
    Generate the lines of a file without their terminators.

    The file handle is released when the generator is exhausted, closed, or
    garbage collected. OSError and UnicodeDecodeError propagate to the caller,
    which decides whether the failure is isolated or fatal.

    Args:
        file_path: Absolute path to the target file.
        encoding: Text encoding of the file.

    Yields:
        str: Lines with any trailing '\\n' / '\\r\\n' / '\\r' removed.
    """
    with open(file_path, "r", encoding=encoding) as f:
        for line in f:
            yield line.rstrip("\r\n")
