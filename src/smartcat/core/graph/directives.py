from __future__ import annotations

"""
Directive Parser.

Recognizes dependency declarations of the form

    require 'Folder 2/File 2-1'

The match is strict: the stripped line must consist of the keyword, one run 
of whitespace, and a single quoted token that starts and ends with a quote 
and contains no other quote. Any deviation ignores the whole line.
"""

from typing import Iterable, List, Optional

from smartcat.core.pipeline.components.reader import stream_file_lines
from smartcat.domain.constants import DEFAULT_ENCODING, PATH_QUOTE, REQUIRE_KEYWORD


def parse_directive(line: str) -> Optional[str]:
    """
    Extract the raw path of a single directive line.

    Args:
        line: One line of file content, with or without its terminator.

    Returns:
        Optional[str]: The path between the quotes, or None if the line is
                       not a directive.
    """
    parts = line.strip().split(None, 1)
    if len(parts) != 2 or parts[0] != REQUIRE_KEYWORD:
        return None

    token = parts[1]
    if (
        len(token) < 2
        or not token.startswith(PATH_QUOTE)
        or not token.endswith(PATH_QUOTE)
        or token.count(PATH_QUOTE) != 2
    ):
        return None

    return token[1:-1]


def parse_directives(lines: Iterable[str]) -> List[str]:
    """
    Collect the raw directive paths of a file, in line order.

    Args:
        lines: The file content as a sequence of lines.

    Returns:
        List[str]: Root-relative paths, one per recognized directive line.
    """
    paths: List[str] = []
    for line in lines:
        path = parse_directive(line)
        if path is not None:
            paths.append(path)
    return paths


def read_directives(file_path: str, encoding: str = DEFAULT_ENCODING) -> List[str]:
    """Stream a file from disk through the parser."""
    return parse_directives(stream_file_lines(file_path, encoding))
