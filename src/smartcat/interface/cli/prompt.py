from __future__ import annotations

"""
Interactive root directory prompt.

Asks for the root folder until the answer is a non-empty path to an 
existing directory.
"""

from typing import Callable, Optional

from smartcat.infra.fs import check_root_directory
from smartcat.utils.i18n import i18n


def prompt_for_root(
        read_line: Callable[[], str] = input,
        write: Callable[[str], None] = print,
) -> Optional[str]:
    """
    Read a root directory path interactively.

    Args:
        read_line: Source of user input (defaults to builtin input).
        write: Sink for prompt and diagnostic messages.

    Returns:
        Optional[str]: A valid directory path, or None if input ended (EOF).

    Raises:
        KeyboardInterrupt: Propagated so the caller can report cancellation.
    """
    while True:
        write(i18n.t("cli.prompt.root"))
        try:
            answer = read_line()
        except EOFError:
            return None

        path = answer.strip()
        valid, reason = check_root_directory(path)
        if valid:
            return path

        write(i18n.t(f"cli.prompt.{reason}"))
