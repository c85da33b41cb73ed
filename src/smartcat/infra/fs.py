from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides cross-platform path canonicalization, user data directory
resolution and directory validation utilities. Acts as an abstraction over
the 'os' module so that scan-derived and directive-derived paths collapse
onto the same node identifier on Windows and Unix-like systems alike.
"""

import os
from typing import Optional, Tuple

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "SmartCat"
UNIX_APP_DIR_NAME = ".smartcat"

# Separators accepted inside directive paths regardless of the host OS
_DIRECTIVE_SEPARATORS = ("/", "\\")

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Automatically creates the hierarchy if it does not exist.
    Standards:
    - Windows: %LOCALAPPDATA%/SmartCat
    - Linux/Mac: ~/.smartcat

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    if not path:
        home = os.path.expanduser("~")
        path = os.path.join(home, UNIX_APP_DIR_NAME)

    try:
        os.makedirs(path, exist_ok=True)
    except OSError:
        pass

    return os.path.abspath(path)


def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a directory path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is blank.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)


def canonical_id(path: str) -> str:
    """
    Build the canonical node identifier for a filesystem path.

    The identifier is absolute, collapses '.' and '..' segments and
    redundant separators, and is case-folded on case-insensitive hosts.

    Args:
        path: Any absolute or relative path to a file.

    Returns:
        str: The canonical identifier.
    """
    return os.path.normcase(os.path.normpath(os.path.abspath(path)))


def resolve_directive(root: str, raw_path: str) -> str:
    """
    Resolve a root-relative directive path into a canonical node identifier.

    Both '/' and '\\' are accepted as separators so that a directive written
    on one platform resolves on another. Every backslash is treated as a
    separator, even on POSIX where it is a legal file name character, so a
    file whose name contains a backslash cannot be required.

    Args:
        root: Absolute root directory of the run.
        raw_path: Path exactly as it appeared between the quotes.

    Returns:
        str: Canonical identifier, comparable with scan-derived ids.
    """
    relative = raw_path
    for sep in _DIRECTIVE_SEPARATORS:
        if sep != os.sep:
            relative = relative.replace(sep, os.sep)
    return canonical_id(os.path.join(root, relative))


def relative_label(root: str, node_id: str) -> str:
    """Render a node identifier relative to the root for human output."""
    try:
        return os.path.relpath(node_id, root)
    except ValueError:
        # Different drives on Windows
        return node_id

# -----------------------------------------------------------------------------
# FILESYSTEM VALIDATION API
# -----------------------------------------------------------------------------

def check_root_directory(path: str) -> Tuple[bool, Optional[str]]:
    """
    Verify that a user supplied root path is usable.

    Args:
        path: Raw root path string.

    Returns:
        Tuple[bool, Optional[str]]: (Valid flag, reason key if invalid).
                                    Reason is 'empty' or 'not_directory'.
    """
    if not (path or "").strip():
        return False, "empty"
    if not os.path.isdir(normalize_path(path, os.getcwd())):
        return False, "not_directory"
    return True, None
