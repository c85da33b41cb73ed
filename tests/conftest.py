from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures that materialize directory trees on disk.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Callable, Dict, Iterator

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Scenario Content
# -----------------------------------------------------------------------------
FILE_1_1 = (
    "Lorem ipsum dolor sit amet, consectetur adipiscing elit.\n"
    "require 'Folder 2/File 2-1'\n"
    "Praesent feugiat egestas sem, id luctus lectus dignissim ac.\n"
)
FILE_2_1 = (
    "Phasellus eget tellus ac risus iaculis feugiat nec in eros.\n"
    "Nulla lacinia ante ac felis malesuada auctor.\n"
)
FILE_2_2 = (
    "require 'Folder 1/File 1-1'\n"
    "require 'Folder 2/File 2-1'\n"
    "In pretium dictum lacinia.\n"
)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[[Dict[str, str]], Path]:
    """
    Return a factory that writes {relative path: content} under a fresh root.

    Returns:
        Callable[[Dict[str, str]], Path]: Factory returning the root directory.
    """
    def _make(files: Dict[str, str]) -> Path:
        root = tmp_path / "root"
        root.mkdir(exist_ok=True)
        for rel, content in files.items():
            target = root / rel
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
        return root

    return _make


@pytest.fixture
def scenario_a(make_tree: Callable[[Dict[str, str]], Path]) -> Path:
    """The worked example: File 2-2 needs File 1-1 and File 2-1, File 1-1 needs File 2-1."""
    return make_tree({
        "Folder 1/File 1-1": FILE_1_1,
        "Folder 2/File 2-1": FILE_2_1,
        "Folder 2/File 2-2": FILE_2_2,
    })


@pytest.fixture(autouse=True)
def isolate_user_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep every test away from the real ~/.smartcat settings file."""
    data_dir = tmp_path / "user_data"
    monkeypatch.setattr(
        "smartcat.domain.config.get_user_data_dir", lambda: str(data_dir)
    )


@pytest.fixture(autouse=True)
def reset_smartcat_logging() -> Iterator[None]:
    """Detach SmartCat handlers after each test."""
    yield
    from smartcat.infra.logging import reset_logging
    reset_logging()
    logging.getLogger().setLevel(logging.WARNING)
