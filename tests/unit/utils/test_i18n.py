from __future__ import annotations

"""
Unit tests for the Internationalization (i18n) Utility.

Verifies key resolution, interpolation, fallbacks and locale parity.
"""

import json
import os
from typing import Any, Dict, Set

import pytest

from smartcat.utils.i18n import I18n, i18n

LOCALES_DIR = os.path.abspath(os.path.join(
    os.path.dirname(__file__), "..", "..", "..", "src", "smartcat", "interface", "locales"
))


def _flatten(data: Dict[str, Any], prefix: str = "") -> Set[str]:
    keys: Set[str] = set()
    for k, v in data.items():
        full = f"{prefix}{k}"
        if isinstance(v, dict):
            keys |= _flatten(v, f"{full}.")
        else:
            keys.add(full)
    return keys


def test_singleton_is_loaded() -> None:
    assert i18n.is_loaded is True
    assert i18n.locale == "en"


def test_translate_simple_key() -> None:
    assert i18n.t("cli.prompt.empty") == "Path is empty"


def test_translate_with_interpolation() -> None:
    assert i18n.t("cli.status.output", path="/r/concatenated.txt") == \
        "Concatenated file is located at /r/concatenated.txt"


def test_missing_key_falls_back_to_key() -> None:
    assert i18n.t("cli.nope.missing") == "cli.nope.missing"
    # Intermediate node, not a string
    assert i18n.t("cli.prompt") == "cli.prompt"


def test_missing_placeholder_returns_raw_template() -> None:
    assert i18n.t("cli.status.output", other="x") == "Concatenated file is located at {path}"


def test_unknown_locale_falls_back() -> None:
    manager = I18n("xx")

    assert manager.is_loaded is False
    assert manager.t("cli.prompt.empty") == "cli.prompt.empty"


def test_spanish_locale_loads() -> None:
    manager = I18n("es")

    assert manager.is_loaded is True
    assert manager.locale == "es"
    assert manager.t("cli.prompt.empty") == "La ruta está vacía"


@pytest.mark.parametrize("locale", ["es"])
def test_locale_key_parity(locale: str) -> None:
    with open(os.path.join(LOCALES_DIR, "en.json"), encoding="utf-8") as f:
        en = _flatten(json.load(f))
    with open(os.path.join(LOCALES_DIR, f"{locale}.json"), encoding="utf-8") as f:
        other = _flatten(json.load(f))

    assert en == other
