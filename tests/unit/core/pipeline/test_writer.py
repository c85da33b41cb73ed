from __future__ import annotations

"""
Unit tests for the Concatenated Artifact Writer.

Verifies:
1. Verbatim concatenation in the given order with normalized terminators.
2. Unreadable inputs are skipped and reported.
3. No artifact and no staging leftovers after a write failure.
"""

import os
import stat
from unittest.mock import patch

import pytest

from smartcat.core.pipeline.components.writer import concatenate_files


def test_concatenates_in_given_order(tmp_path) -> None:
    a = tmp_path / "a.txt"
    b = tmp_path / "b.txt"
    a.write_text("A1\nA2\n", encoding="utf-8")
    b.write_text("require 'a.txt'\nB1\n", encoding="utf-8")
    out = tmp_path / "out.txt"

    failures = concatenate_files([str(a), str(b)], str(out))

    assert failures == []
    assert out.read_bytes() == b"A1\nA2\nrequire 'a.txt'\nB1\n"


def test_missing_final_newline_is_added(tmp_path) -> None:
    a = tmp_path / "a.txt"
    b = tmp_path / "b.txt"
    a.write_text("no newline", encoding="utf-8")
    b.write_text("next", encoding="utf-8")
    out = tmp_path / "out.txt"

    concatenate_files([str(a), str(b)], str(out))

    assert out.read_bytes() == b"no newline\nnext\n"


def test_line_terminators_are_normalized(tmp_path) -> None:
    a = tmp_path / "a.txt"
    a.write_bytes(b"x\r\ny\r\n")
    out = tmp_path / "out.txt"

    concatenate_files([str(a)], str(out))

    assert out.read_bytes() == b"x\ny\n"


def test_empty_file_contributes_nothing(tmp_path) -> None:
    a = tmp_path / "a.txt"
    e = tmp_path / "empty.txt"
    a.write_text("a\n", encoding="utf-8")
    e.write_text("", encoding="utf-8")
    out = tmp_path / "out.txt"

    concatenate_files([str(e), str(a)], str(out))

    assert out.read_text(encoding="utf-8") == "a\n"


def test_replaces_existing_artifact(tmp_path) -> None:
    a = tmp_path / "a.txt"
    a.write_text("fresh\n", encoding="utf-8")
    out = tmp_path / "out.txt"
    out.write_text("stale content\n", encoding="utf-8")

    concatenate_files([str(a)], str(out))

    assert out.read_text(encoding="utf-8") == "fresh\n"


def test_previous_artifact_can_be_an_input(tmp_path) -> None:
    """The artifact is read before it is replaced."""
    out = tmp_path / "out.txt"
    out.write_text("old run\n", encoding="utf-8")
    a = tmp_path / "a.txt"
    a.write_text("a\n", encoding="utf-8")

    concatenate_files([str(out), str(a)], str(out))

    assert out.read_text(encoding="utf-8") == "old run\na\n"


def test_unreadable_file_is_skipped(tmp_path) -> None:
    a = tmp_path / "a.txt"
    a.write_text("a\n", encoding="utf-8")
    bad = tmp_path / "bad.bin"
    bad.write_bytes(b"good line\n\xff\xfe\n")
    out = tmp_path / "out.txt"

    failures = concatenate_files([str(bad), str(a)], str(out))

    assert [path for path, _ in failures] == [str(bad)]
    # Nothing from the partially decodable file leaks into the artifact
    assert out.read_text(encoding="utf-8") == "a\n"


def test_write_failure_leaves_no_artifact(tmp_path) -> None:
    a = tmp_path / "a.txt"
    a.write_text("a\n", encoding="utf-8")
    out = tmp_path / "out.txt"

    with patch("smartcat.core.pipeline.components.writer.os.replace",
               side_effect=OSError("disk full")):
        with pytest.raises(OSError, match="disk full"):
            concatenate_files([str(a)], str(out))

    assert not out.exists()
    assert sorted(os.listdir(tmp_path)) == ["a.txt"]


def test_unwritable_directory_raises(tmp_path) -> None:
    a = tmp_path / "a.txt"
    a.write_text("a\n", encoding="utf-8")

    with pytest.raises(OSError):
        concatenate_files([str(a)], str(tmp_path / "missing_dir" / "out.txt"))


@pytest.fixture
def umask_022():
    previous = os.umask(0o022)
    yield
    os.umask(previous)


@pytest.mark.skipif(os.name == "nt", reason="POSIX permission bits")
def test_new_artifact_follows_umask(tmp_path, umask_022) -> None:
    a = tmp_path / "a.txt"
    a.write_text("a\n", encoding="utf-8")
    out = tmp_path / "out.txt"

    concatenate_files([str(a)], str(out))

    assert stat.S_IMODE(os.stat(out).st_mode) == 0o644


@pytest.mark.skipif(os.name == "nt", reason="POSIX permission bits")
def test_existing_artifact_keeps_its_mode(tmp_path, umask_022) -> None:
    a = tmp_path / "a.txt"
    a.write_text("a\n", encoding="utf-8")
    out = tmp_path / "out.txt"
    out.write_text("old\n", encoding="utf-8")
    os.chmod(out, 0o640)

    concatenate_files([str(a)], str(out))

    assert stat.S_IMODE(os.stat(out).st_mode) == 0o640
    assert out.read_text(encoding="utf-8") == "a\n"
