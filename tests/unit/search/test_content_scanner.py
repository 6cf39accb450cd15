from __future__ import annotations

from pathlib import Path

import pytest

from finder.errors import UnreadableFileError
from finder.matching import compile_pattern
from finder.search import is_text_eligible, scan_content


def test_text_eligibility_by_extension() -> None:
    assert is_text_eligible("a.txt")
    assert is_text_eligible(Path("logs/APP.LOG"))
    assert is_text_eligible("settings.json")
    assert not is_text_eligible("a.bin")
    assert not is_text_eligible("Makefile")


def test_text_eligibility_with_custom_extensions() -> None:
    assert is_text_eligible("notes.org", {".org"})
    assert not is_text_eligible("notes.txt", {".org"})


def test_exact_scan_requires_whole_line_match(tmp_path: Path) -> None:
    path = tmp_path / "notes.txt"
    path.write_text("first line\nconfig\nlast line\n", encoding="utf-8")

    hit = scan_content(path, compile_pattern("CONFIG"))
    assert hit is not None
    assert hit.line_number == 2
    assert hit.distance == 0

    assert scan_content(path, compile_pattern("line")) is None
    assert scan_content(path, compile_pattern("*line")) is not None


def test_scan_strips_windows_line_endings(tmp_path: Path) -> None:
    path = tmp_path / "crlf.txt"
    path.write_bytes(b"alpha\r\nbeta\r\n")

    hit = scan_content(path, compile_pattern("beta"))
    assert hit is not None
    assert hit.line_number == 2


def test_fuzzy_scan_compares_full_line(tmp_path: Path) -> None:
    path = tmp_path / "notes.md"
    path.write_text("unrelated text here\nRead Me\n", encoding="utf-8")

    hit = scan_content(path, compile_pattern("readme", fuzzy_threshold=2))
    assert hit is not None
    assert hit.line_number == 2
    assert hit.distance == 1


def test_scan_without_match_returns_none(tmp_path: Path) -> None:
    path = tmp_path / "empty.txt"
    path.write_text("", encoding="utf-8")

    assert scan_content(path, compile_pattern("*")) is None


def test_undecodable_file_raises_unreadable_error(tmp_path: Path) -> None:
    path = tmp_path / "latin1.txt"
    path.write_bytes(b"caf\xe9\n")

    with pytest.raises(UnreadableFileError) as error:
        scan_content(path, compile_pattern("cafe"))

    assert error.value.path == path
    assert "UTF-8" in error.value.reason


def test_missing_file_raises_unreadable_error(tmp_path: Path) -> None:
    with pytest.raises(UnreadableFileError):
        scan_content(tmp_path / "gone.txt", compile_pattern("*"))
