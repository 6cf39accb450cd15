"""Console rendering of match records and traversal notices."""

from __future__ import annotations

import json
from collections import Counter
from typing import TextIO

from finder.search import MatchRecord, WalkNotice

_NOTICE_LABELS = {
    "excluded": "Excluded",
    "access-denied": "Access denied",
    "unreadable-file": "Unreadable",
    "unreadable-directory": "Unreadable",
    "cycle": "Skipped cycle",
}


def format_record(record: MatchRecord) -> str:
    """Render one match as a human-readable line."""
    path = f"{record.path}/" if record.is_directory else str(record.path)
    if record.kind == "name-fuzzy":
        return f"{path} (fuzzy match, distance: {record.distance})"
    if record.kind == "content-exact":
        return f"{path} (content match)"
    if record.kind == "content-fuzzy":
        return f"{path} (content fuzzy match, distance: {record.distance})"
    return path


def format_notice(notice: WalkNotice) -> str:
    """Render one traversal notice as a human-readable line."""
    line = f"{_NOTICE_LABELS[notice.kind]}: {notice.path}"
    if notice.detail and notice.kind in {"unreadable-file", "unreadable-directory"}:
        return f"{line} ({notice.detail})"
    return line


def record_to_dict(record: MatchRecord) -> dict[str, object]:
    """Return a JSON-serializable view of a match."""
    return {
        "type": "match",
        "path": str(record.path),
        "kind": record.kind,
        "distance": record.distance,
        "is_directory": record.is_directory,
        "line_number": record.line_number,
    }


def notice_to_dict(notice: WalkNotice) -> dict[str, object]:
    """Return a JSON-serializable view of a notice."""
    return {
        "type": "notice",
        "path": str(notice.path),
        "kind": notice.kind,
        "detail": notice.detail,
    }


class ConsoleReporter:
    """Write matches and notices to a stream as they are produced."""

    def __init__(self, out_stream: TextIO, json_lines: bool = False) -> None:
        self._out = out_stream
        self._json_lines = json_lines
        self.match_counts: Counter[str] = Counter()
        self.notice_counts: Counter[str] = Counter()

    def record(self, record: MatchRecord) -> None:
        self.match_counts[record.kind] += 1
        if self._json_lines:
            self._write(json.dumps(record_to_dict(record), sort_keys=True))
            return
        self._write(format_record(record))

    def notice(self, notice: WalkNotice) -> None:
        self.notice_counts[notice.kind] += 1
        if self._json_lines:
            self._write(json.dumps(notice_to_dict(notice), sort_keys=True))
            return
        self._write(format_notice(notice))

    def _write(self, line: str) -> None:
        self._out.write(f"{line}\n")
        self._out.flush()
