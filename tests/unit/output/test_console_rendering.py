from __future__ import annotations

import io
import json
from pathlib import Path

from finder.output import ConsoleReporter, format_notice, format_record
from finder.search import MatchRecord, WalkNotice


def test_record_lines_distinguish_match_kinds() -> None:
    path = Path("/data/readme.md")

    assert format_record(MatchRecord(path=path, kind="name-exact")) == "/data/readme.md"
    assert (
        format_record(MatchRecord(path=path, kind="name-fuzzy", distance=3))
        == "/data/readme.md (fuzzy match, distance: 3)"
    )
    assert (
        format_record(MatchRecord(path=path, kind="content-exact", line_number=4))
        == "/data/readme.md (content match)"
    )
    assert (
        format_record(MatchRecord(path=path, kind="content-fuzzy", distance=1, line_number=2))
        == "/data/readme.md (content fuzzy match, distance: 1)"
    )
    assert (
        format_record(MatchRecord(path=Path("/data/src"), kind="name-exact", is_directory=True))
        == "/data/src/"
    )


def test_notice_lines() -> None:
    assert format_notice(WalkNotice(path=Path("/mnt/a"), kind="excluded")) == "Excluded: /mnt/a"
    assert (
        format_notice(WalkNotice(path=Path("/root"), kind="access-denied", detail="denied"))
        == "Access denied: /root"
    )
    assert (
        format_notice(WalkNotice(path=Path("/x.txt"), kind="unreadable-file", detail="bad"))
        == "Unreadable: /x.txt (bad)"
    )
    assert format_notice(WalkNotice(path=Path("/l"), kind="cycle")) == "Skipped cycle: /l"


def test_reporter_counts_and_writes_json_lines() -> None:
    stream = io.StringIO()
    reporter = ConsoleReporter(stream, json_lines=True)

    reporter.record(MatchRecord(path=Path("/a.txt"), kind="name-exact"))
    reporter.record(MatchRecord(path=Path("/a.txt"), kind="content-exact", line_number=1))
    reporter.notice(WalkNotice(path=Path("/mnt"), kind="excluded"))

    payloads = [json.loads(line) for line in stream.getvalue().splitlines()]
    assert payloads[0] == {
        "distance": None,
        "is_directory": False,
        "kind": "name-exact",
        "line_number": None,
        "path": "/a.txt",
        "type": "match",
    }
    assert payloads[1]["line_number"] == 1
    assert payloads[2] == {"detail": "", "kind": "excluded", "path": "/mnt", "type": "notice"}
    assert reporter.match_counts == {"name-exact": 1, "content-exact": 1}
    assert reporter.notice_counts == {"excluded": 1}
