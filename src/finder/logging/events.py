"""Structured JSONL event log for search sessions."""

from __future__ import annotations

import json
import uuid
from dataclasses import asdict, dataclass
from datetime import UTC, datetime
from pathlib import Path


@dataclass(slots=True, frozen=True)
class SearchEvent:
    """One structured event of a search session."""

    timestamp: str
    session_id: str
    event: str
    path: str | None
    metadata: dict[str, object]


def utc_timestamp() -> str:
    """Return an ISO-8601 UTC timestamp."""
    return datetime.now(tz=UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def new_session_id() -> str:
    """Return a short random identifier for one search session."""
    return uuid.uuid4().hex[:12]


def sanitize_options(options: dict[str, object]) -> dict[str, object]:
    """Reduce search options to loggable values.

    Patterns may carry user data, so only their length is recorded.
    """
    sanitized: dict[str, object] = {}
    for key in sorted(options.keys()):
        value = options[key]
        if key == "pattern" and isinstance(value, str):
            sanitized["pattern_length"] = len(value)
            continue
        if isinstance(value, (int, float, bool)) or value is None:
            sanitized[key] = value
            continue
        if isinstance(value, (str, Path)):
            sanitized[key] = str(value)
            continue
        if isinstance(value, (list, tuple)):
            sanitized[f"{key}_length"] = len(value)
            continue
        sanitized[f"{key}_type"] = type(value).__name__
    return sanitized


class JsonlEventLogger:
    """Append-only JSONL event logger bound to one search session."""

    def __init__(self, path: Path, session_id: str | None = None) -> None:
        self._path = path
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._session_id = session_id or new_session_id()

    @property
    def path(self) -> Path:
        """Return on-disk JSONL path."""
        return self._path

    @property
    def session_id(self) -> str:
        return self._session_id

    def emit(
        self, event: str, path: Path | str | None = None, **metadata: object
    ) -> SearchEvent:
        """Append one event as a JSON object line and return it."""
        record = SearchEvent(
            timestamp=utc_timestamp(),
            session_id=self._session_id,
            event=event,
            path=str(path) if path is not None else None,
            metadata=dict(metadata),
        )
        with self._path.open("a", encoding="utf-8") as handle:
            handle.write(json.dumps(asdict(record), sort_keys=True, default=str))
            handle.write("\n")
        return record
