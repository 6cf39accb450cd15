"""Typed models for search requests, matches and traversal notices."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from finder.config import DEFAULT_FUZZY_THRESHOLD
from finder.matching import PatternMode

MatchKind = Literal["name-exact", "name-fuzzy", "content-exact", "content-fuzzy"]
NoticeKind = Literal[
    "excluded",
    "access-denied",
    "unreadable-file",
    "unreadable-directory",
    "cycle",
]


@dataclass(slots=True, frozen=True)
class SearchSpec:
    """Immutable description of one search run."""

    start_directory: Path
    pattern: str = "*"
    use_fuzzy: bool = False
    fuzzy_threshold: int = DEFAULT_FUZZY_THRESHOLD
    search_content: bool = False
    pattern_mode: PatternMode = "wildcard"
    include_directories: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.fuzzy_threshold, int) or self.fuzzy_threshold < 0:
            raise ValueError("fuzzy_threshold must be a non-negative integer.")


@dataclass(slots=True, frozen=True)
class MatchRecord:
    """One reported match.

    ``distance`` is set for fuzzy kinds and ``line_number`` (1-based) for
    content kinds.
    """

    path: Path
    kind: MatchKind
    distance: int | None = None
    is_directory: bool = False
    line_number: int | None = None

    @property
    def is_content_match(self) -> bool:
        return self.kind.startswith("content-")


@dataclass(slots=True, frozen=True)
class WalkNotice:
    """Non-fatal traversal condition reported alongside matches."""

    path: Path
    kind: NoticeKind
    detail: str = ""


@dataclass(slots=True, frozen=True)
class ContentHit:
    """First line of a file that satisfied the content matcher."""

    line_number: int
    distance: int
