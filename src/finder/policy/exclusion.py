"""Fixed exclusion policy for directory traversal."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path, PurePath
from typing import Final

DEFAULT_EXCLUDED_PREFIXES: Final[tuple[str, ...]] = ("/mnt",)
DEFAULT_EXCEPTION_PREFIXES: Final[tuple[str, ...]] = ("/mnt/drive2",)

PathLike = str | os.PathLike[str]


def canonical_path(path: PathLike) -> Path:
    """Return the absolute, symlink-resolved form used for policy checks."""
    return Path(path).expanduser().resolve(strict=False)


def _is_under(candidate: PurePath, prefix: PurePath) -> bool:
    return candidate.is_relative_to(prefix)


def should_exclude(
    candidate: PathLike,
    start_dir: PathLike,
    excluded_prefixes: tuple[PathLike, ...],
    exception_prefixes: tuple[PathLike, ...],
) -> bool:
    """Return True when a directory must be pruned from the traversal.

    A candidate inside the search root is never excluded. Otherwise it is
    excluded when it lies under an excluded prefix and under no exception
    prefix. Comparison is by whole path components on the paths as given;
    callers canonicalize first.
    """
    candidate_path = PurePath(candidate)
    if _is_under(candidate_path, PurePath(start_dir)):
        return False
    if not any(_is_under(candidate_path, PurePath(prefix)) for prefix in excluded_prefixes):
        return False
    return not any(_is_under(candidate_path, PurePath(prefix)) for prefix in exception_prefixes)


@dataclass(slots=True, frozen=True)
class ExclusionSet:
    """Excluded subtrees plus the nested exceptions that re-admit them."""

    excluded_prefixes: tuple[str, ...] = DEFAULT_EXCLUDED_PREFIXES
    exception_prefixes: tuple[str, ...] = DEFAULT_EXCEPTION_PREFIXES

    def should_exclude(self, candidate: PathLike, start_dir: PathLike) -> bool:
        """Apply the policy to a candidate directory for one search root."""
        return should_exclude(
            candidate,
            start_dir,
            self.excluded_prefixes,
            self.exception_prefixes,
        )

    def canonicalized(self) -> ExclusionSet:
        """Return a copy whose prefixes are in canonical form."""
        return ExclusionSet(
            excluded_prefixes=tuple(str(canonical_path(p)) for p in self.excluded_prefixes),
            exception_prefixes=tuple(str(canonical_path(p)) for p in self.exception_prefixes),
        )
