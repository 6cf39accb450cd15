"""Depth-first directory walk producing match records."""

from __future__ import annotations

import os
from collections.abc import Callable, Collection, Iterator
from pathlib import Path

from finder.config import DEFAULT_TEXT_EXTENSIONS
from finder.errors import UnreadableFileError
from finder.matching import Matcher, compile_pattern
from finder.policy import ExclusionSet, canonical_path
from finder.search.content import is_text_eligible, scan_content
from finder.search.models import MatchRecord, NoticeKind, SearchSpec, WalkNotice

NoticeSink = Callable[[WalkNotice], None]


def _discard_notice(notice: WalkNotice) -> None:
    return None


def _entry_is_dir(entry: os.DirEntry[str]) -> bool:
    try:
        return entry.is_dir()
    except OSError:
        return False


def _entry_is_file(entry: os.DirEntry[str]) -> bool:
    try:
        return entry.is_file()
    except OSError:
        return False


def _entry_is_symlink(entry: os.DirEntry[str]) -> bool:
    try:
        return entry.is_symlink()
    except OSError:
        return False


class Walker:
    """Walk a directory tree and yield matches for one SearchSpec.

    Traversal is depth-first and pre-order: the files of a directory are
    reported before any of its subdirectories are entered. Siblings are
    visited in name order. Conditions that stop a single directory or file
    from being examined are passed to ``on_notice`` and never abort the walk.
    """

    def __init__(
        self,
        spec: SearchSpec,
        exclusions: ExclusionSet | None = None,
        text_extensions: Collection[str] = DEFAULT_TEXT_EXTENSIONS,
        on_notice: NoticeSink | None = None,
    ) -> None:
        self._spec = spec
        self._root = canonical_path(spec.start_directory)
        self._exclusions = (exclusions or ExclusionSet()).canonicalized()
        self._text_extensions = frozenset(ext.lower() for ext in text_extensions)
        self._on_notice = on_notice or _discard_notice
        self._matcher: Matcher = compile_pattern(
            spec.pattern,
            mode=spec.pattern_mode,
            fuzzy_threshold=spec.fuzzy_threshold if spec.use_fuzzy else None,
        )

    def walk(self) -> Iterator[MatchRecord]:
        """Yield match records lazily in traversal order."""
        stack: list[tuple[Path, Path]] = [(Path(self._spec.start_directory), self._root)]
        visited: set[tuple[int, int]] = set()
        while stack:
            directory, canonical = stack.pop()
            if self._exclusions.should_exclude(canonical, self._root):
                self._notify(directory, "excluded")
                continue
            try:
                stat = os.stat(directory)
            except OSError as error:
                self._notify_directory_error(directory, error)
                continue
            identity = (stat.st_dev, stat.st_ino)
            if identity in visited:
                self._notify(directory, "cycle", "directory already visited")
                continue
            visited.add(identity)

            try:
                with os.scandir(directory) as iterator:
                    entries = sorted(iterator, key=lambda item: item.name)
            except OSError as error:
                self._notify_directory_error(directory, error)
                continue

            subdirectories: list[os.DirEntry[str]] = []
            for entry in entries:
                if _entry_is_dir(entry):
                    subdirectories.append(entry)
                    continue
                if not _entry_is_file(entry):
                    continue
                yield from self._visit_file(Path(entry.path))

            if self._spec.include_directories:
                for entry in subdirectories:
                    record = self._match_name(Path(entry.path), is_directory=True)
                    if record is not None:
                        yield record

            for entry in reversed(subdirectories):
                if _entry_is_symlink(entry):
                    child_canonical = canonical_path(entry.path)
                else:
                    child_canonical = canonical / entry.name
                stack.append((Path(entry.path), child_canonical))

    def _visit_file(self, path: Path) -> Iterator[MatchRecord]:
        record = self._match_name(path, is_directory=False)
        if record is not None:
            yield record
        if not self._spec.search_content:
            return
        if not is_text_eligible(path, self._text_extensions):
            return
        try:
            hit = scan_content(path, self._matcher)
        except UnreadableFileError as error:
            self._notify(path, "unreadable-file", error.reason)
            return
        if hit is None:
            return
        if self._matcher.fuzzy:
            yield MatchRecord(
                path=path,
                kind="content-fuzzy",
                distance=hit.distance,
                line_number=hit.line_number,
            )
            return
        yield MatchRecord(path=path, kind="content-exact", line_number=hit.line_number)

    def _match_name(self, path: Path, is_directory: bool) -> MatchRecord | None:
        distance = self._matcher.match(path.name)
        if distance is None:
            return None
        if self._matcher.fuzzy:
            return MatchRecord(
                path=path,
                kind="name-fuzzy",
                distance=distance,
                is_directory=is_directory,
            )
        return MatchRecord(path=path, kind="name-exact", is_directory=is_directory)

    def _notify_directory_error(self, directory: Path, error: OSError) -> None:
        reason = error.strerror or str(error)
        if isinstance(error, PermissionError):
            self._notify(directory, "access-denied", reason)
            return
        self._notify(directory, "unreadable-directory", reason)

    def _notify(self, path: Path, kind: NoticeKind, detail: str = "") -> None:
        self._on_notice(WalkNotice(path=path, kind=kind, detail=detail))


def walk(
    spec: SearchSpec,
    exclusions: ExclusionSet | None = None,
    text_extensions: Collection[str] = DEFAULT_TEXT_EXTENSIONS,
    on_notice: NoticeSink | None = None,
) -> Iterator[MatchRecord]:
    """Yield the matches of spec, starting at spec.start_directory."""
    walker = Walker(
        spec,
        exclusions=exclusions,
        text_extensions=text_extensions,
        on_notice=on_notice,
    )
    return walker.walk()
