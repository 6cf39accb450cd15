"""Text eligibility and line-by-line content scanning."""

from __future__ import annotations

from collections.abc import Collection
from pathlib import Path

from finder.config import DEFAULT_TEXT_EXTENSIONS
from finder.errors import UnreadableFileError
from finder.matching import Matcher
from finder.search.models import ContentHit


def is_text_eligible(
    path: Path | str,
    text_extensions: Collection[str] = DEFAULT_TEXT_EXTENSIONS,
) -> bool:
    """Return True when the file extension marks it as scannable text."""
    suffix = Path(path).suffix.lower()
    return bool(suffix) and suffix in text_extensions


def scan_content(path: Path, matcher: Matcher) -> ContentHit | None:
    """Return the first line of path that satisfies matcher.

    Each line is compared whole, without its line terminator. Files that
    cannot be opened or decoded as UTF-8 raise UnreadableFileError.
    """
    try:
        with path.open("r", encoding="utf-8") as handle:
            for line_number, line in enumerate(handle, start=1):
                distance = matcher.match(line.rstrip("\n"))
                if distance is not None:
                    return ContentHit(line_number=line_number, distance=distance)
    except UnicodeDecodeError as error:
        raise UnreadableFileError(
            path=path, reason=f"not valid UTF-8 text ({error.reason})"
        ) from error
    except OSError as error:
        raise UnreadableFileError(path=path, reason=error.strerror or str(error)) from error
    return None
