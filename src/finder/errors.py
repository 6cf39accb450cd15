"""Error types raised by the search engine and its configuration layer."""

from __future__ import annotations

from pathlib import Path


class FinderError(Exception):
    """Base class for finder errors."""


class InvalidPatternError(FinderError):
    """Raised when a regex-mode pattern does not compile."""

    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__(f"Invalid regular expression {pattern!r}: {reason}")
        self.pattern = pattern
        self.reason = reason


class UnreadableFileError(FinderError):
    """Raised when a file cannot be read as text during a content scan."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class ConfigError(FinderError, ValueError):
    """Raised when a configuration file or override is invalid."""
