"""Traversal exclusion policy."""

from .exclusion import (
    DEFAULT_EXCEPTION_PREFIXES,
    DEFAULT_EXCLUDED_PREFIXES,
    ExclusionSet,
    canonical_path,
    should_exclude,
)

__all__ = [
    "DEFAULT_EXCEPTION_PREFIXES",
    "DEFAULT_EXCLUDED_PREFIXES",
    "ExclusionSet",
    "canonical_path",
    "should_exclude",
]
