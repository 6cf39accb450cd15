"""Pattern compilation and fuzzy distance primitives."""

from .distance import fuzzy_distance, levenshtein, within_threshold
from .patterns import (
    MATCH_ALL_PATTERN,
    PATTERN_MODES,
    Matcher,
    PatternMode,
    compile_pattern,
    wildcard_to_regex,
)

__all__ = [
    "MATCH_ALL_PATTERN",
    "PATTERN_MODES",
    "Matcher",
    "PatternMode",
    "compile_pattern",
    "fuzzy_distance",
    "levenshtein",
    "wildcard_to_regex",
    "within_threshold",
]
