"""Pattern compilation for name and line matching."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final, Literal

from finder.errors import InvalidPatternError
from finder.matching.distance import within_threshold

PatternMode = Literal["wildcard", "regex"]

PATTERN_MODES: Final[tuple[str, ...]] = ("wildcard", "regex")
MATCH_ALL_PATTERN: Final[str] = "*"


@dataclass(slots=True, frozen=True)
class Matcher:
    """Compiled predicate for a single search pattern.

    Exact matchers carry a compiled expression that must match the whole
    text. Fuzzy matchers carry the case-folded pattern and the maximum edit
    distance accepted.
    """

    pattern: str
    regex: re.Pattern[str] | None = None
    fuzzy_threshold: int | None = None

    @property
    def fuzzy(self) -> bool:
        """Return True when matching by edit distance."""
        return self.fuzzy_threshold is not None

    def match(self, text: str) -> int | None:
        """Return the match distance for text, or None when it does not match.

        Exact matches always report a distance of 0.
        """
        if self.fuzzy_threshold is not None:
            return within_threshold(text, self.pattern, self.fuzzy_threshold)
        if self.regex is not None and self.regex.fullmatch(text) is not None:
            return 0
        return None

    def matches(self, text: str) -> bool:
        """Return True when text satisfies the pattern."""
        return self.match(text) is not None


def wildcard_to_regex(pattern: str) -> str:
    """Translate a wildcard expression into an equivalent regular expression.

    Every character is escaped first, so regex metacharacters such as ``[``,
    ``(`` or ``|`` stay literal. ``*`` then becomes ``.*`` and ``?`` becomes
    ``.``. The caller anchors the result by matching the whole string.
    """
    return re.escape(pattern).replace(r"\*", ".*").replace(r"\?", ".")


def compile_pattern(
    pattern: str,
    mode: PatternMode = "wildcard",
    fuzzy_threshold: int | None = None,
) -> Matcher:
    """Compile a search pattern into a case-insensitive whole-string matcher."""
    if fuzzy_threshold is not None:
        if fuzzy_threshold < 0:
            raise ValueError("fuzzy_threshold must be a non-negative integer.")
        return Matcher(pattern=pattern, fuzzy_threshold=fuzzy_threshold)
    if mode not in PATTERN_MODES:
        raise ValueError(f"Unknown pattern mode: {mode!r}")
    expression = wildcard_to_regex(pattern) if mode == "wildcard" else pattern
    try:
        regex = re.compile(expression, re.IGNORECASE)
    except re.error as error:
        raise InvalidPatternError(pattern=pattern, reason=str(error)) from error
    return Matcher(pattern=pattern, regex=regex)
