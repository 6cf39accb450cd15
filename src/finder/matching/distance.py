"""Levenshtein edit distance for fuzzy matching."""

from __future__ import annotations


def levenshtein(a: str, b: str) -> int:
    """Return the unit-cost edit distance between two strings.

    Characters are compared as-is. The ``(len(a)+1) x (len(b)+1)`` table is
    filled row by row, keeping only the previous row.
    """
    if not a:
        return len(b)
    if not b:
        return len(a)
    if len(a) < len(b):
        a, b = b, a

    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        current = [i]
        for j, char_b in enumerate(b, start=1):
            cost = 0 if char_a == char_b else 1
            current.append(
                min(
                    previous[j] + 1,
                    current[j - 1] + 1,
                    previous[j - 1] + cost,
                )
            )
        previous = current
    return previous[-1]


def fuzzy_distance(a: str, b: str) -> int:
    """Return the edit distance between case-folded operands."""
    return levenshtein(a.casefold(), b.casefold())


def within_threshold(text: str, pattern: str, threshold: int) -> int | None:
    """Return the case-folded distance when it is <= threshold, else None."""
    folded_text = text.casefold()
    folded_pattern = pattern.casefold()
    # length difference is a lower bound on the distance
    if abs(len(folded_text) - len(folded_pattern)) > threshold:
        return None
    distance = fuzzy_distance(text, pattern)
    if distance > threshold:
        return None
    return distance
