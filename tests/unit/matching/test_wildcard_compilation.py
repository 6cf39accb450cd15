from __future__ import annotations

import pytest

from finder.errors import InvalidPatternError
from finder.matching import PATTERN_MODES, compile_pattern, wildcard_to_regex


def test_star_matches_any_run_case_insensitively() -> None:
    matcher = compile_pattern("*.txt")

    assert matcher.matches("a.txt")
    assert matcher.matches("A.TXT")
    assert matcher.matches(".txt")
    assert not matcher.matches("a.txtx")
    assert not matcher.matches("a_txt")


def test_question_mark_matches_exactly_one_character() -> None:
    matcher = compile_pattern("log?.txt")

    assert matcher.matches("log1.txt")
    assert not matcher.matches("log12.txt")
    assert not matcher.matches("log.txt")


def test_whole_name_must_match() -> None:
    matcher = compile_pattern("readme")

    assert matcher.matches("README")
    assert not matcher.matches("readme.md")
    assert not matcher.matches("old_readme")


def test_default_pattern_matches_everything() -> None:
    matcher = compile_pattern("*")

    assert matcher.matches("")
    assert matcher.matches("anything.bin")


def test_regex_metacharacters_are_literal_in_wildcard_mode() -> None:
    matcher = compile_pattern("report[1](a|b).txt")

    assert matcher.matches("report[1](a|b).txt")
    assert not matcher.matches("report1a.txt")
    assert wildcard_to_regex("a*b?c") == "a.*b.c"


def test_exact_match_reports_zero_distance() -> None:
    matcher = compile_pattern("*.md")

    assert matcher.match("notes.md") == 0
    assert matcher.match("notes.txt") is None
    assert matcher.fuzzy is False


def test_regex_mode_uses_expression_with_whole_string_anchoring() -> None:
    matcher = compile_pattern(r"log\d+\.(txt|log)", mode="regex")

    assert matcher.matches("log12.txt")
    assert matcher.matches("LOG7.LOG")
    assert not matcher.matches("log.txt")
    assert not matcher.matches("old-log1.txt")


def test_invalid_regex_raises_invalid_pattern_error() -> None:
    with pytest.raises(InvalidPatternError) as error:
        compile_pattern("([unclosed", mode="regex")

    assert error.value.pattern == "([unclosed"


def test_unknown_mode_is_rejected() -> None:
    with pytest.raises(ValueError, match="Unknown pattern mode"):
        compile_pattern("*", mode="glob")  # type: ignore[arg-type]


def test_fuzzy_matcher_reports_distance_within_threshold() -> None:
    matcher = compile_pattern("readme", fuzzy_threshold=4)

    assert matcher.fuzzy is True
    assert matcher.match("readme.md") == 3
    assert matcher.match("README.txt") == 4
    assert matcher.match("license") is None


def test_negative_fuzzy_threshold_is_rejected() -> None:
    with pytest.raises(ValueError, match="non-negative"):
        compile_pattern("readme", fuzzy_threshold=-1)


@pytest.mark.parametrize("mode", PATTERN_MODES)
def test_every_known_mode_compiles(mode: str) -> None:
    assert compile_pattern("a", mode=mode).matches("A")  # type: ignore[arg-type]
