"""Tests for search input sanitization (keyword splitting, LIKE escaping)."""

import pytest

from app.shared.utils.sanitization import InputSanitizer, sanitize_keywords


@pytest.mark.parametrize(
    ("term", "expected"),
    [
        ("Startup", ["Startup"]),
        ("  somchai   startup ", ["somchai", "startup"]),
        ("a\tb\nc", ["a", "b", "c"]),
        ("O'Neil", ["ONeil"]),
        ('"quoted"', ["quoted"]),
        ("drop;table", ["droptable"]),
        ("' ; \"", []),
        ("", []),
        ("สมชาย ใจดี", ["สมชาย", "ใจดี"]),
    ],
)
def test_sanitize_keywords(term: str, expected: list[str]) -> None:
    assert sanitize_keywords(term) == expected


def test_keywords_keep_wildcard_characters_literal() -> None:
    """% and _ survive splitting; escaping happens when the pattern is built."""
    assert sanitize_keywords("50% off_peak") == ["50%", "off_peak"]


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("plain", "plain"),
        ("50%", "50\\%"),
        ("a_b", "a\\_b"),
        ("back\\slash", "back\\\\slash"),
        ("\\%", "\\\\\\%"),
    ],
)
def test_escape_like(value: str, expected: str) -> None:
    assert InputSanitizer.escape_like(value) == expected


def test_contains_pattern_wraps_escaped_value() -> None:
    assert InputSanitizer.contains_pattern("10%_x") == "%10\\%\\_x%"


def test_clean_keyword_strips_only_quotes_and_semicolons() -> None:
    assert InputSanitizer.clean_keyword(" it's;\"ok\" ") == "itsok"
