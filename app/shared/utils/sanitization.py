"""Input sanitization for search terms.

Queries use bound parameters; these helpers keep user text literal inside
LIKE/ILIKE patterns and split search input into keywords.
"""

import re
from typing import ClassVar


class InputSanitizer:
    """Sanitize user-supplied search text."""

    LIKE_ESCAPE_CHAR: ClassVar[str] = "\\"
    # Stripped outright: quoting and statement separators never belong in a keyword.
    STRIPPED_CHARS: ClassVar[re.Pattern[str]] = re.compile(r"""['";]""")
    WHITESPACE: ClassVar[re.Pattern[str]] = re.compile(r"\s+")

    @classmethod
    def escape_like(cls, value: str) -> str:
        """Escape LIKE/ILIKE wildcards so value matches literally.

        The escape character itself is escaped first, then % and _.
        Use with ``ESCAPE '\\'`` (SQLAlchemy: ``ilike(pattern, escape="\\\\")``).

        Args:
            value: Literal text.

        Returns:
            Text safe to wrap in ``%...%``.
        """
        esc = cls.LIKE_ESCAPE_CHAR
        return (
            value.replace(esc, esc + esc)
            .replace("%", esc + "%")
            .replace("_", esc + "_")
        )

    @classmethod
    def contains_pattern(cls, value: str) -> str:
        """Return an ILIKE pattern matching value as a substring."""
        return f"%{cls.escape_like(value)}%"

    @classmethod
    def clean_keyword(cls, value: str) -> str:
        """Strip quote and semicolon characters from a single keyword."""
        return cls.STRIPPED_CHARS.sub("", value).strip()

    @classmethod
    def split_keywords(cls, search_term: str) -> list[str]:
        """Split a search term on whitespace and clean each keyword.

        Empty tokens (before or after cleaning) are dropped; order is kept.
        Keywords stay literal; wildcard escaping happens where patterns
        are built (see contains_pattern).

        Args:
            search_term: Raw user input.

        Returns:
            Keywords in the order typed.
        """
        keywords = []
        for token in cls.WHITESPACE.split(search_term):
            cleaned = cls.clean_keyword(token)
            if cleaned:
                keywords.append(cleaned)
        return keywords


def sanitize_keywords(search_term: str) -> list[str]:
    """Return the cleaned keywords of a search term (see InputSanitizer.split_keywords)."""
    return InputSanitizer.split_keywords(search_term)
