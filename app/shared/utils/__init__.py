"""Shared utilities: ID generation and search input sanitization."""

from app.shared.utils.generators import generate_cuid
from app.shared.utils.sanitization import InputSanitizer, sanitize_keywords

__all__ = [
    "InputSanitizer",
    "generate_cuid",
    "sanitize_keywords",
]
