"""Shared utilities: telemetry, request context, and cross-cutting helpers.

Used by application, infrastructure and middleware. No business logic.
"""

from app.shared.utils import InputSanitizer, generate_cuid, sanitize_keywords

__all__ = [
    "InputSanitizer",
    "generate_cuid",
    "sanitize_keywords",
]
