"""Security: JWT access tokens and caller context."""

from app.infrastructure.security.jwt import (
    auth_context_from_token,
    create_access_token,
    verify_token,
)

__all__ = [
    "auth_context_from_token",
    "create_access_token",
    "verify_token",
]
