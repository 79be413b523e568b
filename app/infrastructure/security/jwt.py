"""JWT access tokens: creation, verification, and the caller's AuthContext.

Uses app.core.config for secret, algorithm and default TTL.
"""

from datetime import UTC, datetime, timedelta
from typing import Any, cast

from jose import JWTError, jwt

from app.application.dtos.auth import SUPER_ADMIN_ROLE, AuthContext
from app.core.config import get_settings


def create_access_token(
    data: dict[str, Any],
    expires_delta: timedelta | None = None,
) -> str:
    """Create a JWT access token with the given claims.

    Args:
        data: Claims to encode (sub, tenant_id, role, is_super_admin).
        expires_delta: Optional TTL; else uses settings.access_token_expire_minutes.

    Returns:
        Encoded JWT string.
    """
    settings = get_settings()
    to_encode = data.copy()
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)
    to_encode["exp"] = datetime.now(UTC) + expires_delta
    encoded = jwt.encode(
        to_encode,
        settings.secret_key.get_secret_value(),
        algorithm=settings.algorithm,
    )
    return cast(str, encoded)


def verify_token(token: str) -> dict[str, Any]:
    """Verify and decode a JWT. Returns the payload.

    Raises:
        ValueError: If the token is invalid, expired, or has no sub claim.
    """
    settings = get_settings()
    try:
        payload = jwt.decode(
            token,
            settings.secret_key.get_secret_value(),
            algorithms=[settings.algorithm],
            options={"require_exp": True, "require_sub": True},
        )
    except JWTError as e:
        raise ValueError(f"Invalid token: {e!s}") from e
    if not payload.get("sub"):
        raise ValueError("Token missing required claim: sub")
    return payload


def auth_context_from_token(token: str) -> AuthContext:
    """Verify token and build the caller's AuthContext from its claims.

    A token with is_super_admin=true or role=super_admin is a platform
    super admin; other tokens must carry a tenant_id claim.

    Raises:
        ValueError: If the token is invalid or a non-admin token has no tenant_id.
    """
    payload = verify_token(token)
    role = payload.get("role")
    is_super_admin = bool(payload.get("is_super_admin")) or role == SUPER_ADMIN_ROLE
    tenant_id = payload.get("tenant_id")
    if not is_super_admin and not tenant_id:
        raise ValueError("Token missing required claim: tenant_id")
    return AuthContext(
        user_id=str(payload["sub"]),
        tenant_id=str(tenant_id) if tenant_id else None,
        role=role,
        is_super_admin=is_super_admin,
    )
