"""Auth dependencies: bearer token to AuthContext, tenant access check."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.application.dtos.auth import AuthContext
from app.application.services.authorization_service import AuthorizationService
from app.domain.exceptions import AuthenticationException
from app.infrastructure.security.jwt import auth_context_from_token

from .tenant import get_tenant_id

_http_bearer = HTTPBearer(auto_error=False)


def get_authorization_service() -> AuthorizationService:
    """Tenant access policy (composition root)."""
    return AuthorizationService()


async def get_auth_context_optional(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_http_bearer)],
) -> AuthContext | None:
    """Return the caller's AuthContext from the bearer token, or None."""
    if not credentials:
        return None
    try:
        return auth_context_from_token(credentials.credentials)
    except ValueError:
        return None


async def get_auth_context(
    ctx: Annotated[AuthContext | None, Depends(get_auth_context_optional)],
) -> AuthContext:
    """Return the caller's AuthContext; raise 401 if missing or invalid."""
    if ctx is None:
        raise AuthenticationException("Not authenticated")
    return ctx


async def get_authorized_tenant_id(
    ctx: Annotated[AuthContext, Depends(get_auth_context)],
    tenant_id: Annotated[str, Depends(get_tenant_id)],
    auth_svc: Annotated[AuthorizationService, Depends(get_authorization_service)],
) -> str:
    """Tenant ID from the header, after checking the caller may read it.

    Raises AuthorizationException (403) when the token belongs to another tenant.
    """
    auth_svc.enforce_tenant_access(ctx, tenant_id, action="read")
    return tenant_id
