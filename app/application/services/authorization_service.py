"""Authorization service: tenant access checks for the authenticated caller."""

from __future__ import annotations

from app.application.dtos.auth import AuthContext
from app.domain.exceptions import AuthorizationException


class AuthorizationService:
    """Decides whether an AuthContext may act on a tenant."""

    def can_access_tenant(self, ctx: AuthContext, tenant_id: str) -> bool:
        """Super admins reach every tenant; everyone else only their own."""
        if ctx.is_super_admin:
            return True
        return ctx.tenant_id is not None and ctx.tenant_id == tenant_id

    def enforce_tenant_access(
        self, ctx: AuthContext, tenant_id: str, action: str = "read"
    ) -> None:
        """Raise AuthorizationException if ctx may not act on tenant_id."""
        if not self.can_access_tenant(ctx, tenant_id):
            raise AuthorizationException(resource="tenant", action=action)
