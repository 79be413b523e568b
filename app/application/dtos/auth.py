"""DTOs for the authenticated caller (no dependency on ORM)."""

from dataclasses import dataclass

SUPER_ADMIN_ROLE = "super_admin"


@dataclass(frozen=True)
class AuthContext:
    """Who is calling, built once per request from the bearer token.

    tenant_id is None for platform-wide super admins.
    """

    user_id: str
    tenant_id: str | None = None
    role: str | None = None
    is_super_admin: bool = False
