"""DTOs for tenant lookups (no dependency on ORM)."""

from dataclasses import dataclass

from app.domain.enums import TenantStatus


@dataclass(frozen=True)
class TenantResult:
    """Tenant read-model (result of get_by_id, get_by_code)."""

    id: str
    code: str
    name: str
    status: TenantStatus
