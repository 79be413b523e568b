"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.application.dtos.participant import ParticipantPage, ParticipantResult
    from app.application.dtos.tenant import TenantResult


class ITenantRepository(Protocol):
    """Protocol for tenant lookups (header validation)."""

    async def get_by_id(self, tenant_id: str) -> TenantResult | None:
        """Return tenant by ID, or None."""

    async def get_by_code(self, code: str) -> TenantResult | None:
        """Return tenant by unique code, or None."""


class IParticipantRepository(Protocol):
    """Protocol for the tenant participant directory."""

    async def get_by_id_and_tenant(
        self, participant_id: str, tenant_id: str
    ) -> ParticipantResult | None:
        """Return participant only if it belongs to tenant."""

    async def list_by_tenant(
        self,
        tenant_id: str,
        status: str | None = None,
        limit: int = 50,
        offset: int = 0,
    ) -> ParticipantPage:
        """Return one page of tenant participants (newest first) with total count."""


class IParticipantSearchRepository(Protocol):
    """Protocol for the read queries the participant search issues.

    Every participant query is scoped by explicit tenant_id equality and a
    status IN filter. Matching is case-insensitive substring; keyword and
    term arguments are literal text (implementations escape wildcards).
    """

    async def search_by_fields(
        self,
        tenant_id: str,
        keyword: str,
        statuses: Sequence[str],
        limit: int,
    ) -> list[ParticipantResult]:
        """Participants where any searchable text field contains keyword."""

    async def list_tag_candidates(
        self,
        tenant_id: str,
        statuses: Sequence[str],
        limit: int,
    ) -> list[ParticipantResult]:
        """Participants with a non-null tag list (bounded page for in-memory scan)."""

    async def search_by_category(
        self,
        tenant_id: str,
        category_code: str,
        statuses: Sequence[str],
        limit: int,
    ) -> list[ParticipantResult]:
        """Participants whose business_type_code equals category_code."""

    async def find_category_codes(self, term: str) -> list[str]:
        """Category codes whose Thai or English name contains term."""
