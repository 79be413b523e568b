"""Participant directory: get one participant, list a tenant's participants."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.application.dtos.participant import ParticipantPage, ParticipantResult
from app.domain.enums import ParticipantStatus
from app.domain.exceptions import ResourceNotFoundException, ValidationException

if TYPE_CHECKING:
    from app.application.interfaces.repositories import IParticipantRepository

MAX_PAGE_SIZE = 100


class ParticipantService:
    """Tenant-scoped participant reads (delegate to IParticipantRepository)."""

    def __init__(self, participant_repo: IParticipantRepository) -> None:
        self.participant_repo = participant_repo

    async def get_participant(
        self, tenant_id: str, participant_id: str
    ) -> ParticipantResult:
        """Return participant in tenant; raise ResourceNotFoundException otherwise."""
        participant = await self.participant_repo.get_by_id_and_tenant(
            participant_id, tenant_id
        )
        if participant is None:
            raise ResourceNotFoundException("participant", participant_id)
        return participant

    async def list_participants(
        self,
        tenant_id: str,
        status: str | None = None,
        limit: int = 50,
        offset: int = 0,
    ) -> ParticipantPage:
        """List participants (newest first). limit is clamped to 1..100."""
        if status is not None and status not in ParticipantStatus.values():
            raise ValidationException(f"Unknown participant status: {status}", field="status")
        if offset < 0:
            raise ValidationException("offset must not be negative", field="offset")
        limit = min(max(1, limit), MAX_PAGE_SIZE)
        return await self.participant_repo.list_by_tenant(
            tenant_id, status=status, limit=limit, offset=offset
        )
