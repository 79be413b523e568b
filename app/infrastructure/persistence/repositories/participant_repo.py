"""Participant directory repository (tenant-scoped reads). Returns application DTOs."""

from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.participant import ParticipantPage, ParticipantResult
from app.infrastructure.persistence.models.participant import Participant
from app.infrastructure.persistence.repositories.base import BaseRepository


def participant_to_result(p: Participant) -> ParticipantResult:
    """Map ORM Participant to application ParticipantResult."""
    return ParticipantResult(
        participant_id=p.participant_id,
        tenant_id=p.tenant_id,
        status=p.status,
        full_name_th=p.full_name_th,
        full_name_en=p.full_name_en,
        nickname_th=p.nickname_th,
        nickname_en=p.nickname_en,
        position=p.position,
        company=p.company,
        tagline=p.tagline,
        notes=p.notes,
        phone=p.phone,
        email=p.email,
        line_id=p.line_id,
        website_url=p.website_url,
        facebook_url=p.facebook_url,
        instagram_url=p.instagram_url,
        linkedin_url=p.linkedin_url,
        onepage_url=p.onepage_url,
        photo_url=p.photo_url,
        company_logo_url=p.company_logo_url,
        business_address=p.business_address,
        business_type_code=p.business_type_code,
        tags=list(p.tags) if p.tags is not None else None,
        created_at=p.created_at,
        updated_at=p.updated_at,
    )


class ParticipantRepository(BaseRepository[Participant]):
    """Participant reads. Every query filters on tenant_id."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Participant)

    async def get_by_id_and_tenant(
        self, participant_id: str, tenant_id: str
    ) -> ParticipantResult | None:
        """Return participant only if it belongs to tenant."""
        participant = await self.get_by_id(participant_id)
        if participant is None or participant.tenant_id != tenant_id:
            return None
        return participant_to_result(participant)

    async def list_by_tenant(
        self,
        tenant_id: str,
        status: str | None = None,
        limit: int = 50,
        offset: int = 0,
    ) -> ParticipantPage:
        """Return one page of tenant participants (newest first) with total count."""
        conditions = [Participant.tenant_id == tenant_id]
        if status is not None:
            conditions.append(Participant.status == status)
        total = await self.db.scalar(
            select(func.count()).select_from(Participant).where(*conditions)
        )
        result = await self.db.execute(
            select(Participant)
            .where(*conditions)
            .order_by(Participant.created_at.desc(), Participant.participant_id)
            .offset(offset)
            .limit(limit)
        )
        return ParticipantPage(
            items=[participant_to_result(p) for p in result.scalars().all()],
            total=int(total or 0),
            limit=limit,
            offset=offset,
        )
