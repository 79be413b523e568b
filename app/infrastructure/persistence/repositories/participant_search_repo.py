"""Participant search repository: the read queries behind participant search.

Case-insensitive substring matching uses ILIKE with bound parameters and
escaped wildcards, so keywords containing % or _ match literally.
Each method opens its own short-lived session: the search service may
cancel a query on timeout, and a cancelled query must not leave a shared
session half-used for the next sub-query.
"""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import Select, or_, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.application.dtos.participant import ParticipantResult
from app.infrastructure.persistence.models.business_category import BusinessCategory
from app.infrastructure.persistence.models.participant import Participant
from app.infrastructure.persistence.repositories.participant_repo import (
    participant_to_result,
)
from app.shared.utils.sanitization import InputSanitizer

# Text columns matched by the per-keyword field query.
SEARCH_FIELDS: tuple[str, ...] = (
    "full_name_th",
    "full_name_en",
    "nickname_th",
    "nickname_en",
    "phone",
    "company",
    "tagline",
    "notes",
)

_ESCAPE = InputSanitizer.LIKE_ESCAPE_CHAR


def _scoped(tenant_id: str, statuses: Sequence[str]) -> Select[tuple[Participant]]:
    """Participants of one tenant with status in statuses, in stable order."""
    return (
        select(Participant)
        .where(
            Participant.tenant_id == tenant_id,
            Participant.status.in_(list(statuses)),
        )
        .order_by(Participant.created_at, Participant.participant_id)
    )


def build_field_search(
    tenant_id: str, keyword: str, statuses: Sequence[str], limit: int
) -> Select[tuple[Participant]]:
    """Statement: any SEARCH_FIELDS column contains keyword (ILIKE, escaped)."""
    pattern = InputSanitizer.contains_pattern(keyword)
    return (
        _scoped(tenant_id, statuses)
        .where(
            or_(
                *(
                    getattr(Participant, field).ilike(pattern, escape=_ESCAPE)
                    for field in SEARCH_FIELDS
                )
            )
        )
        .limit(limit)
    )


def build_tag_candidates(
    tenant_id: str, statuses: Sequence[str], limit: int
) -> Select[tuple[Participant]]:
    """Statement: first `limit` participants that have a tag list."""
    return _scoped(tenant_id, statuses).where(Participant.tags.is_not(None)).limit(limit)


def build_category_search(
    tenant_id: str, category_code: str, statuses: Sequence[str], limit: int
) -> Select[tuple[Participant]]:
    """Statement: participants whose business_type_code equals category_code."""
    return (
        _scoped(tenant_id, statuses)
        .where(Participant.business_type_code == category_code)
        .limit(limit)
    )


def build_category_lookup(term: str) -> Select[tuple[str]]:
    """Statement: category codes whose Thai or English name contains term."""
    pattern = InputSanitizer.contains_pattern(term)
    return (
        select(BusinessCategory.category_code)
        .where(
            or_(
                BusinessCategory.name_th.ilike(pattern, escape=_ESCAPE),
                BusinessCategory.name_en.ilike(pattern, escape=_ESCAPE),
            )
        )
        .order_by(BusinessCategory.category_code)
    )


class ParticipantSearchRepository:
    """SQLAlchemy implementation of IParticipantSearchRepository."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self.session_factory = session_factory

    async def _fetch_participants(
        self, stmt: Select[tuple[Participant]]
    ) -> list[ParticipantResult]:
        async with self.session_factory() as session:
            result = await session.execute(stmt)
            return [participant_to_result(p) for p in result.scalars().all()]

    async def search_by_fields(
        self,
        tenant_id: str,
        keyword: str,
        statuses: Sequence[str],
        limit: int,
    ) -> list[ParticipantResult]:
        """Participants where any searchable text field contains keyword."""
        return await self._fetch_participants(
            build_field_search(tenant_id, keyword, statuses, limit)
        )

    async def list_tag_candidates(
        self,
        tenant_id: str,
        statuses: Sequence[str],
        limit: int,
    ) -> list[ParticipantResult]:
        """Participants with a non-null tag list (bounded page for in-memory scan)."""
        return await self._fetch_participants(
            build_tag_candidates(tenant_id, statuses, limit)
        )

    async def search_by_category(
        self,
        tenant_id: str,
        category_code: str,
        statuses: Sequence[str],
        limit: int,
    ) -> list[ParticipantResult]:
        """Participants whose business_type_code equals category_code."""
        return await self._fetch_participants(
            build_category_search(tenant_id, category_code, statuses, limit)
        )

    async def find_category_codes(self, term: str) -> list[str]:
        """Category codes whose Thai or English name contains term."""
        async with self.session_factory() as session:
            result = await session.execute(build_category_lookup(term))
            return list(result.scalars().all())
