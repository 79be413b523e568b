"""Participant directory and search dependencies (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.use_cases.participants import ParticipantService
from app.application.use_cases.search import ParticipantSearchService
from app.infrastructure.persistence.database import get_db, get_session_factory
from app.infrastructure.persistence.repositories import (
    ParticipantRepository,
    ParticipantSearchRepository,
)


async def get_participant_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ParticipantRepository:
    """Participant repository bound to the request session."""
    return ParticipantRepository(db)


async def get_participant_service(
    participant_repo: Annotated[ParticipantRepository, Depends(get_participant_repo)],
) -> ParticipantService:
    """Build ParticipantService."""
    return ParticipantService(participant_repo)


def get_participant_search_repo() -> ParticipantSearchRepository:
    """Search repository; opens its own session per sub-query."""
    return ParticipantSearchRepository(get_session_factory())


def get_participant_search_service(
    search_repo: Annotated[
        ParticipantSearchRepository, Depends(get_participant_search_repo)
    ],
) -> ParticipantSearchService:
    """Build ParticipantSearchService."""
    return ParticipantSearchService(search_repo)
