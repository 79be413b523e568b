"""Persistence repositories. Re-exports for dependency injection."""

from app.infrastructure.persistence.repositories.base import BaseRepository
from app.infrastructure.persistence.repositories.participant_repo import (
    ParticipantRepository,
)
from app.infrastructure.persistence.repositories.participant_search_repo import (
    ParticipantSearchRepository,
)
from app.infrastructure.persistence.repositories.tenant_repo import TenantRepository

__all__ = [
    "BaseRepository",
    "ParticipantRepository",
    "ParticipantSearchRepository",
    "TenantRepository",
]
