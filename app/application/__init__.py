"""Application layer: interfaces, services, use cases.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (repositories).
"""

from app.application.interfaces import (
    IParticipantRepository,
    IParticipantSearchRepository,
    ITenantRepository,
)
from app.application.services.authorization_service import AuthorizationService
from app.application.use_cases.participants import ParticipantService
from app.application.use_cases.search import ParticipantSearchService

__all__ = [
    "AuthorizationService",
    "IParticipantRepository",
    "IParticipantSearchRepository",
    "ITenantRepository",
    "ParticipantSearchService",
    "ParticipantService",
]
