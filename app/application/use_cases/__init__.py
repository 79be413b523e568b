"""Application use cases: one entry point per workflow."""

from app.application.use_cases.participants import ParticipantService
from app.application.use_cases.search import ParticipantSearchService

__all__ = [
    "ParticipantSearchService",
    "ParticipantService",
]
