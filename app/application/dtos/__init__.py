"""Application DTOs (no ORM dependency)."""

from app.application.dtos.auth import AuthContext
from app.application.dtos.participant import ParticipantPage, ParticipantResult
from app.application.dtos.search import SearchOptions, SearchResult
from app.application.dtos.tenant import TenantResult

__all__ = [
    "AuthContext",
    "ParticipantPage",
    "ParticipantResult",
    "SearchOptions",
    "SearchResult",
    "TenantResult",
]
