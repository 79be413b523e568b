"""Pydantic response schemas for the API."""

from app.schemas.health import (
    HealthResponse,
    ReadinessErrorResponse,
    ReadinessResponse,
)
from app.schemas.participant import ParticipantListResponse, ParticipantResponse
from app.schemas.search import ParticipantSearchResponse

__all__ = [
    "HealthResponse",
    "ParticipantListResponse",
    "ParticipantResponse",
    "ParticipantSearchResponse",
    "ReadinessErrorResponse",
    "ReadinessResponse",
]
