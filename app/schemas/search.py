"""Participant search API schemas."""

from pydantic import BaseModel, Field

from app.schemas.participant import ParticipantResponse


class ParticipantSearchResponse(BaseModel):
    """Search response: one page of matches plus diagnostics."""

    participants: list[ParticipantResponse]
    matching_category_codes: list[str] = Field(default_factory=list)
    count: int = Field(..., ge=0, description="Participants in this page")
    total_found: int = Field(
        default=0, ge=0, description="Unique matches gathered before paging"
    )
    has_more: bool = Field(default=False, description="Another page exists")
    limit: int
    offset: int
    timed_out_queries: list[str] = Field(
        default_factory=list,
        description="Sub-queries that timed out; results may be incomplete",
    )
