"""Participant API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ParticipantResponse(BaseModel):
    """Participant as returned by directory and search endpoints."""

    model_config = ConfigDict(from_attributes=True)

    participant_id: str
    tenant_id: str
    status: str
    full_name_th: str | None = None
    full_name_en: str | None = None
    nickname_th: str | None = None
    nickname_en: str | None = None
    position: str | None = None
    company: str | None = None
    tagline: str | None = None
    phone: str | None = None
    email: str | None = None
    line_id: str | None = None
    business_type_code: str | None = None
    tags: list[str] | None = None
    website_url: str | None = None
    facebook_url: str | None = None
    instagram_url: str | None = None
    linkedin_url: str | None = None
    onepage_url: str | None = None
    photo_url: str | None = None
    company_logo_url: str | None = None
    business_address: str | None = None
    notes: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ParticipantListResponse(BaseModel):
    """One page of a tenant's participants."""

    items: list[ParticipantResponse]
    total: int = Field(..., ge=0, description="Participants matching the filter")
    limit: int
    offset: int
