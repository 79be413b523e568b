"""DTOs for participant use cases (no dependency on ORM)."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class ParticipantResult:
    """Participant read-model (directory and search results)."""

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
    notes: str | None = None
    phone: str | None = None
    email: str | None = None
    line_id: str | None = None
    website_url: str | None = None
    facebook_url: str | None = None
    instagram_url: str | None = None
    linkedin_url: str | None = None
    onepage_url: str | None = None
    photo_url: str | None = None
    company_logo_url: str | None = None
    business_address: str | None = None
    business_type_code: str | None = None
    tags: list[str] | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def display_name(self) -> str:
        """Best available name for logs and UI (Thai name first)."""
        return (
            self.full_name_th
            or self.full_name_en
            or self.nickname_th
            or self.nickname_en
            or self.participant_id
        )


@dataclass(frozen=True)
class ParticipantPage:
    """One page of a tenant's participant list."""

    items: list[ParticipantResult] = field(default_factory=list)
    total: int = 0
    limit: int = 50
    offset: int = 0
