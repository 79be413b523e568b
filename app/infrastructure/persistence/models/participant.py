"""Participant ORM model. A chapter member, visitor, prospect or alumnus."""

from sqlalchemy import ForeignKey, Index, String, Text
from sqlalchemy.dialects.postgresql import ARRAY
from sqlalchemy.orm import Mapped, mapped_column

from app.domain.enums import ParticipantStatus
from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import (
    TenantScopedModel,
    status_check,
)
from app.shared.utils.generators import generate_cuid


class Participant(TenantScopedModel, Base):
    """Participant entity. Table: participants. Never hard-deleted (status changes only).

    Index (tenant_id, status) backs every directory and search query.
    """

    __tablename__ = "participants"

    participant_id: Mapped[str] = mapped_column(
        String, primary_key=True, default=generate_cuid
    )
    status: Mapped[str] = mapped_column(
        String, nullable=False, default=ParticipantStatus.PROSPECT.value
    )

    # Identity (bilingual)
    full_name_th: Mapped[str | None] = mapped_column(String(255))
    full_name_en: Mapped[str | None] = mapped_column(String(255))
    nickname_th: Mapped[str | None] = mapped_column(String(100))
    nickname_en: Mapped[str | None] = mapped_column(String(100))

    # Professional
    position: Mapped[str | None] = mapped_column(String(255))
    company: Mapped[str | None] = mapped_column(String(255))
    tagline: Mapped[str | None] = mapped_column(String(500))
    notes: Mapped[str | None] = mapped_column(Text)
    business_address: Mapped[str | None] = mapped_column(Text)
    business_type_code: Mapped[str | None] = mapped_column(
        String,
        ForeignKey("business_categories.category_code", ondelete="SET NULL"),
        index=True,
    )
    tags: Mapped[list[str] | None] = mapped_column(ARRAY(String))

    # Contact
    phone: Mapped[str | None] = mapped_column(String(50))
    email: Mapped[str | None] = mapped_column(String(255))
    line_id: Mapped[str | None] = mapped_column(String(100))
    website_url: Mapped[str | None] = mapped_column(String(500))
    facebook_url: Mapped[str | None] = mapped_column(String(500))
    instagram_url: Mapped[str | None] = mapped_column(String(500))
    linkedin_url: Mapped[str | None] = mapped_column(String(500))
    onepage_url: Mapped[str | None] = mapped_column(String(500))
    photo_url: Mapped[str | None] = mapped_column(String(500))
    company_logo_url: Mapped[str | None] = mapped_column(String(500))

    __table_args__ = (
        Index("ix_participants_tenant_status", "tenant_id", "status"),
        status_check(ParticipantStatus.values(), "participants_status_check"),
    )
