"""Tenant ORM model. One chapter; every participant row belongs to exactly one."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from app.domain.enums import TenantStatus
from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import (
    CuidMixin,
    TimestampMixin,
    status_check,
)


class Tenant(CuidMixin, TimestampMixin, Base):
    """Chapter account. Table: tenant. The X-Tenant-ID header carries its id."""

    __tablename__ = "tenant"

    code: Mapped[str] = mapped_column(String, unique=True, nullable=False, index=True)
    name: Mapped[str] = mapped_column(String, nullable=False)
    status: Mapped[str] = mapped_column(
        String, nullable=False, default=TenantStatus.ACTIVE.value, index=True
    )

    __table_args__ = (status_check(TenantStatus.values(), "tenant_status_check"),)
