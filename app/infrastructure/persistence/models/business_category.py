"""BusinessCategory ORM model. Shared reference table (not tenant-scoped)."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base


class BusinessCategory(Base):
    """Business category with bilingual display names. Table: business_categories."""

    __tablename__ = "business_categories"

    category_code: Mapped[str] = mapped_column(String(20), primary_key=True)
    name_th: Mapped[str] = mapped_column(String(255), nullable=False)
    name_en: Mapped[str] = mapped_column(String(255), nullable=False)
