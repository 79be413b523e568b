"""ORM models. Import here so Alembic autogenerate sees every table."""

from app.infrastructure.persistence.models.business_category import BusinessCategory
from app.infrastructure.persistence.models.participant import Participant
from app.infrastructure.persistence.models.tenant import Tenant

__all__ = [
    "BusinessCategory",
    "Participant",
    "Tenant",
]
