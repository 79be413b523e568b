"""Domain layer: enums and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from app.domain.enums import ParticipantStatus, TenantStatus
from app.domain.exceptions import (
    AuthenticationException,
    AuthorizationException,
    ChapterException,
    ResourceNotFoundException,
    SqlNotConfiguredException,
    ValidationException,
)

__all__ = [
    # Enums
    "ParticipantStatus",
    "TenantStatus",
    # Exceptions
    "AuthenticationException",
    "AuthorizationException",
    "ChapterException",
    "ResourceNotFoundException",
    "SqlNotConfiguredException",
    "ValidationException",
]
