"""Domain enumerations for the chapter platform.

Enums represent fixed sets of domain values (tenant and participant status).
"""

from enum import Enum


class TenantStatus(str, Enum):
    """Tenant (chapter account) lifecycle status.

    Determines whether a tenant accepts API traffic.
    """

    ACTIVE = "active"
    SUSPENDED = "suspended"
    ARCHIVED = "archived"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid status values as strings.

        Returns:
            List of enum value strings (e.g. for validation or serialization).
        """
        return [status.value for status in cls]


class ParticipantStatus(str, Enum):
    """Where a person stands with the chapter.

    Participants move between statuses through admin edits and approval
    workflows; rows are never hard-deleted.
    """

    PROSPECT = "prospect"
    VISITOR = "visitor"
    MEMBER = "member"
    ALUMNI = "alumni"
    DECLINED = "declined"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid status values as strings."""
        return [status.value for status in cls]

    @classmethod
    def visible(cls) -> list[str]:
        """Statuses shown in member directory search by default."""
        return [cls.MEMBER.value, cls.VISITOR.value]
