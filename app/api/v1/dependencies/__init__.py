"""Presentation-layer dependency injection (composition root).

Routes depend only on these providers, never on infrastructure directly.
Tests swap repositories through app.dependency_overrides.
"""

from .auth import (
    get_auth_context,
    get_auth_context_optional,
    get_authorization_service,
    get_authorized_tenant_id,
)
from .participant import (
    get_participant_repo,
    get_participant_search_repo,
    get_participant_search_service,
    get_participant_service,
)
from .tenant import get_tenant_id, get_tenant_repo

__all__ = [
    "get_auth_context",
    "get_auth_context_optional",
    "get_authorization_service",
    "get_authorized_tenant_id",
    "get_participant_repo",
    "get_participant_search_repo",
    "get_participant_search_service",
    "get_participant_service",
    "get_tenant_id",
    "get_tenant_repo",
]
