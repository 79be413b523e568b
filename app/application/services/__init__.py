"""Application services (stateless helpers used by use cases and dependencies)."""

from app.application.services.authorization_service import AuthorizationService

__all__ = ["AuthorizationService"]
