"""Application interfaces (ports): repository protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from app.infrastructure.
"""

from app.application.interfaces.repositories import (
    IParticipantRepository,
    IParticipantSearchRepository,
    ITenantRepository,
)

__all__ = [
    "IParticipantRepository",
    "IParticipantSearchRepository",
    "ITenantRepository",
]
