"""Application interfaces (ports): repository and service protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from app.infrastructure or app.api.
"""

from app.application.interfaces.repositories import (
    IOrderRepository,
    IOrganizationRepository,
    IUserRepository,
)
from app.application.interfaces.services import ICacheInvalidator, ITokenIssuer

__all__ = [
    "ICacheInvalidator",
    "IOrderRepository",
    "IOrganizationRepository",
    "ITokenIssuer",
    "IUserRepository",
]
