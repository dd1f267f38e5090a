"""Domain layer: enums and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from app.domain.enums import EntityType
from app.domain.exceptions import (
    AuthenticationException,
    DuplicateEmailException,
    OrdersApiException,
    ResourceNotFoundException,
    ValidationException,
)

__all__ = [
    # Enums
    "EntityType",
    # Exceptions
    "AuthenticationException",
    "DuplicateEmailException",
    "OrdersApiException",
    "ResourceNotFoundException",
    "ValidationException",
]
