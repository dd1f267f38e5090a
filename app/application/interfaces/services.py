"""Service interfaces (ports) for the application layer.

Protocols define contracts for collaborators of application services (DIP).
"""

from __future__ import annotations

from typing import Any, Protocol


# Cache invalidation interface
class ICacheInvalidator(Protocol):
    """Protocol for evicting cached responses after writes. Must not raise."""

    def invalidate(self, entity: str, entity_id: str) -> None:
        """Drop the entity's item key and all list keys of its type."""

    def invalidate_list(self, entity: str) -> int:
        """Drop all list keys of the entity type; return how many were removed."""

    def invalidate_items(self, entity: str) -> int:
        """Drop every item key of the entity type; return how many were removed."""


# Token issuing interface
class ITokenIssuer(Protocol):
    """Protocol for issuing access tokens (JWT in production)."""

    def create_access_token(self, data: dict[str, Any]) -> str:
        """Return a signed token carrying data as claims."""
