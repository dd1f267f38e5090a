"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.

Update methods take a mapping of changed fields (snake_case DTO names) so a
field can be explicitly cleared with None; they return None when the row does
not exist. Delete methods return whether a row was removed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from app.application.dtos.order import OrderCreate, OrderFilter, OrderResult
    from app.application.dtos.organization import (
        OrganizationCreate,
        OrganizationResult,
    )
    from app.application.dtos.pagination import Page, PageRequest
    from app.application.dtos.user import UserCreate, UserResult


# Organization repository interface
class IOrganizationRepository(Protocol):
    """Protocol for organization repository (DIP)."""

    async def get_by_id(self, organization_id: str) -> OrganizationResult | None:
        """Return organization by ID."""

    async def list_page(self, request: PageRequest) -> Page[OrganizationResult]:
        """Return one page of organizations ordered by name."""

    async def create_organization(self, data: OrganizationCreate) -> OrganizationResult:
        """Create organization; return created entity."""

    async def update_organization(
        self, organization_id: str, changes: dict[str, Any]
    ) -> OrganizationResult | None:
        """Apply changes; None when not found."""

    async def delete_organization(self, organization_id: str) -> bool:
        """Delete organization (and, by cascade, its users and orders)."""


# User repository interface
class IUserRepository(Protocol):
    """Protocol for user repository (DIP)."""

    async def get_by_id(self, user_id: str) -> UserResult | None:
        """Return user by ID."""

    async def get_by_email(self, email: str) -> UserResult | None:
        """Return user by unique email."""

    async def list_page(self, request: PageRequest) -> Page[UserResult]:
        """Return one page of users ordered by last name, then first name."""

    async def authenticate(self, email: str, password: str) -> UserResult | None:
        """Return user when email and password match; None otherwise (constant time)."""

    async def create_user(self, data: UserCreate) -> UserResult:
        """Create user (hashes password). Raises DuplicateEmailException on duplicate email."""

    async def update_user(self, user_id: str, changes: dict[str, Any]) -> UserResult | None:
        """Apply changes ('password' is hashed); None when not found."""

    async def delete_user(self, user_id: str) -> bool:
        """Delete user (and, by cascade, their orders)."""


# Order repository interface
class IOrderRepository(Protocol):
    """Protocol for order repository (DIP)."""

    async def get_by_id(
        self, order_id: str, *, with_relations: bool = False
    ) -> OrderResult | None:
        """Return order by ID; with_relations joins its user and organization."""

    async def list_page(
        self, request: PageRequest, filters: OrderFilter
    ) -> Page[OrderResult]:
        """Return one page of orders (newest order_date first) matching filters."""

    async def create_order(self, data: OrderCreate) -> OrderResult:
        """Create order; return created entity."""

    async def update_order(self, order_id: str, changes: dict[str, Any]) -> OrderResult | None:
        """Apply changes; None when not found."""

    async def delete_order(self, order_id: str) -> bool:
        """Delete order."""
