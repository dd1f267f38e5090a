"""Order application service: CRUD with reference checks and cache invalidation."""

from __future__ import annotations

import logging
from typing import Any

from app.application.dtos.order import OrderCreate, OrderFilter, OrderResult
from app.application.dtos.pagination import Page, PageRequest
from app.application.interfaces.repositories import (
    IOrderRepository,
    IOrganizationRepository,
    IUserRepository,
)
from app.application.interfaces.services import ICacheInvalidator
from app.domain.enums import EntityType
from app.domain.exceptions import ResourceNotFoundException, ValidationException

logger = logging.getLogger(__name__)


class OrderService:
    """Read, create, update and delete orders."""

    def __init__(
        self,
        order_repo: IOrderRepository,
        user_repo: IUserRepository,
        organization_repo: IOrganizationRepository,
        invalidator: ICacheInvalidator,
    ) -> None:
        self._order_repo = order_repo
        self._user_repo = user_repo
        self._organization_repo = organization_repo
        self._invalidator = invalidator

    async def _check_references(
        self, user_id: str | None, organization_id: str | None
    ) -> None:
        if user_id is not None and await self._user_repo.get_by_id(user_id) is None:
            raise ValidationException(f"user not found: {user_id}", field="userId")
        if (
            organization_id is not None
            and await self._organization_repo.get_by_id(organization_id) is None
        ):
            raise ValidationException(
                f"organization not found: {organization_id}", field="organizationId"
            )

    async def get(self, order_id: str) -> OrderResult:
        """Return order with its user and organization joined. Raises ResourceNotFoundException if missing."""
        order = await self._order_repo.get_by_id(order_id, with_relations=True)
        if order is None:
            raise ResourceNotFoundException(EntityType.ORDER.value, order_id)
        return order

    async def list_page(
        self, request: PageRequest, filters: OrderFilter | None = None
    ) -> Page[OrderResult]:
        return await self._order_repo.list_page(request, filters or OrderFilter())

    async def create(self, data: OrderCreate) -> OrderResult:
        """Create order. Raises ValidationException for unknown user or organization."""
        await self._check_references(data.user_id, data.organization_id)
        created = await self._order_repo.create_order(data)
        logger.info(
            "Order created: %s (user %s, organization %s, amount %s)",
            created.id,
            created.user_id,
            created.organization_id,
            created.total_amount,
        )
        self._invalidator.invalidate(EntityType.ORDER.value, created.id)
        return created

    async def update(self, order_id: str, changes: dict[str, Any]) -> OrderResult:
        """Apply changes. Raises ResourceNotFoundException if missing."""
        await self._check_references(
            changes.get("user_id"), changes.get("organization_id")
        )
        updated = await self._order_repo.update_order(order_id, changes)
        if updated is None:
            raise ResourceNotFoundException(EntityType.ORDER.value, order_id)
        logger.info("Order updated: %s (%s)", order_id, sorted(changes))
        self._invalidator.invalidate(EntityType.ORDER.value, order_id)
        return updated

    async def delete(self, order_id: str) -> None:
        """Delete order; deleting a missing order is not an error."""
        deleted = await self._order_repo.delete_order(order_id)
        if deleted:
            logger.info("Order deleted: %s", order_id)
        self._invalidator.invalidate(EntityType.ORDER.value, order_id)
