"""Order repository. Interface methods return application DTOs."""

from decimal import Decimal
from typing import Any

from sqlalchemy import ColumnElement, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from app.application.dtos.order import OrderCreate, OrderFilter, OrderResult
from app.application.dtos.pagination import Page, PageRequest
from app.infrastructure.persistence.models.order import Order
from app.infrastructure.persistence.repositories.base import BaseRepository
from app.infrastructure.persistence.repositories.organization_repo import (
    _organization_to_result,
)
from app.infrastructure.persistence.repositories.user_repo import _user_to_result
from app.shared.utils.datetime import ensure_utc


def _order_to_result(o: Order, *, with_relations: bool = False) -> OrderResult:
    return OrderResult(
        id=o.id,
        order_date=ensure_utc(o.order_date),  # type: ignore[arg-type]
        total_amount=float(o.total_amount),
        user_id=o.user_id,
        organization_id=o.organization_id,
        user=_user_to_result(o.user) if with_relations else None,
        organization=_organization_to_result(o.organization) if with_relations else None,
    )


def _amount(value: float) -> Decimal:
    """Two-decimal Decimal for the NUMERIC(10, 2) column."""
    return Decimal(str(value)).quantize(Decimal("0.01"))


class OrderRepository(BaseRepository[Order]):
    """Order CRUD; lists are newest order_date first."""

    _updatable = frozenset({"order_date", "total_amount", "user_id", "organization_id"})

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Order)

    async def get_by_id(
        self, order_id: str, *, with_relations: bool = False
    ) -> OrderResult | None:
        stmt = select(Order).where(Order.id == order_id)
        if with_relations:
            stmt = stmt.options(joinedload(Order.user), joinedload(Order.organization))
        order = (await self.db.execute(stmt)).scalar_one_or_none()
        return _order_to_result(order, with_relations=with_relations) if order else None

    async def list_page(
        self, request: PageRequest, filters: OrderFilter
    ) -> Page[OrderResult]:
        where: list[ColumnElement[bool]] = []
        if filters.user_id is not None:
            where.append(Order.user_id == filters.user_id)
        if filters.organization_id is not None:
            where.append(Order.organization_id == filters.organization_id)
        rows, total = await self._page(
            request,
            order_by=(Order.order_date.desc(), Order.id.asc()),
            where=where,
        )
        return Page.build([_order_to_result(o) for o in rows], request, total)

    async def create_order(self, data: OrderCreate) -> OrderResult:
        order = Order(
            order_date=ensure_utc(data.order_date),
            total_amount=_amount(data.total_amount),
            user_id=data.user_id,
            organization_id=data.organization_id,
        )
        return _order_to_result(await self.create(order))

    async def update_order(self, order_id: str, changes: dict[str, Any]) -> OrderResult | None:
        changes = dict(changes)
        if "total_amount" in changes:
            changes["total_amount"] = _amount(changes["total_amount"])
        if "order_date" in changes:
            changes["order_date"] = ensure_utc(changes["order_date"])
        order = await self.apply_changes(order_id, changes)
        return _order_to_result(order) if order else None

    async def delete_order(self, order_id: str) -> bool:
        return await self.delete_by_id(order_id)
