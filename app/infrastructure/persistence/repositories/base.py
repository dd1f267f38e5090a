"""Base repository: generic get, paging, create, change-set update and delete."""

from collections.abc import Sequence
from typing import Any, Generic, TypeVar

from sqlalchemy import ColumnElement, Select, delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.pagination import PageRequest
from app.infrastructure.persistence.database import Base


ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Base repository over one mapped model.

    Subclasses map ORM rows to application DTOs; this class only deals in ORM
    instances. _updatable lists the attributes apply_changes may set.
    """

    _updatable: frozenset[str] = frozenset()

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    async def _get(self, entity_id: str) -> ModelType | None:
        """Return a single record by primary key, or None."""
        model: Any = self.model
        result = await self.db.execute(select(self.model).where(model.id == entity_id))
        return result.scalar_one_or_none()

    async def _page(
        self,
        request: PageRequest,
        order_by: Sequence[ColumnElement[Any]],
        where: Sequence[ColumnElement[bool]] = (),
        stmt: Select[Any] | None = None,
    ) -> tuple[list[ModelType], int]:
        """Return (rows for the requested page, total matching rows)."""
        count_stmt = select(func.count()).select_from(self.model)
        for clause in where:
            count_stmt = count_stmt.where(clause)
        total = (await self.db.execute(count_stmt)).scalar_one()

        rows_stmt = stmt if stmt is not None else select(self.model)
        for clause in where:
            rows_stmt = rows_stmt.where(clause)
        rows_stmt = rows_stmt.order_by(*order_by).offset(request.offset).limit(request.limit)
        result = await self.db.execute(rows_stmt)
        return list(result.scalars().all()), int(total)

    async def create(self, obj: ModelType) -> ModelType:
        """Persist a new record and return it refreshed (server defaults loaded)."""
        self.db.add(obj)
        await self.db.flush()
        await self.db.refresh(obj)
        return obj

    async def apply_changes(self, entity_id: str, changes: dict[str, Any]) -> ModelType | None:
        """Set allowed attributes from changes; None when the row does not exist."""
        obj = await self._get(entity_id)
        if obj is None:
            return None
        unknown = set(changes) - self._updatable
        if unknown:
            raise ValueError(f"Cannot update {self.model.__name__} fields: {sorted(unknown)}")
        for key, value in changes.items():
            setattr(obj, key, value)
        await self.db.flush()
        await self.db.refresh(obj)
        return obj

    async def delete_by_id(self, entity_id: str) -> bool:
        """Delete by primary key; True when a row was removed."""
        model: Any = self.model
        result: Any = await self.db.execute(delete(self.model).where(model.id == entity_id))
        await self.db.flush()
        return bool(result.rowcount)
