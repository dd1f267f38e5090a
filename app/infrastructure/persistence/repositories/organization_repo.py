"""Organization repository. Interface methods return application DTOs."""

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.organization import OrganizationCreate, OrganizationResult
from app.application.dtos.pagination import Page, PageRequest
from app.infrastructure.persistence.models.organization import Organization
from app.infrastructure.persistence.repositories.base import BaseRepository
from app.shared.utils.datetime import ensure_utc


def _organization_to_result(o: Organization) -> OrganizationResult:
    return OrganizationResult(
        id=o.id,
        name=o.name,
        industry=o.industry,
        date_founded=ensure_utc(o.date_founded),
    )


class OrganizationRepository(BaseRepository[Organization]):
    """Organization CRUD; lists are ordered by name."""

    _updatable = frozenset({"name", "industry", "date_founded"})

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Organization)

    async def get_by_id(self, organization_id: str) -> OrganizationResult | None:
        org = await self._get(organization_id)
        return _organization_to_result(org) if org else None

    async def list_page(self, request: PageRequest) -> Page[OrganizationResult]:
        rows, total = await self._page(
            request, order_by=(Organization.name.asc(), Organization.id.asc())
        )
        return Page.build([_organization_to_result(o) for o in rows], request, total)

    async def create_organization(self, data: OrganizationCreate) -> OrganizationResult:
        org = Organization(
            name=data.name,
            industry=data.industry,
            date_founded=ensure_utc(data.date_founded),
        )
        return _organization_to_result(await self.create(org))

    async def update_organization(
        self, organization_id: str, changes: dict[str, Any]
    ) -> OrganizationResult | None:
        if "date_founded" in changes:
            changes = {**changes, "date_founded": ensure_utc(changes["date_founded"])}
        org = await self.apply_changes(organization_id, changes)
        return _organization_to_result(org) if org else None

    async def delete_organization(self, organization_id: str) -> bool:
        return await self.delete_by_id(organization_id)
