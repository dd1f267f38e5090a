"""Organization application service: CRUD with cache invalidation after writes."""

from __future__ import annotations

import logging
from typing import Any

from app.application.dtos.organization import OrganizationCreate, OrganizationResult
from app.application.dtos.pagination import Page, PageRequest
from app.application.interfaces.repositories import IOrganizationRepository
from app.application.interfaces.services import ICacheInvalidator
from app.domain.enums import EntityType
from app.domain.exceptions import ResourceNotFoundException

logger = logging.getLogger(__name__)


class OrganizationService:
    """Read, create, update and delete organizations."""

    def __init__(
        self,
        organization_repo: IOrganizationRepository,
        invalidator: ICacheInvalidator,
    ) -> None:
        self._repo = organization_repo
        self._invalidator = invalidator

    async def get(self, organization_id: str) -> OrganizationResult:
        """Return organization. Raises ResourceNotFoundException if missing."""
        organization = await self._repo.get_by_id(organization_id)
        if organization is None:
            raise ResourceNotFoundException(EntityType.ORGANIZATION.value, organization_id)
        return organization

    async def list_page(self, request: PageRequest) -> Page[OrganizationResult]:
        return await self._repo.list_page(request)

    async def create(self, data: OrganizationCreate) -> OrganizationResult:
        created = await self._repo.create_organization(data)
        logger.info("Organization created: %s", created.id)
        self._invalidator.invalidate(EntityType.ORGANIZATION.value, created.id)
        return created

    async def update(
        self, organization_id: str, changes: dict[str, Any]
    ) -> OrganizationResult:
        """Apply changes. Raises ResourceNotFoundException if missing."""
        updated = await self._repo.update_organization(organization_id, changes)
        if updated is None:
            raise ResourceNotFoundException(EntityType.ORGANIZATION.value, organization_id)
        logger.info("Organization updated: %s (%s)", organization_id, sorted(changes))
        self._invalidator.invalidate(EntityType.ORGANIZATION.value, organization_id)
        # Single-order entries embed the organization
        self._invalidator.invalidate_items(EntityType.ORDER.value)
        return updated

    async def delete(self, organization_id: str) -> None:
        """Delete organization; deleting a missing organization is not an error.

        Users and orders of the organization are removed by cascade, so their
        list pages and cached items are dropped as well.
        """
        deleted = await self._repo.delete_organization(organization_id)
        if deleted:
            logger.info("Organization deleted: %s", organization_id)
        self._invalidator.invalidate(EntityType.ORGANIZATION.value, organization_id)
        self._invalidator.invalidate_list(EntityType.USER.value)
        self._invalidator.invalidate_list(EntityType.ORDER.value)
        self._invalidator.invalidate_items(EntityType.USER.value)
        self._invalidator.invalidate_items(EntityType.ORDER.value)
