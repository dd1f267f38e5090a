"""User application service: CRUD with reference checks and cache invalidation."""

from __future__ import annotations

import logging
from typing import Any

from app.application.dtos.pagination import Page, PageRequest
from app.application.dtos.user import UserCreate, UserResult
from app.application.interfaces.repositories import (
    IOrganizationRepository,
    IUserRepository,
)
from app.application.interfaces.services import ICacheInvalidator
from app.domain.enums import EntityType
from app.domain.exceptions import (
    DuplicateEmailException,
    ResourceNotFoundException,
    ValidationException,
)

logger = logging.getLogger(__name__)


class UserService:
    """Read, create, update and delete users."""

    def __init__(
        self,
        user_repo: IUserRepository,
        organization_repo: IOrganizationRepository,
        invalidator: ICacheInvalidator,
    ) -> None:
        self._user_repo = user_repo
        self._organization_repo = organization_repo
        self._invalidator = invalidator

    async def _require_organization(self, organization_id: str) -> None:
        if await self._organization_repo.get_by_id(organization_id) is None:
            raise ValidationException(
                f"organization not found: {organization_id}", field="organizationId"
            )

    async def get(self, user_id: str) -> UserResult:
        """Return user. Raises ResourceNotFoundException if missing."""
        user = await self._user_repo.get_by_id(user_id)
        if user is None:
            raise ResourceNotFoundException(EntityType.USER.value, user_id)
        return user

    async def list_page(self, request: PageRequest) -> Page[UserResult]:
        return await self._user_repo.list_page(request)

    async def create(self, data: UserCreate) -> UserResult:
        """Create user.

        Raises:
            ValidationException: organization_id does not reference an organization.
            DuplicateEmailException: email is already registered.
        """
        await self._require_organization(data.organization_id)
        if await self._user_repo.get_by_email(data.email) is not None:
            raise DuplicateEmailException()
        created = await self._user_repo.create_user(data)
        logger.info("User created: %s (organization %s)", created.id, created.organization_id)
        self._invalidator.invalidate(EntityType.USER.value, created.id)
        return created

    async def update(self, user_id: str, changes: dict[str, Any]) -> UserResult:
        """Apply changes. Raises ResourceNotFoundException if missing."""
        if changes.get("organization_id") is not None:
            await self._require_organization(changes["organization_id"])
        if changes.get("email") is not None:
            existing = await self._user_repo.get_by_email(changes["email"])
            if existing is not None and existing.id != user_id:
                raise DuplicateEmailException()
        updated = await self._user_repo.update_user(user_id, changes)
        if updated is None:
            raise ResourceNotFoundException(EntityType.USER.value, user_id)
        logger.info(
            "User updated: %s (%s)",
            user_id,
            sorted(k for k in changes if k != "password"),
        )
        self._invalidator.invalidate(EntityType.USER.value, user_id)
        # Single-order entries embed the user
        self._invalidator.invalidate_items(EntityType.ORDER.value)
        return updated

    async def delete(self, user_id: str) -> None:
        """Delete user; deleting a missing user is not an error. Their orders go by cascade."""
        deleted = await self._user_repo.delete_user(user_id)
        if deleted:
            logger.info("User deleted: %s", user_id)
        self._invalidator.invalidate(EntityType.USER.value, user_id)
        self._invalidator.invalidate_list(EntityType.ORDER.value)
        self._invalidator.invalidate_items(EntityType.ORDER.value)
