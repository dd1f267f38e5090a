"""User repository with password helpers. Interface methods return application DTOs."""

from typing import Any

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.pagination import Page, PageRequest
from app.application.dtos.user import UserCreate, UserResult
from app.domain.exceptions import DuplicateEmailException
from app.infrastructure.persistence.models.user import User
from app.infrastructure.persistence.repositories.base import BaseRepository
from app.infrastructure.security.password import check_password, hash_password
from app.shared.utils.datetime import ensure_utc


def _user_to_result(u: User) -> UserResult:
    """Map ORM User to application UserResult (no password)."""
    return UserResult(
        id=u.id,
        first_name=u.first_name,
        last_name=u.last_name,
        email=u.email,
        date_created=ensure_utc(u.date_created),
        organization_id=u.organization_id,
    )


class UserRepository(BaseRepository[User]):
    """User CRUD and authentication; lists are ordered by last name, then first name."""

    _updatable = frozenset(
        {
            "first_name",
            "last_name",
            "email",
            "date_created",
            "organization_id",
            "hashed_password",
        }
    )

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, User)

    async def _get_by_email(self, email: str) -> User | None:
        result = await self.db.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def get_by_id(self, user_id: str) -> UserResult | None:
        user = await self._get(user_id)
        return _user_to_result(user) if user else None

    async def get_by_email(self, email: str) -> UserResult | None:
        user = await self._get_by_email(email)
        return _user_to_result(user) if user else None

    async def list_page(self, request: PageRequest) -> Page[UserResult]:
        rows, total = await self._page(
            request,
            order_by=(User.last_name.asc(), User.first_name.asc(), User.id.asc()),
        )
        return Page.build([_user_to_result(u) for u in rows], request, total)

    async def authenticate(self, email: str, password: str) -> UserResult | None:
        user = await self._get_by_email(email)
        if not await check_password(password, user.hashed_password if user else None):
            return None
        return _user_to_result(user) if user else None

    async def create_user(self, data: UserCreate) -> UserResult:
        """Create user; raise DuplicateEmailException on unique constraint violation."""
        user = User(
            first_name=data.first_name,
            last_name=data.last_name,
            email=data.email,
            organization_id=data.organization_id,
            hashed_password=await hash_password(data.password),
        )
        if data.date_created is not None:
            user.date_created = ensure_utc(data.date_created)
        try:
            return _user_to_result(await self.create(user))
        except IntegrityError:
            raise DuplicateEmailException()

    async def update_user(self, user_id: str, changes: dict[str, Any]) -> UserResult | None:
        """Apply changes; raise DuplicateEmailException on unique constraint violation."""
        changes = dict(changes)
        if "password" in changes:
            changes["hashed_password"] = await hash_password(changes.pop("password"))
        if "date_created" in changes:
            changes["date_created"] = ensure_utc(changes["date_created"])
        try:
            user = await self.apply_changes(user_id, changes)
        except IntegrityError:
            raise DuplicateEmailException()
        return _user_to_result(user) if user else None

    async def delete_user(self, user_id: str) -> bool:
        return await self.delete_by_id(user_id)
