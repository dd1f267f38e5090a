"""Seed service: fills an empty database with demo organizations, users and orders."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from datetime import datetime, timedelta

from app.application.dtos.order import OrderCreate
from app.application.dtos.organization import OrganizationCreate, OrganizationResult
from app.application.dtos.user import UserCreate, UserResult
from app.application.interfaces.repositories import (
    IOrderRepository,
    IOrganizationRepository,
    IUserRepository,
)
from app.application.interfaces.services import ICacheInvalidator
from app.domain.enums import EntityType
from app.shared.utils.datetime import utc_now

logger = logging.getLogger(__name__)

SEED_ORGANIZATIONS = 2
SEED_USERS = 10
SEED_ORDERS = 20

INDUSTRIES = ("IT", "Transport", "Package Provider")
FIRST_NAMES = (
    "Alex", "Jamie", "Taylor", "Jordan", "Casey",
    "Riley", "Morgan", "Avery", "Parker", "Reese",
)
LAST_NAMES = (
    "Smith", "Johnson", "Brown", "O'Neil", "Garcia",
    "Davis", "Miller", "Wilson", "Moore", "Taylor",
)
EMAIL_DOMAIN = "yopmail.com"


@dataclass(frozen=True)
class SeededOrganization:
    name: str
    user_count: int


@dataclass(frozen=True)
class SeededUser:
    id: str
    email: str


@dataclass(frozen=True)
class SeedResult:
    """Summary of what seed() created."""

    organizations: list[SeededOrganization]
    users: list[SeededUser]
    orders: list[str]


class SeedService:
    """Create demo data through the repositories (same transaction as the request)."""

    def __init__(
        self,
        organization_repo: IOrganizationRepository,
        user_repo: IUserRepository,
        order_repo: IOrderRepository,
        invalidator: ICacheInvalidator,
        *,
        user_password: str,
        rng: random.Random | None = None,
    ) -> None:
        self._organization_repo = organization_repo
        self._user_repo = user_repo
        self._order_repo = order_repo
        self._invalidator = invalidator
        self._user_password = user_password
        self._rng = rng or random.Random()

    def _past_datetime(self, days_back: int) -> datetime:
        """Random time of day, 1..days_back days ago."""
        days = self._rng.randint(1, max(1, days_back))
        moment = utc_now() - timedelta(days=days)
        return moment.replace(
            hour=self._rng.randint(0, 23),
            minute=self._rng.randint(0, 59),
            second=self._rng.randint(0, 59),
            microsecond=0,
        )

    def _amount(self, low: int = 10, high: int = 1000) -> float:
        return self._rng.randint(low * 100, high * 100) / 100

    def _email(self, first: str, last: str) -> str:
        suffix = self._rng.randint(100, 999)
        return f"{first.lower()}.{last.lower()}{suffix}@{EMAIL_DOMAIN}"

    async def _unique_email(self, first: str, last: str) -> str:
        email = self._email(first, last)
        while await self._user_repo.get_by_email(email) is not None:
            email = self._email(first, last)
        return email

    async def seed(self) -> SeedResult:
        organizations: list[OrganizationResult] = []
        for _ in range(SEED_ORGANIZATIONS):
            organizations.append(
                await self._organization_repo.create_organization(
                    OrganizationCreate(
                        name=f"OneRail{self._rng.randint(100000, 999999)}",
                        industry=self._rng.choice(INDUSTRIES),
                        date_founded=self._past_datetime(365 * 10),
                    )
                )
            )

        users: list[UserResult] = []
        for _ in range(SEED_USERS):
            first = self._rng.choice(FIRST_NAMES)
            last = self._rng.choice(LAST_NAMES)
            organization = self._rng.choice(organizations)
            users.append(
                await self._user_repo.create_user(
                    UserCreate(
                        first_name=first,
                        last_name=last,
                        email=await self._unique_email(first, last),
                        password=self._user_password,
                        organization_id=organization.id,
                        date_created=utc_now(),
                    )
                )
            )

        order_ids: list[str] = []
        for _ in range(SEED_ORDERS):
            user = self._rng.choice(users)
            created = await self._order_repo.create_order(
                OrderCreate(
                    order_date=self._past_datetime(365),
                    total_amount=self._amount(),
                    user_id=user.id,
                    organization_id=user.organization_id,
                )
            )
            order_ids.append(created.id)

        for entity in EntityType.values():
            self._invalidator.invalidate_list(entity)
        logger.info(
            "Seeded %s organizations, %s users, %s orders",
            len(organizations),
            len(users),
            len(order_ids),
        )
        return SeedResult(
            organizations=[
                SeededOrganization(
                    name=o.name,
                    user_count=sum(1 for u in users if u.organization_id == o.id),
                )
                for o in organizations
            ],
            users=[SeededUser(id=u.id, email=u.email) for u in users],
            orders=order_ids,
        )
