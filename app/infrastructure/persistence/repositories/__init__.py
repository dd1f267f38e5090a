"""Repositories: data access over ORM models, returning application DTOs."""

from app.infrastructure.persistence.repositories.base import BaseRepository
from app.infrastructure.persistence.repositories.order_repo import OrderRepository
from app.infrastructure.persistence.repositories.organization_repo import (
    OrganizationRepository,
)
from app.infrastructure.persistence.repositories.user_repo import UserRepository

__all__ = [
    "BaseRepository",
    "OrderRepository",
    "OrganizationRepository",
    "UserRepository",
]
