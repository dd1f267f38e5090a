"""Persistence models: ORM entities and mixins."""

from app.infrastructure.persistence.models.mixins import (
    CuidMixin,
    OrganizationMixin,
    TimestampMixin,
)
from app.infrastructure.persistence.models.order import Order
from app.infrastructure.persistence.models.organization import Organization
from app.infrastructure.persistence.models.user import User

__all__ = [
    "Order",
    "Organization",
    "User",
    "CuidMixin",
    "OrganizationMixin",
    "TimestampMixin",
]
