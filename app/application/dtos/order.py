"""DTOs for order use cases (no dependency on ORM)."""

from dataclasses import dataclass
from datetime import datetime

from app.application.dtos.organization import OrganizationResult
from app.application.dtos.user import UserResult


@dataclass(frozen=True)
class OrderCreate:
    """Validated input for creating an order."""

    order_date: datetime
    total_amount: float
    user_id: str
    organization_id: str


@dataclass(frozen=True)
class OrderFilter:
    """Optional equality filters for order lists."""

    user_id: str | None = None
    organization_id: str | None = None


@dataclass(frozen=True)
class OrderResult:
    """Order read-model. user/organization are set only when the read joins them."""

    id: str
    order_date: datetime
    total_amount: float
    user_id: str
    organization_id: str
    user: UserResult | None = None
    organization: OrganizationResult | None = None
