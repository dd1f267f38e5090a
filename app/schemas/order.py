"""Order API schemas."""

from datetime import datetime
from typing import Any

from pydantic import Field, SerializerFunctionWrapHandler, model_serializer

from app.application.dtos.order import OrderResult
from app.schemas.common import CamelModel, Identifier, PastDatetime, UpdateModel
from app.schemas.organization import OrganizationResponse
from app.schemas.user import UserResponse

# NUMERIC(10, 2) upper bound
MAX_TOTAL_AMOUNT = 99_999_999.99


class OrderCreateRequest(CamelModel):
    """Request body for creating an order."""

    order_date: PastDatetime
    total_amount: float = Field(..., gt=0, le=MAX_TOTAL_AMOUNT, allow_inf_nan=False)
    user_id: Identifier
    organization_id: Identifier


class OrderUpdateRequest(UpdateModel):
    """Request body for updating an order (partial)."""

    required_fields = frozenset({"order_date", "total_amount", "user_id", "organization_id"})

    order_date: PastDatetime | None = None
    total_amount: float | None = Field(
        default=None, gt=0, le=MAX_TOTAL_AMOUNT, allow_inf_nan=False
    )
    user_id: Identifier | None = None
    organization_id: Identifier | None = None


class OrderResponse(CamelModel):
    """Order response. user and organization appear only on single-order reads."""

    id: str
    order_date: datetime
    total_amount: float
    user_id: str
    organization_id: str
    user: UserResponse | None = None
    organization: OrganizationResponse | None = None

    @model_serializer(mode="wrap")
    def _omit_missing_joins(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        for key in ("user", "organization"):
            if data.get(key) is None:
                data.pop(key, None)
        return data

    @classmethod
    def from_result(cls, o: OrderResult) -> "OrderResponse":
        return cls(
            id=o.id,
            order_date=o.order_date,
            total_amount=o.total_amount,
            user_id=o.user_id,
            organization_id=o.organization_id,
            user=UserResponse.from_result(o.user) if o.user else None,
            organization=(
                OrganizationResponse.from_result(o.organization) if o.organization else None
            ),
        )
