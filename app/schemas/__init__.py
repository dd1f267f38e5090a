"""Pydantic request/response schemas for the API."""

from app.schemas.auth import LoginRequest, LoginResponse, MeResponse
from app.schemas.common import CamelModel, PageResponse, UpdateModel
from app.schemas.health import (
    HealthResponse,
    ReadinessErrorResponse,
    ReadinessResponse,
)
from app.schemas.order import OrderCreateRequest, OrderResponse, OrderUpdateRequest
from app.schemas.organization import (
    OrganizationCreateRequest,
    OrganizationResponse,
    OrganizationUpdateRequest,
)
from app.schemas.seed import SeedResponse
from app.schemas.user import UserCreateRequest, UserResponse, UserUpdateRequest

__all__ = [
    "CamelModel",
    "HealthResponse",
    "LoginRequest",
    "LoginResponse",
    "MeResponse",
    "OrderCreateRequest",
    "OrderResponse",
    "OrderUpdateRequest",
    "OrganizationCreateRequest",
    "OrganizationResponse",
    "OrganizationUpdateRequest",
    "PageResponse",
    "ReadinessErrorResponse",
    "ReadinessResponse",
    "SeedResponse",
    "UpdateModel",
    "UserCreateRequest",
    "UserResponse",
    "UserUpdateRequest",
]
