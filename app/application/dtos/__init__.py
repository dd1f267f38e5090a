"""Application DTOs (no ORM dependency)."""

from app.application.dtos.order import OrderCreate, OrderFilter, OrderResult
from app.application.dtos.organization import OrganizationCreate, OrganizationResult
from app.application.dtos.pagination import Page, PageRequest
from app.application.dtos.user import UserCreate, UserResult

__all__ = [
    "OrderCreate",
    "OrderFilter",
    "OrderResult",
    "OrganizationCreate",
    "OrganizationResult",
    "Page",
    "PageRequest",
    "UserCreate",
    "UserResult",
]
