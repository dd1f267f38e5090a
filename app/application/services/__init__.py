"""Application services: organizations, users, orders, auth and demo seed."""

from app.application.services.auth_service import AuthService, LoginResult
from app.application.services.order_service import OrderService
from app.application.services.organization_service import OrganizationService
from app.application.services.seed_service import SeedResult, SeedService
from app.application.services.user_service import UserService

__all__ = [
    "AuthService",
    "LoginResult",
    "OrderService",
    "OrganizationService",
    "SeedResult",
    "SeedService",
    "UserService",
]
