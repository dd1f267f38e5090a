"""API router aggregation.

Includes all endpoint modules with consistent prefix and tags. All routes
use dependencies from app.api.v1.dependencies (no manual repo/service construction).
"""

from fastapi import APIRouter

from app.api.v1.endpoints import auth, health, orders, organizations, seed, users

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(
    organizations.router, prefix="/organization", tags=["organizations"]
)
api_router.include_router(users.router, prefix="/user", tags=["users"])
api_router.include_router(orders.router, prefix="/order", tags=["orders"])
api_router.include_router(seed.router, prefix="/seed", tags=["seed"])
