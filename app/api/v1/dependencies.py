"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for DB sessions, repositories, the response cache
and application services. Routes depend only on these dependencies, not on
infrastructure directly.

Read routes use get_db (no commit); write routes use the *_for_write
variants, which share one transactional session per request.
"""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import Depends, HTTPException, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.user import UserResult
from app.application.services.auth_service import AuthService
from app.application.services.order_service import OrderService
from app.application.services.organization_service import OrganizationService
from app.application.services.seed_service import SeedService
from app.application.services.user_service import UserService
from app.core.config import get_settings
from app.application.interfaces.services import ICacheInvalidator
from app.infrastructure.cache import BoundedTTLCache, CacheInvalidator, PostCommitInvalidator
from app.infrastructure.persistence.database import (
    after_commit,
    get_db,
    get_db_transactional,
)
from app.infrastructure.persistence.repositories import (
    OrderRepository,
    OrganizationRepository,
    UserRepository,
)
from app.infrastructure.security.jwt import JwtTokenIssuer, verify_token

logger = logging.getLogger(__name__)

_http_bearer = HTTPBearer(auto_error=False)


# ---- Cache ----


def get_cache(request: Request) -> BoundedTTLCache:
    """Response cache attached to the app in create_app()."""
    return request.app.state.cache


def get_cache_invalidator(
    cache: Annotated[BoundedTTLCache, Depends(get_cache)],
) -> CacheInvalidator:
    return CacheInvalidator(cache)


def get_cache_invalidator_for_write(
    cache: Annotated[BoundedTTLCache, Depends(get_cache)],
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> PostCommitInvalidator:
    """Invalidator whose evictions run after the request transaction commits."""
    invalidator = PostCommitInvalidator(CacheInvalidator(cache))
    after_commit(db, invalidator.flush)
    return invalidator


# ---- Repositories ----


async def get_organization_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> OrganizationRepository:
    return OrganizationRepository(db)


async def get_organization_repo_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> OrganizationRepository:
    return OrganizationRepository(db)


async def get_user_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> UserRepository:
    return UserRepository(db)


async def get_user_repo_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> UserRepository:
    return UserRepository(db)


async def get_order_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> OrderRepository:
    return OrderRepository(db)


async def get_order_repo_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> OrderRepository:
    return OrderRepository(db)


# ---- Services ----


def get_organization_service(
    organization_repo: Annotated[OrganizationRepository, Depends(get_organization_repo)],
    invalidator: Annotated[CacheInvalidator, Depends(get_cache_invalidator)],
) -> OrganizationService:
    return OrganizationService(organization_repo, invalidator)


def get_organization_service_for_write(
    organization_repo: Annotated[
        OrganizationRepository, Depends(get_organization_repo_for_write)
    ],
    invalidator: Annotated[ICacheInvalidator, Depends(get_cache_invalidator_for_write)],
) -> OrganizationService:
    return OrganizationService(organization_repo, invalidator)


def get_user_service(
    user_repo: Annotated[UserRepository, Depends(get_user_repo)],
    organization_repo: Annotated[OrganizationRepository, Depends(get_organization_repo)],
    invalidator: Annotated[CacheInvalidator, Depends(get_cache_invalidator)],
) -> UserService:
    return UserService(user_repo, organization_repo, invalidator)


def get_user_service_for_write(
    user_repo: Annotated[UserRepository, Depends(get_user_repo_for_write)],
    organization_repo: Annotated[
        OrganizationRepository, Depends(get_organization_repo_for_write)
    ],
    invalidator: Annotated[ICacheInvalidator, Depends(get_cache_invalidator_for_write)],
) -> UserService:
    return UserService(user_repo, organization_repo, invalidator)


def get_order_service(
    order_repo: Annotated[OrderRepository, Depends(get_order_repo)],
    user_repo: Annotated[UserRepository, Depends(get_user_repo)],
    organization_repo: Annotated[OrganizationRepository, Depends(get_organization_repo)],
    invalidator: Annotated[CacheInvalidator, Depends(get_cache_invalidator)],
) -> OrderService:
    return OrderService(order_repo, user_repo, organization_repo, invalidator)


def get_order_service_for_write(
    order_repo: Annotated[OrderRepository, Depends(get_order_repo_for_write)],
    user_repo: Annotated[UserRepository, Depends(get_user_repo_for_write)],
    organization_repo: Annotated[
        OrganizationRepository, Depends(get_organization_repo_for_write)
    ],
    invalidator: Annotated[ICacheInvalidator, Depends(get_cache_invalidator_for_write)],
) -> OrderService:
    return OrderService(order_repo, user_repo, organization_repo, invalidator)


def get_auth_service(
    user_repo: Annotated[UserRepository, Depends(get_user_repo)],
) -> AuthService:
    return AuthService(user_repo, JwtTokenIssuer())


def get_seed_service(
    organization_repo: Annotated[
        OrganizationRepository, Depends(get_organization_repo_for_write)
    ],
    user_repo: Annotated[UserRepository, Depends(get_user_repo_for_write)],
    order_repo: Annotated[OrderRepository, Depends(get_order_repo_for_write)],
    invalidator: Annotated[ICacheInvalidator, Depends(get_cache_invalidator_for_write)],
) -> SeedService:
    return SeedService(
        organization_repo,
        user_repo,
        order_repo,
        invalidator,
        user_password=get_settings().seed_user_password.get_secret_value(),
    )


# ---- Authentication ----


async def get_current_user_optional(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_http_bearer)],
    user_repo: Annotated[UserRepository, Depends(get_user_repo)],
) -> UserResult | None:
    """Return current user from JWT if present; else None.

    Stores the user's organization id on request.state for the per-organization
    rate limit.
    """
    if not credentials:
        return None
    try:
        payload = verify_token(credentials.credentials)
    except ValueError as e:
        logger.debug("JWT verification failed: %s", e)
        return None
    user = await user_repo.get_by_id(payload["sub"])
    if user is None:
        return None
    request.state.organization_id = user.organization_id
    return user


async def get_current_user(
    current_user: Annotated[UserResult | None, Depends(get_current_user_optional)],
) -> UserResult:
    """Return current user from JWT; raise 401 if missing or invalid."""
    if current_user is None:
        raise HTTPException(
            status_code=401,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return current_user
