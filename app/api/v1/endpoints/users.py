"""User API. Reads are cached and sent with public Cache-Control."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request, Response

from app.api.v1.dependencies import (
    get_cache,
    get_current_user,
    get_user_service,
    get_user_service_for_write,
)
from app.api.v1.responses import respond_public
from app.application.dtos.pagination import PageRequest
from app.application.dtos.user import UserCreate, UserResult
from app.application.services.user_service import UserService
from app.core.config import get_settings
from app.core.constants import MAX_PAGE
from app.core.limiter import limit_organization
from app.domain.enums import EntityType
from app.infrastructure.cache import CacheProtocol, item_key, list_key
from app.schemas.common import PageResponse
from app.schemas.user import UserCreateRequest, UserResponse, UserUpdateRequest

router = APIRouter()

_ENTITY = EntityType.USER.value


@router.get("", response_model=PageResponse[UserResponse])
@limit_organization
async def list_users(
    request: Request,
    current_user: Annotated[UserResult, Depends(get_current_user)],
    service: Annotated[UserService, Depends(get_user_service)],
    cache: Annotated[CacheProtocol, Depends(get_cache)],
    page: Annotated[int | None, Query(le=MAX_PAGE)] = None,
    limit: int | None = None,
) -> Response:
    """List users by last name, then first name (paginated)."""
    key = list_key(_ENTITY, {"page": page, "limit": limit})
    body = cache.get(key)
    if body is None:
        result = await service.list_page(PageRequest.normalize(page, limit))
        body = PageResponse[UserResponse](
            data=[UserResponse.from_result(u) for u in result.data],
            page=result.page,
            limit=result.limit,
            total=result.total,
            total_pages=result.total_pages,
        ).to_body()
        cache.set(key, body)
    return respond_public(body, get_settings().cache_ttl_seconds)


@router.get("/{user_id}", response_model=UserResponse)
@limit_organization
async def get_user(
    request: Request,
    user_id: str,
    current_user: Annotated[UserResult, Depends(get_current_user)],
    service: Annotated[UserService, Depends(get_user_service)],
    cache: Annotated[CacheProtocol, Depends(get_cache)],
) -> Response:
    """Get user by id. 404 if missing."""
    key = item_key(_ENTITY, user_id)
    body = cache.get(key)
    if body is None:
        body = UserResponse.from_result(await service.get(user_id)).to_body()
        cache.set(key, body)
    return respond_public(body, get_settings().cache_ttl_seconds)


@router.post("", response_model=UserResponse, status_code=201)
@limit_organization
async def create_user(
    request: Request,
    body: UserCreateRequest,
    current_user: Annotated[UserResult, Depends(get_current_user)],
    service: Annotated[UserService, Depends(get_user_service_for_write)],
) -> UserResponse:
    """Create a user. 400 for an unknown organization; 409 for a taken email."""
    created = await service.create(
        UserCreate(
            first_name=body.first_name,
            last_name=body.last_name,
            email=str(body.email),
            password=body.password,
            organization_id=body.organization_id,
            date_created=body.date_created,
        )
    )
    return UserResponse.from_result(created)


@router.put("/{user_id}", response_model=UserResponse)
@limit_organization
async def update_user(
    request: Request,
    user_id: str,
    body: UserUpdateRequest,
    current_user: Annotated[UserResult, Depends(get_current_user)],
    service: Annotated[UserService, Depends(get_user_service_for_write)],
) -> UserResponse:
    """Update a user (partial). 404 if missing."""
    changes = body.changes()
    if "email" in changes:
        changes["email"] = str(changes["email"])
    updated = await service.update(user_id, changes)
    return UserResponse.from_result(updated)


@router.delete("/{user_id}", status_code=204)
@limit_organization
async def delete_user(
    request: Request,
    user_id: str,
    current_user: Annotated[UserResult, Depends(get_current_user)],
    service: Annotated[UserService, Depends(get_user_service_for_write)],
) -> Response:
    """Delete a user with their orders. Idempotent."""
    await service.delete(user_id)
    return Response(status_code=204)
