"""Order API. Reads are cached and revalidated with ETag / If-None-Match."""

from typing import Annotated

from fastapi import APIRouter, Depends, Header, Query, Request, Response

from app.api.v1.dependencies import (
    get_cache,
    get_current_user,
    get_order_service,
    get_order_service_for_write,
)
from app.api.v1.responses import populate_and_respond, respond_cached_or_fresh
from app.application.dtos.order import OrderCreate, OrderFilter
from app.application.dtos.pagination import PageRequest
from app.application.dtos.user import UserResult
from app.application.services.order_service import OrderService
from app.core.constants import MAX_PAGE
from app.core.limiter import limit_organization
from app.domain.enums import EntityType
from app.infrastructure.cache import CacheProtocol, item_key, list_key
from app.schemas.common import PageResponse
from app.schemas.order import OrderCreateRequest, OrderResponse, OrderUpdateRequest

router = APIRouter()

_ENTITY = EntityType.ORDER.value


@router.get("", response_model=PageResponse[OrderResponse])
@limit_organization
async def list_orders(
    request: Request,
    current_user: Annotated[UserResult, Depends(get_current_user)],
    service: Annotated[OrderService, Depends(get_order_service)],
    cache: Annotated[CacheProtocol, Depends(get_cache)],
    page: Annotated[int | None, Query(le=MAX_PAGE)] = None,
    limit: int | None = None,
    user_id: Annotated[str | None, Query(alias="userId")] = None,
    organization_id: Annotated[str | None, Query(alias="organizationId")] = None,
    if_none_match: Annotated[str | None, Header()] = None,
) -> Response:
    """List orders, newest first, optionally filtered by userId / organizationId."""
    # Empty filter values mean "no filter"
    user_id = user_id or None
    organization_id = organization_id or None
    key = list_key(
        _ENTITY,
        {
            "page": page,
            "limit": limit,
            "userId": user_id,
            "organizationId": organization_id,
        },
    )
    cached = cache.get(key)
    if cached is not None:
        return respond_cached_or_fresh(if_none_match, cached)
    result = await service.list_page(
        PageRequest.normalize(page, limit),
        OrderFilter(user_id=user_id, organization_id=organization_id),
    )
    body = PageResponse[OrderResponse](
        data=[OrderResponse.from_result(o) for o in result.data],
        page=result.page,
        limit=result.limit,
        total=result.total,
        total_pages=result.total_pages,
    ).to_body()
    return populate_and_respond(cache, key, body, if_none_match)


@router.get("/{order_id}", response_model=OrderResponse)
@limit_organization
async def get_order(
    request: Request,
    order_id: str,
    current_user: Annotated[UserResult, Depends(get_current_user)],
    service: Annotated[OrderService, Depends(get_order_service)],
    cache: Annotated[CacheProtocol, Depends(get_cache)],
    if_none_match: Annotated[str | None, Header()] = None,
) -> Response:
    """Get order by id with its user and organization. 404 if missing."""
    key = item_key(_ENTITY, order_id)
    cached = cache.get(key)
    if cached is not None:
        return respond_cached_or_fresh(if_none_match, cached)
    body = OrderResponse.from_result(await service.get(order_id)).to_body()
    return populate_and_respond(cache, key, body, if_none_match)


@router.post("", response_model=OrderResponse, status_code=201)
@limit_organization
async def create_order(
    request: Request,
    body: OrderCreateRequest,
    current_user: Annotated[UserResult, Depends(get_current_user)],
    service: Annotated[OrderService, Depends(get_order_service_for_write)],
) -> OrderResponse:
    """Create an order. 400 for an unknown user or organization."""
    created = await service.create(
        OrderCreate(
            order_date=body.order_date,
            total_amount=body.total_amount,
            user_id=body.user_id,
            organization_id=body.organization_id,
        )
    )
    return OrderResponse.from_result(created)


@router.put("/{order_id}", response_model=OrderResponse)
@limit_organization
async def update_order(
    request: Request,
    order_id: str,
    body: OrderUpdateRequest,
    current_user: Annotated[UserResult, Depends(get_current_user)],
    service: Annotated[OrderService, Depends(get_order_service_for_write)],
) -> OrderResponse:
    """Update an order (partial). 404 if missing."""
    updated = await service.update(order_id, body.changes())
    return OrderResponse.from_result(updated)


@router.delete("/{order_id}", status_code=204)
@limit_organization
async def delete_order(
    request: Request,
    order_id: str,
    current_user: Annotated[UserResult, Depends(get_current_user)],
    service: Annotated[OrderService, Depends(get_order_service_for_write)],
) -> Response:
    """Delete an order. Idempotent."""
    await service.delete(order_id)
    return Response(status_code=204)
