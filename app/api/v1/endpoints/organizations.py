"""Organization API. Reads are cached and sent with public Cache-Control."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request, Response

from app.api.v1.dependencies import (
    get_cache,
    get_current_user,
    get_organization_service,
    get_organization_service_for_write,
)
from app.api.v1.responses import respond_public
from app.application.dtos.organization import OrganizationCreate
from app.application.dtos.pagination import PageRequest
from app.application.dtos.user import UserResult
from app.application.services.organization_service import OrganizationService
from app.core.config import get_settings
from app.core.constants import MAX_PAGE
from app.core.limiter import limit_organization
from app.domain.enums import EntityType
from app.infrastructure.cache import CacheProtocol, item_key, list_key
from app.schemas.common import PageResponse
from app.schemas.organization import (
    OrganizationCreateRequest,
    OrganizationResponse,
    OrganizationUpdateRequest,
)

router = APIRouter()

_ENTITY = EntityType.ORGANIZATION.value


@router.get("", response_model=PageResponse[OrganizationResponse])
@limit_organization
async def list_organizations(
    request: Request,
    current_user: Annotated[UserResult, Depends(get_current_user)],
    service: Annotated[OrganizationService, Depends(get_organization_service)],
    cache: Annotated[CacheProtocol, Depends(get_cache)],
    page: Annotated[int | None, Query(le=MAX_PAGE)] = None,
    limit: int | None = None,
) -> Response:
    """List organizations by name (paginated)."""
    key = list_key(_ENTITY, {"page": page, "limit": limit})
    body = cache.get(key)
    if body is None:
        result = await service.list_page(PageRequest.normalize(page, limit))
        body = PageResponse[OrganizationResponse](
            data=[OrganizationResponse.from_result(o) for o in result.data],
            page=result.page,
            limit=result.limit,
            total=result.total,
            total_pages=result.total_pages,
        ).to_body()
        cache.set(key, body)
    return respond_public(body, get_settings().cache_ttl_seconds)


@router.get("/{organization_id}", response_model=OrganizationResponse)
@limit_organization
async def get_organization(
    request: Request,
    organization_id: str,
    current_user: Annotated[UserResult, Depends(get_current_user)],
    service: Annotated[OrganizationService, Depends(get_organization_service)],
    cache: Annotated[CacheProtocol, Depends(get_cache)],
) -> Response:
    """Get organization by id. 404 if missing."""
    key = item_key(_ENTITY, organization_id)
    body = cache.get(key)
    if body is None:
        body = OrganizationResponse.from_result(await service.get(organization_id)).to_body()
        cache.set(key, body)
    return respond_public(body, get_settings().cache_ttl_seconds)


@router.post("", response_model=OrganizationResponse, status_code=201)
@limit_organization
async def create_organization(
    request: Request,
    body: OrganizationCreateRequest,
    current_user: Annotated[UserResult, Depends(get_current_user)],
    service: Annotated[OrganizationService, Depends(get_organization_service_for_write)],
) -> OrganizationResponse:
    """Create an organization."""
    created = await service.create(
        OrganizationCreate(
            name=body.name,
            industry=body.industry,
            date_founded=body.date_founded,
        )
    )
    return OrganizationResponse.from_result(created)


@router.put("/{organization_id}", response_model=OrganizationResponse)
@limit_organization
async def update_organization(
    request: Request,
    organization_id: str,
    body: OrganizationUpdateRequest,
    current_user: Annotated[UserResult, Depends(get_current_user)],
    service: Annotated[OrganizationService, Depends(get_organization_service_for_write)],
) -> OrganizationResponse:
    """Update an organization (partial). 404 if missing."""
    updated = await service.update(organization_id, body.changes())
    return OrganizationResponse.from_result(updated)


@router.delete("/{organization_id}", status_code=204)
@limit_organization
async def delete_organization(
    request: Request,
    organization_id: str,
    current_user: Annotated[UserResult, Depends(get_current_user)],
    service: Annotated[OrganizationService, Depends(get_organization_service_for_write)],
) -> Response:
    """Delete an organization with its users and orders. Idempotent."""
    await service.delete(organization_id)
    return Response(status_code=204)
