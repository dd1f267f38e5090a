"""Seed API: fill the database with demo data. Open route; disabled by SEED_ENABLED=false."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request

from app.api.v1.dependencies import get_seed_service
from app.application.services.seed_service import SeedService
from app.core.config import get_settings
from app.core.limiter import limit_seed
from app.schemas.seed import SeedResponse

router = APIRouter()


def _require_seed_enabled() -> None:
    if not get_settings().seed_enabled:
        raise HTTPException(status_code=404, detail="Not Found")


@router.post(
    "",
    response_model=SeedResponse,
    dependencies=[Depends(_require_seed_enabled)],
)
@limit_seed
async def seed(
    request: Request,
    service: Annotated[SeedService, Depends(get_seed_service)],
) -> SeedResponse:
    """Create 2 organizations, 10 users and 20 orders."""
    return SeedResponse.from_result(await service.seed())
