"""Health endpoints: liveness and database readiness. No authentication."""

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from app.infrastructure.persistence import database
from app.schemas.health import (
    HealthResponse,
    ReadinessErrorResponse,
    ReadinessResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return simple ok status for liveness."""
    return HealthResponse()


@router.get(
    "/readiness",
    response_model=ReadinessResponse,
    responses={503: {"description": "Database unreachable", "model": ReadinessErrorResponse}},
)
async def readiness_check() -> ReadinessResponse | JSONResponse:
    """Return 200 when SELECT 1 succeeds; 503 otherwise."""
    try:
        await database.check_database()
    except Exception as e:
        logger.error("Readiness check failed: %s", e)
        return JSONResponse(status_code=503, content=ReadinessErrorResponse().model_dump())
    return ReadinessResponse()
