"""Health check API schemas."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response for GET /health (liveness)."""

    status: str = Field(default="ok", description="Service status")


class ReadinessResponse(BaseModel):
    """Response for GET /readiness when the database answers."""

    status: str = Field(default="ready", description="Readiness status")
    db: str = Field(default="ok", description="Database status")


class ReadinessErrorResponse(BaseModel):
    """Response for GET /readiness when the database is unreachable (503)."""

    status: str = Field(default="unavailable", description="Readiness status")
    db: str = Field(default="down", description="Database status")
