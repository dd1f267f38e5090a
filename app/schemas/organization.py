"""Organization API schemas."""

from datetime import datetime
from typing import Annotated

from pydantic import StringConstraints

from app.application.dtos.organization import OrganizationResult
from app.schemas.common import CamelModel, NonBlankStr, PastDatetime, UpdateModel

Industry = Annotated[str, StringConstraints(strip_whitespace=True, max_length=255)]


class OrganizationCreateRequest(CamelModel):
    """Request body for creating an organization."""

    name: NonBlankStr
    industry: Industry | None = None
    date_founded: PastDatetime | None = None


class OrganizationUpdateRequest(UpdateModel):
    """Request body for updating an organization (partial)."""

    required_fields = frozenset({"name"})

    name: NonBlankStr | None = None
    industry: Industry | None = None
    date_founded: PastDatetime | None = None


class OrganizationResponse(CamelModel):
    """Organization response."""

    id: str
    name: str
    industry: str | None
    date_founded: datetime | None

    @classmethod
    def from_result(cls, o: OrganizationResult) -> "OrganizationResponse":
        return cls(
            id=o.id,
            name=o.name,
            industry=o.industry,
            date_founded=o.date_founded,
        )
