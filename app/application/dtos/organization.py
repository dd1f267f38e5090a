"""DTOs for organization use cases (no dependency on ORM)."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class OrganizationCreate:
    """Validated input for creating an organization."""

    name: str
    industry: str | None = None
    date_founded: datetime | None = None


@dataclass(frozen=True)
class OrganizationResult:
    """Organization read-model (result of get_by_id, list_page, create, update)."""

    id: str
    name: str
    industry: str | None
    date_founded: datetime | None
