"""DTOs for user use cases (no dependency on ORM)."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class UserCreate:
    """Validated input for creating a user. Password is plain text; the repository hashes it."""

    first_name: str
    last_name: str
    email: str
    password: str
    organization_id: str
    date_created: datetime | None = None


@dataclass(frozen=True)
class UserResult:
    """User read-model (result of get_by_id, create_user, authenticate, etc.). No password."""

    id: str
    first_name: str
    last_name: str
    email: str
    date_created: datetime | None
    organization_id: str
