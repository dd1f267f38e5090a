"""User API schemas."""

from datetime import datetime

from pydantic import EmailStr, Field

from app.application.dtos.user import UserResult
from app.schemas.common import (
    CamelModel,
    Identifier,
    NonBlankStr,
    PastDatetime,
    UpdateModel,
)


class UserCreateRequest(CamelModel):
    """Request body for creating a user in an organization."""

    first_name: NonBlankStr
    last_name: NonBlankStr
    email: EmailStr
    password: str = Field(..., min_length=8, description="Password (min 8 characters)")
    date_created: PastDatetime | None = None
    organization_id: Identifier


class UserUpdateRequest(UpdateModel):
    """Request body for updating a user (partial)."""

    required_fields = frozenset(
        {"first_name", "last_name", "email", "password", "organization_id"}
    )

    first_name: NonBlankStr | None = None
    last_name: NonBlankStr | None = None
    email: EmailStr | None = None
    password: str | None = Field(default=None, min_length=8)
    date_created: PastDatetime | None = None
    organization_id: Identifier | None = None


class UserResponse(CamelModel):
    """User response (no password)."""

    id: str
    first_name: str
    last_name: str
    email: str
    date_created: datetime | None
    organization_id: str

    @classmethod
    def from_result(cls, u: UserResult) -> "UserResponse":
        return cls(
            id=u.id,
            first_name=u.first_name,
            last_name=u.last_name,
            email=u.email,
            date_created=u.date_created,
            organization_id=u.organization_id,
        )
