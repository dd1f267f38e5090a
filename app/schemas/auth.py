"""Auth API schemas."""

from pydantic import BaseModel, Field

from app.schemas.user import UserResponse


class LoginRequest(BaseModel):
    """Request body for login."""

    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class LoginResponse(BaseModel):
    """Access token and the authenticated user."""

    token: str
    user: UserResponse


class MeResponse(BaseModel):
    """Current user for GET /auth/me."""

    user: UserResponse
