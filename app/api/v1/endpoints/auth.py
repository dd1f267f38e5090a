"""Auth API: email/password login and current user."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from app.api.v1.dependencies import get_auth_service, get_current_user
from app.application.dtos.user import UserResult
from app.application.services.auth_service import AuthService
from app.core.limiter import limit_auth, limit_organization
from app.schemas.auth import LoginRequest, LoginResponse, MeResponse
from app.schemas.user import UserResponse

router = APIRouter()


@router.post("/login", response_model=LoginResponse)
@limit_auth
async def login(
    request: Request,
    body: LoginRequest,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
) -> LoginResponse:
    """Exchange email and password for a bearer token. 401 on bad credentials."""
    result = await auth_service.login(body.email, body.password)
    return LoginResponse(token=result.token, user=UserResponse.from_result(result.user))


@router.get("/me", response_model=MeResponse)
@limit_organization
async def me(
    request: Request,
    current_user: Annotated[UserResult, Depends(get_current_user)],
) -> MeResponse:
    """Return the authenticated user."""
    return MeResponse(user=UserResponse.from_result(current_user))
