"""Auth application service: email/password login issuing a JWT."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from app.application.dtos.user import UserResult
from app.application.interfaces.repositories import IUserRepository
from app.application.interfaces.services import ITokenIssuer
from app.domain.exceptions import AuthenticationException

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoginResult:
    """Access token and the user it was issued for."""

    token: str
    user: UserResult


def token_claims(user: UserResult) -> dict[str, str]:
    """JWT claims for user: sub is the user id; organization_id keys the rate limit."""
    return {
        "sub": user.id,
        "organization_id": user.organization_id,
        "email": user.email,
    }


class AuthService:
    """Authenticate users and issue access tokens."""

    def __init__(self, user_repo: IUserRepository, token_issuer: ITokenIssuer) -> None:
        self._user_repo = user_repo
        self._token_issuer = token_issuer

    async def login(self, email: str, password: str) -> LoginResult:
        """Return token and user. Raises AuthenticationException with a generic message on failure."""
        user = await self._user_repo.authenticate(email, password)
        if user is None:
            raise AuthenticationException("Invalid email or password")
        token = self._token_issuer.create_access_token(token_claims(user))
        logger.info("User logged in: %s", user.id)
        return LoginResult(token=token, user=user)
