"""Security: access tokens and password hashing."""

from app.infrastructure.security.jwt import (
    JwtTokenIssuer,
    create_access_token,
    verify_token,
)
from app.infrastructure.security.password import (
    check_password,
    get_password_hash,
    hash_password,
    verify_password,
)

__all__ = [
    "JwtTokenIssuer",
    "check_password",
    "create_access_token",
    "get_password_hash",
    "hash_password",
    "verify_password",
    "verify_token",
]
