"""JWT access tokens for authenticated users.

Claims: sub (user id), organization_id, email, exp. Secret and algorithm come
from settings.
"""

from datetime import timedelta
from typing import Any, cast

from jose import JWTError, jwt

from app.core.config import get_settings
from app.shared.utils.datetime import utc_now


def create_access_token(
    data: dict[str, Any],
    expires_delta: timedelta | None = None,
) -> str:
    """Encode claims into a signed token.

    Args:
        data: Claims to encode; must include sub.
        expires_delta: Optional TTL; else settings.access_token_expire_minutes.
    """
    settings = get_settings()
    ttl = expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    to_encode = {**data, "exp": utc_now() + ttl}
    return cast(
        str,
        jwt.encode(
            to_encode,
            settings.secret_key.get_secret_value(),
            algorithm=settings.algorithm,
        ),
    )


def verify_token(token: str) -> dict[str, Any]:
    """Decode and verify a token. Raises ValueError if invalid, expired, or missing sub/exp."""
    settings = get_settings()
    try:
        payload = jwt.decode(
            token,
            settings.secret_key.get_secret_value(),
            algorithms=[settings.algorithm],
            options={"require_exp": True, "require_sub": True},
        )
    except JWTError as e:
        raise ValueError(f"Invalid token: {e!s}") from e
    if not payload.get("sub"):
        raise ValueError("Token missing required claim: sub")
    return payload


class JwtTokenIssuer:
    """ITokenIssuer backed by create_access_token."""

    def create_access_token(self, data: dict[str, Any]) -> str:
        return create_access_token(data)
