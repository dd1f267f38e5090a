"""Rate limiter instance for SlowAPI.

Shared so both main (app.state.limiter) and route modules can use the same
instance without circular imports. Central limit strings and decorators
keep rate limits DRY.

Authenticated routes are limited per organization: get_current_user stores
the caller's organization id on request.state before the endpoint runs.
"""

from fastapi import Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from app.core.config import get_settings
from app.core.constants import UNKNOWN_ORGANIZATION_KEY

limiter = Limiter(key_func=get_remote_address)

# Single source of truth for rate limit strings and decorators.
LOGIN_LIMIT = "10/minute"
SEED_LIMIT = "5/minute"


def organization_key(request: Request) -> str:
    """Rate-limit bucket for the authenticated caller's organization."""
    return getattr(request.state, "organization_id", None) or UNKNOWN_ORGANIZATION_KEY


def organization_limit() -> str:
    """Per-organization limit string from settings (e.g. '30/minute')."""
    return get_settings().rate_limit_per_organization


limit_auth = limiter.limit(LOGIN_LIMIT)
limit_seed = limiter.limit(SEED_LIMIT)
limit_organization = limiter.limit(organization_limit, key_func=organization_key)
