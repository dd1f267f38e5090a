"""Response helpers for cached reads.

Two caching styles are used by the routes:

- ETag revalidation (orders): every response carries ETag; a request whose
  If-None-Match equals the current tag gets 304 with no body.
- Public Cache-Control (organizations, users): Cache-Control public with a
  max-age; no ETag.
"""

import math
from typing import Any

from fastapi import Response
from fastapi.responses import JSONResponse

from app.infrastructure.cache import CacheProtocol, compute_etag


def respond_cached_or_fresh(
    if_none_match: str | None, body: Any, status_code: int = 200
) -> Response:
    """304 when If-None-Match equals the body's tag (quotes included), else the full body."""
    etag = compute_etag(body)
    if if_none_match and if_none_match == etag:
        return Response(status_code=304, headers={"ETag": etag})
    return JSONResponse(content=body, status_code=status_code, headers={"ETag": etag})


def populate_and_respond(
    cache: CacheProtocol,
    key: str,
    body: Any,
    if_none_match: str | None,
    status_code: int = 200,
) -> Response:
    """Store body under key, then respond as respond_cached_or_fresh."""
    cache.set(key, body)
    return respond_cached_or_fresh(if_none_match, body, status_code)


def respond_public(body: Any, max_age: float, status_code: int = 200) -> JSONResponse:
    """Full body with Cache-Control public; max_age is floored and clamped at 0."""
    seconds = max(0, math.floor(max_age))
    return JSONResponse(
        content=body,
        status_code=status_code,
        headers={"Cache-Control": f"public, max-age={seconds}"},
    )
