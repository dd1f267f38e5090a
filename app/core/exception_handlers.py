"""Exception-to-response mapping for the FastAPI app.

Every error leaves the API as {"error", "message"[, "details"]}. Call
register_exception_handlers(app) once in create_app().
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import get_settings
from app.core.limiter import organization_key
from app.domain.exceptions import (
    AuthenticationException,
    DuplicateEmailException,
    OrdersApiException,
    ResourceNotFoundException,
    ValidationException,
)

logger = logging.getLogger(__name__)

# Most specific class wins; anything else derived from OrdersApiException is a 400
_STATUS_BY_EXCEPTION: tuple[tuple[type[OrdersApiException], int], ...] = (
    (ResourceNotFoundException, 404),
    (AuthenticationException, 401),
    (DuplicateEmailException, 409),
    (ValidationException, 400),
)


def _error_response(
    status_code: int,
    error: str,
    message: Any,
    details: Any = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    content: dict[str, Any] = {"error": error, "message": message}
    if details is not None:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content, headers=headers)


def status_for(exc: OrdersApiException) -> int:
    for exc_type, status_code in _STATUS_BY_EXCEPTION:
        if isinstance(exc, exc_type):
            return status_code
    return 400


def _orders_api_exception_handler(request: Request, exc: OrdersApiException) -> JSONResponse:
    status_code = status_for(exc)
    logger.info("%s %s -> %s %s", request.method, request.url.path, status_code, exc.error_code)
    return _error_response(status_code, exc.error_code, exc.message, exc.details)


def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """422 listing each failed field (pydantic error dicts, JSON-safe)."""
    return _error_response(
        422,
        "VALIDATION_ERROR",
        "Request validation failed",
        jsonable_encoder(exc.errors()),
    )


def _http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return _error_response(
        exc.status_code,
        "HTTP_ERROR",
        exc.detail,
        headers=getattr(exc, "headers", None),
    )


def _rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """429 naming the organization whose window is exhausted."""
    organization_id = organization_key(request)
    logger.warning("Rate limit exceeded for organization %s (%s)", organization_id, exc.detail)
    return _error_response(
        429,
        "RATE_LIMITED",
        f"Too many requests for organization {organization_id}. Allowed {exc.detail}",
    )


def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """500; the exception text is only exposed when DEBUG is on."""
    logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
    message = str(exc) if get_settings().debug else "Internal server error"
    return _error_response(500, "INTERNAL_ERROR", message)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(OrdersApiException, _orders_api_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)
