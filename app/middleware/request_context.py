"""Request context middleware: request id and request logging.

Generates or forwards the request id header and echoes it on the response.
Client-provided ids are sanitized (length + character set) to prevent log
injection. Logs request start (debug, sensitive headers redacted) and
completion (info, status and duration). Raw ASGI, no BaseHTTPMiddleware.
"""

import logging
import re
import time
import uuid
from typing import Callable

from app.shared.telemetry.logging import sanitize_headers

logger = logging.getLogger(__name__)

REQUEST_ID_MAX_LENGTH = 64
REQUEST_ID_ALLOWED_PATTERN = re.compile(
    r"^[a-zA-Z0-9_-]{1," + str(REQUEST_ID_MAX_LENGTH) + r"}$"
)


def _decode_headers(scope: dict) -> dict[str, str]:
    """ASGI (bytes, bytes) header pairs as a lower-cased str dict (last value wins)."""
    return {
        k.decode("latin-1").lower(): v.decode("utf-8", errors="replace")
        for k, v in scope.get("headers", [])
    }


def _sanitize_request_id(raw: str | None) -> str:
    """Return raw if valid and safe; otherwise a new UUID."""
    if not raw or not REQUEST_ID_ALLOWED_PATTERN.match(raw.strip()):
        return str(uuid.uuid4())
    return raw.strip()


def RequestContextMiddleware(app: Callable, header_name: str = "X-Request-ID") -> Callable:
    """Attach a request id to scope state and the response; log each request. Raw ASGI."""
    header_key = header_name.lower()

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        headers = _decode_headers(scope)
        request_id = _sanitize_request_id(headers.get(header_key))
        scope.setdefault("state", {})["request_id"] = request_id
        method, path = scope.get("method", ""), scope.get("path", "")
        logger.debug(
            "Request start %s %s [%s] headers=%s",
            method,
            path,
            request_id,
            sanitize_headers(headers),
        )
        started = time.perf_counter()
        status_code = 500

        async def send_wrapper(message: dict) -> None:
            nonlocal status_code
            if message["type"] == "http.response.start":
                status_code = message["status"]
                out = list(message.get("headers", []))
                out.append((header_name.encode(), request_id.encode()))
                message["headers"] = out
            await send(message)

        try:
            await app(scope, receive, send_wrapper)
        finally:
            logger.info(
                "Request end %s %s [%s] %s in %.1fms",
                method,
                path,
                request_id,
                status_code,
                (time.perf_counter() - started) * 1000,
            )

    return asgi_app
