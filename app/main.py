"""FastAPI application entry point.

Wiring only: lifespan, exception handlers, middleware, routers.
No business logic here. See app.core.lifespan and app.core.exception_handlers.

Settings are loaded inside create_app() so that tests can set env (and optionally
clear get_settings cache) before importing or calling create_app().
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.v1 import api_router
from app.core.config import get_settings
from app.core.exception_handlers import register_exception_handlers
from app.core.lifespan import create_lifespan
from app.core.limiter import limiter
from app.infrastructure.cache import BoundedTTLCache
from app.middleware import RequestContextMiddleware
from app.shared.telemetry.logging import setup_logging


def create_app() -> FastAPI:
    """Build and return the FastAPI application. Settings are resolved here (deferred from import)."""
    settings = get_settings()
    setup_logging()
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=create_lifespan,
    )

    app.state.cache = BoundedTTLCache(
        max_entries=settings.cache_max_entries,
        default_ttl=settings.cache_ttl_seconds,
    )

    limiter.enabled = settings.rate_limit_enabled
    app.state.limiter = limiter

    register_exception_handlers(app)

    # Middleware: first added = innermost. Request context wraps CORS so preflights are logged.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[o.strip() for o in settings.allowed_origins.split(",") if o.strip()],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["ETag", settings.request_id_header],
    )
    app.add_middleware(RequestContextMiddleware, header_name=settings.request_id_header)

    app.include_router(api_router, prefix="/api")

    return app


app = create_app()
