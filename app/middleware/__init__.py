"""HTTP middleware. Applied in create_app()."""

from app.middleware.request_context import RequestContextMiddleware

__all__ = ["RequestContextMiddleware"]
