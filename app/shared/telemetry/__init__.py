"""Shared telemetry: logging setup and log-safe helpers."""

from app.shared.telemetry.logging import sanitize_headers, setup_logging

__all__ = [
    "sanitize_headers",
    "setup_logging",
]
