"""Logging configuration for the application."""

import logging
import sys
from collections.abc import Mapping
from typing import Any

from app.core.config import get_settings
from app.core.constants import REDACTED_HEADER_VALUE, REDACTED_HEADERS

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging() -> None:
    """Configure application-wide logging.

    Level is DEBUG when settings.debug is True, otherwise INFO.
    Output goes to stdout. Safe to call more than once (basicConfig is a
    no-op once the root logger has handlers).
    """
    settings = get_settings()
    log_level = logging.DEBUG if settings.debug else logging.INFO
    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def sanitize_headers(headers: Mapping[str, Any]) -> dict[str, Any]:
    """Copy of headers with credentials (Authorization, Cookie, ...) redacted for logging."""
    return {
        name: REDACTED_HEADER_VALUE if name.lower() in REDACTED_HEADERS else value
        for name, value in headers.items()
    }
