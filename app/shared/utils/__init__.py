"""Shared utilities: datetime and id generators."""

from app.shared.utils.datetime import ensure_utc, is_past, utc_now
from app.shared.utils.generators import generate_cuid

__all__ = [
    "ensure_utc",
    "generate_cuid",
    "is_past",
    "utc_now",
]
