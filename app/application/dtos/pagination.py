"""Pagination DTOs shared by list use cases."""

import math
from dataclasses import dataclass
from typing import Generic, TypeVar

from app.core.constants import DEFAULT_PAGE, DEFAULT_PAGE_LIMIT, MAX_PAGE, MAX_PAGE_LIMIT


@dataclass(frozen=True)
class PageRequest:
    """Normalized 1-based page request with its row offset."""

    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_PAGE_LIMIT

    @classmethod
    def normalize(cls, page: int | None = None, limit: int | None = None) -> "PageRequest":
        """Clamp page to [1, MAX_PAGE] and limit to [1, MAX_PAGE_LIMIT]; None means the default."""
        p = min(MAX_PAGE, max(1, page if page is not None else DEFAULT_PAGE))
        lim = min(MAX_PAGE_LIMIT, max(1, limit if limit is not None else DEFAULT_PAGE_LIMIT))
        return cls(page=p, limit=lim)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of results plus totals (total_pages is at least 1)."""

    data: list[T]
    page: int
    limit: int
    total: int
    total_pages: int

    @classmethod
    def build(cls, data: list[T], request: PageRequest, total: int) -> "Page[T]":
        return cls(
            data=data,
            page=request.page,
            limit=request.limit,
            total=total,
            total_pages=max(1, math.ceil(total / request.limit)),
        )
