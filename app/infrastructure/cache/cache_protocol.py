"""Cache protocol for the response cache (DIP)."""

from typing import Any, Protocol


class CacheProtocol(Protocol):
    """Protocol for response cache backends. Used by route handlers and CacheInvalidator."""

    def get(self, key: str) -> Any | None:
        """Return cached value or None when missing or expired."""
        ...

    def set(self, key: str, value: Any, ttl_seconds: float | None = None) -> None:
        """Store value; None means the backend's default TTL."""
        ...

    def delete(self, key: str) -> None:
        """Remove key from cache (no-op when absent)."""
        ...

    def delete_by_prefix(self, prefix: str) -> int:
        """Remove every key starting with prefix; return how many were removed."""
        ...
