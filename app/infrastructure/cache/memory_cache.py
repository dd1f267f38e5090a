"""In-process response cache: LRU eviction with per-entry TTL.

One instance is built by create_app() and shared through app.state.cache.
Entries live in an OrderedDict ordered by recency (oldest first) together
with their expiry deadline; expiry is checked on read and by purge_expired(),
which the lifespan sweep task calls periodically.

All public operations hold a lock so that concurrent requests never observe
a half-applied eviction or prefix delete.
"""

from __future__ import annotations

import logging
import threading
import time
from collections import OrderedDict
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Entry:
    value: Any
    expires_at: float


class BoundedTTLCache:
    """Capacity-bounded key/value store with least-recently-used eviction and TTL expiry.

    Implements CacheProtocol. Values are stored as-is (no copy, no serialization).
    """

    def __init__(
        self,
        max_entries: int = 1000,
        default_ttl: float = 600.0,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize an empty cache.

        Args:
            max_entries: Maximum number of live entries (>= 1).
            default_ttl: TTL in seconds used when set() gets no ttl (> 0).
            clock: Monotonic time source in seconds (injectable for tests).

        Raises:
            ValueError: If max_entries or default_ttl is out of range.
        """
        if max_entries < 1:
            raise ValueError(f"max_entries must be >= 1, got {max_entries}")
        if default_ttl <= 0:
            raise ValueError(f"default_ttl must be > 0, got {default_ttl}")
        self._max_entries = max_entries
        self._default_ttl = default_ttl
        self._clock = clock
        self._entries: OrderedDict[str, _Entry] = OrderedDict()
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    @property
    def max_entries(self) -> int:
        return self._max_entries

    @property
    def default_ttl(self) -> float:
        return self._default_ttl

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def get(self, key: str) -> Any | None:
        """Return the value for key, or None when missing or expired.

        A hit marks the entry as most recently used. An expired entry is
        removed on the spot.
        """
        with self._lock:
            entry = self._entries.get(key)
            if entry is not None and self._clock() >= entry.expires_at:
                del self._entries[key]
                entry = None
            if entry is None:
                self._misses += 1
                logger.debug("Cache MISS: %s", key)
                return None
            self._entries.move_to_end(key)
            self._hits += 1
        logger.debug("Cache HIT: %s", key)
        return entry.value

    def set(self, key: str, value: Any, ttl_seconds: float | None = None) -> None:
        """Insert or overwrite key, reset its TTL and mark it most recently used.

        Evicts least recently used entries while over capacity.

        Raises:
            ValueError: If ttl_seconds is given and not positive.
        """
        ttl = self._default_ttl if ttl_seconds is None else ttl_seconds
        if ttl <= 0:
            raise ValueError(f"ttl_seconds must be > 0, got {ttl_seconds}")
        with self._lock:
            self._entries[key] = _Entry(value=value, expires_at=self._clock() + ttl)
            self._entries.move_to_end(key)
            while len(self._entries) > self._max_entries:
                evicted, _ = self._entries.popitem(last=False)
                logger.debug("Cache EVICT: %s", evicted)
        logger.debug("Cache SET: %s (TTL: %ss)", key, ttl)

    def delete(self, key: str) -> None:
        """Remove key if present; no-op otherwise."""
        with self._lock:
            self._entries.pop(key, None)

    def delete_by_prefix(self, prefix: str) -> int:
        """Remove every entry whose key starts with prefix.

        Returns:
            Number of entries removed.
        """
        with self._lock:
            keys = [k for k in self._entries if k.startswith(prefix)]
            for k in keys:
                del self._entries[k]
        if keys:
            logger.info("Cache INVALIDATE: %s (%s keys)", prefix, len(keys))
        return len(keys)

    def purge_expired(self) -> int:
        """Remove all expired entries. Returns the number removed."""
        with self._lock:
            now = self._clock()
            expired = [k for k, e in self._entries.items() if now >= e.expires_at]
            for k in expired:
                del self._entries[k]
        if expired:
            logger.debug("Cache PURGE: %s expired entries", len(expired))
        return len(expired)

    def clear(self) -> None:
        """Remove all entries and reset statistics."""
        with self._lock:
            self._entries.clear()
            self._hits = 0
            self._misses = 0

    def stats(self) -> dict[str, Any]:
        """Return hit/miss/size statistics."""
        with self._lock:
            hits, misses, size = self._hits, self._misses, len(self._entries)
        return {
            "hits": hits,
            "misses": misses,
            "size": size,
            "max_entries": self._max_entries,
            "hit_rate": round(hits / max(hits + misses, 1) * 100, 1),
        }
