"""Cache invalidation after writes.

A mutation of one entity makes its item key and every list page of its type
stale. Invalidation runs after the write succeeded; a failure here is logged
and never undoes the write (stale entries age out with their TTL).

Write requests use PostCommitInvalidator: evictions are queued while the
request's transaction is open and applied once it has committed, so a
concurrent read cannot re-cache rows from before the commit.
"""

import logging
from collections.abc import Callable

from app.infrastructure.cache.cache_protocol import CacheProtocol
from app.infrastructure.cache.keys import item_key, item_prefix, list_prefix

logger = logging.getLogger(__name__)


class CacheInvalidator:
    """Evicts cached item and list responses of an entity type (implements ICacheInvalidator)."""

    def __init__(self, cache: CacheProtocol) -> None:
        self.cache = cache

    def invalidate(self, entity: str, entity_id: str) -> None:
        """Drop all list keys of entity, then the item key of entity_id."""
        self.invalidate_list(entity)
        try:
            self.cache.delete(item_key(entity, entity_id))
        except Exception:
            logger.exception("Cache invalidation failed for %s:%s", entity, entity_id)

    def invalidate_list(self, entity: str) -> int:
        """Drop every cached list page of entity. Returns the number of keys removed."""
        try:
            return self.cache.delete_by_prefix(list_prefix(entity))
        except Exception:
            logger.exception("Cache list invalidation failed for %s", entity)
            return 0

    def invalidate_items(self, entity: str) -> int:
        """Drop every cached item of entity (e.g. orders embedding a changed user)."""
        try:
            return self.cache.delete_by_prefix(item_prefix(entity))
        except Exception:
            logger.exception("Cache item invalidation failed for %s", entity)
            return 0


class PostCommitInvalidator:
    """ICacheInvalidator that queues evictions until flush() is called.

    flush() is registered as an after-commit hook of the request's
    transactional session; on rollback it never runs and nothing is evicted.
    """

    def __init__(self, target: CacheInvalidator) -> None:
        self._target = target
        self._pending: list[Callable[[], object]] = []

    @property
    def pending(self) -> int:
        return len(self._pending)

    def invalidate(self, entity: str, entity_id: str) -> None:
        self._pending.append(lambda: self._target.invalidate(entity, entity_id))

    def invalidate_list(self, entity: str) -> int:
        """Queue the list eviction; returns 0 because nothing is removed yet."""
        self._pending.append(lambda: self._target.invalidate_list(entity))
        return 0

    def invalidate_items(self, entity: str) -> int:
        self._pending.append(lambda: self._target.invalidate_items(entity))
        return 0

    def flush(self) -> None:
        """Apply queued evictions in the order they were requested."""
        pending, self._pending = self._pending, []
        for evict in pending:
            evict()
