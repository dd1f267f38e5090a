"""Cache: in-process response store, key builders, entity tags and invalidation.

Route handlers read and populate the store; services invalidate through
CacheInvalidator after writes, deferred to commit on write requests.
Key format is in keys.py (DRY).
"""

from app.infrastructure.cache.cache_protocol import CacheProtocol
from app.infrastructure.cache.etag import canonical_json, compute_etag
from app.infrastructure.cache.invalidation import CacheInvalidator, PostCommitInvalidator
from app.infrastructure.cache.keys import item_key, item_prefix, list_key, list_prefix
from app.infrastructure.cache.memory_cache import BoundedTTLCache

__all__ = [
    "BoundedTTLCache",
    "CacheInvalidator",
    "CacheProtocol",
    "PostCommitInvalidator",
    "canonical_json",
    "compute_etag",
    "item_key",
    "item_prefix",
    "list_key",
    "list_prefix",
]
