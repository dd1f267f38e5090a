"""Cache key builders. Single place for key format (DRY).

Item keys: "{entity}:item:{id}". List keys: "{entity}:list" or
"{entity}:list:{name=value&...}" with empty parameters dropped and the
rest sorted by name, so equivalent queries share one key.
"""

from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

from app.core.constants import (
    CACHE_KEY_SEP,
    CACHE_QUERY_SEP,
    CACHE_SEGMENT_ITEM,
    CACHE_SEGMENT_LIST,
)

# Characters encodeURIComponent leaves literal besides alphanumerics and "-_.~"
_URI_COMPONENT_SAFE = "!*'()"


def _encode_component(value: Any) -> str:
    """Percent-encode a key component (space becomes %20, '/' is encoded)."""
    if isinstance(value, bool):
        value = "true" if value else "false"
    return quote(str(value), safe=_URI_COMPONENT_SAFE)


def item_key(entity: str, entity_id: str) -> str:
    """Cache key for a single entity by ID."""
    return f"{entity}{CACHE_KEY_SEP}{CACHE_SEGMENT_ITEM}{CACHE_KEY_SEP}{entity_id}"


def item_prefix(entity: str) -> str:
    """Prefix shared by every item key of the entity, separator included."""
    return f"{entity}{CACHE_KEY_SEP}{CACHE_SEGMENT_ITEM}{CACHE_KEY_SEP}"


def list_prefix(entity: str) -> str:
    """Prefix shared by every list key of the entity (for bulk invalidation)."""
    return f"{entity}{CACHE_KEY_SEP}{CACHE_SEGMENT_LIST}"


def list_key(entity: str, params: Mapping[str, Any]) -> str:
    """Cache key for a collection query.

    Args:
        entity: Entity namespace (e.g. 'order').
        params: Query parameters; None and "" values are omitted.

    Returns:
        "{entity}:list" when no parameter survives, else "{entity}:list:{query}".
    """
    pairs = [
        f"{_encode_component(name)}={_encode_component(value)}"
        for name, value in sorted(params.items())
        if value is not None and value != ""
    ]
    prefix = list_prefix(entity)
    if not pairs:
        return prefix
    return f"{prefix}{CACHE_KEY_SEP}{CACHE_QUERY_SEP.join(pairs)}"
