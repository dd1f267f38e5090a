"""Core constants: cache key segments, pagination bounds and shared literals.

Single source of truth for cache key structure (DRY). Used by
infrastructure cache, repositories and the rate limiter.
"""

# Delimiter for composite cache keys
CACHE_KEY_SEP = ":"

# Second key segment: "{entity}:item:{id}" or "{entity}:list[:{query}]"
CACHE_SEGMENT_ITEM = "item"
CACHE_SEGMENT_LIST = "list"

# Joins name=value pairs inside a list key
CACHE_QUERY_SEP = "&"

# Pagination (1-based pages)
DEFAULT_PAGE = 1
DEFAULT_PAGE_LIMIT = 20
MAX_PAGE_LIMIT = 100
# Keeps the row offset within a Postgres bigint
MAX_PAGE = 10_000_000

# Rate-limit bucket for requests without a resolved organization
UNKNOWN_ORGANIZATION_KEY = "unknown-org"

# Replaces sensitive header values in request logs
REDACTED_HEADER_VALUE = "*** redacted ***"
REDACTED_HEADERS = frozenset(
    {"authorization", "cookie", "set-cookie", "proxy-authorization"}
)
