"""Tests for cache key builders (item keys, normalized list keys)."""

from app.infrastructure.cache.keys import item_key, item_prefix, list_key, list_prefix


def test_item_key_format() -> None:
    assert item_key("order", "abc123") == "order:item:abc123"


def test_item_prefix_matches_item_keys_only() -> None:
    assert item_key("order", "abc123").startswith(item_prefix("order"))
    assert not list_prefix("order").startswith(item_prefix("order"))


def test_list_key_drops_empty_values_and_sorts_names() -> None:
    """None and "" are omitted; names are sorted; space is %20."""
    key = list_key(
        "order",
        {"page": 2, "limit": 10, "q": "a b", "empty": "", "undef": None},
    )
    assert key == "order:list:limit=10&page=2&q=a%20b"


def test_list_key_without_surviving_params_is_bare_prefix() -> None:
    assert list_key("user", {}) == "user:list"
    assert list_key("user", {"page": None, "limit": ""}) == "user:list"
    assert list_key("user", {}) == list_prefix("user")


def test_list_key_is_independent_of_param_order() -> None:
    a = list_key("order", {"userId": "u1", "page": 1, "organizationId": "o1"})
    b = list_key("order", {"organizationId": "o1", "page": 1, "userId": "u1"})
    assert a == b == "order:list:organizationId=o1&page=1&userId=u1"


def test_list_key_encodes_like_uri_components() -> None:
    """Reserved characters are percent-encoded; !~*'() and -_. stay literal."""
    key = list_key("order", {"q": "a/b&c=d", "s": "x!~*'()-_.y", "u": "é"})
    assert key == "order:list:q=a%2Fb%26c%3Dd&s=x!~*'()-_.y&u=%C3%A9"


def test_list_key_renders_booleans_lowercase() -> None:
    assert list_key("order", {"flag": True, "other": False}) == (
        "order:list:flag=true&other=false"
    )


def test_list_key_keeps_zero() -> None:
    """Only None and "" are treated as missing."""
    assert list_key("order", {"page": 0}) == "order:list:page=0"
