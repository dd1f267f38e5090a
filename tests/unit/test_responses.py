"""Tests for cached-read response helpers (ETag/304 and public Cache-Control)."""

import json

import pytest

from app.api.v1.responses import (
    populate_and_respond,
    respond_cached_or_fresh,
    respond_public,
)
from app.infrastructure.cache import BoundedTTLCache, compute_etag

BODY = {"id": "o1", "totalAmount": 12.5}


def test_fresh_response_carries_etag_and_body() -> None:
    response = respond_cached_or_fresh(None, BODY)
    assert response.status_code == 200
    assert response.headers["etag"] == compute_etag(BODY)
    assert json.loads(response.body) == BODY


def test_matching_if_none_match_returns_304_without_body() -> None:
    etag = compute_etag(BODY)
    response = respond_cached_or_fresh(etag, BODY)
    assert response.status_code == 304
    assert response.headers["etag"] == etag
    assert response.body == b""


@pytest.mark.parametrize(
    "if_none_match",
    ['"deadbeef"', "", "W/" + compute_etag(BODY), compute_etag(BODY).strip('"')],
)
def test_non_matching_if_none_match_sends_full_body(if_none_match: str) -> None:
    """Comparison is exact: weak tags and unquoted digests do not match."""
    response = respond_cached_or_fresh(if_none_match, BODY)
    assert response.status_code == 200
    assert json.loads(response.body) == BODY


def test_custom_success_status() -> None:
    assert respond_cached_or_fresh(None, BODY, status_code=201).status_code == 201


def test_populate_and_respond_stores_body_even_on_304() -> None:
    cache = BoundedTTLCache()
    response = populate_and_respond(cache, "order:item:o1", BODY, compute_etag(BODY))
    assert response.status_code == 304
    assert cache.get("order:item:o1") == BODY


def test_populate_and_respond_full_body_on_miss() -> None:
    cache = BoundedTTLCache()
    response = populate_and_respond(cache, "order:list", BODY, None)
    assert response.status_code == 200
    assert response.headers["etag"] == compute_etag(BODY)
    assert cache.get("order:list") == BODY


@pytest.mark.parametrize(
    ("max_age", "expected"),
    [(600, "600"), (59.9, "59"), (0, "0"), (-5, "0")],
)
def test_respond_public_sets_cache_control(max_age: float, expected: str) -> None:
    response = respond_public(BODY, max_age)
    assert response.status_code == 200
    assert response.headers["cache-control"] == f"public, max-age={expected}"
    assert "etag" not in response.headers
    assert json.loads(response.body) == BODY
