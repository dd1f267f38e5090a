"""Tests for organization CRUD, response caching and invalidation."""

from httpx import AsyncClient

from app.application.dtos.organization import OrganizationResult
from app.application.dtos.user import UserResult
from tests.fakes import FakeDataStore


async def test_requires_authentication(
    client: AsyncClient, override_repositories: FakeDataStore
) -> None:
    response = await client.get("/api/organization")
    assert response.status_code == 401


async def test_list_organizations_paginated(
    client: AsyncClient,
    store: FakeDataStore,
    organization: OrganizationResult,
    auth_headers: dict[str, str],
) -> None:
    store.add_organization(name="Beta Freight")
    response = await client.get("/api/organization?page=1&limit=1", headers=auth_headers)
    assert response.status_code == 200
    body = response.json()
    assert body["page"] == 1
    assert body["limit"] == 1
    assert body["total"] == 2
    assert body["totalPages"] == 2
    assert [o["name"] for o in body["data"]] == ["Acme Logistics"]
    assert response.headers["Cache-Control"] == "public, max-age=600"
    assert "ETag" not in response.headers


async def test_list_is_served_from_cache(
    client: AsyncClient,
    store: FakeDataStore,
    organization: OrganizationResult,
    auth_headers: dict[str, str],
) -> None:
    first = await client.get("/api/organization", headers=auth_headers)
    second = await client.get("/api/organization", headers=auth_headers)
    assert first.json() == second.json()
    assert store.organizations_repo.list_calls == 1


async def test_create_drops_cached_lists(
    client: AsyncClient,
    store: FakeDataStore,
    organization: OrganizationResult,
    auth_headers: dict[str, str],
) -> None:
    await client.get("/api/organization", headers=auth_headers)
    created = await client.post(
        "/api/organization",
        json={"name": "Gamma", "industry": "IT", "dateFounded": "2001-02-03T04:05:06Z"},
        headers=auth_headers,
    )
    assert created.status_code == 201
    assert created.json()["dateFounded"] == "2001-02-03T04:05:06Z"
    listed = await client.get("/api/organization", headers=auth_headers)
    assert listed.json()["total"] == 2
    assert store.organizations_repo.list_calls == 2


async def test_get_organization_and_cache_refresh_after_update(
    client: AsyncClient,
    store: FakeDataStore,
    organization: OrganizationResult,
    auth_headers: dict[str, str],
) -> None:
    url = f"/api/organization/{organization.id}"
    response = await client.get(url, headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["name"] == "Acme Logistics"

    updated = await client.put(url, json={"industry": "Retail"}, headers=auth_headers)
    assert updated.status_code == 200
    assert updated.json()["name"] == "Acme Logistics"
    assert updated.json()["industry"] == "Retail"

    again = await client.get(url, headers=auth_headers)
    assert again.json()["industry"] == "Retail"
    assert store.organizations_repo.get_calls >= 2


async def test_get_missing_organization_returns_404(
    client: AsyncClient, auth_headers: dict[str, str]
) -> None:
    response = await client.get("/api/organization/missing", headers=auth_headers)
    assert response.status_code == 404
    assert response.json()["error"] == "RESOURCE_NOT_FOUND"


async def test_update_missing_organization_returns_404(
    client: AsyncClient, auth_headers: dict[str, str]
) -> None:
    response = await client.put(
        "/api/organization/missing", json={"name": "X"}, headers=auth_headers
    )
    assert response.status_code == 404


async def test_create_rejects_blank_name_and_future_date(
    client: AsyncClient, auth_headers: dict[str, str]
) -> None:
    blank = await client.post("/api/organization", json={"name": "  "}, headers=auth_headers)
    assert blank.status_code == 422
    future = await client.post(
        "/api/organization",
        json={"name": "Later", "dateFounded": "2999-01-01T00:00:00Z"},
        headers=auth_headers,
    )
    assert future.status_code == 422


async def test_update_rejects_null_name(
    client: AsyncClient, organization: OrganizationResult, auth_headers: dict[str, str]
) -> None:
    response = await client.put(
        f"/api/organization/{organization.id}", json={"name": None}, headers=auth_headers
    )
    assert response.status_code == 422


async def test_delete_organization_is_idempotent(
    client: AsyncClient,
    store: FakeDataStore,
    auth_headers: dict[str, str],
    user: UserResult,
) -> None:
    other = store.add_organization(name="Temporary")
    url = f"/api/organization/{other.id}"
    first = await client.delete(url, headers=auth_headers)
    second = await client.delete(url, headers=auth_headers)
    assert (first.status_code, second.status_code) == (204, 204)
    assert other.id not in store.organizations
