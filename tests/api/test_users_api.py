"""Tests for user CRUD, public caching and reference validation."""

from datetime import UTC, datetime

from httpx import AsyncClient

from app.application.dtos.organization import OrganizationResult
from app.application.dtos.user import UserResult
from tests.fakes import FakeDataStore


def _new_user(organization_id: str, email: str = "grace@example.com") -> dict:
    return {
        "firstName": "Grace",
        "lastName": "Hopper",
        "email": email,
        "password": "compilers-rule",
        "organizationId": organization_id,
    }


async def test_create_user_hides_password(
    client: AsyncClient,
    store: FakeDataStore,
    organization: OrganizationResult,
    auth_headers: dict[str, str],
) -> None:
    response = await client.post(
        "/api/user", json=_new_user(organization.id), headers=auth_headers
    )
    assert response.status_code == 201
    body = response.json()
    assert body["firstName"] == "Grace"
    assert body["organizationId"] == organization.id
    assert body["dateCreated"] is not None
    assert "password" not in body
    assert store.passwords[body["id"]] == "compilers-rule"


async def test_create_user_unknown_organization_returns_400(
    client: AsyncClient, auth_headers: dict[str, str]
) -> None:
    response = await client.post("/api/user", json=_new_user("nope"), headers=auth_headers)
    assert response.status_code == 400
    assert response.json()["details"] == {"field": "organizationId"}


async def test_create_user_duplicate_email_returns_409(
    client: AsyncClient,
    organization: OrganizationResult,
    user: UserResult,
    auth_headers: dict[str, str],
) -> None:
    response = await client.post(
        "/api/user", json=_new_user(organization.id, user.email), headers=auth_headers
    )
    assert response.status_code == 409
    assert response.json()["error"] == "DUPLICATE_EMAIL"


async def test_create_user_invalid_email_and_short_password(
    client: AsyncClient, organization: OrganizationResult, auth_headers: dict[str, str]
) -> None:
    bad_email = _new_user(organization.id, "not-an-email")
    short_password = {**_new_user(organization.id), "password": "short"}
    for payload in (bad_email, short_password):
        response = await client.post("/api/user", json=payload, headers=auth_headers)
        assert response.status_code == 422


async def test_list_users_cached_with_public_header(
    client: AsyncClient,
    store: FakeDataStore,
    user: UserResult,
    auth_headers: dict[str, str],
) -> None:
    first = await client.get("/api/user", headers=auth_headers)
    second = await client.get("/api/user", headers=auth_headers)
    assert first.status_code == second.status_code == 200
    assert first.headers["Cache-Control"] == "public, max-age=600"
    assert [u["email"] for u in second.json()["data"]] == [user.email]
    assert store.users_repo.list_calls == 1


async def test_update_user_invalidates_item(
    client: AsyncClient,
    user: UserResult,
    auth_headers: dict[str, str],
) -> None:
    url = f"/api/user/{user.id}"
    assert (await client.get(url, headers=auth_headers)).json()["lastName"] == "Lovelace"
    response = await client.put(url, json={"lastName": "King"}, headers=auth_headers)
    assert response.status_code == 200
    assert (await client.get(url, headers=auth_headers)).json()["lastName"] == "King"


async def test_update_user_password_allows_new_login(
    client: AsyncClient,
    user: UserResult,
    auth_headers: dict[str, str],
) -> None:
    response = await client.put(
        f"/api/user/{user.id}", json={"password": "brand-new-secret"}, headers=auth_headers
    )
    assert response.status_code == 200
    login = await client.post(
        "/api/auth/login", json={"email": user.email, "password": "brand-new-secret"}
    )
    assert login.status_code == 200


async def test_get_missing_user_returns_404(
    client: AsyncClient, auth_headers: dict[str, str]
) -> None:
    response = await client.get("/api/user/missing", headers=auth_headers)
    assert response.status_code == 404


async def test_delete_user_removes_their_orders(
    client: AsyncClient,
    store: FakeDataStore,
    organization: OrganizationResult,
    auth_headers: dict[str, str],
) -> None:
    other = store.add_user("Grace", "Hopper", "grace@example.com", "pw-123456", organization.id)
    store.add_order(datetime(2020, 1, 1, tzinfo=UTC), 12.5, other.id, organization.id)
    response = await client.delete(f"/api/user/{other.id}", headers=auth_headers)
    assert response.status_code == 204
    assert store.orders == {}
