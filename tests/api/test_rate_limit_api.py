"""Tests for the per-organization rate limit."""

import pytest
from httpx import AsyncClient

from app.application.dtos.user import UserResult
from app.core.config import get_settings
from tests.fakes import TEST_PASSWORD, FakeDataStore


async def test_organization_limit_returns_429(
    client: AsyncClient,
    user: UserResult,
    auth_headers: dict[str, str],
    settings_env: pytest.MonkeyPatch,
) -> None:
    settings_env.setenv("RATE_LIMIT_PER_ORGANIZATION", "2/minute")
    get_settings.cache_clear()

    for _ in range(2):
        assert (await client.get("/api/organization", headers=auth_headers)).status_code == 200
    response = await client.get("/api/organization", headers=auth_headers)

    assert response.status_code == 429
    body = response.json()
    assert body["error"] == "RATE_LIMITED"
    assert body["message"].startswith(
        f"Too many requests for organization {user.organization_id}. Allowed "
    )


async def test_organizations_have_separate_windows(
    client: AsyncClient,
    user: UserResult,
    auth_headers: dict[str, str],
    settings_env: pytest.MonkeyPatch,
    store: FakeDataStore,
) -> None:
    settings_env.setenv("RATE_LIMIT_PER_ORGANIZATION", "1/minute")
    get_settings.cache_clear()

    other_org = store.add_organization(name="Other Co")
    store.add_user("Bo", "Peep", "bo@example.com", TEST_PASSWORD, other_org.id)
    login = await client.post(
        "/api/auth/login", json={"email": "bo@example.com", "password": TEST_PASSWORD}
    )
    other_headers = {"Authorization": f"Bearer {login.json()['token']}"}

    assert (await client.get("/api/organization", headers=auth_headers)).status_code == 200
    assert (await client.get("/api/organization", headers=other_headers)).status_code == 200
    assert (await client.get("/api/organization", headers=auth_headers)).status_code == 429
