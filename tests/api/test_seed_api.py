"""Tests for the demo data endpoint."""

import pytest
from httpx import AsyncClient

from app.core.config import get_settings
from tests.fakes import FakeDataStore


async def test_seed_creates_demo_data_and_users_can_log_in(
    client: AsyncClient, override_repositories: FakeDataStore
) -> None:
    response = await client.post("/api/seed")
    assert response.status_code == 200
    body = response.json()
    assert len(body["organizations"]) == 2
    assert sum(o["userCount"] for o in body["organizations"]) == 10
    assert len(body["orders"]) == 20

    login = await client.post(
        "/api/auth/login",
        json={"email": body["users"][0]["email"], "password": "onerail-demo"},
    )
    assert login.status_code == 200


async def test_seed_disabled_returns_404(
    client: AsyncClient,
    override_repositories: FakeDataStore,
    settings_env: pytest.MonkeyPatch,
) -> None:
    settings_env.setenv("SEED_ENABLED", "false")
    get_settings.cache_clear()
    response = await client.post("/api/seed")
    assert response.status_code == 404
    assert override_repositories.organizations == {}
