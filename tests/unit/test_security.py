"""Tests for password hashing and JWT access tokens."""

from datetime import timedelta

import pytest

from app.infrastructure.security.jwt import (
    JwtTokenIssuer,
    create_access_token,
    verify_token,
)
from app.infrastructure.security.password import (
    check_password,
    get_password_hash,
    verify_password,
)


def test_password_hash_roundtrip() -> None:
    hashed = get_password_hash("s3cret-password")
    assert hashed != "s3cret-password"
    assert verify_password("s3cret-password", hashed)
    assert not verify_password("wrong-password", hashed)


def test_long_passwords_are_not_truncated() -> None:
    """Passwords differing after byte 72 must not verify against each other."""
    base = "x" * 80
    hashed = get_password_hash(base + "a")
    assert not verify_password(base + "b", hashed)


def test_verify_password_with_malformed_hash_returns_false() -> None:
    assert not verify_password("anything", "not-a-bcrypt-hash")


async def test_check_password_without_hash_fails() -> None:
    assert await check_password("anything", None) is False


async def test_check_password_matches() -> None:
    hashed = get_password_hash("another-password")
    assert await check_password("another-password", hashed) is True


def test_token_roundtrip_keeps_claims() -> None:
    token = create_access_token({"sub": "u1", "organization_id": "org1"})
    payload = verify_token(token)
    assert payload["sub"] == "u1"
    assert payload["organization_id"] == "org1"
    assert "exp" in payload


def test_issuer_creates_verifiable_token() -> None:
    token = JwtTokenIssuer().create_access_token({"sub": "u2"})
    assert verify_token(token)["sub"] == "u2"


def test_expired_token_is_rejected() -> None:
    token = create_access_token({"sub": "u1"}, expires_delta=timedelta(seconds=-10))
    with pytest.raises(ValueError, match="Invalid token"):
        verify_token(token)


def test_tampered_token_is_rejected() -> None:
    token = create_access_token({"sub": "u1"})
    head, payload, signature = token.split(".")
    with pytest.raises(ValueError):
        verify_token(f"{head}.{payload}.{signature[::-1]}")


def test_token_without_sub_is_rejected() -> None:
    token = create_access_token({"organization_id": "org1"})
    with pytest.raises(ValueError):
        verify_token(token)
