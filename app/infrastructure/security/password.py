"""Password hashing (bcrypt over a SHA-256 pre-hash).

Bcrypt truncates inputs at 72 bytes; pre-hashing with SHA-256 yields a fixed-length
input so long passwords are not silently truncated. The async helpers run bcrypt
in a worker thread so the event loop is not blocked.
"""

import asyncio
import base64
import hashlib

import bcrypt

# Compared against when no user matches, so unknown emails cost the same as bad passwords.
_dummy_hash_cache: str | None = None


def _prehash(password: str) -> bytes:
    return base64.b64encode(hashlib.sha256(password.encode("utf-8")).digest())


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Return True if plain_password matches hashed_password."""
    try:
        return bool(bcrypt.checkpw(_prehash(plain_password), hashed_password.encode("utf-8")))
    except (ValueError, TypeError):
        return False


def get_password_hash(password: str) -> str:
    """Return bcrypt hash of password."""
    return bcrypt.hashpw(_prehash(password), bcrypt.gensalt()).decode("utf-8")


async def hash_password(password: str) -> str:
    """Hash in a worker thread."""
    return await asyncio.to_thread(get_password_hash, password)


async def check_password(password: str, hashed_password: str | None) -> bool:
    """Verify in a worker thread; a None hash is checked against a dummy and fails."""
    global _dummy_hash_cache
    if hashed_password is None:
        if _dummy_hash_cache is None:
            _dummy_hash_cache = await hash_password("not-a-real-password")
        await asyncio.to_thread(verify_password, password, _dummy_hash_cache)
        return False
    return await asyncio.to_thread(verify_password, password, hashed_password)
