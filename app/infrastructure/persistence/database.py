"""Persistence: async engine, session factory, and Base for SQLAlchemy ORM.

Engine and session factory are created lazily on first use (get_db /
get_db_transactional) so import does not trigger Settings validation.
Tables are created at startup by create_all() when DATABASE_AUTO_CREATE is set.
"""

import logging
from collections.abc import AsyncIterator, Callable
from typing import Any

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from app.core.config import get_settings

logger = logging.getLogger(__name__)

# Set by _ensure_engine() on first use; avoids get_settings() at import time.
engine: Any = None
AsyncSessionLocal: async_sessionmaker[AsyncSession] | None = None

_AFTER_COMMIT_KEY = "after_commit"


def _ensure_engine() -> None:
    """Create engine and AsyncSessionLocal on first use."""
    global engine, AsyncSessionLocal
    if AsyncSessionLocal is not None:
        return
    settings = get_settings()
    kwargs: dict[str, Any] = {"echo": settings.database_echo, "pool_pre_ping": True}
    if settings.database_url.startswith("postgresql"):
        kwargs.update(
            pool_size=settings.db_pool_size if settings.db_pool_size is not None else 10,
            max_overflow=(
                settings.db_max_overflow if settings.db_max_overflow is not None else 20
            ),
            pool_recycle=3600,
            connect_args={
                "command_timeout": (
                    settings.db_command_timeout
                    if settings.db_command_timeout is not None
                    else 60
                )
            },
        )
    engine = create_async_engine(settings.database_url, **kwargs)
    AsyncSessionLocal = async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy declarative models."""


async def get_db() -> AsyncIterator[AsyncSession]:
    """Database session dependency for read operations.

    Does not commit; use get_db_transactional for writes.
    Yields a session and closes it on exit.
    """
    _ensure_engine()
    assert AsyncSessionLocal is not None
    async with AsyncSessionLocal() as session:
        yield session


async def get_db_transactional() -> AsyncIterator[AsyncSession]:
    """Database session dependency for write operations.

    Begins a transaction, commits on success, rolls back on exception.
    Hooks registered with after_commit() run once the commit has succeeded.
    Use for POST, PUT, DELETE endpoints.
    """
    _ensure_engine()
    assert AsyncSessionLocal is not None
    async with AsyncSessionLocal() as session:
        async with session.begin():
            yield session
        run_after_commit(session)


def after_commit(session: AsyncSession, hook: Callable[[], None]) -> None:
    """Run hook after the session's request transaction commits (not on rollback)."""
    session.info.setdefault(_AFTER_COMMIT_KEY, []).append(hook)


def run_after_commit(session: AsyncSession) -> None:
    """Call and clear the hooks queued with after_commit()."""
    hooks = session.info.pop(_AFTER_COMMIT_KEY, [])
    for hook in hooks:
        hook()


async def create_all() -> None:
    """Create all mapped tables that do not exist yet."""
    # Register models on Base.metadata
    from app.infrastructure.persistence import models  # noqa: F401

    _ensure_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables ensured")


async def check_database() -> None:
    """Run SELECT 1; raises if the database is unreachable."""
    _ensure_engine()
    async with engine.connect() as conn:
        await conn.execute(text("SELECT 1"))


async def dispose_engine() -> None:
    """Close pooled connections and forget the engine."""
    global engine, AsyncSessionLocal
    if engine is None:
        return
    await engine.dispose()
    engine = None
    AsyncSessionLocal = None
    logger.info("Database engine disposed")
