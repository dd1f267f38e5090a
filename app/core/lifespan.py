"""Application lifespan: startup and shutdown.

Single place for all startup/shutdown logic. Used by main.py; no business
logic here, only wiring of infrastructure (tables, cache sweep, DB engine).
The response cache itself is built in create_app() so it exists even when
the lifespan does not run (e.g. ASGI transport in tests).
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from app.core.config import get_settings
from app.infrastructure.cache import BoundedTTLCache

logger = logging.getLogger(__name__)


async def sweep_expired(cache: BoundedTTLCache, interval_seconds: float) -> None:
    """Purge expired cache entries every interval_seconds until cancelled."""
    while True:
        await asyncio.sleep(interval_seconds)
        removed = cache.purge_expired()
        if removed:
            logger.debug("Cache sweep removed %s expired entries", removed)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup: create tables (DATABASE_AUTO_CREATE), start the cache sweep
    (CACHE_SWEEP_INTERVAL_SECONDS > 0). Shutdown: stop the sweep, clear the
    cache, dispose the SQL engine.
    """
    settings = get_settings()
    from app.infrastructure.persistence import database

    # ---- Startup ----
    if settings.database_auto_create:
        await database.create_all()

    cache: BoundedTTLCache = app.state.cache
    sweep_task: asyncio.Task[None] | None = None
    if settings.cache_sweep_interval_seconds > 0:
        sweep_task = asyncio.create_task(
            sweep_expired(cache, settings.cache_sweep_interval_seconds)
        )
        logger.info(
            "Cache sweep started (every %ss)", settings.cache_sweep_interval_seconds
        )

    yield

    # ---- Shutdown ----
    if sweep_task is not None:
        sweep_task.cancel()
        try:
            await sweep_task
        except asyncio.CancelledError:
            pass
        logger.info("Cache sweep stopped")

    cache.clear()
    logger.info("Cache cleared")

    await database.dispose_engine()
