from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from cryptograms.core.config import get_settings
from cryptograms.models.database import Base


@lru_cache
def _engine_for(database_url: str) -> AsyncEngine:
    """One engine per database URL, created on first use."""
    return create_async_engine(database_url)


@lru_cache
def _session_factory_for(database_url: str) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(_engine_for(database_url), expire_on_commit=False)


def get_engine() -> AsyncEngine:
    """Get the engine for the configured database."""
    return _engine_for(get_settings().database_url)


async def init_db() -> None:
    """Create all tables that do not exist yet."""
    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def dispose_db() -> None:
    """Close pooled connections of the configured engine."""
    await get_engine().dispose()


@asynccontextmanager
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Yield a session that commits on success and rolls back on error."""
    session = _session_factory_for(get_settings().database_url)()
    try:
        yield session
        await session.commit()
    except Exception:
        await session.rollback()
        raise
    finally:
        await session.close()
