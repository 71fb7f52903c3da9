"""
Async database session management.
Challenge: Connection pooling, scoped sessions, proper cleanup.
Design: One session per unit of work; repositories flush, the scope commits.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from functools import lru_cache

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from accounts.config import get_settings
from accounts.db.base import Base

logger = logging.getLogger(__name__)


def build_engine(database_url: str, *, echo: bool = False) -> AsyncEngine:
    """Create an async engine. Pool options only apply to server databases."""
    options: dict = {"echo": echo}
    if not database_url.startswith("sqlite"):
        settings = get_settings()
        options.update(
            pool_pre_ping=True,  # Verify connections before use
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
        )
    return create_async_engine(database_url, **options)


def build_session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@lru_cache
def get_engine() -> AsyncEngine:
    settings = get_settings()
    return build_engine(settings.database_url, echo=settings.debug)


@lru_cache
def get_session_maker() -> async_sessionmaker[AsyncSession]:
    return build_session_maker(get_engine())


@asynccontextmanager
async def session_scope(
    session_maker: async_sessionmaker[AsyncSession] | None = None,
) -> AsyncGenerator[AsyncSession, None]:
    """Yield a session. Commit on success, rollback on error, close on exit."""
    maker = session_maker or get_session_maker()
    async with maker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            logger.debug("rolling back session after error")
            await session.rollback()
            raise
        finally:
            await session.close()


async def create_tables(engine: AsyncEngine) -> None:
    """Create missing tables from the ORM metadata. Not a migration tool."""
    # Register models on Base.metadata
    import accounts.db.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
