"""Async engine and session handling for PostgreSQL."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import logfire
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from quill.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the async engine described by ``settings.database``.

    SQL is echoed when ``settings.debug`` is set.
    """
    database = settings.database
    return create_async_engine(
        database.url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=database.pool_size,
        max_overflow=database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # Rows are mapped to frozen domain models right away, so nothing needs
    # refreshing after commit
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)


@asynccontextmanager
async def session_scope(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncIterator[AsyncSession]:
    """One unit of work.

    Commits when the block exits normally and rolls back when it raises.
    HTTP requests, publish jobs and the seed script all run inside one.

    Args:
        session_factory: Factory for creating sessions

    Yields:
        Database session
    """
    async with session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception as e:
            logfire.warn("Session rollback", error=str(e))
            await session.rollback()
            raise
