"""Async engine and session factory for PostgreSQL.

Both are created once per process by the DI container; sessions are opened
per request.
"""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from forum.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the process-wide async engine.

    Args:
        settings: Application settings (database URL and pool sizing)

    Returns:
        Async engine with a pre-pinged connection pool
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
    """Create the session factory.

    Sessions never autoflush or expire on commit: repositories flush
    explicitly and domain models are rebuilt from rows anyway.

    Args:
        engine: Async engine

    Returns:
        Session factory
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )
