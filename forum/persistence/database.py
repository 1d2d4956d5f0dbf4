"""Async engine and session factory for PostgreSQL."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from forum.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the async engine.

    Pool sizing comes from ``DATABASE__POOL_SIZE`` and
    ``DATABASE__MAX_OVERFLOW``; SQL is echoed when ``DEBUG`` is set.
    """
    return create_async_engine(
        settings.database_url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create the session factory used for request-scoped sessions.

    Objects stay usable after commit because repositories return domain
    models built from rows, never ORM instances.
    """
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
