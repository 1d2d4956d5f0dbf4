"""Persistence component: PostgreSQL in production."""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from forum.config import Settings
from forum.domain.repository import DiscussionRepository, UserRepository
from forum.persistence.database import create_engine, create_session_factory
from forum.persistence.repository import (
    PostgresDiscussionRepository,
    PostgresUserRepository,
)
from forum.util.di.base import ProviderBase
from forum.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Repositories and whatever backs them."""

    __component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide the engine; its pool is disposed when the container closes."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide one transaction per request.

        ``session.begin()`` commits when the request scope closes cleanly
        and rolls back if it closes with an exception.
        """
        async with session_factory() as session:
            try:
                async with session.begin():
                    yield session
            except Exception as e:
                logfire.warn("Request transaction rolled back", error=str(e))
                raise

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_discussion_repository(self, session: AsyncSession) -> DiscussionRepository:
        return PostgresDiscussionRepository(session)
