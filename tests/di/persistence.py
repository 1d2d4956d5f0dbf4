"""Mock persistence providers for testing."""

from dishka import Scope, provide

from forum.domain.repository import DiscussionRepository, UserRepository
from forum.persistence.repository.inmemory import (
    InMemoryDiscussionRepository,
    InMemoryUserRepository,
)
from forum.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Repositories are APP-scoped so state survives across requests made
    against one container (end-to-end tests). Every test builds its own
    container, which keeps tests isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_user_repository(self) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository()

    @provide(scope=Scope.APP)
    def get_discussion_repository(self) -> DiscussionRepository:
        """Provide in-memory discussion repository."""
        return InMemoryDiscussionRepository()
