"""Domain layer DI providers."""

from dishka import Scope, provide

from forum.config import AuthSettings, DiscussionSettings
from forum.domain.repository import DiscussionRepository, UserRepository
from forum.domain.service import (
    DiscussionService,
    JWTService,
    MentionService,
    UserService,
)
from forum.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_mention_service(self, user_repository: UserRepository) -> MentionService:
        """Provide mention domain service."""
        return MentionService(user_repository=user_repository)

    @provide
    def get_discussion_service(
        self,
        discussion_repository: DiscussionRepository,
        mention_service: MentionService,
        settings: DiscussionSettings,
    ) -> DiscussionService:
        """Provide discussion domain service."""
        return DiscussionService(
            discussion_repository=discussion_repository,
            mention_service=mention_service,
            settings=settings,
        )
