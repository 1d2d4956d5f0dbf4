"""Search users use case."""

import logfire
from pydantic import BaseModel

from forum.config import DiscussionSettings
from forum.domain.service import UserService

from .common import UserSummary, to_user_summary


class SearchUsersRequest(BaseModel):
    """Search users request."""

    query: str = ""


class SearchUsersResponse(BaseModel):
    """Search users response."""

    users: list[UserSummary]


class SearchUsersUseCase:
    """Use case for @mention autocomplete."""

    def __init__(self, user_service: UserService, settings: DiscussionSettings) -> None:
        """Initialize search users use case.

        Args:
            user_service: User domain service
            settings: Discussion settings (search limit)
        """
        self.user_service = user_service
        self.settings = settings

    async def execute(self, request: SearchUsersRequest) -> SearchUsersResponse:
        """Execute search users flow.

        Args:
            request: Query text

        Returns:
            At most ``user_search_limit`` users ordered by username
        """
        with logfire.span("search_users.execute", query=request.query):
            users = await self.user_service.search_users(
                request.query, limit=self.settings.user_search_limit
            )
            return SearchUsersResponse(users=[to_user_summary(u) for u in users])
