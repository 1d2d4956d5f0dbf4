"""Get discussion use case."""

from uuid import UUID

from pydantic import BaseModel

from forum.domain.service import DiscussionService, UserService
from forum.domain.value import DiscussionId

from .common import DiscussionDetail, expand_discussion


class GetDiscussionRequest(BaseModel):
    """Get discussion request."""

    discussion_id: str  # UUID string


class GetDiscussionUseCase:
    """Use case for retrieving a discussion with its whole reply tree."""

    def __init__(
        self, discussion_service: DiscussionService, user_service: UserService
    ) -> None:
        """Initialize get discussion use case.

        Args:
            discussion_service: Discussion domain service
            user_service: User domain service
        """
        self.discussion_service = discussion_service
        self.user_service = user_service

    async def execute(self, request: GetDiscussionRequest) -> DiscussionDetail:
        """Execute get discussion flow.

        Authors and mentions are expanded at every depth of the tree.

        Raises:
            NotFoundError: If the discussion does not exist
        """
        discussion = await self.discussion_service.get_discussion(
            DiscussionId(UUID(request.discussion_id))
        )
        return await expand_discussion(self.user_service, discussion)
