"""Edit discussion use case."""

from uuid import UUID

from pydantic import BaseModel

from forum.domain.service import DiscussionService, UserService
from forum.domain.value import Approach, DiscussionId, UserId

from .common import DiscussionDetail, expand_discussion


class EditDiscussionRequest(BaseModel):
    """Edit discussion request."""

    discussion_id: str
    user_id: str  # User ID from authenticated user
    title: str
    content: str
    approach: Approach | None = None  # Required when editing a Solution


class EditDiscussionUseCase:
    """Use case for the author editing their discussion."""

    def __init__(
        self, discussion_service: DiscussionService, user_service: UserService
    ) -> None:
        """Initialize edit discussion use case.

        Args:
            discussion_service: Discussion domain service
            user_service: User domain service
        """
        self.discussion_service = discussion_service
        self.user_service = user_service

    async def execute(self, request: EditDiscussionRequest) -> DiscussionDetail:
        """Execute edit discussion flow.

        Raises:
            NotFoundError: If the discussion does not exist
            NotAuthorizedError: If the user is not the author
            ValidationError: If the edit breaks the discussion's rules
        """
        discussion = await self.discussion_service.edit_discussion(
            discussion_id=DiscussionId(UUID(request.discussion_id)),
            user_id=UserId(UUID(request.user_id)),
            title=request.title,
            content=request.content,
            approach=request.approach,
        )
        return await expand_discussion(self.user_service, discussion)
