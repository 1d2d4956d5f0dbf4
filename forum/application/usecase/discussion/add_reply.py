"""Add reply use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from forum.domain.service import DiscussionService, UserService
from forum.domain.value import DiscussionId, ReplyId, UserId

from .common import DiscussionDetail, expand_discussion


class AddReplyRequest(BaseModel):
    """Add reply request."""

    discussion_id: str
    author_id: str  # User ID from authenticated user
    content: str
    parent_path: list[str] = Field(default_factory=list)  # Empty for top level


class AddReplyUseCase:
    """Use case for replying to a discussion or to any reply in its tree."""

    def __init__(
        self, discussion_service: DiscussionService, user_service: UserService
    ) -> None:
        """Initialize add reply use case.

        Args:
            discussion_service: Discussion domain service
            user_service: User domain service
        """
        self.discussion_service = discussion_service
        self.user_service = user_service

    async def execute(self, request: AddReplyRequest) -> DiscussionDetail:
        """Execute add reply flow.

        Returns:
            The updated discussion with users expanded

        Raises:
            NotFoundError: If the discussion or parent reply does not exist
        """
        discussion = await self.discussion_service.add_reply(
            discussion_id=DiscussionId(UUID(request.discussion_id)),
            content=request.content,
            author_id=UserId(UUID(request.author_id)),
            parent_path=tuple(ReplyId(UUID(rid)) for rid in request.parent_path),
        )
        return await expand_discussion(self.user_service, discussion)
