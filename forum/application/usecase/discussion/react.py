"""Like / dislike use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from forum.domain.service import DiscussionService, UserService
from forum.domain.value import DiscussionId, ReactionKind, ReplyId, UserId

from .common import DiscussionDetail, expand_discussion


class ReactRequest(BaseModel):
    """Reaction request.

    An empty path targets the discussion itself.
    """

    discussion_id: str
    user_id: str  # User ID from authenticated user
    kind: ReactionKind
    path: list[str] = Field(default_factory=list)


class ReactUseCase:
    """Use case for toggling a like or dislike on any node of a discussion."""

    def __init__(
        self, discussion_service: DiscussionService, user_service: UserService
    ) -> None:
        self.discussion_service = discussion_service
        self.user_service = user_service

    async def execute(self, request: ReactRequest) -> DiscussionDetail:
        """Execute reaction flow.

        Raises:
            NotFoundError: If the discussion or addressed reply does not exist
        """
        discussion = await self.discussion_service.set_reaction(
            discussion_id=DiscussionId(UUID(request.discussion_id)),
            path=tuple(ReplyId(UUID(rid)) for rid in request.path),
            user_id=UserId(UUID(request.user_id)),
            kind=request.kind,
        )
        return await expand_discussion(self.user_service, discussion)
