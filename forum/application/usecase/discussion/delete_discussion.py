"""Delete discussion use case."""

from uuid import UUID

from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase
from forum.domain.service import DiscussionService
from forum.domain.value import DiscussionId, UserId


class DeleteDiscussionRequest(BaseModel):
    """Delete discussion request."""

    discussion_id: str
    user_id: str  # User ID from authenticated user


class DeleteDiscussionResponse(BaseModel):
    """Delete discussion response."""

    message: str


class DeleteDiscussionUseCase(
    BaseUseCase[DeleteDiscussionRequest, DeleteDiscussionResponse]
):
    """Use case for the author deleting their discussion and its replies."""

    def __init__(self, discussion_service: DiscussionService) -> None:
        self.discussion_service = discussion_service

    async def execute(self, request: DeleteDiscussionRequest) -> DeleteDiscussionResponse:
        """Execute delete discussion flow.

        Raises:
            NotFoundError: If the discussion does not exist
            NotAuthorizedError: If the user is not the author
        """
        await self.discussion_service.delete_discussion(
            discussion_id=DiscussionId(UUID(request.discussion_id)),
            user_id=UserId(UUID(request.user_id)),
        )
        return DeleteDiscussionResponse(message="Discussion deleted successfully")
