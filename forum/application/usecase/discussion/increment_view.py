"""Increment view use case."""

from uuid import UUID

from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase
from forum.domain.service import DiscussionService
from forum.domain.value import DiscussionId


class IncrementViewRequest(BaseModel):
    """Increment view request."""

    discussion_id: str


class IncrementViewResponse(BaseModel):
    """Increment view response."""

    success: bool
    views: int


class IncrementViewUseCase(
    BaseUseCase[IncrementViewRequest, IncrementViewResponse]
):
    """Use case for counting a discussion view."""

    def __init__(self, discussion_service: DiscussionService) -> None:
        self.discussion_service = discussion_service

    async def execute(self, request: IncrementViewRequest) -> IncrementViewResponse:
        views = await self.discussion_service.increment_views(
            DiscussionId(UUID(request.discussion_id))
        )
        return IncrementViewResponse(success=True, views=views)
