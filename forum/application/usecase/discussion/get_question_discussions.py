"""Question-scoped discussion use cases."""

from pydantic import BaseModel

from forum.domain.service import DiscussionService, UserService

from .common import DiscussionDetail, load_users, to_discussion_detail


class GetQuestionDiscussionsRequest(BaseModel):
    """Get question discussions request."""

    question_id: int
    solutions: bool = False  # Solutions only, or everything but Solutions


class GetQuestionDiscussionsResponse(BaseModel):
    """Get question discussions response."""

    discussions: list[DiscussionDetail]


class GetQuestionDiscussionsUseCase:
    """Use case for a question's discussion thread or its solutions."""

    def __init__(
        self, discussion_service: DiscussionService, user_service: UserService
    ) -> None:
        self.discussion_service = discussion_service
        self.user_service = user_service

    async def execute(
        self, request: GetQuestionDiscussionsRequest
    ) -> GetQuestionDiscussionsResponse:
        """Execute get question discussions flow.

        Args:
            request: Question ID and whether to return solutions

        Returns:
            Full discussions, newest first
        """
        discussions = await self.discussion_service.get_question_discussions(
            request.question_id, solutions=request.solutions
        )
        users = await load_users(self.user_service, discussions)
        return GetQuestionDiscussionsResponse(
            discussions=[to_discussion_detail(d, users) for d in discussions]
        )


class CountQuestionDiscussionsRequest(BaseModel):
    """Count question discussions request."""

    question_id: int


class CountQuestionDiscussionsResponse(BaseModel):
    """Count question discussions response."""

    count: int


class CountQuestionDiscussionsUseCase:
    """Use case for counting a question's (non-solution) discussions."""

    def __init__(self, discussion_service: DiscussionService) -> None:
        self.discussion_service = discussion_service

    async def execute(
        self, request: CountQuestionDiscussionsRequest
    ) -> CountQuestionDiscussionsResponse:
        count = await self.discussion_service.count_question_discussions(
            request.question_id
        )
        return CountQuestionDiscussionsResponse(count=count)
