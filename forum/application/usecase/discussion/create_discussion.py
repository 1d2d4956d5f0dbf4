"""Create discussion use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from forum.domain.service import DiscussionService, UserService
from forum.domain.value import Approach, Category, UserId

from .common import DiscussionDetail, expand_discussion


class CreateDiscussionRequest(BaseModel):
    """Create discussion request."""

    author_id: str  # User ID from authenticated user
    title: str
    content: str
    category: Category = Category.GENERAL
    tags: list[str] = Field(default_factory=list)
    approach: Approach | None = None
    question_id: int | None = None


class CreateDiscussionUseCase:
    """Use case for starting a discussion."""

    def __init__(
        self, discussion_service: DiscussionService, user_service: UserService
    ) -> None:
        """Initialize create discussion use case.

        Args:
            discussion_service: Discussion domain service
            user_service: User domain service
        """
        self.discussion_service = discussion_service
        self.user_service = user_service

    async def execute(self, request: CreateDiscussionRequest) -> DiscussionDetail:
        """Execute create discussion flow.

        Steps:
        1. Resolve @mentions in the content
        2. Validate the category/approach combination
        3. Persist the new discussion
        4. Return it with users expanded

        Raises:
            ValidationError: If a Solutions discussion has no approach
            ValueError: If a field violates the model's constraints
        """
        with logfire.span(
            "create_discussion.execute",
            author_id=request.author_id,
            category=request.category.value,
        ):
            discussion = await self.discussion_service.create_discussion(
                author_id=UserId(UUID(request.author_id)),
                title=request.title,
                content=request.content,
                category=request.category,
                tags=request.tags,
                approach=request.approach,
                question_id=request.question_id,
            )
            return await expand_discussion(self.user_service, discussion)
