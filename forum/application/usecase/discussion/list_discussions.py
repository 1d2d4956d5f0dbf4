"""List discussions use case."""

import logfire
from pydantic import BaseModel

from forum.domain.repository import DiscussionSortOrder
from forum.domain.service import DiscussionService, UserService
from forum.domain.value import Category

from .common import DiscussionSummary, load_users, to_discussion_summary


class ListDiscussionsRequest(BaseModel):
    """List discussions request."""

    sort: DiscussionSortOrder = DiscussionSortOrder.TRENDING
    category: Category | None = None
    search: str | None = None


class ListDiscussionsResponse(BaseModel):
    """List discussions response."""

    discussions: list[DiscussionSummary]


class ListDiscussionsUseCase:
    """Use case for browsing the general forum."""

    def __init__(
        self, discussion_service: DiscussionService, user_service: UserService
    ) -> None:
        """Initialize list discussions use case.

        Args:
            discussion_service: Discussion domain service
            user_service: User domain service
        """
        self.discussion_service = discussion_service
        self.user_service = user_service

    async def execute(self, request: ListDiscussionsRequest) -> ListDiscussionsResponse:
        """Execute list discussions flow.

        List items carry the author and mentions but not the reply tree.

        Args:
            request: Sort order and optional filters

        Returns:
            Matching discussions, at most the configured list limit
        """
        with logfire.span(
            "list_discussions.execute",
            sort=request.sort.value,
            category=request.category.value if request.category else None,
            search=request.search,
        ):
            discussions = await self.discussion_service.list_discussions(
                sort=request.sort,
                category=request.category,
                search=request.search,
            )

            # Batch query to avoid N+1 user lookups
            users = await load_users(
                self.user_service, discussions, include_replies=False
            )

            logfire.info("Discussions listed", count=len(discussions))
            return ListDiscussionsResponse(
                discussions=[to_discussion_summary(d, users) for d in discussions]
            )
