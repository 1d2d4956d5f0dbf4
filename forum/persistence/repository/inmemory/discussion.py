"""In-memory discussion repository for testing."""

from typing import Optional

from forum.domain.model.discussion import Discussion
from forum.domain.repository.discussion import (
    DiscussionRepository,
    DiscussionSortOrder,
)
from forum.domain.value import Category, DiscussionId


def _matches(discussion: Discussion, needle: str) -> bool:
    return any(
        needle in text.lower()
        for text in (discussion.title, discussion.content, discussion.category.value)
    )


class InMemoryDiscussionRepository(DiscussionRepository):
    """In-memory implementation of DiscussionRepository for testing."""

    def __init__(self) -> None:
        self._discussions: dict[DiscussionId, Discussion] = {}

    async def find_by_id(self, discussion_id: DiscussionId) -> Optional[Discussion]:
        """Find a discussion by ID."""
        return self._discussions.get(discussion_id)

    async def find_all(
        self,
        sort: DiscussionSortOrder = DiscussionSortOrder.TRENDING,
        category: Optional[Category] = None,
        search: Optional[str] = None,
        limit: int = 50,
    ) -> list[Discussion]:
        """Find general-forum discussions with filtering and sorting."""
        discussions = [d for d in self._discussions.values() if d.question_id is None]

        if category is not None:
            discussions = [d for d in discussions if d.category == category]

        if search:
            needle = search.lower()
            discussions = [d for d in discussions if _matches(d, needle)]

        # Newest first, then a stable sort on the primary key keeps that tie-break
        discussions.sort(key=lambda d: d.created_at, reverse=True)
        if sort == DiscussionSortOrder.TRENDING:
            discussions.sort(key=lambda d: d.views, reverse=True)
        elif sort == DiscussionSortOrder.OLDEST:
            discussions.reverse()
        elif sort == DiscussionSortOrder.MOST_LIKED:
            discussions.sort(key=lambda d: d.likes_count, reverse=True)

        return discussions[:limit]

    async def find_by_question(
        self, question_id: int, solutions: bool = False
    ) -> list[Discussion]:
        """Find a question's discussions (or solutions), newest first."""
        discussions = [
            d
            for d in self._discussions.values()
            if d.question_id == question_id
            and (d.category == Category.SOLUTIONS) == solutions
        ]
        discussions.sort(key=lambda d: d.created_at, reverse=True)
        return discussions

    async def count_by_question(self, question_id: int) -> int:
        """Count a question's non-Solutions discussions."""
        return len(await self.find_by_question(question_id, solutions=False))

    async def save(self, discussion: Discussion) -> Discussion:
        """Insert a discussion."""
        self._discussions[discussion.id] = discussion
        return discussion

    async def update(
        self, discussion: Discussion, expected_version: int
    ) -> Optional[Discussion]:
        """Replace a discussion if its stored version still matches."""
        stored = self._discussions.get(discussion.id)
        if stored is None or stored.version != expected_version:
            return None

        updated = discussion.model_copy(
            update={"views": stored.views, "version": expected_version + 1}
        )
        self._discussions[discussion.id] = updated
        return updated

    async def delete(self, discussion_id: DiscussionId) -> bool:
        """Delete a discussion."""
        return self._discussions.pop(discussion_id, None) is not None

    async def increment_views(self, discussion_id: DiscussionId) -> Optional[int]:
        """Increment views by 1."""
        discussion = self._discussions.get(discussion_id)
        if discussion is None:
            return None

        # Views bypass the version check
        views = discussion.views + 1
        self._discussions[discussion_id] = discussion.model_copy(
            update={"views": views}
        )
        return views
