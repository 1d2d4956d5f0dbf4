"""Discussion repository interface."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Optional

from forum.domain.model.discussion import Discussion
from forum.domain.value import Category, DiscussionId


class DiscussionSortOrder(str, Enum):
    """Sort order for listing general-forum discussions."""

    TRENDING = "trending"  # Most viewed first, newest breaks ties
    NEWEST = "newest"
    OLDEST = "oldest"
    MOST_LIKED = "most-liked"  # Most likes first, newest breaks ties


class DiscussionRepository(ABC):
    """Repository for the Discussion aggregate.

    The aggregate is stored whole, replies included. Writes to an existing
    discussion are guarded by its version number.
    """

    @abstractmethod
    async def find_by_id(self, discussion_id: DiscussionId) -> Optional[Discussion]:
        """Find a discussion by ID.

        Args:
            discussion_id: The discussion's unique identifier

        Returns:
            The discussion if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        sort: DiscussionSortOrder = DiscussionSortOrder.TRENDING,
        category: Optional[Category] = None,
        search: Optional[str] = None,
        limit: int = 50,
    ) -> List[Discussion]:
        """Find general-forum discussions (those without a question).

        Args:
            sort: Sort order
            category: Only return discussions in this category
            search: Case-insensitive substring matched against
                title, content or category
            limit: Maximum number of discussions to return

        Returns:
            Matching discussions in the requested order
        """
        pass

    @abstractmethod
    async def find_by_question(
        self, question_id: int, solutions: bool = False
    ) -> List[Discussion]:
        """Find discussions attached to a question, newest first.

        Args:
            question_id: External question ID
            solutions: Return only Solutions if True, everything else if False

        Returns:
            Matching discussions
        """
        pass

    @abstractmethod
    async def count_by_question(self, question_id: int) -> int:
        """Count non-Solutions discussions attached to a question."""
        pass

    @abstractmethod
    async def save(self, discussion: Discussion) -> Discussion:
        """Insert a new discussion.

        Args:
            discussion: The discussion to insert

        Returns:
            The stored discussion
        """
        pass

    @abstractmethod
    async def update(
        self, discussion: Discussion, expected_version: int
    ) -> Optional[Discussion]:
        """Replace a stored discussion if it is still at ``expected_version``.

        The view counter is not overwritten. The stored version becomes
        ``expected_version + 1``.

        Args:
            discussion: New state of the aggregate
            expected_version: Version the change was computed from

        Returns:
            The stored discussion, or None if the version no longer matches
            (or the discussion was deleted)
        """
        pass

    @abstractmethod
    async def delete(self, discussion_id: DiscussionId) -> bool:
        """Delete a discussion and its reply tree.

        Returns:
            True if a discussion was deleted
        """
        pass

    @abstractmethod
    async def increment_views(self, discussion_id: DiscussionId) -> Optional[int]:
        """Atomically increment the view counter by 1.

        Returns:
            The new view count, or None if the discussion does not exist
        """
        pass
