"""PostgreSQL implementation of Discussion repository."""

from typing import List, Optional

import logfire
from sqlalchemy import desc, func, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import Discussion
from forum.domain.repository.discussion import (
    DiscussionRepository,
    DiscussionSortOrder,
)
from forum.domain.value import Category, DiscussionId
from forum.persistence.mappers import discussion_to_dict, row_to_discussion
from forum.persistence.query import LIKE_ESCAPE, contains_pattern
from forum.persistence.tables import discussions_table

# Columns an update never touches; views is owned by increment_views
_IMMUTABLE_COLUMNS = frozenset(
    {"id", "question_id", "author_id", "created_at", "views", "version"}
)


class PostgresDiscussionRepository(DiscussionRepository):
    """PostgreSQL implementation of DiscussionRepository.

    The reply tree lives in a JSONB column, so each write replaces the
    whole aggregate in one statement.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, discussion_id: DiscussionId) -> Optional[Discussion]:
        """Find a discussion by ID."""
        with logfire.span(
            "discussion_repository.find_by_id", discussion_id=str(discussion_id)
        ):
            stmt = select(discussions_table).where(
                discussions_table.c.id == discussion_id
            )
            result = await self.session.execute(stmt)
            row = result.fetchone()

            if not row:
                return None
            return row_to_discussion(row._asdict())

    async def find_all(
        self,
        sort: DiscussionSortOrder = DiscussionSortOrder.TRENDING,
        category: Optional[Category] = None,
        search: Optional[str] = None,
        limit: int = 50,
    ) -> List[Discussion]:
        """Find general-forum discussions with filtering and sorting."""
        with logfire.span(
            "discussion_repository.find_all",
            sort=sort.value,
            category=category.value if category else None,
            search=search,
            limit=limit,
        ):
            stmt = select(discussions_table).where(
                discussions_table.c.question_id.is_(None)
            )

            if category is not None:
                stmt = stmt.where(discussions_table.c.category == category.value)

            if search:
                pattern = contains_pattern(search)
                searched = (
                    discussions_table.c.title,
                    discussions_table.c.content,
                    discussions_table.c.category,
                )
                stmt = stmt.where(
                    or_(*(c.ilike(pattern, escape=LIKE_ESCAPE) for c in searched))
                )

            newest = desc(discussions_table.c.created_at)
            if sort == DiscussionSortOrder.TRENDING:
                stmt = stmt.order_by(desc(discussions_table.c.views), newest)
            elif sort == DiscussionSortOrder.NEWEST:
                stmt = stmt.order_by(newest)
            elif sort == DiscussionSortOrder.OLDEST:
                stmt = stmt.order_by(discussions_table.c.created_at)
            elif sort == DiscussionSortOrder.MOST_LIKED:
                stmt = stmt.order_by(
                    desc(func.cardinality(discussions_table.c.likes)), newest
                )

            stmt = stmt.limit(limit)

            result = await self.session.execute(stmt)
            discussions = [row_to_discussion(row._asdict()) for row in result]

            logfire.info("Found discussions", count=len(discussions))
            return discussions

    async def find_by_question(
        self, question_id: int, solutions: bool = False
    ) -> List[Discussion]:
        """Find a question's discussions (or solutions), newest first."""
        with logfire.span(
            "discussion_repository.find_by_question",
            question_id=question_id,
            solutions=solutions,
        ):
            is_solution = discussions_table.c.category == Category.SOLUTIONS.value
            stmt = (
                select(discussions_table)
                .where(discussions_table.c.question_id == question_id)
                .where(is_solution if solutions else ~is_solution)
                .order_by(desc(discussions_table.c.created_at))
            )
            result = await self.session.execute(stmt)
            return [row_to_discussion(row._asdict()) for row in result]

    async def count_by_question(self, question_id: int) -> int:
        """Count a question's non-Solutions discussions."""
        stmt = (
            select(func.count())
            .select_from(discussions_table)
            .where(discussions_table.c.question_id == question_id)
            .where(discussions_table.c.category != Category.SOLUTIONS.value)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, discussion: Discussion) -> Discussion:
        """Insert a new discussion."""
        with logfire.span(
            "discussion_repository.save", discussion_id=str(discussion.id)
        ):
            stmt = discussions_table.insert().values(**discussion_to_dict(discussion))
            await self.session.execute(stmt)
            await self.session.flush()
            return discussion

    async def update(
        self, discussion: Discussion, expected_version: int
    ) -> Optional[Discussion]:
        """Compare-and-swap the stored aggregate on its version number."""
        with logfire.span(
            "discussion_repository.update",
            discussion_id=str(discussion.id),
            expected_version=expected_version,
        ):
            values = {
                key: value
                for key, value in discussion_to_dict(discussion).items()
                if key not in _IMMUTABLE_COLUMNS
            }
            stmt = (
                update(discussions_table)
                .where(discussions_table.c.id == discussion.id)
                .where(discussions_table.c.version == expected_version)
                .values(**values, version=expected_version + 1)
                .returning(discussions_table)
            )
            result = await self.session.execute(stmt)
            row = result.fetchone()

            if row is None:
                logfire.warn(
                    "Discussion version mismatch",
                    discussion_id=str(discussion.id),
                    expected_version=expected_version,
                )
                return None

            await self.session.flush()
            return row_to_discussion(row._asdict())

    async def delete(self, discussion_id: DiscussionId) -> bool:
        """Delete a discussion (hard delete, replies included)."""
        stmt = (
            discussions_table.delete()
            .where(discussions_table.c.id == discussion_id)
            .returning(discussions_table.c.id)
        )
        result = await self.session.execute(stmt)
        deleted = result.fetchone() is not None
        await self.session.flush()
        return deleted

    async def increment_views(self, discussion_id: DiscussionId) -> Optional[int]:
        """Atomically increment views by 1."""
        stmt = (
            update(discussions_table)
            .where(discussions_table.c.id == discussion_id)
            .values(views=discussions_table.c.views + 1)
            .returning(discussions_table.c.views)
        )
        result = await self.session.execute(stmt)
        views = result.scalar_one_or_none()
        await self.session.flush()
        return views
