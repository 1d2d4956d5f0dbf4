"""Unit tests for the in-memory discussion repository."""

from datetime import timedelta
from uuid import uuid4

import pytest

from forum.domain.value import Approach, Category, DiscussionId
from forum.persistence.repository.inmemory import InMemoryDiscussionRepository
from tests.conftest import make_discussion, make_reply


class TestVersionedUpdate:
    """Unit tests for compare-and-swap updates."""

    @pytest.mark.asyncio
    async def test_update_bumps_version(self):
        # Arrange
        repo = InMemoryDiscussionRepository()
        discussion = await repo.save(make_discussion())

        # Act
        updated = await repo.update(
            discussion.model_copy(update={"title": "Edited"}), expected_version=0
        )

        # Assert
        assert updated is not None
        assert updated.version == 1
        stored = await repo.find_by_id(discussion.id)
        assert stored.title == "Edited"

    @pytest.mark.asyncio
    async def test_stale_version_is_rejected(self):
        """A writer holding an old snapshot must not overwrite a newer one."""
        repo = InMemoryDiscussionRepository()
        discussion = await repo.save(make_discussion())
        first = discussion.model_copy(update={"replies": [make_reply()]})
        second = discussion.model_copy(update={"replies": [make_reply()]})

        assert await repo.update(first, expected_version=0) is not None
        assert await repo.update(second, expected_version=0) is None

        stored = await repo.find_by_id(discussion.id)
        assert stored.replies == first.replies

    @pytest.mark.asyncio
    async def test_update_of_missing_discussion(self):
        repo = InMemoryDiscussionRepository()

        assert await repo.update(make_discussion(), expected_version=0) is None

    @pytest.mark.asyncio
    async def test_views_do_not_touch_version(self):
        repo = InMemoryDiscussionRepository()
        discussion = await repo.save(make_discussion())

        assert await repo.increment_views(discussion.id) == 1
        assert await repo.increment_views(discussion.id) == 2

        stored = await repo.find_by_id(discussion.id)
        assert stored.views == 2
        assert stored.version == 0

    @pytest.mark.asyncio
    async def test_views_on_missing_discussion(self):
        repo = InMemoryDiscussionRepository()

        assert await repo.increment_views(DiscussionId(uuid4())) is None


class TestQuestionQueries:
    """Unit tests for question-scoped lookups."""

    @pytest.mark.asyncio
    async def test_find_by_question_newest_first(self):
        # Arrange
        repo = InMemoryDiscussionRepository()
        older = await repo.save(make_discussion(question_id=3, age=timedelta(days=1)))
        newer = await repo.save(make_discussion(question_id=3))
        await repo.save(
            make_discussion(
                question_id=3, category=Category.SOLUTIONS, approach=Approach.FORMULA
            )
        )

        # Act
        discussions = await repo.find_by_question(3)

        # Assert
        assert [d.id for d in discussions] == [newer.id, older.id]
        assert await repo.count_by_question(3) == 2
        assert len(await repo.find_by_question(3, solutions=True)) == 1
        assert await repo.count_by_question(4) == 0

    @pytest.mark.asyncio
    async def test_question_discussions_not_in_general_listing(self):
        repo = InMemoryDiscussionRepository()
        await repo.save(make_discussion(question_id=3))
        general = await repo.save(make_discussion())

        discussions = await repo.find_all()

        assert [d.id for d in discussions] == [general.id]


class TestDelete:
    """Unit tests for deletion."""

    @pytest.mark.asyncio
    async def test_delete_removes_discussion(self):
        repo = InMemoryDiscussionRepository()
        discussion = await repo.save(make_discussion(replies=[make_reply()]))

        assert await repo.delete(discussion.id) is True
        assert await repo.find_by_id(discussion.id) is None
        assert await repo.delete(discussion.id) is False
