"""Unit tests for ListDiscussionsUseCase."""

from datetime import timedelta
from uuid import uuid4

import pytest

from forum.application.usecase.discussion import (
    ListDiscussionsRequest,
    ListDiscussionsUseCase,
)
from forum.domain.repository import (
    DiscussionRepository,
    DiscussionSortOrder,
    UserRepository,
)
from forum.domain.value import Category, UserId
from tests.conftest import make_discussion, make_reply, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


def _likes(count: int) -> list[UserId]:
    return [UserId(uuid4()) for _ in range(count)]


class TestListDiscussions:
    """Tests for listing the general forum."""

    @pytest.mark.asyncio
    async def test_most_liked_orders_by_like_count(self, unit_env):
        # Arrange
        repo = await unit_env.get(DiscussionRepository)
        use_case = await unit_env.get(ListDiscussionsUseCase)
        three = await repo.save(make_discussion(title="three", likes=_likes(3)))
        five = await repo.save(
            make_discussion(title="five", likes=_likes(5), age=timedelta(days=2))
        )

        # Act
        result = await use_case.execute(
            ListDiscussionsRequest(sort=DiscussionSortOrder.MOST_LIKED)
        )

        # Assert
        assert [d.discussion_id for d in result.discussions] == [
            str(five.id),
            str(three.id),
        ]
        assert [d.likes_count for d in result.discussions] == [5, 3]

    @pytest.mark.asyncio
    async def test_trending_orders_by_views_then_newest(self, unit_env):
        repo = await unit_env.get(DiscussionRepository)
        use_case = await unit_env.get(ListDiscussionsUseCase)
        old_popular = await repo.save(
            make_discussion(title="old", views=10, age=timedelta(days=3))
        )
        new_quiet = await repo.save(make_discussion(title="new", views=1))
        older_quiet = await repo.save(
            make_discussion(title="older", views=1, age=timedelta(days=1))
        )

        result = await use_case.execute(ListDiscussionsRequest())

        assert [d.discussion_id for d in result.discussions] == [
            str(old_popular.id),
            str(new_quiet.id),
            str(older_quiet.id),
        ]

    @pytest.mark.asyncio
    async def test_newest_and_oldest(self, unit_env):
        repo = await unit_env.get(DiscussionRepository)
        use_case = await unit_env.get(ListDiscussionsUseCase)
        old = await repo.save(make_discussion(age=timedelta(hours=5)))
        new = await repo.save(make_discussion())

        newest = await use_case.execute(
            ListDiscussionsRequest(sort=DiscussionSortOrder.NEWEST)
        )
        oldest = await use_case.execute(
            ListDiscussionsRequest(sort=DiscussionSortOrder.OLDEST)
        )

        assert [d.discussion_id for d in newest.discussions] == [str(new.id), str(old.id)]
        assert [d.discussion_id for d in oldest.discussions] == [str(old.id), str(new.id)]

    @pytest.mark.asyncio
    async def test_category_and_search_filters(self, unit_env):
        # Arrange
        repo = await unit_env.get(DiscussionRepository)
        use_case = await unit_env.get(ListDiscussionsUseCase)
        exam = await repo.save(
            make_discussion(title="Mock test tips", category=Category.EXAMS)
        )
        await repo.save(make_discussion(title="Career advice", category=Category.CAREER))
        study = await repo.save(
            make_discussion(
                title="Schedule", content="My MOCK test plan", category=Category.STUDY
            )
        )

        # Act
        by_category = await use_case.execute(
            ListDiscussionsRequest(category=Category.EXAMS)
        )
        by_search = await use_case.execute(
            ListDiscussionsRequest(search="  mock ", sort=DiscussionSortOrder.NEWEST)
        )
        by_category_name = await use_case.execute(ListDiscussionsRequest(search="car"))

        # Assert
        assert [d.discussion_id for d in by_category.discussions] == [str(exam.id)]
        assert {d.discussion_id for d in by_search.discussions} == {
            str(exam.id),
            str(study.id),
        }
        assert [d.category for d in by_category_name.discussions] == [Category.CAREER]

    @pytest.mark.asyncio
    async def test_question_discussions_are_excluded(self, unit_env):
        repo = await unit_env.get(DiscussionRepository)
        use_case = await unit_env.get(ListDiscussionsUseCase)
        await repo.save(make_discussion(question_id=7))

        result = await use_case.execute(ListDiscussionsRequest())

        assert result.discussions == []

    @pytest.mark.asyncio
    async def test_capped_at_fifty(self, unit_env):
        repo = await unit_env.get(DiscussionRepository)
        use_case = await unit_env.get(ListDiscussionsUseCase)
        for _ in range(55):
            await repo.save(make_discussion())

        result = await use_case.execute(ListDiscussionsRequest())

        assert len(result.discussions) == 50

    @pytest.mark.asyncio
    async def test_items_expand_author_and_count_top_level_replies(self, unit_env):
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        repo = await unit_env.get(DiscussionRepository)
        use_case = await unit_env.get(ListDiscussionsUseCase)
        author = await user_repo.save(make_user("author"))
        nested = make_reply(replies=[make_reply()])
        await repo.save(
            make_discussion(author_id=author.id, replies=[nested, make_reply()])
        )

        # Act
        result = await use_case.execute(ListDiscussionsRequest())

        # Assert
        item = result.discussions[0]
        assert item.author.username == "author"
        assert item.reply_count == 2
        assert not hasattr(item, "replies")
