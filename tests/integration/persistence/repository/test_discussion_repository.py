"""Integration tests for PostgresDiscussionRepository.

These tests need a migrated PostgreSQL database at DATABASE__URL.
"""

import os

import pytest

from forum.domain.repository import DiscussionRepository
from tests.conftest import make_discussion, make_reply
from tests.harness import create_env_fixture

pytestmark = pytest.mark.skipif(
    "DATABASE__URL" not in os.environ, reason="PostgreSQL not configured"
)

integration_env = create_env_fixture(unmock={"persistence"})


class TestDiscussionRepositoryIntegration:
    """Integration tests for the JSONB reply tree and versioned updates."""

    @pytest.mark.asyncio
    async def test_reply_tree_round_trips(self, integration_env):
        # Arrange
        repo = await integration_env.get(DiscussionRepository)
        nested = make_reply(content="nested")
        discussion = make_discussion(replies=[make_reply(replies=[nested])])

        # Act
        await repo.save(discussion)
        loaded = await repo.find_by_id(discussion.id)

        # Assert
        assert loaded is not None
        assert loaded.replies[0].replies[0].id == nested.id
        assert loaded.replies[0].replies[0].content == "nested"

    @pytest.mark.asyncio
    async def test_update_is_compare_and_swap(self, integration_env):
        repo = await integration_env.get(DiscussionRepository)
        discussion = await repo.save(make_discussion())

        first = await repo.update(
            discussion.model_copy(update={"title": "First"}), expected_version=0
        )
        stale = await repo.update(
            discussion.model_copy(update={"title": "Stale"}), expected_version=0
        )

        assert first is not None
        assert first.version == 1
        assert stale is None
        assert (await repo.find_by_id(discussion.id)).title == "First"

    @pytest.mark.asyncio
    async def test_increment_views_keeps_version(self, integration_env):
        repo = await integration_env.get(DiscussionRepository)
        discussion = await repo.save(make_discussion())

        await repo.increment_views(discussion.id)
        views = await repo.increment_views(discussion.id)

        loaded = await repo.find_by_id(discussion.id)
        assert views == 2
        assert loaded.views == 2
        assert loaded.version == 0
