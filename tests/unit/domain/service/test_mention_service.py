"""Unit tests for mention extraction and resolution."""

import pytest

from forum.domain.repository import UserRepository
from forum.domain.service import MentionService, find_mentioned_usernames
from tests.conftest import make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestFindMentionedUsernames:
    """Tests for the pure @username scan."""

    def test_returns_distinct_names_in_first_occurrence_order(self):
        assert find_mentioned_usernames("@bob hi @alice, @bob again") == [
            "bob",
            "alice",
        ]

    def test_no_mentions(self):
        assert find_mentioned_usernames("nothing to see here") == []

    def test_only_ascii_word_characters_are_matched(self):
        assert find_mentioned_usernames("@josé and @ann-marie") == ["jos", "ann"]


class TestResolveMentions:
    """Tests for MentionService.resolve_mentions."""

    @pytest.mark.asyncio
    async def test_known_users_resolved_unknown_ignored(self, unit_env):
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        mention_service = await unit_env.get(MentionService)
        alice = await user_repo.save(make_user("alice"))
        bob = await user_repo.save(make_user("bob999"))

        # Act
        mentions = await mention_service.resolve_mentions(
            "hey @alice and @bob999, see @nouser"
        )

        # Assert
        assert mentions == [alice.id, bob.id]

    @pytest.mark.asyncio
    async def test_repeated_mentions_resolve_once(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        mention_service = await unit_env.get(MentionService)
        alice = await user_repo.save(make_user("alice"))

        mentions = await mention_service.resolve_mentions("@alice @alice @alice")

        assert mentions == [alice.id]

    @pytest.mark.asyncio
    async def test_overlong_names_are_skipped(self, unit_env):
        mention_service = await unit_env.get(MentionService)

        assert await mention_service.resolve_mentions("@" + "a" * 51) == []
