"""Unit tests for the Discussion aggregate and its reply tree."""

from datetime import datetime
from uuid import uuid4

import pytest

from forum.domain.error import NotFoundError, ValidationError
from forum.domain.model import Discussion
from forum.domain.value import Approach, Category, ReactionKind, ReplyId, UserId
from tests.conftest import make_discussion, make_reply


def _three_level_discussion():
    """Discussion -> a -> b -> c, plus a sibling d at the top level."""
    c = make_reply(content="level three")
    b = make_reply(content="level two", replies=[c])
    a = make_reply(content="level one", replies=[b])
    d = make_reply(content="sibling")
    return make_discussion(replies=[a, d]), a, b, c, d


class TestResolve:
    """Tests for reply path resolution."""

    def test_empty_path_is_the_discussion(self):
        discussion = make_discussion()

        assert discussion.resolve(()) is discussion

    def test_full_path_reaches_deep_reply(self):
        # Arrange
        discussion, a, b, c, _ = _three_level_discussion()

        # Act
        node = discussion.resolve((a.id, b.id, c.id))

        # Assert
        assert node.id == c.id
        assert node.content == "level three"

    def test_single_segment_finds_reply_at_any_depth(self):
        """Each segment is searched among all descendants, not just children."""
        discussion, a, _, c, _ = _three_level_discussion()

        assert discussion.resolve((c.id,)).id == c.id
        assert discussion.resolve((a.id, c.id)).id == c.id

    def test_unknown_first_segment_reports_reply(self):
        discussion, *_ = _three_level_discussion()
        missing = ReplyId(uuid4())

        with pytest.raises(NotFoundError) as exc_info:
            discussion.resolve((missing,))

        assert exc_info.value.resource == "Reply"
        assert exc_info.value.identifier == str(missing)

    def test_segment_outside_previous_subtree_reports_nested_reply(self):
        # Arrange - d is a top-level sibling, not beneath a
        discussion, a, _, _, d = _three_level_discussion()

        # Act & Assert
        with pytest.raises(NotFoundError) as exc_info:
            discussion.resolve((a.id, d.id))

        assert exc_info.value.resource == "Nested reply"
        assert exc_info.value.identifier == str(d.id)

    def test_find_reply_and_iteration_cover_whole_tree(self):
        discussion, a, b, c, d = _three_level_discussion()

        assert [r.id for r in discussion.iter_replies()] == [a.id, b.id, c.id, d.id]
        assert discussion.find_reply(b.id) == b
        assert discussion.find_reply(ReplyId(uuid4())) is None


class TestWithReply:
    """Tests for reply insertion."""

    def test_empty_parent_path_appends_top_level(self):
        # Arrange
        discussion, a, _, _, d = _three_level_discussion()
        reply = make_reply(content="new top-level")

        # Act
        updated = discussion.with_reply(reply)

        # Assert
        assert [r.id for r in updated.replies] == [a.id, d.id, reply.id]
        assert updated.reply_count == 3

    def test_nested_parent_path_appends_beneath_target(self):
        discussion, a, b, c, _ = _three_level_discussion()
        reply = make_reply(content="fourth level")

        updated = discussion.with_reply(reply, (a.id, b.id, c.id))

        target = updated.resolve((a.id, b.id, c.id))
        assert [r.id for r in target.replies] == [reply.id]
        # Root-level count is unaffected by nested replies
        assert updated.reply_count == discussion.reply_count

    def test_original_aggregate_is_not_modified(self):
        discussion, a, _, _, _ = _three_level_discussion()

        discussion.with_reply(make_reply(), (a.id,))

        assert len(discussion.find_reply(a.id).replies) == 1

    def test_invalid_parent_path_raises_and_leaves_tree_unchanged(self):
        # Arrange
        discussion, a, *_ = _three_level_discussion()
        before = discussion.model_dump()
        missing = ReplyId(uuid4())

        # Act & Assert
        with pytest.raises(NotFoundError) as exc_info:
            discussion.with_reply(make_reply(), (a.id, missing))

        assert exc_info.value.resource == "Parent reply"
        assert str(exc_info.value) == f"Parent reply not found: {missing}"
        assert discussion.model_dump() == before

    def test_duplicate_reply_id_is_rejected(self):
        discussion, _, b, _, _ = _three_level_discussion()

        with pytest.raises(ValidationError):
            discussion.with_reply(b)


class TestWithReaction:
    """Tests for the like/dislike toggle."""

    def test_like_then_like_again_returns_to_no_reaction(self):
        # Arrange
        discussion = make_discussion()
        user = UserId(uuid4())
        now = datetime.now()

        # Act
        liked = discussion.with_reaction((), user, ReactionKind.LIKE, now)
        unliked = liked.with_reaction((), user, ReactionKind.LIKE, now)

        # Assert
        assert liked.likes == [user]
        assert liked.reaction_of(user) == ReactionKind.LIKE
        assert unliked.likes == []
        assert unliked.reaction_of(user) is None

    def test_switching_moves_user_between_lists(self):
        other = UserId(uuid4())
        discussion = make_discussion(likes=[other])
        user = UserId(uuid4())
        now = datetime.now()

        liked = discussion.with_reaction((), user, ReactionKind.LIKE, now)
        disliked = liked.with_reaction((), user, ReactionKind.DISLIKE, now)

        assert len(liked.likes) == 2
        assert disliked.likes == [other]
        assert disliked.dislikes == [user]
        assert set(disliked.likes).isdisjoint(disliked.dislikes)

    def test_reaction_on_nested_reply_only_touches_that_reply(self):
        discussion, a, b, c, _ = _three_level_discussion()
        user = UserId(uuid4())
        now = datetime.now()

        updated = discussion.with_reaction((a.id, b.id), user, ReactionKind.DISLIKE, now)

        node = updated.find_reply(b.id)
        assert node.dislikes == [user]
        assert node.updated_at == now
        assert node.replies[0].id == c.id
        assert updated.dislikes == []
        assert updated.find_reply(a.id).dislikes == []

    def test_reaction_on_missing_reply_raises(self):
        discussion = make_discussion()

        with pytest.raises(NotFoundError):
            discussion.with_reaction(
                (ReplyId(uuid4()),), UserId(uuid4()), ReactionKind.LIKE, datetime.now()
            )


class TestDiscussionValidation:
    """Tests for aggregate invariants enforced at construction."""

    def test_user_cannot_both_like_and_dislike(self):
        user = UserId(uuid4())

        with pytest.raises(ValueError, match="both like and dislike"):
            Discussion.model_validate(
                {**make_discussion().model_dump(), "likes": [user], "dislikes": [user]}
            )

    def test_duplicate_likes_are_rejected(self):
        user = UserId(uuid4())

        with pytest.raises(ValueError, match="duplicate"):
            make_discussion(likes=[user, user])

    def test_solutions_require_approach(self):
        with pytest.raises(ValueError, match="Approach is required"):
            make_discussion(category=Category.SOLUTIONS)

    def test_approach_only_allowed_for_solutions(self):
        with pytest.raises(ValueError, match="only allowed"):
            make_discussion(category=Category.GENERAL, approach=Approach.LOGIC)

    def test_reply_ids_must_be_unique_across_tree(self):
        reply = make_reply()
        parent = make_reply(replies=[reply])

        with pytest.raises(ValueError, match="unique"):
            make_discussion(replies=[parent, reply])

    def test_replies_survive_json_round_trip(self):
        discussion, *_ = _three_level_discussion()

        restored = Discussion.model_validate_json(discussion.model_dump_json())

        assert restored == discussion
