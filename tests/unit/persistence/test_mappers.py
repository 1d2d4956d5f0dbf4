"""Unit tests for row/model mappers."""

from datetime import datetime
from uuid import uuid4

from forum.domain.value import Approach, Category
from forum.persistence.mappers import discussion_to_dict, row_to_discussion
from tests.conftest import make_discussion, make_reply


class TestDiscussionMapping:
    """Unit tests for discussion rows."""

    def test_reply_tree_stored_as_json(self):
        # Arrange
        child = make_reply(content="child")
        discussion = make_discussion(
            category=Category.SOLUTIONS,
            approach=Approach.STEPWISE,
            replies=[make_reply(content="parent", replies=[child])],
        )

        # Act
        data = discussion_to_dict(discussion)

        # Assert
        assert data["category"] == "Solutions"
        assert data["approach"] == "Stepwise"
        assert "replies" in data
        parent = data["replies"][0]
        assert parent["content"] == "parent"
        assert parent["id"] == str(discussion.replies[0].id)
        assert parent["replies"][0]["id"] == str(child.id)
        assert isinstance(parent["created_at"], str)

    def test_row_with_string_ids_and_nested_replies(self):
        # Arrange
        author_id = uuid4()
        liker = uuid4()
        now = datetime.now()
        row = {
            "id": str(uuid4()),
            "question_id": None,
            "author_id": str(author_id),
            "title": "Title",
            "content": "Content",
            "category": "General",
            "approach": None,
            "tags": ["algebra"],
            "likes": [str(liker)],
            "dislikes": [],
            "mentions": None,
            "replies": [
                {
                    "id": str(uuid4()),
                    "author_id": str(uuid4()),
                    "content": "outer",
                    "likes": [],
                    "dislikes": [],
                    "mentions": [],
                    "replies": [
                        {
                            "id": str(uuid4()),
                            "author_id": str(author_id),
                            "content": "inner",
                            "created_at": now.isoformat(),
                            "updated_at": now.isoformat(),
                        }
                    ],
                    "created_at": now.isoformat(),
                    "updated_at": now.isoformat(),
                }
            ],
            "is_pinned": False,
            "views": 4,
            "version": 2,
            "created_at": now,
            "updated_at": now,
        }

        # Act
        discussion = row_to_discussion(row)

        # Assert
        assert discussion.author_id == author_id
        assert discussion.likes_count == 1
        assert discussion.mentions == []
        assert [t.root for t in discussion.tags] == ["algebra"]
        assert discussion.replies[0].replies[0].content == "inner"
        assert discussion.replies[0].replies[0].author_id == discussion.author_id
        assert discussion.views == 4
        assert discussion.version == 2
