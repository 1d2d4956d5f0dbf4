"""Test configuration and builders."""

from datetime import datetime, timedelta
from uuid import uuid4

from forum.domain.model import Discussion, Reply, User
from forum.domain.value import (
    Approach,
    Category,
    DiscussionId,
    ReplyId,
    UserId,
    Username,
)


def make_user(username: str) -> User:
    """Build a user with a fresh ID."""
    return User(id=UserId(uuid4()), username=Username(username))


def make_reply(
    author_id: UserId | None = None,
    content: str = "A reply",
    replies: list[Reply] | None = None,
) -> Reply:
    """Build a reply with a fresh ID."""
    return Reply(
        id=ReplyId(uuid4()),
        author_id=author_id or UserId(uuid4()),
        content=content,
        replies=replies or [],
    )


def make_discussion(
    author_id: UserId | None = None,
    title: str = "How do I integrate by parts?",
    content: str = "Stuck on the second step.",
    category: Category = Category.GENERAL,
    approach: Approach | None = None,
    question_id: int | None = None,
    replies: list[Reply] | None = None,
    likes: list[UserId] | None = None,
    views: int = 0,
    age: timedelta = timedelta(0),
) -> Discussion:
    """Build a discussion; ``age`` backdates created_at for ordering tests."""
    created_at = datetime.now() - age
    return Discussion(
        id=DiscussionId(uuid4()),
        author_id=author_id or UserId(uuid4()),
        title=title,
        content=content,
        category=category,
        approach=approach,
        question_id=question_id,
        replies=replies or [],
        likes=likes or [],
        views=views,
        created_at=created_at,
        updated_at=created_at,
    )
