"""Shared discussion response models and user expansion.

Responses replace user IDs with user summaries. Every ID referenced by an
aggregate is collected first and loaded in a single batch.
"""

from collections.abc import Iterable, Iterator, Mapping
from datetime import datetime

from pydantic import BaseModel

from forum.application.usecase.user.common import UserSummary, to_user_summary
from forum.domain.model import Discussion, Reply, User
from forum.domain.service import UserService
from forum.domain.value import Approach, Category, UserId

Users = Mapping[UserId, User]


class ReplyItem(BaseModel):
    """Reply with its authors and mentions expanded, children included."""

    reply_id: str
    author_id: str
    author: UserSummary | None
    content: str
    likes: list[str]
    dislikes: list[str]
    mentions: list[UserSummary]
    replies: list["ReplyItem"]
    created_at: datetime
    updated_at: datetime


class DiscussionSummary(BaseModel):
    """Discussion fields shared by list items and details."""

    discussion_id: str
    question_id: int | None
    author_id: str
    author: UserSummary | None
    title: str
    content: str
    category: Category
    approach: Approach | None
    tags: list[str]
    likes: list[str]
    dislikes: list[str]
    likes_count: int
    reply_count: int
    mentions: list[UserSummary]
    is_pinned: bool
    views: int
    created_at: datetime
    updated_at: datetime


class DiscussionDetail(DiscussionSummary):
    """Discussion with its whole reply tree."""

    replies: list[ReplyItem]


def collect_user_ids(
    discussions: Iterable[Discussion], include_replies: bool = True
) -> Iterator[UserId]:
    """Yield every user ID the discussions reference (authors and mentions)."""
    for discussion in discussions:
        yield discussion.author_id
        yield from discussion.mentions
        if include_replies:
            for reply in discussion.iter_replies():
                yield reply.author_id
                yield from reply.mentions


async def load_users(
    user_service: UserService,
    discussions: Iterable[Discussion],
    include_replies: bool = True,
) -> Users:
    """Batch-load every user referenced by the discussions."""
    return await user_service.get_users_by_ids(
        collect_user_ids(discussions, include_replies=include_replies)
    )


def _summary(user_id: UserId, users: Users) -> UserSummary | None:
    user = users.get(user_id)
    return to_user_summary(user) if user else None


def _mentions(user_ids: Iterable[UserId], users: Users) -> list[UserSummary]:
    # Mentioned users that no longer exist are dropped
    return [to_user_summary(users[uid]) for uid in user_ids if uid in users]


def to_reply_item(reply: Reply, users: Users) -> ReplyItem:
    return ReplyItem(
        reply_id=str(reply.id),
        author_id=str(reply.author_id),
        author=_summary(reply.author_id, users),
        content=reply.content,
        likes=[str(uid) for uid in reply.likes],
        dislikes=[str(uid) for uid in reply.dislikes],
        mentions=_mentions(reply.mentions, users),
        replies=[to_reply_item(child, users) for child in reply.replies],
        created_at=reply.created_at,
        updated_at=reply.updated_at,
    )


def _summary_fields(discussion: Discussion, users: Users) -> dict:
    return {
        "discussion_id": str(discussion.id),
        "question_id": discussion.question_id,
        "author_id": str(discussion.author_id),
        "author": _summary(discussion.author_id, users),
        "title": discussion.title,
        "content": discussion.content,
        "category": discussion.category,
        "approach": discussion.approach,
        "tags": [tag.root for tag in discussion.tags],
        "likes": [str(uid) for uid in discussion.likes],
        "dislikes": [str(uid) for uid in discussion.dislikes],
        "likes_count": discussion.likes_count,
        "reply_count": discussion.reply_count,
        "mentions": _mentions(discussion.mentions, users),
        "is_pinned": discussion.is_pinned,
        "views": discussion.views,
        "created_at": discussion.created_at,
        "updated_at": discussion.updated_at,
    }


def to_discussion_summary(discussion: Discussion, users: Users) -> DiscussionSummary:
    return DiscussionSummary(**_summary_fields(discussion, users))


def to_discussion_detail(discussion: Discussion, users: Users) -> DiscussionDetail:
    return DiscussionDetail(
        **_summary_fields(discussion, users),
        replies=[to_reply_item(reply, users) for reply in discussion.replies],
    )


async def expand_discussion(
    user_service: UserService, discussion: Discussion
) -> DiscussionDetail:
    """Build a detail response with every user reference expanded."""
    users = await load_users(user_service, [discussion])
    return to_discussion_detail(discussion, users)
