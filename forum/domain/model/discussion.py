"""Discussion aggregate root.

A discussion owns an embedded tree of replies with unlimited depth. The
tree is persisted together with the discussion, so every change produces
a new aggregate that replaces the stored one.

Nodes are addressed with a reply path: a tuple of reply IDs where the
empty path is the discussion itself. Each path segment is searched among
all descendants of the node reached by the previous segment, so a single
ID finds a reply at any depth.
"""

from collections.abc import Callable, Iterator, Sequence
from datetime import datetime
from typing import Any, Optional, TypeVar, Union

from pydantic import Field, model_validator

from forum.domain.error import NotFoundError, ValidationError
from forum.domain.model.common import DomainModel
from forum.domain.value import (
    Approach,
    Category,
    DiscussionId,
    ReactionKind,
    ReplyId,
    Tag,
    UserId,
)

ReplyPath = tuple[ReplyId, ...]

NodeT = TypeVar("NodeT", bound="ReactableNode")


class ReactableNode(DomainModel):
    """Authored text that users can like, dislike and mention people in.

    Business rules:
    - likes and dislikes never contain duplicates
    - a user appears in at most one of likes/dislikes
    """

    author_id: UserId
    content: str = Field(min_length=1, max_length=10000)
    likes: list[UserId] = Field(default_factory=list)
    dislikes: list[UserId] = Field(default_factory=list)
    mentions: list[UserId] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def validate_reactions(self) -> "ReactableNode":
        """Validate that reaction lists are duplicate-free and disjoint."""
        likes, dislikes = set(self.likes), set(self.dislikes)
        if len(likes) != len(self.likes) or len(dislikes) != len(self.dislikes):
            raise ValueError("Reaction lists must not contain duplicate users")
        if likes & dislikes:
            raise ValueError("A user cannot both like and dislike the same item")
        return self

    def reaction_of(self, user_id: UserId) -> ReactionKind | None:
        """Return the user's current reaction, if any."""
        if user_id in self.likes:
            return ReactionKind.LIKE
        if user_id in self.dislikes:
            return ReactionKind.DISLIKE
        return None

    def toggled(
        self: NodeT, user_id: UserId, kind: ReactionKind, now: datetime
    ) -> NodeT:
        """Return a copy with the user's reaction toggled.

        Reacting again with the same kind removes the reaction; reacting
        with the other kind replaces it.
        """
        reactions = {
            ReactionKind.LIKE: list(self.likes),
            ReactionKind.DISLIKE: list(self.dislikes),
        }
        target = reactions[kind]
        if user_id in target:
            target.remove(user_id)
        else:
            target.append(user_id)
            opposite = reactions[kind.opposite]
            if user_id in opposite:
                opposite.remove(user_id)

        return self.model_copy(
            update={
                "likes": reactions[ReactionKind.LIKE],
                "dislikes": reactions[ReactionKind.DISLIKE],
                "updated_at": now,
            }
        )


class Reply(ReactableNode):
    """Reply to a discussion or to another reply."""

    id: ReplyId
    replies: list["Reply"] = Field(default_factory=list)


def _iter_tree(replies: Sequence[Reply]) -> Iterator[Reply]:
    for reply in replies:
        yield reply
        yield from _iter_tree(reply.replies)


def _find(replies: Sequence[Reply], reply_id: ReplyId) -> Reply | None:
    return next((r for r in _iter_tree(replies) if r.id == reply_id), None)


def _replace(
    replies: Sequence[Reply],
    reply_id: ReplyId,
    transform: Callable[[Reply], Reply],
) -> list[Reply] | None:
    """Copy the branch leading to ``reply_id`` with that node transformed.

    Returns None if the reply is not in this subtree.
    """
    for index, reply in enumerate(replies):
        if reply.id == reply_id:
            updated = transform(reply)
        else:
            children = _replace(reply.replies, reply_id, transform)
            if children is None:
                continue
            updated = reply.model_copy(update={"replies": children})
        return [*replies[:index], updated, *replies[index + 1 :]]
    return None


class Discussion(ReactableNode):
    """Discussion aggregate root.

    Owns its whole reply tree. A discussion with a question_id belongs to
    that question's thread; without one it lives in the general forum.
    Solutions (and only Solutions) state the approach they take.
    """

    id: DiscussionId
    question_id: Optional[int] = None
    title: str = Field(min_length=1, max_length=300)
    category: Category = Category.GENERAL
    approach: Optional[Approach] = None
    tags: list[Tag] = Field(default_factory=list)
    replies: list[Reply] = Field(default_factory=list)
    is_pinned: bool = False
    views: int = Field(default=0, ge=0)
    version: int = Field(default=0, ge=0)

    @model_validator(mode="after")
    def validate_approach(self) -> "Discussion":
        """Validate that approach is present exactly for Solutions."""
        if self.category == Category.SOLUTIONS and self.approach is None:
            raise ValueError("Approach is required for solutions")
        if self.category != Category.SOLUTIONS and self.approach is not None:
            raise ValueError("Approach is only allowed for solutions")
        return self

    @model_validator(mode="after")
    def validate_unique_reply_ids(self) -> "Discussion":
        """Validate that reply IDs are unique across the whole tree."""
        reply_ids = [reply.id for reply in self.iter_replies()]
        if len(reply_ids) != len(set(reply_ids)):
            raise ValueError("Reply IDs must be unique within a discussion")
        return self

    @property
    def likes_count(self) -> int:
        return len(self.likes)

    @property
    def reply_count(self) -> int:
        """Number of top-level replies (nested replies are not counted)."""
        return len(self.replies)

    def iter_replies(self) -> Iterator[Reply]:
        """Iterate over every reply in the tree, depth-first."""
        return _iter_tree(self.replies)

    def find_reply(self, reply_id: ReplyId) -> Reply | None:
        """Find a reply anywhere in the tree."""
        return _find(self.replies, reply_id)

    def resolve(self, path: ReplyPath) -> Union["Discussion", Reply]:
        """Resolve a reply path to the node it addresses.

        Args:
            path: Reply IDs from outermost to innermost; empty for the discussion

        Returns:
            The discussion itself or the addressed reply

        Raises:
            NotFoundError: At the first segment that does not resolve
        """
        node: Discussion | Reply = self
        for depth, reply_id in enumerate(path):
            found = _find(node.replies, reply_id)
            if found is None:
                resource = "Reply" if depth == 0 else "Nested reply"
                raise NotFoundError(resource, str(reply_id))
            node = found
        return node

    def with_reply(self, reply: Reply, parent_path: ReplyPath = ()) -> "Discussion":
        """Return a copy with ``reply`` appended under the addressed node.

        Raises:
            NotFoundError: If the parent path does not resolve
            ValidationError: If the reply ID is already used in this tree
        """
        if self.find_reply(reply.id) is not None:
            raise ValidationError(f"Reply {reply.id} already exists")
        try:
            self.resolve(parent_path)
        except NotFoundError as e:
            raise NotFoundError("Parent reply", e.identifier) from e

        def append(node: Any) -> Any:
            return node.model_copy(update={"replies": [*node.replies, reply]})

        return self._transform(parent_path, append)

    def with_reaction(
        self,
        path: ReplyPath,
        user_id: UserId,
        kind: ReactionKind,
        now: datetime,
    ) -> "Discussion":
        """Return a copy with the user's reaction toggled on the addressed node.

        Raises:
            NotFoundError: If the path does not resolve
        """
        self.resolve(path)
        return self._transform(path, lambda node: node.toggled(user_id, kind, now))

    def revised(self, **changes: Any) -> "Discussion":
        """Return a validated copy with the given fields changed."""
        return Discussion.model_validate({**self.model_dump(), **changes})

    def _transform(
        self, path: ReplyPath, transform: Callable[[Any], Any]
    ) -> "Discussion":
        if not path:
            return transform(self)
        target = self.resolve(path)
        replies = _replace(self.replies, target.id, transform)
        return self.model_copy(update={"replies": replies})
