"""Domain value objects for the forum."""

from forum.domain.value.identifiers import DiscussionId, ReplyId, UserId
from forum.domain.value.types import (
    Approach,
    Category,
    ReactionKind,
    Tag,
    Username,
)

__all__ = [
    # Identifiers
    "UserId",
    "DiscussionId",
    "ReplyId",
    # Types
    "Approach",
    "Category",
    "ReactionKind",
    "Tag",
    "Username",
]
