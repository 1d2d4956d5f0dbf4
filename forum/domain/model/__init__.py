"""Domain model entities for the forum."""

from forum.domain.model.discussion import Discussion, Reply, ReplyPath
from forum.domain.model.user import User

__all__ = [
    "Discussion",
    "Reply",
    "ReplyPath",
    "User",
]
