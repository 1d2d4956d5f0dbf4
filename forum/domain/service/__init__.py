"""Domain services."""

from .base import Service
from .discussion_service import DiscussionService
from .jwt_service import JWTService
from .mention_service import MentionService, find_mentioned_usernames
from .user_service import UserService

__all__ = [
    "DiscussionService",
    "JWTService",
    "MentionService",
    "Service",
    "UserService",
    "find_mentioned_usernames",
]
