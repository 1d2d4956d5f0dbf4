"""Repository interfaces for the forum domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from forum.domain.repository.discussion import DiscussionRepository, DiscussionSortOrder
from forum.domain.repository.user import UserRepository

__all__ = [
    "DiscussionRepository",
    "DiscussionSortOrder",
    "UserRepository",
]
