"""PostgreSQL repository implementations."""

from forum.persistence.repository.discussion import PostgresDiscussionRepository
from forum.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresDiscussionRepository",
    "PostgresUserRepository",
]
