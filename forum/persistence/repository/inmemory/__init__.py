"""In-memory repository implementations for testing."""

from .discussion import InMemoryDiscussionRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryDiscussionRepository",
    "InMemoryUserRepository",
]
