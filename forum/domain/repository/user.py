"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from forum.domain.model.user import User
from forum.domain.value import UserId, Username


class UserRepository(ABC):
    """Repository for User entity.

    Defines the contract for user persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list[User]:
        """Find several users in one query.

        Args:
            user_ids: User IDs to look up (unknown IDs are skipped)

        Returns:
            The users that exist, in no particular order
        """
        pass

    @abstractmethod
    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by exact username.

        Args:
            username: The username to match

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def search_by_username(self, query: str, limit: int = 5) -> list[User]:
        """Find users whose username contains ``query`` (case-insensitive).

        Args:
            query: Substring to look for
            limit: Maximum number of users to return

        Returns:
            Matching users ordered by username
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass
