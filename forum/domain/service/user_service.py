"""User domain service."""

from typing import Iterable

import logfire

from forum.domain.model import User
from forum.domain.repository import UserRepository
from forum.domain.value import UserId

from .base import Service


class UserService(Service):
    """Domain service for reading forum users."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_users_by_ids(self, user_ids: Iterable[UserId]) -> dict[UserId, User]:
        """Batch-load users, keyed by ID.

        Unknown IDs are simply absent from the result.

        Args:
            user_ids: IDs to load (duplicates allowed)

        Returns:
            Mapping of user ID to user
        """
        unique_ids = list(dict.fromkeys(user_ids))
        if not unique_ids:
            return {}

        with logfire.span("user_service.get_users_by_ids", count=len(unique_ids)):
            users = await self.user_repository.find_by_ids(unique_ids)
            found = {user.id: user for user in users}
            if len(found) != len(unique_ids):
                logfire.debug(
                    "Some referenced users were not found",
                    requested=len(unique_ids),
                    found=len(found),
                )
            return found

    async def search_users(self, query: str, limit: int = 5) -> list[User]:
        """Search users by username substring for mention autocomplete.

        Args:
            query: Case-insensitive substring; blank returns nothing
            limit: Maximum number of users

        Returns:
            Matching users ordered by username
        """
        query = query.strip()
        if not query:
            return []

        with logfire.span("user_service.search_users", query=query, limit=limit):
            users = await self.user_repository.search_by_username(query, limit=limit)
            logfire.info("Users searched", query=query, count=len(users))
            return users
