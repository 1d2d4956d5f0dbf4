"""In-memory user repository for testing."""

from typing import Optional, Sequence

from forum.domain.model.user import User
from forum.domain.repository.user import UserRepository
from forum.domain.value import UserId, Username


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list[User]:
        """Find several users by ID."""
        return [self._users[uid] for uid in dict.fromkeys(user_ids) if uid in self._users]

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by their username."""
        for user in self._users.values():
            if user.username == username:
                return user
        return None

    async def search_by_username(self, query: str, limit: int = 5) -> list[User]:
        """Find users whose username contains the query, case-insensitively."""
        needle = query.lower()
        users = [u for u in self._users.values() if needle in u.username.root.lower()]
        users.sort(key=lambda u: u.username.root)
        return users[:limit]

    async def save(self, user: User) -> User:
        """Save or update a user."""
        self._users[user.id] = user
        return user
