"""PostgreSQL implementation of User repository."""

from typing import Optional, Sequence

from sqlalchemy import Select, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import User
from forum.domain.repository import UserRepository
from forum.domain.value import UserId, Username
from forum.persistence.mappers import row_to_user, user_to_dict
from forum.persistence.query import LIKE_ESCAPE, contains_pattern
from forum.persistence.tables import users_table

# Columns the identity system may change on an existing user
_MUTABLE_COLUMNS = ("username", "avatar_url", "updated_at")


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def _one(self, stmt: Select) -> Optional[User]:
        row = (await self.session.execute(stmt)).mappings().first()
        return row_to_user(dict(row)) if row else None

    async def _all(self, stmt: Select) -> list[User]:
        rows = (await self.session.execute(stmt)).mappings().all()
        return [row_to_user(dict(row)) for row in rows]

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        return await self._one(select(users_table).where(users_table.c.id == user_id))

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list[User]:
        if not user_ids:
            return []
        return await self._all(
            select(users_table).where(users_table.c.id.in_(list(user_ids)))
        )

    async def find_by_username(self, username: Username) -> Optional[User]:
        # Exact match; the unique index makes this a single lookup
        return await self._one(
            select(users_table).where(users_table.c.username == username.root)
        )

    async def search_by_username(self, query: str, limit: int = 5) -> list[User]:
        """Substring search with LIKE wildcards in the query taken literally."""
        pattern = contains_pattern(query)
        return await self._all(
            select(users_table)
            .where(users_table.c.username.ilike(pattern, escape=LIKE_ESCAPE))
            .order_by(users_table.c.username)
            .limit(limit)
        )

    async def save(self, user: User) -> User:
        """Insert a user, or refresh the profile fields of an existing one."""
        stmt = insert(users_table).values(**user_to_dict(user))
        stmt = stmt.on_conflict_do_update(
            index_elements=[users_table.c.id],
            set_={column: stmt.excluded[column] for column in _MUTABLE_COLUMNS},
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return user
