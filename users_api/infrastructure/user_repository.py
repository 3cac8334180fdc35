"""SQLAlchemy User Repository: Persistence Gateway implementation for users.

Invariants:
    - Implements core.repository_protocols.UserRepository
    - Every mutating method ends in exactly one commit
    - Every SQLAlchemy failure surfaces as DatabaseError at the call site
    - find_all applies no ordering; callers get whatever the store returns
"""

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from users_api.core.domain_types import UserId
from users_api.infrastructure.database import translate_db_errors
from users_api.models.user import User


class SqlAlchemyUserRepository:
    """UserRepository backed by an AsyncSession scoped to one request."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def find_all(self) -> Sequence[User]:
        with translate_db_errors("find_all"):
            result = await self._db.execute(select(User))
            return list(result.scalars().all())

    async def find_by_id(self, user_id: UserId) -> User | None:
        with translate_db_errors("find_by_id"):
            return await self._db.get(User, user_id)

    async def insert(self, name: str, email: str, age: int) -> User:
        user = User(name=name, email=email, age=age)
        with translate_db_errors("insert"):
            self._db.add(user)
            await self._db.commit()
            await self._db.refresh(user)
        return user

    async def save(self, user: User) -> None:
        """Persist all fields of an already-loaded user in one commit."""
        with translate_db_errors("save"):
            self._db.add(user)
            await self._db.commit()

    async def delete(self, user: User) -> None:
        with translate_db_errors("delete"):
            await self._db.delete(user)
            await self._db.commit()
