"""PostgreSQL implementation of User repository."""

from typing import List, Optional, Sequence

from sqlalchemy import select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import User
from forum.domain.repository import UserRepository
from forum.domain.value import UserId
from forum.persistence.mappers import row_to_user, user_to_dict
from forum.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """Users stored in the ``users`` table."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        stmt = select(users_table).where(users_table.c.id == user_id)
        row = (await self.session.execute(stmt)).mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> List[User]:
        """Load several users in one round trip; unknown ids are skipped."""
        if not user_ids:
            return []
        stmt = select(users_table).where(users_table.c.id.in_(list(user_ids)))
        rows = (await self.session.execute(stmt)).mappings().all()
        return [row_to_user(dict(row)) for row in rows]

    async def save(self, user: User) -> User:
        """Insert a user, or overwrite the profile of an existing one."""
        values = user_to_dict(user)
        stmt = insert(users_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[users_table.c.id],
            set_={k: v for k, v in values.items() if k != "id"},
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return user

    async def adjust_reputation(self, user_id: UserId, delta: int) -> None:
        """Apply ``reputation = reputation + delta`` in the database."""
        stmt = (
            update(users_table)
            .where(users_table.c.id == user_id)
            .values(reputation=users_table.c.reputation + delta)
        )
        await self.session.execute(stmt)
        await self.session.flush()
