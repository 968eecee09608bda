"""PostgreSQL implementation of Interaction repository."""

from typing import List

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import Interaction
from forum.domain.repository import InteractionRepository
from forum.domain.value import AnswerId
from forum.persistence.mappers import interaction_to_dict, row_to_interaction
from forum.persistence.tables import interactions_table


class PostgresInteractionRepository(InteractionRepository):
    """PostgreSQL implementation of InteractionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def save(self, interaction: Interaction) -> Interaction:
        """Append an interaction record."""
        stmt = interactions_table.insert().values(**interaction_to_dict(interaction))
        await self.session.execute(stmt)
        await self.session.flush()
        return interaction

    async def find_by_answer(self, answer_id: AnswerId) -> List[Interaction]:
        """Find all interactions referencing an answer."""
        stmt = (
            select(interactions_table)
            .where(interactions_table.c.answer_id == answer_id)
            .order_by(interactions_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_interaction(dict(row)) for row in result.mappings().all()]

    async def delete_by_answer(self, answer_id: AnswerId) -> int:
        """Delete all interactions referencing an answer."""
        stmt = delete(interactions_table).where(
            interactions_table.c.answer_id == answer_id
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount or 0
