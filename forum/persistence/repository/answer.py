"""PostgreSQL implementation of Answer repository."""

from typing import List, Optional

from sqlalchemy import any_, asc, cast, delete, desc, func, not_, select, update
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import Answer
from forum.domain.repository import AnswerRepository
from forum.domain.value import (
    AnswerId,
    AnswerSortOrder,
    QuestionId,
    UserId,
    VoteDirection,
)
from forum.persistence.mappers import answer_to_dict, row_to_answer
from forum.persistence.tables import answers_table


class PostgresAnswerRepository(AnswerRepository):
    """PostgreSQL implementation of AnswerRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @staticmethod
    def _voters_column(direction: VoteDirection):
        if direction == VoteDirection.UP:
            return answers_table.c.upvotes
        return answers_table.c.downvotes

    async def find_by_id(
        self, answer_id: AnswerId, for_update: bool = False
    ) -> Optional[Answer]:
        """Find an answer by ID, optionally locking its row."""
        stmt = select(answers_table).where(answers_table.c.id == answer_id)
        if for_update:
            stmt = stmt.with_for_update()
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_answer(dict(row)) if row else None

    async def find_by_question(
        self,
        question_id: QuestionId,
        sort: Optional[AnswerSortOrder] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Answer]:
        """Find answers to a question with sorting and pagination."""
        stmt = select(answers_table).where(answers_table.c.question_id == question_id)

        upvote_count = func.cardinality(answers_table.c.upvotes)
        if sort == AnswerSortOrder.HIGHEST_UPVOTES:
            stmt = stmt.order_by(desc(upvote_count))
        elif sort == AnswerSortOrder.LOWEST_UPVOTES:
            stmt = stmt.order_by(asc(upvote_count))
        elif sort == AnswerSortOrder.RECENT:
            stmt = stmt.order_by(desc(answers_table.c.created_at))

        # Ties (and the unsorted listing) fall back to insertion order
        stmt = stmt.order_by(asc(answers_table.c.created_at), asc(answers_table.c.id))
        stmt = stmt.limit(limit).offset(offset)

        result = await self.session.execute(stmt)
        return [row_to_answer(dict(row)) for row in result.mappings().all()]

    async def count_by_question(self, question_id: QuestionId) -> int:
        """Count answers to a question."""
        stmt = (
            select(func.count())
            .select_from(answers_table)
            .where(answers_table.c.question_id == question_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, answer: Answer) -> Answer:
        """Insert an answer."""
        stmt = answers_table.insert().values(**answer_to_dict(answer))
        await self.session.execute(stmt)
        await self.session.flush()
        return answer

    async def delete(self, answer_id: AnswerId) -> bool:
        """Delete an answer (hard delete)."""
        stmt = delete(answers_table).where(answers_table.c.id == answer_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def add_voter(
        self, answer_id: AnswerId, user_id: UserId, direction: VoteDirection
    ) -> None:
        """Add a voter to a vote set unless already present."""
        column = self._voters_column(direction)
        voter = cast(user_id, UUID)
        stmt = (
            update(answers_table)
            .where(answers_table.c.id == answer_id)
            .where(not_(voter == any_(column)))
            .values({column.name: func.array_append(column, voter)})
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def remove_voter(
        self, answer_id: AnswerId, user_id: UserId, direction: VoteDirection
    ) -> None:
        """Remove a voter from a vote set."""
        column = self._voters_column(direction)
        voter = cast(user_id, UUID)
        stmt = (
            update(answers_table)
            .where(answers_table.c.id == answer_id)
            .values({column.name: func.array_remove(column, voter)})
        )
        await self.session.execute(stmt)
        await self.session.flush()
