"""PostgreSQL implementation of Question repository."""

from typing import Optional

from sqlalchemy import cast, func, select, update
from sqlalchemy.dialects.postgresql import UUID, insert
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import Question
from forum.domain.repository import QuestionRepository
from forum.domain.value import AnswerId, QuestionId
from forum.persistence.mappers import question_to_dict, row_to_question
from forum.persistence.tables import questions_table


class PostgresQuestionRepository(QuestionRepository):
    """PostgreSQL implementation of QuestionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID."""
        stmt = select(questions_table).where(questions_table.c.id == question_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_question(dict(row)) if row else None

    async def save(self, question: Question) -> Question:
        """Insert a question, or overwrite an existing one."""
        values = question_to_dict(question)
        stmt = insert(questions_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[questions_table.c.id],
            set_={k: v for k, v in values.items() if k != "id"},
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return question

    async def append_answer(self, question_id: QuestionId, answer_id: AnswerId) -> None:
        """Append an answer ID to the question's answer list."""
        stmt = (
            update(questions_table)
            .where(questions_table.c.id == question_id)
            .values(
                answer_ids=func.array_append(
                    questions_table.c.answer_ids, cast(answer_id, UUID)
                )
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def remove_answer(self, question_id: QuestionId, answer_id: AnswerId) -> None:
        """Remove an answer ID from the question's answer list."""
        stmt = (
            update(questions_table)
            .where(questions_table.c.id == question_id)
            .values(
                answer_ids=func.array_remove(
                    questions_table.c.answer_ids, cast(answer_id, UUID)
                )
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()
