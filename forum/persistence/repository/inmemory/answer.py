"""In-memory answer repository for testing."""

from typing import Optional

from forum.domain.model.answer import Answer
from forum.domain.repository.answer import AnswerRepository
from forum.domain.value import (
    AnswerId,
    AnswerSortOrder,
    QuestionId,
    UserId,
    VoteDirection,
)

from .database import InMemoryDatabase


class InMemoryAnswerRepository(AnswerRepository):
    """In-memory implementation of AnswerRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self.database = database

    async def find_by_id(
        self, answer_id: AnswerId, for_update: bool = False
    ) -> Optional[Answer]:
        """Find an answer by ID (locking is a no-op)."""
        return self.database.answers.get(answer_id)

    async def find_by_question(
        self,
        question_id: QuestionId,
        sort: Optional[AnswerSortOrder] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Answer]:
        """Find answers with sorting and pagination."""
        # Dict order is insertion order; sorted() is stable so ties keep it
        answers = [
            a for a in self.database.answers.values() if a.question_id == question_id
        ]

        if sort == AnswerSortOrder.HIGHEST_UPVOTES:
            answers = sorted(answers, key=lambda a: a.upvote_count, reverse=True)
        elif sort == AnswerSortOrder.LOWEST_UPVOTES:
            answers = sorted(answers, key=lambda a: a.upvote_count)
        elif sort == AnswerSortOrder.RECENT:
            answers = sorted(answers, key=lambda a: a.created_at, reverse=True)
        elif sort == AnswerSortOrder.OLD:
            answers = sorted(answers, key=lambda a: a.created_at)

        return answers[offset : offset + limit]

    async def count_by_question(self, question_id: QuestionId) -> int:
        """Count answers to a question."""
        return sum(
            1 for a in self.database.answers.values() if a.question_id == question_id
        )

    async def save(self, answer: Answer) -> Answer:
        """Save an answer."""
        self.database.answers[answer.id] = answer
        return answer

    async def delete(self, answer_id: AnswerId) -> bool:
        """Delete an answer."""
        return self.database.answers.pop(answer_id, None) is not None

    async def add_voter(
        self, answer_id: AnswerId, user_id: UserId, direction: VoteDirection
    ) -> None:
        """Add a voter to a vote set unless already present."""
        answer = self.database.answers.get(answer_id)
        if not answer:
            return
        field = "upvotes" if direction == VoteDirection.UP else "downvotes"
        voters = getattr(answer, field)
        if user_id in voters:
            return
        self.database.answers[answer_id] = answer.model_copy(
            update={field: [*voters, user_id]}
        )

    async def remove_voter(
        self, answer_id: AnswerId, user_id: UserId, direction: VoteDirection
    ) -> None:
        """Remove a voter from a vote set."""
        answer = self.database.answers.get(answer_id)
        if not answer:
            return
        field = "upvotes" if direction == VoteDirection.UP else "downvotes"
        self.database.answers[answer_id] = answer.model_copy(
            update={field: [v for v in getattr(answer, field) if v != user_id]}
        )
