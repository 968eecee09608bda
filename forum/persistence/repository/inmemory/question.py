"""In-memory question repository for testing."""

from typing import Optional

from forum.domain.model.question import Question
from forum.domain.repository.question import QuestionRepository
from forum.domain.value import AnswerId, QuestionId

from .database import InMemoryDatabase


class InMemoryQuestionRepository(QuestionRepository):
    """In-memory implementation of QuestionRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self.database = database

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID."""
        return self.database.questions.get(question_id)

    async def save(self, question: Question) -> Question:
        """Save or update a question."""
        self.database.questions[question.id] = question
        return question

    async def append_answer(self, question_id: QuestionId, answer_id: AnswerId) -> None:
        """Append an answer ID to the question's answer list."""
        question = self.database.questions.get(question_id)
        if question:
            self.database.questions[question_id] = question.model_copy(
                update={"answers": [*question.answers, answer_id]}
            )

    async def remove_answer(self, question_id: QuestionId, answer_id: AnswerId) -> None:
        """Remove an answer ID from the question's answer list."""
        question = self.database.questions.get(question_id)
        if question:
            self.database.questions[question_id] = question.model_copy(
                update={"answers": [a for a in question.answers if a != answer_id]}
            )
