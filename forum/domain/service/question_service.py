"""Question domain service."""

import logfire

from forum.domain.error import NotFoundError
from forum.domain.model import Question
from forum.domain.repository import QuestionRepository
from forum.domain.value import AnswerId, QuestionId

from .base import Service


class QuestionService(Service):
    """Domain service for question operations."""

    def __init__(self, question_repository: QuestionRepository) -> None:
        """Initialize question service.

        Args:
            question_repository: Question repository
        """
        self.question_repository = question_repository

    async def get_by_id(self, question_id: QuestionId) -> Question:
        """Get a question by ID.

        Raises:
            NotFoundError: If question not found
        """
        with logfire.span("question_service.get_by_id", question_id=str(question_id)):
            question = await self.question_repository.find_by_id(question_id)
            if not question:
                logfire.warn("Question not found", question_id=str(question_id))
                raise NotFoundError("Question", str(question_id))
            return question

    async def attach_answer(self, question_id: QuestionId, answer_id: AnswerId) -> None:
        """Append an answer to the question's answer list."""
        await self.question_repository.append_answer(question_id, answer_id)
        logfire.info(
            "Answer attached to question",
            question_id=str(question_id),
            answer_id=str(answer_id),
        )

    async def detach_answer(self, question_id: QuestionId, answer_id: AnswerId) -> None:
        """Remove an answer from the question's answer list."""
        await self.question_repository.remove_answer(question_id, answer_id)
        logfire.info(
            "Answer detached from question",
            question_id=str(question_id),
            answer_id=str(answer_id),
        )
