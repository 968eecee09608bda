"""Question repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from forum.domain.model.question import Question
from forum.domain.value import AnswerId, QuestionId


class QuestionRepository(ABC):
    """Repository for Question aggregate."""

    @abstractmethod
    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID.

        Args:
            question_id: The question's unique identifier

        Returns:
            The question if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, question: Question) -> Question:
        """Save a question (create or update).

        Args:
            question: The question to save

        Returns:
            The saved question
        """
        pass

    @abstractmethod
    async def append_answer(self, question_id: QuestionId, answer_id: AnswerId) -> None:
        """Append an answer ID to the question's answer list.

        Args:
            question_id: The question ID
            answer_id: The answer ID to append
        """
        pass

    @abstractmethod
    async def remove_answer(self, question_id: QuestionId, answer_id: AnswerId) -> None:
        """Remove every occurrence of an answer ID from the question's answer list.

        Args:
            question_id: The question ID
            answer_id: The answer ID to remove
        """
        pass
