"""Answer repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from forum.domain.model.answer import Answer
from forum.domain.value import AnswerId, AnswerSortOrder, QuestionId, UserId, VoteDirection


class AnswerRepository(ABC):
    """Repository for Answer entity.

    Defines the contract for answer persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(
        self, answer_id: AnswerId, for_update: bool = False
    ) -> Optional[Answer]:
        """Find an answer by ID.

        Args:
            answer_id: The answer's unique identifier
            for_update: Lock the answer until the transaction ends

        Returns:
            The answer if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_question(
        self,
        question_id: QuestionId,
        sort: Optional[AnswerSortOrder] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Answer]:
        """Find answers to a question with sorting and pagination.

        Args:
            question_id: The question ID
            sort: Sort order (None keeps insertion order)
            limit: Maximum number of answers to return
            offset: Number of answers to skip

        Returns:
            List of answers
        """
        pass

    @abstractmethod
    async def count_by_question(self, question_id: QuestionId) -> int:
        """Count answers to a question.

        Args:
            question_id: The question ID

        Returns:
            Number of answers
        """
        pass

    @abstractmethod
    async def save(self, answer: Answer) -> Answer:
        """Save an answer (create).

        Args:
            answer: The answer to save

        Returns:
            The saved answer
        """
        pass

    @abstractmethod
    async def delete(self, answer_id: AnswerId) -> bool:
        """Delete an answer (hard delete).

        Args:
            answer_id: The answer ID to delete

        Returns:
            True if an answer was deleted
        """
        pass

    @abstractmethod
    async def add_voter(
        self, answer_id: AnswerId, user_id: UserId, direction: VoteDirection
    ) -> None:
        """Add a voter to the upvotes or downvotes set (no-op if present).

        Args:
            answer_id: The answer ID
            user_id: The voter
            direction: Which set to add to
        """
        pass

    @abstractmethod
    async def remove_voter(
        self, answer_id: AnswerId, user_id: UserId, direction: VoteDirection
    ) -> None:
        """Remove a voter from the upvotes or downvotes set.

        Args:
            answer_id: The answer ID
            user_id: The voter
            direction: Which set to remove from
        """
        pass
