"""Interaction repository interface."""

from abc import ABC, abstractmethod
from typing import List

from forum.domain.model.interaction import Interaction
from forum.domain.value import AnswerId


class InteractionRepository(ABC):
    """Repository for the append-only interaction log."""

    @abstractmethod
    async def save(self, interaction: Interaction) -> Interaction:
        """Append an interaction record.

        Args:
            interaction: The interaction to save

        Returns:
            The saved interaction
        """
        pass

    @abstractmethod
    async def find_by_answer(self, answer_id: AnswerId) -> List[Interaction]:
        """Find all interactions referencing an answer.

        Args:
            answer_id: The answer ID

        Returns:
            List of interactions
        """
        pass

    @abstractmethod
    async def delete_by_answer(self, answer_id: AnswerId) -> int:
        """Delete all interactions referencing an answer.

        Args:
            answer_id: The answer ID

        Returns:
            Number of deleted interactions
        """
        pass
