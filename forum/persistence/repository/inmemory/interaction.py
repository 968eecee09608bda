"""In-memory interaction repository for testing."""

from forum.domain.model.interaction import Interaction
from forum.domain.repository.interaction import InteractionRepository
from forum.domain.value import AnswerId

from .database import InMemoryDatabase


class InMemoryInteractionRepository(InteractionRepository):
    """In-memory implementation of InteractionRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self.database = database

    async def save(self, interaction: Interaction) -> Interaction:
        """Append an interaction."""
        self.database.interactions.append(interaction)
        return interaction

    async def find_by_answer(self, answer_id: AnswerId) -> list[Interaction]:
        """Find all interactions referencing an answer."""
        return [i for i in self.database.interactions if i.answer_id == answer_id]

    async def delete_by_answer(self, answer_id: AnswerId) -> int:
        """Delete all interactions referencing an answer."""
        kept = [i for i in self.database.interactions if i.answer_id != answer_id]
        deleted = len(self.database.interactions) - len(kept)
        self.database.interactions = kept
        return deleted
