"""Interaction log domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from forum.domain.model import Interaction, Question
from forum.domain.repository import InteractionRepository
from forum.domain.value import AnswerId, InteractionAction, InteractionId, UserId

from .base import Service


class InteractionService(Service):
    """Domain service for recording and purging user interactions."""

    def __init__(self, interaction_repository: InteractionRepository) -> None:
        """Initialize interaction service.

        Args:
            interaction_repository: Interaction repository
        """
        self.interaction_repository = interaction_repository

    async def record_answer(
        self, user_id: UserId, question: Question, answer_id: AnswerId
    ) -> Interaction:
        """Log that a user answered a question.

        The question's tags are copied into the record as they are now.

        Args:
            user_id: Answer author
            question: Answered question
            answer_id: The new answer

        Returns:
            Saved interaction
        """
        interaction = Interaction(
            id=InteractionId(uuid4()),
            user_id=user_id,
            action=InteractionAction.ANSWER,
            question_id=question.id,
            answer_id=answer_id,
            tags=list(question.tags),
            created_at=datetime.now(),
        )
        saved = await self.interaction_repository.save(interaction)
        logfire.info(
            "Interaction recorded",
            interaction_id=str(saved.id),
            action=saved.action.value,
            user_id=str(user_id),
            answer_id=str(answer_id),
        )
        return saved

    async def purge_for_answer(self, answer_id: AnswerId) -> int:
        """Delete every interaction referencing an answer.

        Returns:
            Number of deleted interactions
        """
        deleted = await self.interaction_repository.delete_by_answer(answer_id)
        logfire.info(
            "Interactions purged for answer", answer_id=str(answer_id), count=deleted
        )
        return deleted
