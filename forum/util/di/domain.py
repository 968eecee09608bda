"""Domain layer DI providers."""

from dishka import Scope, provide

from forum.config import ReputationSettings
from forum.domain.repository import (
    AnswerRepository,
    InteractionRepository,
    QuestionRepository,
    UserRepository,
)
from forum.domain.service import (
    AnswerService,
    InteractionService,
    QuestionService,
    UserService,
    VoteService,
)
from forum.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_question_service(
        self, question_repository: QuestionRepository
    ) -> QuestionService:
        """Provide question domain service."""
        return QuestionService(question_repository=question_repository)

    @provide
    def get_interaction_service(
        self, interaction_repository: InteractionRepository
    ) -> InteractionService:
        """Provide interaction domain service."""
        return InteractionService(interaction_repository=interaction_repository)

    @provide
    def get_answer_service(
        self,
        answer_repository: AnswerRepository,
        question_service: QuestionService,
        user_service: UserService,
        interaction_service: InteractionService,
        reputation_settings: ReputationSettings,
    ) -> AnswerService:
        """Provide answer domain service."""
        return AnswerService(
            answer_repository=answer_repository,
            question_service=question_service,
            user_service=user_service,
            interaction_service=interaction_service,
            reputation_settings=reputation_settings,
        )

    @provide
    def get_vote_service(
        self,
        answer_repository: AnswerRepository,
        user_service: UserService,
        reputation_settings: ReputationSettings,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            answer_repository=answer_repository,
            user_service=user_service,
            reputation_settings=reputation_settings,
        )
