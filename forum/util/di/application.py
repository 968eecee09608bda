"""Application layer DI providers."""

from dishka import Scope, provide

from forum.application.usecase.answer import (
    CreateAnswerUseCase,
    DeleteAnswerUseCase,
    DownvoteAnswerUseCase,
    GetAnswersUseCase,
    UpvoteAnswerUseCase,
)
from forum.config import PaginationSettings
from forum.domain.repository import UnitOfWork
from forum.domain.service import AnswerService, PathRevalidator, VoteService
from forum.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    @provide
    def get_create_answer_use_case(
        self,
        answer_service: AnswerService,
        unit_of_work: UnitOfWork,
        path_revalidator: PathRevalidator,
    ) -> CreateAnswerUseCase:
        """Provide create answer use case."""
        return CreateAnswerUseCase(
            answer_service=answer_service,
            unit_of_work=unit_of_work,
            path_revalidator=path_revalidator,
        )

    @provide
    def get_get_answers_use_case(
        self,
        answer_service: AnswerService,
        pagination: PaginationSettings,
        path_revalidator: PathRevalidator,
    ) -> GetAnswersUseCase:
        """Provide get answers use case."""
        return GetAnswersUseCase(
            answer_service=answer_service,
            pagination=pagination,
            path_revalidator=path_revalidator,
        )

    @provide
    def get_upvote_answer_use_case(
        self,
        vote_service: VoteService,
        unit_of_work: UnitOfWork,
        path_revalidator: PathRevalidator,
    ) -> UpvoteAnswerUseCase:
        """Provide upvote answer use case."""
        return UpvoteAnswerUseCase(
            vote_service=vote_service,
            unit_of_work=unit_of_work,
            path_revalidator=path_revalidator,
        )

    @provide
    def get_downvote_answer_use_case(
        self,
        vote_service: VoteService,
        unit_of_work: UnitOfWork,
        path_revalidator: PathRevalidator,
    ) -> DownvoteAnswerUseCase:
        """Provide downvote answer use case."""
        return DownvoteAnswerUseCase(
            vote_service=vote_service,
            unit_of_work=unit_of_work,
            path_revalidator=path_revalidator,
        )

    @provide
    def get_delete_answer_use_case(
        self,
        answer_service: AnswerService,
        unit_of_work: UnitOfWork,
        path_revalidator: PathRevalidator,
    ) -> DeleteAnswerUseCase:
        """Provide delete answer use case."""
        return DeleteAnswerUseCase(
            answer_service=answer_service,
            unit_of_work=unit_of_work,
            path_revalidator=path_revalidator,
        )
