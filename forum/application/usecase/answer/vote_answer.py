"""Upvote and downvote answer use cases."""

from uuid import UUID

from pydantic import BaseModel

from forum.application.usecase.base import (
    HANDLED_ERRORS,
    ActionResponse,
    TransactionalUseCase,
    describe_failure,
)
from forum.domain.repository import UnitOfWork
from forum.domain.service import PathRevalidator, VoteOutcome, VoteService
from forum.domain.value import AnswerId, UserId, VoteState

from .common import AnswerItem, answer_to_item


class AnswerVoteRequest(BaseModel):
    """Answer vote request.

    ``has_upvoted``/``has_downvoted`` are what the client believes; the
    stored votes on the answer decide the transition.
    """

    answer_id: UUID
    user_id: UUID
    has_upvoted: bool | None = None
    has_downvoted: bool | None = None
    path: str  # Page to revalidate

    @property
    def claimed_state(self) -> VoteState | None:
        if self.has_upvoted is None and self.has_downvoted is None:
            return None
        return VoteState(
            has_upvoted=bool(self.has_upvoted),
            has_downvoted=bool(self.has_downvoted),
        )


class AnswerVoteResponse(ActionResponse):
    """Answer vote response."""

    answer: AnswerItem | None = None
    has_upvoted: bool = False
    has_downvoted: bool = False
    author_reputation_delta: int = 0
    voter_reputation_delta: int = 0


def _vote_response(outcome: VoteOutcome, user_id: UserId) -> AnswerVoteResponse:
    state = outcome.answer.vote_state_for(user_id)
    return AnswerVoteResponse(
        answer=answer_to_item(outcome.answer),
        has_upvoted=state.has_upvoted,
        has_downvoted=state.has_downvoted,
        author_reputation_delta=outcome.change.author_delta,
        voter_reputation_delta=outcome.change.voter_delta,
    )


class UpvoteAnswerUseCase(TransactionalUseCase):
    """Use case for upvoting an answer (or taking an upvote back)."""

    def __init__(
        self,
        vote_service: VoteService,
        unit_of_work: UnitOfWork,
        path_revalidator: PathRevalidator,
    ) -> None:
        """Initialize upvote answer use case.

        Args:
            vote_service: Vote domain service
            unit_of_work: Transaction boundary
            path_revalidator: Cache revalidation port
        """
        super().__init__(unit_of_work, path_revalidator)
        self.vote_service = vote_service

    async def execute(self, request: AnswerVoteRequest) -> AnswerVoteResponse:
        """Execute upvote flow.

        Args:
            request: Answer vote request

        Returns:
            Response with the updated answer and applied reputation deltas
        """
        user_id = UserId(request.user_id)
        try:
            outcome = await self.run_in_transaction(
                lambda: self.vote_service.upvote_answer(
                    AnswerId(request.answer_id), user_id, request.claimed_state
                )
            )
        except HANDLED_ERRORS as e:
            return AnswerVoteResponse(
                success=False, error=describe_failure("upvote_answer", e)
            )

        await self.revalidate(request.path)
        return _vote_response(outcome, user_id)


class DownvoteAnswerUseCase(TransactionalUseCase):
    """Use case for downvoting an answer (or taking a downvote back)."""

    def __init__(
        self,
        vote_service: VoteService,
        unit_of_work: UnitOfWork,
        path_revalidator: PathRevalidator,
    ) -> None:
        """Initialize downvote answer use case.

        Args:
            vote_service: Vote domain service
            unit_of_work: Transaction boundary
            path_revalidator: Cache revalidation port
        """
        super().__init__(unit_of_work, path_revalidator)
        self.vote_service = vote_service

    async def execute(self, request: AnswerVoteRequest) -> AnswerVoteResponse:
        """Execute downvote flow.

        Args:
            request: Answer vote request

        Returns:
            Response with the updated answer and applied reputation deltas
        """
        user_id = UserId(request.user_id)
        try:
            outcome = await self.run_in_transaction(
                lambda: self.vote_service.downvote_answer(
                    AnswerId(request.answer_id), user_id, request.claimed_state
                )
            )
        except HANDLED_ERRORS as e:
            return AnswerVoteResponse(
                success=False, error=describe_failure("downvote_answer", e)
            )

        await self.revalidate(request.path)
        return _vote_response(outcome, user_id)
