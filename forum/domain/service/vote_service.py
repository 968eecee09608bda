"""Vote domain service.

Votes live on the answer as two sets of voter ids. Every vote request is
one of three transitions, decided from what is stored on the answer:

    already voted this way   -> toggle off
    voted the opposite way   -> switch (undo + redo, so deltas double)
    not voted                -> new vote
"""

from dataclasses import dataclass
from typing import Optional

import logfire

from forum.config import ReputationSettings
from forum.domain.error import NotFoundError
from forum.domain.model import Answer
from forum.domain.repository import AnswerRepository
from forum.domain.value import (
    AnswerId,
    ReputationChange,
    UserId,
    VoteDirection,
    VoteState,
)

from .base import Service
from .user_service import UserService


@dataclass(frozen=True)
class VotePlan:
    """Answer mutation and reputation deltas for one vote transition."""

    remove_from: Optional[VoteDirection]
    add_to: Optional[VoteDirection]
    change: ReputationChange


@dataclass
class VoteOutcome:
    """Result of applying a vote."""

    answer: Answer
    previous_state: VoteState
    change: ReputationChange


def _opposite(direction: VoteDirection) -> VoteDirection:
    return VoteDirection.DOWN if direction == VoteDirection.UP else VoteDirection.UP


def plan_vote(
    direction: VoteDirection, state: VoteState, settings: ReputationSettings
) -> VotePlan:
    """Decide the transition for a vote in ``direction`` given ``state``.

    Args:
        direction: Requested vote direction
        state: Voter's current vote on the answer
        settings: Reputation rewards

    Returns:
        Plan describing set membership changes and reputation deltas
    """
    sign = 1 if direction == VoteDirection.UP else -1
    received = settings.vote_received
    cast = settings.vote_cast

    same = state.has_upvoted if direction == VoteDirection.UP else state.has_downvoted
    opposite = (
        state.has_downvoted if direction == VoteDirection.UP else state.has_upvoted
    )

    if same:
        return VotePlan(
            remove_from=direction,
            add_to=None,
            change=ReputationChange(
                author_delta=-sign * received, voter_delta=-sign * cast
            ),
        )
    if opposite:
        return VotePlan(
            remove_from=_opposite(direction),
            add_to=direction,
            change=ReputationChange(
                author_delta=2 * sign * received, voter_delta=2 * sign * cast
            ),
        )
    return VotePlan(
        remove_from=None,
        add_to=direction,
        change=ReputationChange(author_delta=sign * received, voter_delta=sign * cast),
    )


class VoteService(Service):
    """Domain service for answer votes."""

    def __init__(
        self,
        answer_repository: AnswerRepository,
        user_service: UserService,
        reputation_settings: ReputationSettings,
    ) -> None:
        """Initialize vote service.

        Args:
            answer_repository: Answer repository
            user_service: User domain service
            reputation_settings: Reputation rewards
        """
        self.answer_repository = answer_repository
        self.user_service = user_service
        self.reputation_settings = reputation_settings

    async def upvote_answer(
        self,
        answer_id: AnswerId,
        user_id: UserId,
        claimed_state: VoteState | None = None,
    ) -> VoteOutcome:
        """Upvote an answer, or toggle an existing upvote off.

        Args:
            answer_id: Answer ID
            user_id: Voter
            claimed_state: Vote state as the caller believes it to be

        Returns:
            Vote outcome with the updated answer

        Raises:
            NotFoundError: If the answer does not exist
        """
        with logfire.span(
            "vote_service.upvote_answer", answer_id=str(answer_id), user_id=str(user_id)
        ):
            return await self._vote(answer_id, user_id, VoteDirection.UP, claimed_state)

    async def downvote_answer(
        self,
        answer_id: AnswerId,
        user_id: UserId,
        claimed_state: VoteState | None = None,
    ) -> VoteOutcome:
        """Downvote an answer, or toggle an existing downvote off.

        Args:
            answer_id: Answer ID
            user_id: Voter
            claimed_state: Vote state as the caller believes it to be

        Returns:
            Vote outcome with the updated answer

        Raises:
            NotFoundError: If the answer does not exist
        """
        with logfire.span(
            "vote_service.downvote_answer",
            answer_id=str(answer_id),
            user_id=str(user_id),
        ):
            return await self._vote(
                answer_id, user_id, VoteDirection.DOWN, claimed_state
            )

    async def _vote(
        self,
        answer_id: AnswerId,
        user_id: UserId,
        direction: VoteDirection,
        claimed_state: VoteState | None,
    ) -> VoteOutcome:
        # Lock the answer so concurrent votes serialize on it
        answer = await self.answer_repository.find_by_id(answer_id, for_update=True)
        if not answer:
            logfire.warn("Vote on non-existent answer", answer_id=str(answer_id))
            raise NotFoundError("Answer", str(answer_id))

        state = answer.vote_state_for(user_id)
        if claimed_state is not None and claimed_state != state:
            logfire.warn(
                "Caller vote state differs from stored state",
                answer_id=str(answer_id),
                user_id=str(user_id),
                claimed_upvoted=claimed_state.has_upvoted,
                claimed_downvoted=claimed_state.has_downvoted,
                stored_upvoted=state.has_upvoted,
                stored_downvoted=state.has_downvoted,
            )

        plan = plan_vote(direction, state, self.reputation_settings)

        if plan.remove_from is not None:
            await self.answer_repository.remove_voter(
                answer_id, user_id, plan.remove_from
            )
        if plan.add_to is not None:
            await self.answer_repository.add_voter(answer_id, user_id, plan.add_to)

        deltas = {user_id: plan.change.voter_delta}
        deltas[answer.author_id] = (
            deltas.get(answer.author_id, 0) + plan.change.author_delta
        )
        await self.user_service.adjust_reputations(deltas)

        updated = await self.answer_repository.find_by_id(answer_id)

        logfire.info(
            "Answer vote applied",
            answer_id=str(answer_id),
            user_id=str(user_id),
            direction=direction.value,
            removed_from=plan.remove_from.value if plan.remove_from else None,
            added_to=plan.add_to.value if plan.add_to else None,
            author_delta=plan.change.author_delta,
            voter_delta=plan.change.voter_delta,
        )
        return VoteOutcome(
            answer=updated or answer,
            previous_state=state,
            change=plan.change,
        )
