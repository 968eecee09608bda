"""Unit tests for VoteService."""

import random
from uuid import uuid4

import pytest

from forum.config import ReputationSettings
from forum.domain.error import NotFoundError
from forum.domain.model import User
from forum.domain.repository import AnswerRepository, QuestionRepository, UserRepository
from forum.domain.service import UserService, VoteService, plan_vote
from forum.domain.value import AnswerId, UserId, VoteDirection, VoteState
from forum.persistence.repository.inmemory import (
    InMemoryDatabase,
    InMemoryUserRepository,
)
from tests.conftest import make_answer, make_question, make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()

UP = VoteDirection.UP
DOWN = VoteDirection.DOWN
NONE = VoteState()
UPVOTED = VoteState(has_upvoted=True)
DOWNVOTED = VoteState(has_downvoted=True)


async def seed(unit_env, existing_vote: VoteDirection | None = None):
    """Store an author, a voter, a question and an answer; return them.

    ``existing_vote`` pre-records the voter's vote on the answer.
    """
    user_repo = await unit_env.get(UserRepository)
    question_repo = await unit_env.get(QuestionRepository)
    answer_repo = await unit_env.get(AnswerRepository)

    author = await user_repo.save(make_user("Author"))
    voter = await user_repo.save(make_user("Voter"))
    question = await question_repo.save(make_question(author.id))
    answer = await answer_repo.save(
        make_answer(
            question.id,
            author.id,
            upvotes=[voter.id] if existing_vote == UP else None,
            downvotes=[voter.id] if existing_vote == DOWN else None,
        )
    )
    return author, voter, answer


async def reputation(unit_env, user: User) -> int:
    user_repo = await unit_env.get(UserRepository)
    return (await user_repo.find_by_id(user.id)).reputation


class TestPlanVote:
    """Transition table for plan_vote."""

    @pytest.mark.parametrize(
        "direction,state,remove_from,add_to,author_delta,voter_delta",
        [
            (UP, NONE, None, UP, 10, 2),
            (UP, UPVOTED, UP, None, -10, -2),
            (UP, DOWNVOTED, DOWN, UP, 20, 4),
            (DOWN, NONE, None, DOWN, -10, -2),
            (DOWN, DOWNVOTED, DOWN, None, 10, 2),
            (DOWN, UPVOTED, UP, DOWN, -20, -4),
        ],
    )
    def test_transitions(
        self, direction, state, remove_from, add_to, author_delta, voter_delta
    ):
        plan = plan_vote(direction, state, ReputationSettings())

        assert plan.remove_from == remove_from
        assert plan.add_to == add_to
        assert plan.change.author_delta == author_delta
        assert plan.change.voter_delta == voter_delta

    def test_uses_configured_amounts(self):
        settings = ReputationSettings(vote_received=5, vote_cast=1)

        plan = plan_vote(UP, DOWNVOTED, settings)

        assert plan.change.author_delta == 10
        assert plan.change.voter_delta == 2


class TestUpvoteAnswer:
    """Tests for upvote_answer."""

    @pytest.mark.asyncio
    async def test_new_upvote_adds_voter_and_rewards_both(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        author, voter, answer = await seed(unit_env)

        outcome = await vote_service.upvote_answer(answer.id, voter.id)

        assert outcome.answer.upvotes == [voter.id]
        assert outcome.answer.downvotes == []
        assert outcome.previous_state == NONE
        assert await reputation(unit_env, author) == 10
        assert await reputation(unit_env, voter) == 2

    @pytest.mark.asyncio
    async def test_second_upvote_toggles_off(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        author, voter, answer = await seed(unit_env, UP)

        outcome = await vote_service.upvote_answer(answer.id, voter.id)

        assert outcome.answer.upvotes == []
        assert await reputation(unit_env, author) == -10
        assert await reputation(unit_env, voter) == -2

    @pytest.mark.asyncio
    async def test_upvote_switches_existing_downvote(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        author, voter, answer = await seed(unit_env, DOWN)

        outcome = await vote_service.upvote_answer(answer.id, voter.id)

        assert outcome.answer.upvotes == [voter.id]
        assert outcome.answer.downvotes == []
        assert outcome.change.author_delta == 20
        assert await reputation(unit_env, author) == 20
        assert await reputation(unit_env, voter) == 4

    @pytest.mark.asyncio
    async def test_upvote_toggle_upvote_nets_single_reward(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        author, voter, answer = await seed(unit_env)

        await vote_service.upvote_answer(answer.id, voter.id)
        await vote_service.upvote_answer(answer.id, voter.id)
        outcome = await vote_service.upvote_answer(answer.id, voter.id)

        assert outcome.answer.upvotes == [voter.id]
        assert await reputation(unit_env, author) == 10
        assert await reputation(unit_env, voter) == 2

    @pytest.mark.asyncio
    async def test_stale_caller_flags_are_ignored(self, unit_env):
        """Stored votes decide the transition, not what the caller claims."""
        vote_service = await unit_env.get(VoteService)
        author, voter, answer = await seed(unit_env)

        # Caller claims an upvote exists; storage says it does not
        outcome = await vote_service.upvote_answer(answer.id, voter.id, UPVOTED)

        assert outcome.answer.upvotes == [voter.id]
        assert outcome.previous_state == NONE
        assert await reputation(unit_env, author) == 10

    @pytest.mark.asyncio
    async def test_nonexistent_answer_raises(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        _, voter, _ = await seed(unit_env)
        missing = AnswerId(uuid4())

        with pytest.raises(NotFoundError, match="Answer not found"):
            await vote_service.upvote_answer(missing, voter.id)

        assert await reputation(unit_env, voter) == 0


class TestDownvoteAnswer:
    """Tests for downvote_answer."""

    @pytest.mark.asyncio
    async def test_new_downvote_penalizes_both(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        author, voter, answer = await seed(unit_env)

        outcome = await vote_service.downvote_answer(answer.id, voter.id)

        assert outcome.answer.downvotes == [voter.id]
        assert await reputation(unit_env, author) == -10
        assert await reputation(unit_env, voter) == -2

    @pytest.mark.asyncio
    async def test_downvote_switches_existing_upvote(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        author, voter, answer = await seed(unit_env, UP)

        outcome = await vote_service.downvote_answer(answer.id, voter.id)

        assert outcome.answer.upvotes == []
        assert outcome.answer.downvotes == [voter.id]
        assert await reputation(unit_env, author) == -20
        assert await reputation(unit_env, voter) == -4

    @pytest.mark.asyncio
    async def test_second_downvote_toggles_off(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        author, voter, answer = await seed(unit_env, DOWN)

        outcome = await vote_service.downvote_answer(answer.id, voter.id)

        assert outcome.answer.downvotes == []
        assert await reputation(unit_env, author) == 10
        assert await reputation(unit_env, voter) == 2


class TestVoteSequences:
    """Properties that hold for any sequence of votes."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("seed_value", [1, 7, 42])
    async def test_voter_never_in_both_sets(self, unit_env, seed_value):
        vote_service = await unit_env.get(VoteService)
        user_repo = await unit_env.get(UserRepository)
        author, _, answer = await seed(unit_env)
        extra = [await user_repo.save(make_user("Extra")) for _ in range(3)]
        rng = random.Random(seed_value)

        for _ in range(40):
            user_id = UserId(rng.choice(extra).id)
            if rng.random() < 0.5:
                outcome = await vote_service.upvote_answer(answer.id, user_id)
            else:
                outcome = await vote_service.downvote_answer(answer.id, user_id)

            assert not set(outcome.answer.upvotes) & set(outcome.answer.downvotes)

        # Author reputation tracks the net vote balance exactly
        assert await reputation(unit_env, author) == 10 * (
            outcome.answer.upvote_count - outcome.answer.downvote_count
        )


class OrderRecordingUserRepository(InMemoryUserRepository):
    """In-memory user repository remembering the order of reputation writes."""

    def __init__(self, database: InMemoryDatabase) -> None:
        super().__init__(database)
        self.adjusted: list[UserId] = []

    async def adjust_reputation(self, user_id: UserId, delta: int) -> None:
        self.adjusted.append(user_id)
        await super().adjust_reputation(user_id, delta)


class TestReputationWriteOrder:
    """Reputation rows are always written in ascending user ID order."""

    @pytest.mark.asyncio
    async def test_mirrored_votes_write_users_in_same_order(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        database = await unit_env.get(InMemoryDatabase)
        x = await user_repo.save(make_user("X"))
        y = await user_repo.save(make_user("Y"))
        question = await question_repo.save(make_question(x.id))
        answer_by_x = await answer_repo.save(make_answer(question.id, x.id))
        answer_by_y = await answer_repo.save(make_answer(question.id, y.id))
        recording_repo = OrderRecordingUserRepository(database)
        vote_service = VoteService(
            answer_repository=answer_repo,
            user_service=UserService(recording_repo),
            reputation_settings=ReputationSettings(),
        )

        await vote_service.upvote_answer(answer_by_y.id, x.id)
        x_on_y = list(recording_repo.adjusted)
        recording_repo.adjusted.clear()
        await vote_service.upvote_answer(answer_by_x.id, y.id)
        y_on_x = list(recording_repo.adjusted)

        assert x_on_y == y_on_x == sorted([x.id, y.id])
        assert await reputation(unit_env, x) == 12
        assert await reputation(unit_env, y) == 12

    @pytest.mark.asyncio
    async def test_self_vote_writes_user_once(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        database = await unit_env.get(InMemoryDatabase)
        author = await user_repo.save(make_user("Author"))
        question = await question_repo.save(make_question(author.id))
        answer = await answer_repo.save(make_answer(question.id, author.id))
        recording_repo = OrderRecordingUserRepository(database)
        vote_service = VoteService(
            answer_repository=answer_repo,
            user_service=UserService(recording_repo),
            reputation_settings=ReputationSettings(),
        )

        await vote_service.upvote_answer(answer.id, author.id)

        assert recording_repo.adjusted == [author.id]
        assert await reputation(unit_env, author) == 12
