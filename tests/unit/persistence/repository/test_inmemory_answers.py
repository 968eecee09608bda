"""Unit tests for the in-memory answer repository and unit of work."""

from uuid import uuid4

import pytest

from forum.domain.value import AnswerSortOrder, QuestionId, UserId, VoteDirection
from forum.persistence.repository.inmemory import (
    InMemoryAnswerRepository,
    InMemoryDatabase,
    InMemoryUnitOfWork,
)
from tests.conftest import make_answer, voters


class TestInMemoryAnswerSorting:
    """Sorting and pagination of find_by_question."""

    @pytest.mark.asyncio
    async def test_ties_keep_insertion_order(self):
        repo = InMemoryAnswerRepository(InMemoryDatabase())
        question_id = QuestionId(uuid4())
        author_id = UserId(uuid4())
        first = await repo.save(
            make_answer(question_id, author_id, upvotes=voters(2), minutes=5)
        )
        second = await repo.save(
            make_answer(question_id, author_id, upvotes=voters(2), minutes=1)
        )

        answers = await repo.find_by_question(
            question_id, sort=AnswerSortOrder.HIGHEST_UPVOTES
        )

        assert [a.id for a in answers] == [first.id, second.id]

    @pytest.mark.asyncio
    async def test_only_the_questions_answers_are_listed(self):
        repo = InMemoryAnswerRepository(InMemoryDatabase())
        question_id = QuestionId(uuid4())
        other_question = QuestionId(uuid4())
        author_id = UserId(uuid4())
        mine = await repo.save(make_answer(question_id, author_id))
        await repo.save(make_answer(other_question, author_id))

        answers = await repo.find_by_question(question_id)

        assert [a.id for a in answers] == [mine.id]
        assert await repo.count_by_question(question_id) == 1

    @pytest.mark.asyncio
    async def test_offset_past_end_is_empty(self):
        repo = InMemoryAnswerRepository(InMemoryDatabase())
        question_id = QuestionId(uuid4())
        await repo.save(make_answer(question_id, UserId(uuid4())))

        assert await repo.find_by_question(question_id, limit=10, offset=10) == []


class TestInMemoryVoters:
    """Vote set updates."""

    @pytest.mark.asyncio
    async def test_add_voter_is_idempotent(self):
        repo = InMemoryAnswerRepository(InMemoryDatabase())
        answer = await repo.save(make_answer(QuestionId(uuid4()), UserId(uuid4())))
        voter = UserId(uuid4())

        await repo.add_voter(answer.id, voter, VoteDirection.UP)
        await repo.add_voter(answer.id, voter, VoteDirection.UP)

        assert (await repo.find_by_id(answer.id)).upvotes == [voter]

    @pytest.mark.asyncio
    async def test_remove_missing_voter_is_noop(self):
        repo = InMemoryAnswerRepository(InMemoryDatabase())
        voter = UserId(uuid4())
        answer = await repo.save(
            make_answer(QuestionId(uuid4()), UserId(uuid4()), downvotes=[voter])
        )

        await repo.remove_voter(answer.id, UserId(uuid4()), VoteDirection.DOWN)

        assert (await repo.find_by_id(answer.id)).downvotes == [voter]


class TestInMemoryUnitOfWork:
    """Snapshot commit/rollback semantics."""

    @pytest.mark.asyncio
    async def test_rollback_restores_last_commit(self):
        database = InMemoryDatabase()
        repo = InMemoryAnswerRepository(database)
        unit_of_work = InMemoryUnitOfWork(database)
        question_id = QuestionId(uuid4())

        committed = await repo.save(make_answer(question_id, UserId(uuid4())))
        await unit_of_work.commit()
        await repo.save(make_answer(question_id, UserId(uuid4())))
        await unit_of_work.rollback()

        assert list(database.answers) == [committed.id]
        assert unit_of_work.commits == 1
        assert unit_of_work.rollbacks == 1
