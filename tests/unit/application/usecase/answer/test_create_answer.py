"""Unit tests for CreateAnswerUseCase."""

from uuid import uuid4

import pytest
from sqlalchemy.exc import OperationalError

from forum.adapter.error import CacheRevalidationError
from forum.adapter.revalidation import RecordingPathRevalidator
from forum.application.usecase.answer import CreateAnswerRequest, CreateAnswerUseCase
from forum.application.usecase.base import ActionErrorKind
from forum.config import ReputationSettings
from forum.domain.repository import (
    AnswerRepository,
    QuestionRepository,
    UnitOfWork,
    UserRepository,
)
from forum.domain.service import (
    AnswerService,
    InteractionService,
    PathRevalidator,
    QuestionService,
    UserService,
)
from forum.persistence.repository.inmemory import (
    InMemoryDatabase,
    InMemoryInteractionRepository,
)
from tests.conftest import make_question, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

PATH = "/question/123"


class FailingInteractionRepository(InMemoryInteractionRepository):
    """Interaction repository whose writes fail like a dropped connection."""

    async def save(self, interaction):
        raise OperationalError("INSERT INTO interactions", {}, Exception("gone"))


class FailingPathRevalidator(PathRevalidator):
    async def revalidate(self, path: str) -> None:
        raise CacheRevalidationError(path, "HTTP 500")


async def seed(unit_env, tags=None):
    user_repo = await unit_env.get(UserRepository)
    question_repo = await unit_env.get(QuestionRepository)
    author = await user_repo.save(make_user("Author"))
    question = await question_repo.save(make_question(author.id, tags=tags))
    return author, question


class TestCreateAnswerUseCase:
    """Tests for CreateAnswerUseCase."""

    @pytest.mark.asyncio
    async def test_create_commits_and_revalidates(self, unit_env):
        author, question = await seed(unit_env)
        use_case = await unit_env.get(CreateAnswerUseCase)
        unit_of_work = await unit_env.get(UnitOfWork)
        recorder = await unit_env.get(RecordingPathRevalidator)

        response = await use_case.execute(
            CreateAnswerRequest(
                content="Use reversed().",
                author_id=author.id,
                question_id=question.id,
                path=PATH,
            )
        )

        assert response.success is True
        assert response.error is None
        assert response.answer.content == "Use reversed()."
        assert response.answer.author_id == str(author.id)
        assert response.answer.question_id == str(question.id)
        assert response.answer.upvote_count == 0
        assert unit_of_work.commits == 1
        assert recorder.paths == [PATH]

    @pytest.mark.asyncio
    async def test_missing_question_reports_not_found(self, unit_env):
        author, _ = await seed(unit_env)
        use_case = await unit_env.get(CreateAnswerUseCase)
        unit_of_work = await unit_env.get(UnitOfWork)
        recorder = await unit_env.get(RecordingPathRevalidator)
        user_repo = await unit_env.get(UserRepository)

        response = await use_case.execute(
            CreateAnswerRequest(
                content="Hello",
                author_id=author.id,
                question_id=uuid4(),
                path=PATH,
            )
        )

        assert response.success is False
        assert response.error.kind == ActionErrorKind.NOT_FOUND
        assert "Question not found" in response.error.message
        assert response.answer is None
        assert unit_of_work.rollbacks == 1
        assert recorder.paths == []
        assert (await user_repo.find_by_id(author.id)).reputation == 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize("content", ["", "  "])
    async def test_blank_content_reports_invalid(self, unit_env, content):
        author, question = await seed(unit_env)
        use_case = await unit_env.get(CreateAnswerUseCase)

        response = await use_case.execute(
            CreateAnswerRequest(
                content=content,
                author_id=author.id,
                question_id=question.id,
                path=PATH,
            )
        )

        assert response.success is False
        assert response.error.kind == ActionErrorKind.INVALID

    @pytest.mark.asyncio
    async def test_storage_failure_rolls_back_every_write(self, unit_env):
        """A failure after the answer is inserted leaves no partial effects."""
        author, question = await seed(unit_env)
        database = await unit_env.get(InMemoryDatabase)
        user_service = await unit_env.get(UserService)
        answer_service = AnswerService(
            answer_repository=await unit_env.get(AnswerRepository),
            question_service=await unit_env.get(QuestionService),
            user_service=user_service,
            interaction_service=InteractionService(
                FailingInteractionRepository(database)
            ),
            reputation_settings=ReputationSettings(),
        )
        recorder = RecordingPathRevalidator()
        use_case = CreateAnswerUseCase(
            answer_service=answer_service,
            unit_of_work=await unit_env.get(UnitOfWork),
            path_revalidator=recorder,
        )

        response = await use_case.execute(
            CreateAnswerRequest(
                content="Hello",
                author_id=author.id,
                question_id=question.id,
                path=PATH,
            )
        )

        assert response.success is False
        assert response.error.kind == ActionErrorKind.STORAGE
        assert database.answers == {}
        assert database.questions[question.id].answers == []
        assert database.users[author.id].reputation == 0
        assert recorder.paths == []

    @pytest.mark.asyncio
    async def test_revalidation_failure_does_not_fail_committed_create(self, unit_env):
        author, question = await seed(unit_env)
        use_case = CreateAnswerUseCase(
            answer_service=await unit_env.get(AnswerService),
            unit_of_work=await unit_env.get(UnitOfWork),
            path_revalidator=FailingPathRevalidator(),
        )
        answer_repo = await unit_env.get(AnswerRepository)

        response = await use_case.execute(
            CreateAnswerRequest(
                content="Hello",
                author_id=author.id,
                question_id=question.id,
                path=PATH,
            )
        )

        assert response.success is True
        assert await answer_repo.count_by_question(question.id) == 1
