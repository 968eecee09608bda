"""Create answer use case."""

from uuid import UUID

from pydantic import BaseModel

from forum.application.usecase.base import (
    HANDLED_ERRORS,
    ActionResponse,
    TransactionalUseCase,
    describe_failure,
)
from forum.domain.repository import UnitOfWork
from forum.domain.service import AnswerService, PathRevalidator
from forum.domain.value import QuestionId, UserId

from .common import AnswerItem, answer_to_item


class CreateAnswerRequest(BaseModel):
    """Create answer request."""

    content: str  # Blank content is rejected by the domain
    author_id: UUID
    question_id: UUID
    path: str  # Page to revalidate


class CreateAnswerResponse(ActionResponse):
    """Create answer response."""

    answer: AnswerItem | None = None


class CreateAnswerUseCase(TransactionalUseCase):
    """Use case for posting an answer to a question."""

    def __init__(
        self,
        answer_service: AnswerService,
        unit_of_work: UnitOfWork,
        path_revalidator: PathRevalidator,
    ) -> None:
        """Initialize create answer use case.

        Args:
            answer_service: Answer domain service
            unit_of_work: Transaction boundary
            path_revalidator: Cache revalidation port
        """
        super().__init__(unit_of_work, path_revalidator)
        self.answer_service = answer_service

    async def execute(self, request: CreateAnswerRequest) -> CreateAnswerResponse:
        """Execute create answer flow.

        Steps:
        1. Create the answer, link it, log the interaction and reward the
           author in one transaction
        2. Revalidate the question page

        Args:
            request: Create answer request

        Returns:
            Response with the created answer, or the failure
        """
        try:
            answer = await self.run_in_transaction(
                lambda: self.answer_service.create_answer(
                    content=request.content,
                    author_id=UserId(request.author_id),
                    question_id=QuestionId(request.question_id),
                )
            )
        except HANDLED_ERRORS as e:
            return CreateAnswerResponse(
                success=False, error=describe_failure("create_answer", e)
            )

        await self.revalidate(request.path)
        return CreateAnswerResponse(answer=answer_to_item(answer))
