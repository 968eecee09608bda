"""Delete answer use case."""

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
from forum.domain.value import AnswerId


class DeleteAnswerRequest(BaseModel):
    """Delete answer request."""

    answer_id: UUID
    path: str  # Page to revalidate


class DeleteAnswerResponse(ActionResponse):
    """Delete answer response."""

    answer_id: str
    question_id: str | None = None


class DeleteAnswerUseCase(TransactionalUseCase):
    """Use case for deleting an answer with its question link and interactions."""

    def __init__(
        self,
        answer_service: AnswerService,
        unit_of_work: UnitOfWork,
        path_revalidator: PathRevalidator,
    ) -> None:
        """Initialize delete answer use case.

        Args:
            answer_service: Answer domain service
            unit_of_work: Transaction boundary
            path_revalidator: Cache revalidation port
        """
        super().__init__(unit_of_work, path_revalidator)
        self.answer_service = answer_service

    async def execute(self, request: DeleteAnswerRequest) -> DeleteAnswerResponse:
        """Execute delete answer flow.

        Args:
            request: Delete answer request

        Returns:
            Response naming the deleted answer, or the failure
        """
        try:
            answer = await self.run_in_transaction(
                lambda: self.answer_service.delete_answer(AnswerId(request.answer_id))
            )
        except HANDLED_ERRORS as e:
            return DeleteAnswerResponse(
                success=False,
                error=describe_failure("delete_answer", e),
                answer_id=str(request.answer_id),
            )

        await self.revalidate(request.path)
        return DeleteAnswerResponse(
            answer_id=str(answer.id), question_id=str(answer.question_id)
        )
