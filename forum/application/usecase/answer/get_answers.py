"""Get answers use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from forum.application.usecase.base import (
    HANDLED_ERRORS,
    ActionResponse,
    BaseUseCase,
    describe_failure,
    revalidate_path,
)
from forum.config import PaginationSettings
from forum.domain.service import AnswerService, PathRevalidator
from forum.domain.value import AnswerSortOrder, QuestionId

from .common import AnswerItem, answer_to_item


class GetAnswersRequest(BaseModel):
    """Get answers request."""

    question_id: UUID
    sort_by: str | None = None  # Unknown values keep the default order
    page: int = Field(default=1, ge=1)
    page_size: int | None = Field(default=None, ge=1)
    path: str | None = None  # Page to revalidate, if any

    @property
    def sort_order(self) -> AnswerSortOrder | None:
        """Parsed sort order, or None for the default order."""
        try:
            return AnswerSortOrder(self.sort_by) if self.sort_by else None
        except ValueError:
            return None


class GetAnswersResponse(ActionResponse):
    """Get answers response."""

    answers: list[AnswerItem] = []
    is_next: bool = False
    total: int = 0
    page: int = 1
    page_size: int = 0


class GetAnswersUseCase(BaseUseCase):
    """Use case for listing a question's answers, one page at a time."""

    def __init__(
        self,
        answer_service: AnswerService,
        pagination: PaginationSettings,
        path_revalidator: PathRevalidator,
    ) -> None:
        """Initialize get answers use case.

        Args:
            answer_service: Answer domain service
            pagination: Page size defaults and limits
            path_revalidator: Cache revalidation port
        """
        self.answer_service = answer_service
        self.pagination = pagination
        self.path_revalidator = path_revalidator

    async def execute(self, request: GetAnswersRequest) -> GetAnswersResponse:
        """Execute get answers flow.

        Args:
            request: Question, sort key, page and optional path

        Returns:
            Page of answers with authors; ``is_next`` tells whether more exist
        """
        page_size = min(
            request.page_size or self.pagination.default_page_size,
            self.pagination.max_page_size,
        )
        if request.sort_by and request.sort_order is None:
            logfire.info("Unknown answer sort, using default", sort_by=request.sort_by)

        try:
            page = await self.answer_service.get_answers(
                question_id=QuestionId(request.question_id),
                sort=request.sort_order,
                page=request.page,
                page_size=page_size,
            )
        except HANDLED_ERRORS as e:
            return GetAnswersResponse(
                success=False,
                error=describe_failure("get_answers", e),
                page=request.page,
                page_size=page_size,
            )

        if request.path:
            await revalidate_path(self.path_revalidator, request.path)

        return GetAnswersResponse(
            answers=[answer_to_item(item.answer, item.author) for item in page.answers],
            is_next=page.is_next,
            total=page.total,
            page=request.page,
            page_size=page_size,
        )
