"""Answer routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Query, status
from pydantic import BaseModel

from forum.application.usecase.answer import (
    AnswerVoteRequest,
    AnswerVoteResponse,
    CreateAnswerRequest,
    CreateAnswerResponse,
    CreateAnswerUseCase,
    DeleteAnswerRequest,
    DeleteAnswerResponse,
    DeleteAnswerUseCase,
    DownvoteAnswerUseCase,
    GetAnswersRequest,
    GetAnswersResponse,
    GetAnswersUseCase,
    UpvoteAnswerUseCase,
)
from forum.application.usecase.base import ActionErrorKind, ActionResponse

router = APIRouter(tags=["answers"], route_class=DishkaRoute)

ERROR_STATUS = {
    ActionErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ActionErrorKind.INVALID: status.HTTP_400_BAD_REQUEST,
    ActionErrorKind.STORAGE: status.HTTP_503_SERVICE_UNAVAILABLE,
}


class CreateAnswerBody(BaseModel):
    """Body for posting an answer."""

    content: str  # Blank content is rejected by the domain
    author_id: UUID
    path: str


class VoteBody(BaseModel):
    """Body for voting on an answer."""

    user_id: UUID
    has_upvoted: bool | None = None
    has_downvoted: bool | None = None
    path: str


def raise_for_failure(response: ActionResponse) -> None:
    """Raise the HTTPException matching a failed action, if any."""
    if response.success or response.error is None:
        return
    raise HTTPException(
        status_code=ERROR_STATUS[response.error.kind],
        detail=response.error.message,
    )


@router.post(
    "/questions/{question_id}/answers",
    response_model=CreateAnswerResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_answer(
    question_id: UUID,
    body: CreateAnswerBody,
    create_answer_use_case: FromDishka[CreateAnswerUseCase],
) -> CreateAnswerResponse:
    """Post an answer to a question.

    Args:
        question_id: Question UUID
        body: Answer content, author and page to revalidate
        create_answer_use_case: Create answer use case from DI

    Returns:
        The created answer

    Raises:
        HTTPException: If the question or author does not exist, or storage fails
    """
    response = await create_answer_use_case.execute(
        CreateAnswerRequest(
            content=body.content,
            author_id=body.author_id,
            question_id=question_id,
            path=body.path,
        )
    )
    raise_for_failure(response)
    return response


@router.get("/questions/{question_id}/answers", response_model=GetAnswersResponse)
async def get_answers(
    question_id: UUID,
    get_answers_use_case: FromDishka[GetAnswersUseCase],
    sort_by: str | None = Query(default=None),
    page: int = Query(default=1, ge=1),
    page_size: int | None = Query(default=None, ge=1),
    path: str | None = Query(default=None),
) -> GetAnswersResponse:
    """List a question's answers with their authors.

    Args:
        question_id: Question UUID
        get_answers_use_case: Get answers use case from DI
        sort_by: highestUpvotes, lowestUpvotes, recent or old
        page: 1-based page number
        page_size: Answers per page
        path: Page to revalidate, if any

    Returns:
        Page of answers and whether a next page exists
    """
    response = await get_answers_use_case.execute(
        GetAnswersRequest(
            question_id=question_id,
            sort_by=sort_by,
            page=page,
            page_size=page_size,
            path=path,
        )
    )
    raise_for_failure(response)
    return response


@router.post("/answers/{answer_id}/upvote", response_model=AnswerVoteResponse)
async def upvote_answer(
    answer_id: UUID,
    body: VoteBody,
    upvote_answer_use_case: FromDishka[UpvoteAnswerUseCase],
) -> AnswerVoteResponse:
    """Upvote an answer, or take back an existing upvote."""
    response = await upvote_answer_use_case.execute(
        AnswerVoteRequest(answer_id=answer_id, **body.model_dump())
    )
    raise_for_failure(response)
    return response


@router.post("/answers/{answer_id}/downvote", response_model=AnswerVoteResponse)
async def downvote_answer(
    answer_id: UUID,
    body: VoteBody,
    downvote_answer_use_case: FromDishka[DownvoteAnswerUseCase],
) -> AnswerVoteResponse:
    """Downvote an answer, or take back an existing downvote."""
    response = await downvote_answer_use_case.execute(
        AnswerVoteRequest(answer_id=answer_id, **body.model_dump())
    )
    raise_for_failure(response)
    return response


@router.delete("/answers/{answer_id}", response_model=DeleteAnswerResponse)
async def delete_answer(
    answer_id: UUID,
    delete_answer_use_case: FromDishka[DeleteAnswerUseCase],
    path: str = Query(...),
) -> DeleteAnswerResponse:
    """Delete an answer with its question link and interactions.

    Args:
        answer_id: Answer UUID
        delete_answer_use_case: Delete answer use case from DI
        path: Page to revalidate

    Raises:
        HTTPException: If the answer does not exist, or storage fails
    """
    response = await delete_answer_use_case.execute(
        DeleteAnswerRequest(answer_id=answer_id, path=path)
    )
    raise_for_failure(response)
    return response
