"""Answer use cases."""

from .common import AnswerItem, AuthorItem
from .create_answer import (
    CreateAnswerRequest,
    CreateAnswerResponse,
    CreateAnswerUseCase,
)
from .delete_answer import (
    DeleteAnswerRequest,
    DeleteAnswerResponse,
    DeleteAnswerUseCase,
)
from .get_answers import GetAnswersRequest, GetAnswersResponse, GetAnswersUseCase
from .vote_answer import (
    AnswerVoteRequest,
    AnswerVoteResponse,
    DownvoteAnswerUseCase,
    UpvoteAnswerUseCase,
)

__all__ = [
    "AnswerItem",
    "AnswerVoteRequest",
    "AnswerVoteResponse",
    "AuthorItem",
    "CreateAnswerRequest",
    "CreateAnswerResponse",
    "CreateAnswerUseCase",
    "DeleteAnswerRequest",
    "DeleteAnswerResponse",
    "DeleteAnswerUseCase",
    "DownvoteAnswerUseCase",
    "GetAnswersRequest",
    "GetAnswersResponse",
    "GetAnswersUseCase",
    "UpvoteAnswerUseCase",
]
