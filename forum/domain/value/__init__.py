"""Domain value objects for the forum."""

from forum.domain.value.identifiers import (
    AnswerId,
    InteractionId,
    QuestionId,
    UserId,
)
from forum.domain.value.types import (
    AnswerSortOrder,
    InteractionAction,
    ReputationChange,
    VoteDirection,
    VoteState,
)

__all__ = [
    # Identifiers
    "UserId",
    "QuestionId",
    "AnswerId",
    "InteractionId",
    # Types
    "AnswerSortOrder",
    "InteractionAction",
    "ReputationChange",
    "VoteDirection",
    "VoteState",
]
