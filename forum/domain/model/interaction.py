"""Interaction log entry."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import (
    AnswerId,
    InteractionAction,
    InteractionId,
    QuestionId,
    UserId,
)


class Interaction(DomainModel):
    """Append-only record of a user action, used for recommendations.

    ``tags`` is a snapshot of the question's tags at the time of the action
    and is not updated if the question is retagged later.
    """

    id: InteractionId
    user_id: UserId
    action: InteractionAction
    question_id: Optional[QuestionId] = None
    answer_id: Optional[AnswerId] = None
    tags: list[str] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.now)
