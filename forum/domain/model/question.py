"""Question aggregate.

Questions hold the ordered list of their answers and the tags copied into
interaction records.
"""

from datetime import datetime

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import AnswerId, QuestionId, UserId


class Question(DomainModel):
    """Question aggregate root."""

    id: QuestionId
    title: str = Field(min_length=1, max_length=300)
    content: str = ""
    author_id: UserId
    tags: list[str] = Field(default_factory=list)
    answers: list[AnswerId] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.now)
