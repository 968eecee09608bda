"""Answer entity.

Answers are user-submitted responses to a question. Votes are stored on
the answer itself as two sets of voter ids.
"""

from datetime import datetime

from pydantic import Field, model_validator

from forum.domain.model.common import DomainModel
from forum.domain.value import AnswerId, QuestionId, UserId, VoteState


class Answer(DomainModel):
    """Answer entity.

    Business rules:
    - A user appears in at most one of upvotes/downvotes
    - Each voter appears at most once per set
    """

    id: AnswerId
    content: str = Field(min_length=1)
    author_id: UserId
    question_id: QuestionId
    upvotes: list[UserId] = Field(default_factory=list)
    downvotes: list[UserId] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def validate_votes(self) -> "Answer":
        """Validate that no voter is counted twice."""
        if len(set(self.upvotes)) != len(self.upvotes):
            raise ValueError("Duplicate voter in upvotes")
        if len(set(self.downvotes)) != len(self.downvotes):
            raise ValueError("Duplicate voter in downvotes")
        if set(self.upvotes) & set(self.downvotes):
            raise ValueError("A user cannot both upvote and downvote an answer")
        return self

    @property
    def upvote_count(self) -> int:
        return len(self.upvotes)

    @property
    def downvote_count(self) -> int:
        return len(self.downvotes)

    def vote_state_for(self, user_id: UserId) -> VoteState:
        """Return how ``user_id`` has currently voted on this answer."""
        return VoteState(
            has_upvoted=user_id in self.upvotes,
            has_downvoted=user_id in self.downvotes,
        )
