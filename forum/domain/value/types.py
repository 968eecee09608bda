"""Domain value objects for the forum.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from forum.domain.value.common import ValueObject


class AnswerSortOrder(str, Enum):
    """Sort order for answer listings.

    Values match the query strings sent by the frontend.
    """

    HIGHEST_UPVOTES = "highestUpvotes"  # Upvote count DESC
    LOWEST_UPVOTES = "lowestUpvotes"  # Upvote count ASC
    RECENT = "recent"  # created_at DESC
    OLD = "old"  # created_at ASC


class InteractionAction(str, Enum):
    """Kind of user action recorded in the interaction log."""

    ASK_QUESTION = "ask_question"
    ANSWER = "answer"
    VIEW = "view"


class VoteDirection(str, Enum):
    """Direction of a vote on an answer."""

    UP = "up"
    DOWN = "down"


class VoteState(ValueObject):
    """A user's current vote on an answer, as stored on the answer."""

    has_upvoted: bool = False
    has_downvoted: bool = False


class ReputationChange(ValueObject):
    """Reputation deltas produced by a single vote transition."""

    author_delta: int
    voter_delta: int
