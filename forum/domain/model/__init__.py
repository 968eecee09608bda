"""Domain model entities for the forum."""

from forum.domain.model.answer import Answer
from forum.domain.model.interaction import Interaction
from forum.domain.model.question import Question
from forum.domain.model.user import AuthorSummary, User

__all__ = [
    "Answer",
    "AuthorSummary",
    "Interaction",
    "Question",
    "User",
]
