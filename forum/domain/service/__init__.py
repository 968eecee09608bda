"""Domain services."""

from .answer_service import AnswerPage, AnswerService, AnswerWithAuthor
from .base import Service
from .interaction_service import InteractionService
from .question_service import QuestionService
from .revalidation import PathRevalidator
from .user_service import UserService
from .vote_service import VoteOutcome, VotePlan, VoteService, plan_vote

__all__ = [
    "AnswerPage",
    "AnswerService",
    "AnswerWithAuthor",
    "InteractionService",
    "PathRevalidator",
    "QuestionService",
    "Service",
    "UserService",
    "VoteOutcome",
    "VotePlan",
    "VoteService",
    "plan_vote",
]
