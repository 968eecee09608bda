"""Repository interfaces for the forum domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from forum.domain.repository.answer import AnswerRepository
from forum.domain.repository.interaction import InteractionRepository
from forum.domain.repository.question import QuestionRepository
from forum.domain.repository.unit_of_work import UnitOfWork
from forum.domain.repository.user import UserRepository

__all__ = [
    "AnswerRepository",
    "InteractionRepository",
    "QuestionRepository",
    "UnitOfWork",
    "UserRepository",
]
