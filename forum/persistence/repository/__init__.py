"""PostgreSQL repository implementations."""

from forum.persistence.repository.answer import PostgresAnswerRepository
from forum.persistence.repository.interaction import PostgresInteractionRepository
from forum.persistence.repository.question import PostgresQuestionRepository
from forum.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresAnswerRepository",
    "PostgresInteractionRepository",
    "PostgresQuestionRepository",
    "PostgresUserRepository",
]
