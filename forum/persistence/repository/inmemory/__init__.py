"""In-memory repository implementations for testing."""

from .answer import InMemoryAnswerRepository
from .database import InMemoryDatabase
from .interaction import InMemoryInteractionRepository
from .question import InMemoryQuestionRepository
from .unit_of_work import InMemoryUnitOfWork
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryAnswerRepository",
    "InMemoryDatabase",
    "InMemoryInteractionRepository",
    "InMemoryQuestionRepository",
    "InMemoryUnitOfWork",
    "InMemoryUserRepository",
]
