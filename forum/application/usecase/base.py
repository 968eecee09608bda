"""Base use cases and the shared result contract.

Every answer action returns a response carrying ``success`` and, on
failure, an ``error`` describing its kind. Domain and storage failures are
logged and reported this way instead of being raised.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Awaitable, Callable, TypeVar

import logfire
from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError

from forum.adapter.error import AdapterError
from forum.domain.error import DomainError, NotFoundError
from forum.domain.repository import UnitOfWork
from forum.domain.service import PathRevalidator

T = TypeVar("T")

# Failures reported through ActionResponse rather than raised
HANDLED_ERRORS = (DomainError, SQLAlchemyError)


class ActionErrorKind(str, Enum):
    """Kind of failure reported by an action."""

    NOT_FOUND = "not_found"
    INVALID = "invalid"
    STORAGE = "storage"


class ActionError(BaseModel):
    """Failure details."""

    kind: ActionErrorKind
    message: str


class ActionResponse(BaseModel):
    """Base response for all answer actions."""

    success: bool = True
    error: ActionError | None = None


def describe_failure(action: str, error: Exception) -> ActionError:
    """Log a handled failure and convert it to an ActionError.

    Args:
        action: Name of the failed action
        error: The domain or storage error

    Returns:
        Failure details for the response
    """
    if isinstance(error, NotFoundError):
        logfire.warn(
            "Answer action failed",
            action=action,
            error=str(error),
            resource=error.resource,
            identifier=error.identifier,
        )
        return ActionError(kind=ActionErrorKind.NOT_FOUND, message=str(error))

    if isinstance(error, DomainError):
        logfire.warn("Answer action rejected", action=action, error=str(error))
        return ActionError(kind=ActionErrorKind.INVALID, message=str(error))

    logfire.error(
        "Answer action storage failure",
        action=action,
        error=str(error),
        error_type=type(error).__name__,
        _exc_info=error,
    )
    return ActionError(kind=ActionErrorKind.STORAGE, message="Storage unavailable")


async def revalidate_path(path_revalidator: PathRevalidator, path: str) -> None:
    """Revalidate ``path``, logging instead of raising on failure.

    Runs after the action succeeded, so a cache that could not be
    invalidated does not turn the action into a failure.
    """
    try:
        await path_revalidator.revalidate(path)
    except AdapterError as e:
        logfire.warn("Revalidation failed", path=path, error=str(e))


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


class TransactionalUseCase(BaseUseCase):
    """Use case whose writes commit together and then revalidate a page."""

    def __init__(
        self, unit_of_work: UnitOfWork, path_revalidator: PathRevalidator
    ) -> None:
        """Initialize transactional use case.

        Args:
            unit_of_work: Transaction boundary for all repository writes
            path_revalidator: Cache revalidation port
        """
        self.unit_of_work = unit_of_work
        self.path_revalidator = path_revalidator

    async def run_in_transaction(self, operation: Callable[[], Awaitable[T]]) -> T:
        """Run ``operation`` and commit; roll back everything if it raises."""
        try:
            result = await operation()
            await self.unit_of_work.commit()
        except Exception:
            await self.unit_of_work.rollback()
            raise
        return result

    async def revalidate(self, path: str) -> None:
        """Revalidate a page after a committed change."""
        await revalidate_path(self.path_revalidator, path)
