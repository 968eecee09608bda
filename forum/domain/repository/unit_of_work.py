"""Unit of work interface."""

from abc import ABC, abstractmethod


class UnitOfWork(ABC):
    """Transaction boundary shared by all repositories of a request.

    Repository writes are only made durable by ``commit``; ``rollback``
    discards every write since the last commit.
    """

    @abstractmethod
    async def commit(self) -> None:
        pass

    @abstractmethod
    async def rollback(self) -> None:
        pass
