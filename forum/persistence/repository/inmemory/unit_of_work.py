"""In-memory unit of work for testing."""

from forum.domain.repository import UnitOfWork

from .database import InMemoryDatabase


class InMemoryUnitOfWork(UnitOfWork):
    """Snapshot-based unit of work over an InMemoryDatabase."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self.database = database
        self._snapshot = database.snapshot()
        self.commits = 0
        self.rollbacks = 0

    async def commit(self) -> None:
        """Make the current state the new rollback point."""
        self._snapshot = self.database.snapshot()
        self.commits += 1

    async def rollback(self) -> None:
        """Discard every change since the last commit."""
        self.database.restore(self._snapshot)
        self.rollbacks += 1
