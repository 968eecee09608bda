"""SQLAlchemy unit of work."""

import logfire
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.repository import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """Unit of work bound to the request's database session."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize unit of work.

        Args:
            session: SQLAlchemy async session shared with the repositories
        """
        self.session = session

    async def commit(self) -> None:
        await self.session.commit()
        logfire.info("Transaction committed")

    async def rollback(self) -> None:
        await self.session.rollback()
        logfire.info("Transaction rolled back")
