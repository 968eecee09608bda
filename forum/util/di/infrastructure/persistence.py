"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from forum.config import Settings
from forum.domain.repository import (
    AnswerRepository,
    InteractionRepository,
    QuestionRepository,
    UnitOfWork,
    UserRepository,
)
from forum.persistence.database import create_engine, create_session_factory
from forum.persistence.repository import (
    PostgresAnswerRepository,
    PostgresInteractionRepository,
    PostgresQuestionRepository,
    PostgresUserRepository,
)
from forum.persistence.unit_of_work import SqlAlchemyUnitOfWork
from forum.util.di.base import ProviderBase
from forum.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component (PostgreSQL or in-memory)."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """PostgreSQL engine, sessions and repositories."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide the engine; it is disposed when the container closes."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()
        logfire.info("Database engine disposed")

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide the session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Open one session per request.

        Use cases commit through the UnitOfWork; anything left uncommitted
        when the request ends is rolled back.
        """
        async with session_factory() as session:
            try:
                yield session
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    # Repositories and the unit of work share the request session
    unit_of_work = provide(
        SqlAlchemyUnitOfWork, provides=UnitOfWork, scope=Scope.REQUEST
    )
    user_repository = provide(
        PostgresUserRepository, provides=UserRepository, scope=Scope.REQUEST
    )
    question_repository = provide(
        PostgresQuestionRepository, provides=QuestionRepository, scope=Scope.REQUEST
    )
    answer_repository = provide(
        PostgresAnswerRepository, provides=AnswerRepository, scope=Scope.REQUEST
    )
    interaction_repository = provide(
        PostgresInteractionRepository,
        provides=InteractionRepository,
        scope=Scope.REQUEST,
    )
