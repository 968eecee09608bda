"""Container fixtures for unit and integration tests."""

import pytest_asyncio

from forum.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Create a fixture yielding a request-scoped container.

    Every test gets a fresh container, so in-memory state never leaks
    between tests. Unmocked persistence needs PostgreSQL at DATABASE__URL.

    Args:
        unmock: Components to run with their production providers

    Returns:
        Async pytest fixture

    Usage:
        unit_env = create_env_fixture()

        @pytest.mark.asyncio
        async def test_upvote(unit_env):
            vote_service = await unit_env.get(VoteService)
            ...
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock)
        async with container() as request_container:
            yield request_container
        await container.close()

    return _test_environment
