"""Test container with in-memory infrastructure."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from forum.util.di import PROVIDERS, Component, get_provider


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build a container where swappable components are mocked.

    Args:
        unmock: Components that should use their production provider

    Returns:
        Container usable both directly and behind the FastAPI app

    Raises:
        ValueError: If ``unmock`` names an unknown component

    Examples:
        build_test_container()                         # all in memory
        build_test_container(unmock={"persistence"})   # real PostgreSQL
    """
    unmock = unmock or set()
    components = {
        base.__mock_component__ for base in PROVIDERS if base.__mock_component__
    }
    unknown = unmock - components
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")

    providers = []
    for base in PROVIDERS:
        use_mock = (
            base.__mock_component__ is not None
            and base.__mock_component__ not in unmock
        )
        providers.append(get_provider(base, use_mock=use_mock)())

    return make_async_container(*providers, FastapiProvider())
