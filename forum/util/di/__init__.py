"""Dependency injection wiring.

``PROVIDERS`` lists one entry per layer or component. Components with
production and mock variants are declared as a base provider class whose
subclasses set ``__is_mock__``; ``get_provider`` picks the variant.
"""

from typing import Type

from forum.util.di.application import ProdApplicationProvider
from forum.util.di.base import Component, ProviderBase
from forum.util.di.core import ProdConfigProvider
from forum.util.di.domain import ProdDomainProvider
from forum.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
    ProdRevalidationProvider,
    RevalidationProvider,
)

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Swappable in tests
    PersistenceProvider,
    RevalidationProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve a PROVIDERS entry to the class to instantiate.

    Args:
        base: Entry from PROVIDERS
        use_mock: Pick the mock variant of a swappable component

    Returns:
        ``base`` itself when it has no variants, otherwise the matching subclass

    Raises:
        ValueError: If no variant matches ``use_mock``
    """
    variants = base.__subclasses__()
    if not variants:
        return base

    for variant in variants:
        if variant.__is_mock__ == use_mock:
            return variant

    kind = "mock" if use_mock else "production"
    name = base.__mock_component__ or base.__name__
    raise ValueError(f"No {kind} provider for {name}")


__all__ = [
    "Component",
    "PROVIDERS",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdPersistenceProvider",
    "ProdRevalidationProvider",
    "ProviderBase",
    "RevalidationProvider",
    "get_provider",
]
