"""Base class for the forum's DI providers."""

from typing import ClassVar, Literal

from dishka import Provider

# Infrastructure components that tests can swap for in-memory variants
Component = Literal["persistence", "revalidation"]


class ProviderBase(Provider):
    """Provider carrying variant metadata.

    Attributes:
        __mock_component__: Component name on swappable bases, else None
        __is_mock__: True on the test variant of a component
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
