"""Port for invalidating cached page renderings."""

from abc import ABC, abstractmethod


class PathRevalidator(ABC):
    """Invalidates whatever rendering is cached for a page path.

    Implementations live in the adapter layer. The next request for the
    path regenerates the page.
    """

    @abstractmethod
    async def revalidate(self, path: str) -> None:
        """Invalidate the cached rendering of ``path``.

        Raises:
            CacheRevalidationError: If the cache could not be invalidated
        """
        pass
