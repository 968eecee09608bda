"""Page cache revalidation clients.

The frontend caches rendered pages; after a successful mutation we ask it
to drop the cached rendering of the affected path.
"""

import httpx
import logfire

from forum.adapter.error import CacheRevalidationError
from forum.domain.service.revalidation import PathRevalidator


class HttpPathRevalidator(PathRevalidator):
    """Revalidates paths through the frontend's revalidation endpoint."""

    def __init__(
        self,
        revalidate_url: str,
        secret: str,
        timeout: float = 5.0,
        enabled: bool = True,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize revalidation client.

        Args:
            revalidate_url: Frontend endpoint accepting ``{"path": ...}``
            secret: Shared secret sent in the X-Revalidate-Secret header
            timeout: Request timeout in seconds
            enabled: When False, requests are logged but not sent
            transport: Optional httpx transport (used in tests)
        """
        self.revalidate_url = revalidate_url
        self.secret = secret
        self.timeout = timeout
        self.enabled = enabled
        self.transport = transport

    async def revalidate(self, path: str) -> None:
        """POST the path to the frontend's revalidation endpoint.

        Raises:
            CacheRevalidationError: On transport errors or non-2xx responses
        """
        if not self.enabled:
            logfire.info("Revalidation disabled, skipping", path=path)
            return

        try:
            async with httpx.AsyncClient(transport=self.transport) as client:
                response = await client.post(
                    self.revalidate_url,
                    json={"path": path},
                    headers={"X-Revalidate-Secret": self.secret},
                    timeout=self.timeout,
                )
        except httpx.HTTPError as e:
            logfire.error("Revalidation HTTP error", path=path, error=str(e))
            raise CacheRevalidationError(path, f"HTTP error: {e}")

        if response.is_error:
            logfire.error(
                "Revalidation rejected",
                path=path,
                status_code=response.status_code,
                response_text=response.text,
            )
            raise CacheRevalidationError(path, f"status {response.status_code}")

        logfire.info("Path revalidated", path=path)


class RecordingPathRevalidator(PathRevalidator):
    """Mock revalidator for testing.

    Records every path instead of calling the frontend.
    """

    def __init__(self) -> None:
        self.paths: list[str] = []

    async def revalidate(self, path: str) -> None:
        """Record the path."""
        self.paths.append(path)
