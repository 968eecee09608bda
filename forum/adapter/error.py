"""Adapter layer errors."""


class AdapterError(Exception):
    """Base adapter error."""

    pass


class CacheRevalidationError(AdapterError):
    """Raised when the frontend refuses or fails a revalidation request."""

    def __init__(self, path: str, reason: str):
        self.path = path
        super().__init__(f"Failed to revalidate {path}: {reason}")
