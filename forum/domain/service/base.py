"""Base class for domain services."""


class Service:
    """Marker base for domain services.

    Services coordinate repositories for one area of the forum (answers,
    votes, users) and own the logfire spans for their operations.
    """
