"""Domain layer errors.

Use cases report these to callers as failed results instead of raising.
"""


class DomainError(Exception):
    """Base for expected failures of a forum operation."""


class BusinessRuleViolationError(DomainError):
    """The request is well-formed but breaks a forum rule."""


class NotFoundError(DomainError):
    """A referenced question, answer or user does not exist."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
