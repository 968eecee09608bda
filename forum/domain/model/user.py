"""User aggregate root.

Users are created by the external auth provider (identified by clerk_id)
and accumulate reputation through community engagement.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import UserId


class User(DomainModel):
    """User aggregate root.

    Reputation is unbounded in both directions: downvotes can push it
    below zero.
    """

    id: UserId
    clerk_id: str
    name: str
    username: str
    picture: Optional[str] = None
    reputation: int = 0
    created_at: datetime = Field(default_factory=datetime.now)


class AuthorSummary(DomainModel):
    """Minimal author projection shown next to an answer."""

    id: UserId
    clerk_id: str
    name: str
    picture: Optional[str] = None
