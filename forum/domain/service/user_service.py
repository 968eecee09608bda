"""User domain service."""

from typing import Mapping, Sequence

import logfire

from forum.domain.error import NotFoundError
from forum.domain.model import AuthorSummary, User
from forum.domain.repository import UserRepository
from forum.domain.value import UserId

from .base import Service


class UserService(Service):
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def get_author_summaries(
        self, user_ids: Sequence[UserId]
    ) -> dict[UserId, AuthorSummary]:
        """Resolve authors to their minimal public projection.

        Args:
            user_ids: Author IDs (duplicates allowed)

        Returns:
            Mapping of user ID to summary; unknown users are absent
        """
        if not user_ids:
            return {}

        # Batch query to avoid N+1
        users = await self.user_repository.find_by_ids(list(dict.fromkeys(user_ids)))
        return {
            user.id: AuthorSummary(
                id=user.id,
                clerk_id=user.clerk_id,
                name=user.name,
                picture=user.picture,
            )
            for user in users
        }

    async def adjust_reputation(self, user_id: UserId, delta: int) -> None:
        """Atomically change a user's reputation.

        Args:
            user_id: User ID
            delta: Amount to add (negative to subtract)
        """
        if delta == 0:
            return
        with logfire.span(
            "user_service.adjust_reputation", user_id=str(user_id), delta=delta
        ):
            await self.user_repository.adjust_reputation(user_id, delta)
            logfire.info("Reputation adjusted", user_id=str(user_id), delta=delta)

    async def adjust_reputations(self, deltas: Mapping[UserId, int]) -> None:
        """Apply several reputation changes in ascending user ID order.

        Votes touching the same users lock their rows in the same order.

        Args:
            deltas: Amount to add per user
        """
        for user_id in sorted(deltas):
            await self.adjust_reputation(user_id, deltas[user_id])
