"""User repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from forum.domain.model.user import User
from forum.domain.value import UserId


class UserRepository(ABC):
    """Repository for User aggregate."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: Sequence[UserId]) -> List[User]:
        """Find several users at once (batch query).

        Args:
            user_ids: User IDs to look up; unknown IDs are skipped

        Returns:
            List of found users, in no particular order
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass

    @abstractmethod
    async def adjust_reputation(self, user_id: UserId, delta: int) -> None:
        """Atomically add ``delta`` (may be negative) to a user's reputation.

        Unknown users are ignored.

        Args:
            user_id: The user's unique identifier
            delta: Amount to add
        """
        pass
