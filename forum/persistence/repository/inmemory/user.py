"""In-memory user repository for testing."""

from typing import Optional, Sequence

from forum.domain.model.user import User
from forum.domain.repository.user import UserRepository
from forum.domain.value import UserId

from .database import InMemoryDatabase


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self.database = database

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self.database.users.get(user_id)

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list[User]:
        """Find several users at once."""
        return [
            self.database.users[uid] for uid in user_ids if uid in self.database.users
        ]

    async def save(self, user: User) -> User:
        """Save or update a user."""
        self.database.users[user.id] = user
        return user

    async def adjust_reputation(self, user_id: UserId, delta: int) -> None:
        """Add ``delta`` to a user's reputation."""
        user = self.database.users.get(user_id)
        if user:
            self.database.users[user_id] = user.model_copy(
                update={"reputation": user.reputation + delta}
            )
