"""In-memory user repository for testing."""

from typing import Optional, Sequence

from remark.domain.model.user import User
from remark.domain.repository.user import UserRepository
from remark.domain.value import UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing.

    Users are owned by another service, so save() exists only for seeding.
    """

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def save(self, user: User) -> User:
        self._users[user.id] = user
        return user

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> dict[UserId, User]:
        """Find several users."""
        return {uid: self._users[uid] for uid in user_ids if uid in self._users}
