"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from remark.domain.model.user import User
from remark.domain.value import UserId


class UserRepository(ABC):
    """Read-only access to users owned by the account service."""

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
    async def find_by_ids(self, user_ids: Sequence[UserId]) -> dict[UserId, User]:
        """Find several users with one query.

        Args:
            user_ids: User IDs to look up (duplicates allowed)

        Returns:
            Mapping of user ID to user; unknown IDs are absent
        """
        pass
