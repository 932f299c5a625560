"""User domain service."""

from typing import Sequence
from uuid import UUID

import logfire

from remark.domain.model import Actor, User
from remark.domain.repository import UserRepository
from remark.domain.value import UserId

from .base import Service


class UserService(Service):
    """Domain service for reading users owned by the account service."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def resolve_actor(self, user_id: str | None) -> Actor | None:
        """Turn a token subject into the actor performing the request.

        Inactive users are returned as inactive actors so the authorization
        guard can reject them explicitly.

        Args:
            user_id: User ID taken from a verified token (None if absent)

        Returns:
            Actor, or None if there is no such user
        """
        if not user_id:
            return None

        with logfire.span("user_service.resolve_actor", user_id=user_id):
            try:
                uid = UserId(UUID(user_id))
            except ValueError:
                logfire.warn("Token subject is not a user ID", user_id=user_id)
                return None

            user = await self.user_repository.find_by_id(uid)
            if not user:
                logfire.warn("Token subject does not exist", user_id=user_id)
                return None
            if not user.is_active:
                logfire.warn("Deactivated user attempted a request", user_id=user_id)
            return user.to_actor()

    async def get_authors(self, user_ids: Sequence[UserId]) -> dict[UserId, User]:
        """Load the authors of a batch of comments with one lookup.

        Args:
            user_ids: Author IDs (duplicates allowed)

        Returns:
            Mapping of user ID to user; unknown authors are absent
        """
        unique = list(dict.fromkeys(user_ids))
        if not unique:
            return {}
        with logfire.span("user_service.get_authors", count=len(unique)):
            return await self.user_repository.find_by_ids(unique)
