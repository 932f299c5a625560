"""User entity and request actor.

Users are owned by the account service; Remark reads them to authenticate
requests and to annotate comments with display names and avatars.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from remark.domain.model.common import DomainModel, utcnow
from remark.domain.value import UserId, UserRole


class User(DomainModel):
    """Read-only view of a user account."""

    id: UserId
    username: str = Field(min_length=1, max_length=255)
    avatar_url: Optional[str] = None
    email: Optional[str] = None
    role: UserRole = UserRole.MEMBER
    is_active: bool = True
    created_at: datetime = Field(default_factory=utcnow)

    def to_actor(self) -> "Actor":
        """Build the actor performing a request as this user."""
        return Actor(user_id=self.id, role=self.role, is_active=self.is_active)


class Actor(DomainModel):
    """Identity performing a request.

    Passed explicitly to authorization checks. Anonymous visitors are
    represented by the absence of an actor (None).
    """

    user_id: UserId
    role: UserRole
    is_active: bool = True

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN
