"""PostgreSQL implementation of User repository."""

from typing import Optional, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from remark.domain.model import User
from remark.domain.repository import UserRepository
from remark.domain.value import UserId
from remark.persistence.mappers import row_to_user
from remark.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """Reads users from the account service's table."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: User ID to look up

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> dict[UserId, User]:
        """Find several users with a single IN query."""
        if not user_ids:
            return {}

        stmt = select(users_table).where(users_table.c.id.in_(list(user_ids)))
        result = await self.session.execute(stmt)
        users = [row_to_user(dict(row)) for row in result.mappings().all()]
        return {user.id: user for user in users}
