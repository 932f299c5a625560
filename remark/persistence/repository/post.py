"""PostgreSQL implementation of Post repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from remark.domain.model import Post
from remark.domain.repository import PostRepository
from remark.domain.value import PostId
from remark.persistence.mappers import row_to_post
from remark.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    """Reads posts from the content service's table."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        stmt = select(posts_table).where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_post(dict(row)) if row else None
