"""PostgreSQL implementation of Comment repository."""

from typing import Any, List, Optional, Sequence

from sqlalchemy import (
    ColumnElement,
    and_,
    case,
    delete,
    false,
    func,
    not_,
    select,
    true,
    update,
)
from sqlalchemy.ext.asyncio import AsyncSession

from remark.domain.model import Comment
from remark.domain.model.common import utcnow
from remark.domain.repository import CommentRepository
from remark.domain.value import (
    CommentId,
    CommentSort,
    ModerationFlags,
    ModerationState,
    ModerationTransition,
    PostId,
)
from remark.persistence.mappers import comment_to_dict, row_to_comment
from remark.persistence.tables import comments_table

c = comments_table.c


def _visible() -> ColumnElement[bool]:
    return and_(c.is_approved.is_(true()), c.is_spam.is_(false()))


def _in_state(state: ModerationState) -> ColumnElement[bool]:
    if state == ModerationState.SPAM:
        return c.is_spam.is_(true())
    if state == ModerationState.APPROVED:
        return _visible()
    return and_(c.is_approved.is_(false()), c.is_spam.is_(false()))


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def create(self, comment: Comment) -> Comment:
        """Insert a new comment."""
        stmt = (
            comments_table.insert()
            .values(**comment_to_dict(comment))
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().one()
        await self.session.flush()
        return row_to_comment(dict(row))

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_comment(dict(row)) if row else None

    async def list_top_level(
        self,
        post_id: PostId,
        only_visible: bool = True,
    ) -> List[Comment]:
        """List top-level comments of a post, newest first."""
        stmt = select(comments_table).where(
            c.post_id == post_id, c.parent_comment_id.is_(None)
        )
        if only_visible:
            stmt = stmt.where(_visible())
        stmt = stmt.order_by(c.created_at.desc())

        result = await self.session.execute(stmt)
        return [row_to_comment(dict(row)) for row in result.mappings().all()]

    async def list_replies_for_parents(
        self,
        parent_ids: Sequence[CommentId],
        only_visible: bool = True,
    ) -> List[Comment]:
        """List replies of a batch of parents with a single IN query."""
        if not parent_ids:
            return []

        stmt = select(comments_table).where(c.parent_comment_id.in_(list(parent_ids)))
        if only_visible:
            stmt = stmt.where(_visible())
        stmt = stmt.order_by(c.created_at.asc())

        result = await self.session.execute(stmt)
        return [row_to_comment(dict(row)) for row in result.mappings().all()]

    async def update(
        self, comment_id: CommentId, patch: dict[str, Any]
    ) -> Optional[Comment]:
        """Apply a field patch with UPDATE ... RETURNING."""
        stmt = (
            update(comments_table)
            .where(c.id == comment_id)
            .values(**patch, updated_at=utcnow())
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        if row is None:
            return None

        await self.session.flush()
        return row_to_comment(dict(row))

    async def apply_transition(
        self, comment_id: CommentId, transition: ModerationTransition
    ) -> Optional[Comment]:
        """Apply a moderation transition in one statement.

        Toggle is computed from the stored flags inside the UPDATE so two
        concurrent toggles serialize on the row lock instead of both
        reading the same value.
        """
        if transition is ModerationTransition.TOGGLE_APPROVAL:
            # SET clauses read the pre-update row
            values: dict[str, Any] = {
                "is_approved": not_(c.is_approved),
                "is_spam": case((c.is_approved, c.is_spam), else_=false()),
            }
        else:
            flags = transition.apply(ModerationFlags())
            values = {"is_approved": flags.is_approved, "is_spam": flags.is_spam}

        stmt = (
            update(comments_table)
            .where(c.id == comment_id)
            .values(**values, updated_at=utcnow())
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        if row is None:
            return None

        await self.session.flush()
        return row_to_comment(dict(row))

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete exactly one comment (hard delete)."""
        stmt = delete(comments_table).where(c.id == comment_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def delete_replies(self, parent_id: CommentId) -> int:
        """Delete every reply of a top-level comment in one statement."""
        stmt = delete(comments_table).where(c.parent_comment_id == parent_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount or 0

    async def count_by_post(self, post_id: PostId) -> int:
        """Count every comment of a post."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(c.post_id == post_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def count_all(self, status: Optional[ModerationState] = None) -> int:
        """Count comments, optionally in one moderation state."""
        stmt = select(func.count()).select_from(comments_table)
        if status is not None:
            stmt = stmt.where(_in_state(status))
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def list_all(
        self,
        status: Optional[ModerationState] = None,
        sort: CommentSort = CommentSort.NEWEST,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Comment]:
        """List comments across all posts for moderation."""
        stmt = select(comments_table)
        if status is not None:
            stmt = stmt.where(_in_state(status))

        order = c.created_at.asc() if sort == CommentSort.OLDEST else c.created_at.desc()
        stmt = stmt.order_by(order, c.id).limit(limit).offset(offset)

        result = await self.session.execute(stmt)
        return [row_to_comment(dict(row)) for row in result.mappings().all()]

    async def list_recent(self, limit: int = 5) -> List[Comment]:
        """List the newest comments regardless of moderation state."""
        stmt = select(comments_table).order_by(c.created_at.desc()).limit(limit)
        result = await self.session.execute(stmt)
        return [row_to_comment(dict(row)) for row in result.mappings().all()]
