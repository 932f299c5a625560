"""In-memory comment repository for testing."""

from typing import Any, Optional, Sequence

from remark.domain.model.comment import Comment
from remark.domain.model.common import utcnow
from remark.domain.repository.comment import CommentRepository
from remark.domain.value import (
    CommentId,
    CommentSort,
    ModerationFlags,
    ModerationState,
    ModerationTransition,
    PostId,
)


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing.

    Mirrors the PostgreSQL constraints that matter to callers: a parent
    cannot be deleted while replies still reference it.
    """

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def create(self, comment: Comment) -> Comment:
        """Insert a new comment."""
        if comment.id in self._comments:
            raise ValueError(f"Comment already exists: {comment.id}")
        self._comments[comment.id] = comment
        return comment

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def list_top_level(
        self,
        post_id: PostId,
        only_visible: bool = True,
    ) -> list[Comment]:
        """List top-level comments of a post, newest first."""
        comments = [
            c
            for c in self._comments.values()
            if c.post_id == post_id and c.is_top_level
        ]
        if only_visible:
            comments = [c for c in comments if c.is_visible]
        comments.sort(key=lambda c: c.created_at, reverse=True)
        return comments

    async def list_replies_for_parents(
        self,
        parent_ids: Sequence[CommentId],
        only_visible: bool = True,
    ) -> list[Comment]:
        """List replies of a batch of parents, oldest first."""
        wanted = set(parent_ids)
        if not wanted:
            return []
        replies = [
            c for c in self._comments.values() if c.parent_comment_id in wanted
        ]
        if only_visible:
            replies = [c for c in replies if c.is_visible]
        replies.sort(key=lambda c: c.created_at)
        return replies

    async def update(
        self, comment_id: CommentId, patch: dict[str, Any]
    ) -> Optional[Comment]:
        """Apply a field patch."""
        comment = self._comments.get(comment_id)
        if comment is None:
            return None
        # Round-trip through validation so invalid patches fail like a CHECK
        updated = Comment.model_validate(
            {**comment.model_dump(), **patch, "updated_at": utcnow()}
        )
        self._comments[comment_id] = updated
        return updated

    async def apply_transition(
        self, comment_id: CommentId, transition: ModerationTransition
    ) -> Optional[Comment]:
        """Apply a moderation transition."""
        comment = self._comments.get(comment_id)
        if comment is None:
            return None
        flags = transition.apply(
            ModerationFlags(is_approved=comment.is_approved, is_spam=comment.is_spam)
        )
        updated = comment.model_copy(
            update={
                "is_approved": flags.is_approved,
                "is_spam": flags.is_spam,
                "updated_at": utcnow(),
            }
        )
        self._comments[comment_id] = updated
        return updated

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete exactly one comment."""
        if any(c.parent_comment_id == comment_id for c in self._comments.values()):
            raise ValueError(f"Comment still has replies: {comment_id}")
        return self._comments.pop(comment_id, None) is not None

    async def delete_replies(self, parent_id: CommentId) -> int:
        """Delete every reply of a top-level comment."""
        reply_ids = [
            c.id for c in self._comments.values() if c.parent_comment_id == parent_id
        ]
        for reply_id in reply_ids:
            del self._comments[reply_id]
        return len(reply_ids)

    async def count_by_post(self, post_id: PostId) -> int:
        """Count every comment of a post."""
        return sum(1 for c in self._comments.values() if c.post_id == post_id)

    def _filter(self, status: Optional[ModerationState]) -> list[Comment]:
        comments = list(self._comments.values())
        if status is not None:
            comments = [c for c in comments if c.moderation_state == status]
        return comments

    async def count_all(self, status: Optional[ModerationState] = None) -> int:
        """Count comments, optionally in one moderation state."""
        return len(self._filter(status))

    async def list_all(
        self,
        status: Optional[ModerationState] = None,
        sort: CommentSort = CommentSort.NEWEST,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Comment]:
        """List comments across all posts for moderation."""
        comments = self._filter(status)
        comments.sort(
            key=lambda c: c.created_at, reverse=sort == CommentSort.NEWEST
        )
        return comments[offset : offset + limit]

    async def list_recent(self, limit: int = 5) -> list[Comment]:
        """List the newest comments regardless of moderation state."""
        comments = sorted(
            self._comments.values(), key=lambda c: c.created_at, reverse=True
        )
        return comments[:limit]
