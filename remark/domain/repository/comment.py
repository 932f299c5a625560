"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import Any, List, Optional, Sequence

from remark.domain.model.comment import Comment
from remark.domain.value import (
    CommentId,
    CommentSort,
    ModerationState,
    ModerationTransition,
    PostId,
)


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.

    The repository never cascades: delete() removes exactly one record and
    the caller is responsible for removing replies first.
    """

    @abstractmethod
    async def create(self, comment: Comment) -> Comment:
        """Insert a new comment.

        Args:
            comment: The comment to insert

        Returns:
            The stored comment
        """
        pass

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_top_level(
        self,
        post_id: PostId,
        only_visible: bool = True,
    ) -> List[Comment]:
        """List top-level comments of a post, newest first.

        Args:
            post_id: The post ID
            only_visible: Restrict to approved, non-spam comments

        Returns:
            Top-level comments ordered by created_at descending
        """
        pass

    @abstractmethod
    async def list_replies_for_parents(
        self,
        parent_ids: Sequence[CommentId],
        only_visible: bool = True,
    ) -> List[Comment]:
        """List replies of a batch of parent comments, oldest first.

        Must be answered with a single query for the whole batch.

        Args:
            parent_ids: IDs of the parent (top-level) comments
            only_visible: Restrict to approved, non-spam comments

        Returns:
            Flat list of replies ordered by created_at ascending
        """
        pass

    @abstractmethod
    async def update(
        self, comment_id: CommentId, patch: dict[str, Any]
    ) -> Optional[Comment]:
        """Apply a field patch in one conditional update.

        updated_at is refreshed automatically.

        Args:
            comment_id: The comment ID
            patch: Mapping of field name to new value

        Returns:
            The updated comment, or None if it does not exist
        """
        pass

    @abstractmethod
    async def apply_transition(
        self, comment_id: CommentId, transition: ModerationTransition
    ) -> Optional[Comment]:
        """Atomically apply a moderation transition.

        Implementations must not read the flags and write them back in two
        steps; two concurrent admin actions on the same comment must not
        lose an update.

        Args:
            comment_id: The comment ID
            transition: The transition to apply

        Returns:
            The updated comment, or None if it does not exist
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> bool:
        """Delete exactly one comment.

        Args:
            comment_id: The comment ID to delete

        Returns:
            True if a comment was removed
        """
        pass

    @abstractmethod
    async def delete_replies(self, parent_id: CommentId) -> int:
        """Delete every reply of a top-level comment.

        Safe to repeat: a second call removes nothing.

        Args:
            parent_id: The top-level comment ID

        Returns:
            Number of replies removed
        """
        pass

    @abstractmethod
    async def count_by_post(self, post_id: PostId) -> int:
        """Count every comment of a post regardless of moderation state.

        Args:
            post_id: The post ID

        Returns:
            Number of comments
        """
        pass

    @abstractmethod
    async def count_all(self, status: Optional[ModerationState] = None) -> int:
        """Count comments, optionally in one moderation state.

        Args:
            status: Moderation state filter (None for all comments)

        Returns:
            Number of matching comments
        """
        pass

    @abstractmethod
    async def list_all(
        self,
        status: Optional[ModerationState] = None,
        sort: CommentSort = CommentSort.NEWEST,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Comment]:
        """List comments across all posts for moderation.

        Args:
            status: Moderation state filter (None for all comments)
            sort: Sort order by creation time
            limit: Maximum number of comments to return
            offset: Number of comments to skip

        Returns:
            Page of comments
        """
        pass

    @abstractmethod
    async def list_recent(self, limit: int = 5) -> List[Comment]:
        """List the newest comments regardless of moderation state.

        Args:
            limit: Maximum number of comments to return

        Returns:
            Comments ordered by created_at descending
        """
        pass
