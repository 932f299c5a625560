"""Moderation domain service."""

import logfire

from remark.domain.error import NotFoundError
from remark.domain.model import Comment
from remark.domain.repository import CommentRepository
from remark.domain.value import CommentId, ModerationTransition

from .base import Service


class ModerationService(Service):
    """Applies admin moderation transitions to stored comments."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize moderation service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def apply(
        self, comment_id: CommentId, transition: ModerationTransition
    ) -> Comment:
        """Apply a transition in one atomic store update.

        Args:
            comment_id: Comment ID
            transition: Transition to apply

        Returns:
            Comment with its new moderation flags

        Raises:
            NotFoundError: If the comment disappeared
        """
        with logfire.span(
            "moderation_service.apply",
            comment_id=str(comment_id),
            transition=transition.value,
        ):
            updated = await self.comment_repository.apply_transition(
                comment_id, transition
            )
            if updated is None:
                logfire.warn(
                    "Comment not found for moderation", comment_id=str(comment_id)
                )
                raise NotFoundError("Comment", str(comment_id))

            logfire.info(
                "Comment moderated",
                comment_id=str(comment_id),
                transition=transition.value,
                state=updated.moderation_state.value,
            )
            return updated

    async def approve(self, comment_id: CommentId) -> Comment:
        """Approve a comment, clearing any spam flag."""
        return await self.apply(comment_id, ModerationTransition.APPROVE)

    async def mark_spam(self, comment_id: CommentId) -> Comment:
        """Mark a comment as spam, clearing approval."""
        return await self.apply(comment_id, ModerationTransition.MARK_SPAM)

    async def toggle_approval(self, comment_id: CommentId) -> Comment:
        """Flip approval; approving also clears spam."""
        return await self.apply(comment_id, ModerationTransition.TOGGLE_APPROVAL)
