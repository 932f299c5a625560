"""Comment domain service."""

import math
from dataclasses import dataclass
from typing import Any
from uuid import uuid4

import logfire

from remark.config import CommentSettings
from remark.domain.error import NotFoundError, ValidationError
from remark.domain.model import Actor, Comment
from remark.domain.model.comment import MAX_CONTENT_LENGTH
from remark.domain.repository import CommentRepository
from remark.domain.value import (
    CommentId,
    CommentSort,
    ModerationState,
    PostId,
    flag_patch,
    initial_flags,
)

from .base import Service
from .thread import CommentThread, assemble_threads


@dataclass
class CommentPage:
    """One page of the admin comment listing."""

    comments: list[Comment]
    total: int
    page: int
    limit: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.limit) if self.limit else 0


class CommentService(Service):
    """Domain service for comment operations.

    Callers are expected to have run the authorization guard; this service
    only enforces data rules (content length, moderation flag exclusivity).
    """

    def __init__(
        self,
        comment_repository: CommentRepository,
        comment_settings: CommentSettings,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            comment_settings: Comment configuration
        """
        self.comment_repository = comment_repository
        self.settings = comment_settings

    def clean_content(self, content: str | None) -> str:
        """Strip and length-check comment content.

        Raises:
            ValidationError: If content is missing, blank or too long
        """
        text = (content or "").strip()
        if not text:
            raise ValidationError("Comment content is required")
        if len(text) > MAX_CONTENT_LENGTH:
            raise ValidationError(
                f"Comment cannot exceed {MAX_CONTENT_LENGTH} characters"
            )
        return text

    async def create_comment(
        self,
        post_id: PostId,
        author: Actor,
        content: str,
        parent_comment_id: CommentId | None = None,
        ip_address: str | None = None,
        user_agent: str | None = None,
    ) -> Comment:
        """Create a comment on a post or a reply to a top-level comment.

        Args:
            post_id: Post ID
            author: Actor writing the comment
            content: Comment text
            parent_comment_id: Top-level comment replied to (None for top-level)
            ip_address: Client address captured for provenance
            user_agent: Client user agent captured for provenance

        Returns:
            Stored comment

        Raises:
            ValidationError: If content is invalid
        """
        with logfire.span(
            "comment_service.create_comment",
            post_id=str(post_id),
            author_id=str(author.user_id),
            parent_comment_id=str(parent_comment_id) if parent_comment_id else None,
        ):
            flags = initial_flags(author.role)
            comment = Comment(
                id=CommentId(uuid4()),
                post_id=post_id,
                author_id=author.user_id,
                content=self.clean_content(content),
                parent_comment_id=parent_comment_id,
                is_approved=flags.is_approved,
                is_spam=flags.is_spam,
                ip_address=ip_address,
                user_agent=user_agent,
            )

            saved = await self.comment_repository.create(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                post_id=str(post_id),
                state=saved.moderation_state.value,
                is_reply=not saved.is_top_level,
            )
            return saved

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span(
            "comment_service.get_comment_by_id", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                logfire.warn("Comment not found", comment_id=str(comment_id))
            return comment

    async def get_threads_for_post(
        self, post_id: PostId, include_hidden: bool = False
    ) -> list[CommentThread]:
        """Load the two-tier discussion of a post.

        Issues exactly two store reads: top-level comments, then the
        replies of the top-level comments just loaded.

        Args:
            post_id: Post ID
            include_hidden: Include pending and spam comments (admin view)

        Returns:
            Threads, newest top-level comment first
        """
        with logfire.span(
            "comment_service.get_threads_for_post",
            post_id=str(post_id),
            include_hidden=include_hidden,
        ):
            only_visible = not include_hidden
            top_level = await self.comment_repository.list_top_level(
                post_id, only_visible=only_visible
            )
            replies = await self.comment_repository.list_replies_for_parents(
                [comment.id for comment in top_level], only_visible=only_visible
            )
            threads = assemble_threads(top_level, replies)
            logfire.info(
                "Comment threads assembled",
                post_id=str(post_id),
                threads=len(threads),
                replies=len(replies),
            )
            return threads

    async def update_comment(
        self, comment: Comment, changes: dict[str, Any], by_admin: bool
    ) -> Comment:
        """Apply an already-authorized edit.

        A non-admin edit only carries content and marks the comment edited.
        An admin edit may also change the moderation flags. Only the flags
        sent are written, plus the one cleared by setting the other.

        Args:
            comment: Comment being edited
            changes: Requested field values
            by_admin: Whether the editor is an admin

        Returns:
            Updated comment

        Raises:
            ValidationError: If nothing would change or values are invalid
            NotFoundError: If the comment disappeared
        """
        with logfire.span(
            "comment_service.update_comment",
            comment_id=str(comment.id),
            fields=sorted(changes),
            by_admin=by_admin,
        ):
            patch: dict[str, Any] = {}

            if "content" in changes:
                patch["content"] = self.clean_content(changes["content"])
                if not by_admin:
                    patch["is_edited"] = True

            if by_admin:
                if "is_edited" in changes:
                    patch["is_edited"] = bool(changes["is_edited"])
                if "is_approved" in changes or "is_spam" in changes:
                    try:
                        patch.update(
                            flag_patch(
                                changes.get("is_approved"), changes.get("is_spam")
                            )
                        )
                    except ValueError as e:
                        raise ValidationError(str(e)) from e

            if not patch:
                raise ValidationError("No updatable fields provided")

            updated = await self.comment_repository.update(comment.id, patch)
            if updated is None:
                logfire.warn("Comment vanished during update", comment_id=str(comment.id))
                raise NotFoundError("Comment", str(comment.id))

            logfire.info(
                "Comment updated",
                comment_id=str(comment.id),
                fields=sorted(patch),
            )
            return updated

    async def delete_replies(self, parent_id: CommentId) -> int:
        """Delete every reply of a top-level comment.

        Args:
            parent_id: Top-level comment ID

        Returns:
            Number of replies removed
        """
        with logfire.span("comment_service.delete_replies", parent_id=str(parent_id)):
            removed = await self.comment_repository.delete_replies(parent_id)
            logfire.info("Replies deleted", parent_id=str(parent_id), count=removed)
            return removed

    async def delete_comment(self, comment_id: CommentId) -> bool:
        """Delete a single comment without touching its replies.

        Args:
            comment_id: Comment ID

        Returns:
            True if the comment existed
        """
        with logfire.span("comment_service.delete_comment", comment_id=str(comment_id)):
            removed = await self.comment_repository.delete(comment_id)
            if removed:
                logfire.info("Comment deleted", comment_id=str(comment_id))
            else:
                logfire.warn("Comment already gone", comment_id=str(comment_id))
            return removed

    async def list_for_moderation(
        self,
        status: ModerationState | None,
        sort: CommentSort,
        page: int,
        limit: int | None = None,
    ) -> CommentPage:
        """List a page of comments across all posts.

        Args:
            status: Moderation state filter (None for all)
            sort: Creation time ordering
            page: 1-based page number
            limit: Page size (configured default when None), capped by configuration

        Returns:
            The page with the total number of matching comments
        """
        if limit is None:
            limit = self.settings.default_page_size
        limit = max(1, min(limit, self.settings.max_page_size))
        page = max(1, page)
        with logfire.span(
            "comment_service.list_for_moderation",
            status=status.value if status else None,
            sort=sort.value,
            page=page,
            limit=limit,
        ):
            total = await self.comment_repository.count_all(status)
            comments = await self.comment_repository.list_all(
                status=status,
                sort=sort,
                limit=limit,
                offset=(page - 1) * limit,
            )
            logfire.info(
                "Comments listed for moderation", count=len(comments), total=total
            )
            return CommentPage(comments=comments, total=total, page=page, limit=limit)
