"""Delete comment use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from remark.application.usecase.base import BaseUseCase
from remark.domain.error import NotFoundError
from remark.domain.model import Actor
from remark.domain.service import (
    Action,
    AuthorizationTarget,
    CommentService,
    PostService,
    can_perform,
)
from remark.domain.value import CommentId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str  # UUID string
    actor: Actor | None


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    comment_id: str
    deleted_count: int  # The comment plus any replies removed with it


class DeleteCommentUseCase(BaseUseCase):
    """Use case for deleting a comment and, for top-level comments, its thread."""

    def __init__(
        self, comment_service: CommentService, post_service: PostService
    ) -> None:
        """Initialize delete comment use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service (to recognise the post author)
        """
        self.comment_service = comment_service
        self.post_service = post_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Steps:
        1. Load the comment and its post
        2. Authorize (comment author, post author or admin)
        3. For a top-level comment, delete its replies first
        4. Delete the comment itself

        Both deletes run in the request transaction. Replies go first
        because the store refuses to remove a parent that still has them,
        and a retry after a partial failure is harmless.

        Raises:
            NotAuthenticatedError: If there is no active actor
            ForbiddenError: If the actor may not delete the comment, or a
                non-admin targets a missing comment
            NotFoundError: If an admin targets a missing comment
        """
        comment_id = CommentId(UUID(request.comment_id))
        comment = await self.comment_service.get_comment_by_id(comment_id)
        post = (
            await self.post_service.get_post_by_id(comment.post_id) if comment else None
        )

        can_perform(
            request.actor,
            Action.DELETE,
            AuthorizationTarget(comment_id=comment_id, comment=comment, post=post),
        ).enforce()

        replies_deleted = 0
        if comment.is_top_level:
            replies_deleted = await self.comment_service.delete_replies(comment.id)

        if not await self.comment_service.delete_comment(comment.id):
            raise NotFoundError("Comment", request.comment_id)

        logfire.info(
            "Comment thread deleted",
            comment_id=request.comment_id,
            replies_deleted=replies_deleted,
        )
        return DeleteCommentResponse(
            comment_id=request.comment_id,
            deleted_count=replies_deleted + 1,
        )
