"""Create comment use case."""

from typing import Any
from uuid import UUID

import logfire
from pydantic import BaseModel

from remark.domain.error import UpstreamWriteFailure
from remark.domain.model import Actor
from remark.domain.service import (
    Action,
    AuthorizationTarget,
    CommentService,
    LeadService,
    PostService,
    UserService,
    can_perform,
)
from remark.domain.value import CommentId, PostId

from remark.application.usecase.base import BaseUseCase
from remark.application.usecase.comment.get_comments import CommentItem


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: str  # UUID string
    actor: Actor | None
    content: str
    parent_comment_id: str | None = None  # Top-level comment replied to
    contact: dict[str, Any] | None = None  # Raw contact block for lead capture
    ip_address: str | None = None
    user_agent: str | None = None


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    comment: CommentItem
    lead_captured: bool


class CreateCommentUseCase(BaseUseCase):
    """Use case for commenting on a post or replying to a top-level comment."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
        user_service: UserService,
        lead_service: LeadService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
            user_service: User domain service
            lead_service: Lead domain service
        """
        self.comment_service = comment_service
        self.post_service = post_service
        self.user_service = user_service
        self.lead_service = lead_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Steps:
        1. Load the post and, for replies, the parent comment
        2. Authorize (published post, top-level parent on the same post)
        3. Create the comment; admins' comments start approved
        4. Capture a lead from valid, non-anonymous contact details

        Invalid contact details and failed lead writes are logged and never
        fail the comment.

        Raises:
            NotAuthenticatedError: If there is no active actor
            NotFoundError: If the post or parent comment does not exist
            InvalidParentError: If the parent cannot hold replies
            ValidationError: If content is invalid
        """
        post_id = PostId(UUID(request.post_id))
        parent_id = (
            CommentId(UUID(request.parent_comment_id))
            if request.parent_comment_id
            else None
        )

        post = await self.post_service.get_post_by_id(post_id)
        parent = (
            await self.comment_service.get_comment_by_id(parent_id)
            if parent_id
            else None
        )
        can_perform(
            request.actor,
            Action.CREATE,
            AuthorizationTarget(
                post_id=post_id,
                post=post,
                parent_comment_id=parent_id,
                parent=parent,
            ),
        ).enforce()

        comment = await self.comment_service.create_comment(
            post_id=post_id,
            author=request.actor,
            content=request.content,
            parent_comment_id=parent_id,
            ip_address=request.ip_address,
            user_agent=request.user_agent,
        )

        lead_captured = False
        contact = self.lead_service.parse_contact(request.contact, comment)
        if contact is not None:
            try:
                lead = await self.lead_service.capture_from_comment(
                    contact, post, comment
                )
                lead_captured = lead is not None
            except UpstreamWriteFailure as e:
                logfire.warn(
                    "Comment created without lead",
                    comment_id=str(comment.id),
                    error=str(e),
                )

        authors = await self.user_service.get_authors([comment.author_id])
        return CreateCommentResponse(
            comment=CommentItem.from_comment(comment, authors.get(comment.author_id)),
            lead_captured=lead_captured,
        )
