"""Moderate comment use case."""

from uuid import UUID

from pydantic import BaseModel

from remark.application.usecase.base import BaseUseCase
from remark.application.usecase.comment.get_comments import CommentItem
from remark.domain.model import Actor
from remark.domain.service import (
    Action,
    AuthorizationTarget,
    CommentService,
    ModerationService,
    UserService,
    can_perform,
)
from remark.domain.value import CommentId, ModerationTransition


class ModerateCommentRequest(BaseModel):
    """Moderate comment request."""

    comment_id: str  # UUID string
    actor: Actor | None
    transition: ModerationTransition


class ModerateCommentResponse(BaseModel):
    """Moderate comment response."""

    comment: CommentItem


class ModerateCommentUseCase(BaseUseCase):
    """Use case for approving, toggling approval of, or marking a comment as spam."""

    def __init__(
        self,
        comment_service: CommentService,
        moderation_service: ModerationService,
        user_service: UserService,
    ) -> None:
        """Initialize moderate comment use case.

        Args:
            comment_service: Comment domain service
            moderation_service: Moderation domain service
            user_service: User domain service
        """
        self.comment_service = comment_service
        self.moderation_service = moderation_service
        self.user_service = user_service

    async def execute(
        self, request: ModerateCommentRequest
    ) -> ModerateCommentResponse:
        """Execute moderate comment flow.

        Raises:
            NotAuthenticatedError: If there is no active actor
            ForbiddenError: If the actor is not an admin
            NotFoundError: If the comment does not exist
        """
        comment_id = CommentId(UUID(request.comment_id))
        comment = await self.comment_service.get_comment_by_id(comment_id)

        can_perform(
            request.actor,
            Action.MODERATE,
            AuthorizationTarget(comment_id=comment_id, comment=comment),
        ).enforce()

        updated = await self.moderation_service.apply(comment_id, request.transition)
        authors = await self.user_service.get_authors([updated.author_id])
        return ModerateCommentResponse(
            comment=CommentItem.from_comment(updated, authors.get(updated.author_id))
        )
