"""Update comment use case."""

from typing import Any
from uuid import UUID

from pydantic import BaseModel

from remark.domain.model import Actor
from remark.domain.service import (
    Action,
    AuthorizationTarget,
    CommentService,
    UserService,
    can_perform,
)
from remark.domain.value import CommentId

from remark.application.usecase.base import BaseUseCase
from remark.application.usecase.comment.get_comments import CommentItem


class UpdateCommentRequest(BaseModel):
    """Update comment request.

    changes holds only the fields the client sent; an explicit null is a
    change, an absent field is not.
    """

    comment_id: str  # UUID string
    actor: Actor | None
    changes: dict[str, Any]


class UpdateCommentResponse(BaseModel):
    """Update comment response."""

    comment: CommentItem


class UpdateCommentUseCase(BaseUseCase):
    """Use case for editing a comment or patching its moderation fields."""

    def __init__(
        self, comment_service: CommentService, user_service: UserService
    ) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment domain service
            user_service: User domain service
        """
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: UpdateCommentRequest) -> UpdateCommentResponse:
        """Execute update comment flow.

        Authors may change their own content, which marks the comment
        edited. Admins may change content and the moderation flags of any
        comment.

        Raises:
            NotAuthenticatedError: If there is no active actor
            ForbiddenError: If the actor may not change these fields, or a
                non-admin targets a missing comment
            NotFoundError: If an admin targets a missing comment
            ValidationError: If values are invalid
        """
        comment_id = CommentId(UUID(request.comment_id))
        comment = await self.comment_service.get_comment_by_id(comment_id)

        can_perform(
            request.actor,
            Action.UPDATE,
            AuthorizationTarget(
                comment_id=comment_id,
                comment=comment,
                fields=frozenset(request.changes),
            ),
        ).enforce()

        updated = await self.comment_service.update_comment(
            comment, request.changes, by_admin=request.actor.is_admin
        )

        authors = await self.user_service.get_authors([updated.author_id])
        return UpdateCommentResponse(
            comment=CommentItem.from_comment(updated, authors.get(updated.author_id))
        )
