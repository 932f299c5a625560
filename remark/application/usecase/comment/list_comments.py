"""List comments use case (moderation queue)."""

from pydantic import BaseModel, Field

from remark.application.usecase.base import BaseUseCase
from remark.application.usecase.comment.get_comments import CommentItem
from remark.domain.model import Actor
from remark.domain.service import Action, CommentService, UserService, can_perform
from remark.domain.value import CommentSort, ModerationState


class ListCommentsRequest(BaseModel):
    """List comments request."""

    actor: Actor | None
    status: ModerationState | None = None
    sort: CommentSort = CommentSort.NEWEST
    page: int = Field(default=1, ge=1)
    limit: int | None = Field(default=None, ge=1)  # Configured default when None


class ListCommentsResponse(BaseModel):
    """List comments response."""

    comments: list[CommentItem]
    results: int
    total: int
    total_pages: int
    current_page: int


class ListCommentsUseCase(BaseUseCase):
    """Use case for the admin listing of comments across all posts."""

    def __init__(
        self, comment_service: CommentService, user_service: UserService
    ) -> None:
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: ListCommentsRequest) -> ListCommentsResponse:
        """Execute list comments flow.

        Raises:
            NotAuthenticatedError: If there is no active actor
            ForbiddenError: If the actor is not an admin
        """
        can_perform(request.actor, Action.LIST_ALL).enforce()

        page = await self.comment_service.list_for_moderation(
            status=request.status,
            sort=request.sort,
            page=request.page,
            limit=request.limit,
        )
        authors = await self.user_service.get_authors(
            [comment.author_id for comment in page.comments]
        )

        return ListCommentsResponse(
            comments=[
                CommentItem.from_comment(comment, authors.get(comment.author_id))
                for comment in page.comments
            ],
            results=len(page.comments),
            total=page.total,
            total_pages=page.total_pages,
            current_page=page.page,
        )
