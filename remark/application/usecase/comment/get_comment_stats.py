"""Get comment stats use case."""

from pydantic import BaseModel

from remark.application.usecase.base import BaseUseCase
from remark.application.usecase.comment.get_comments import CommentItem
from remark.domain.model import Actor
from remark.domain.service import Action, StatsService, UserService, can_perform


class GetCommentStatsRequest(BaseModel):
    """Get comment stats request."""

    actor: Actor | None


class GetCommentStatsResponse(BaseModel):
    """Moderation dashboard figures."""

    total: int
    approved: int
    pending: int
    spam: int
    recent: list[CommentItem]


class GetCommentStatsUseCase(BaseUseCase):
    """Use case for the moderation dashboard."""

    def __init__(self, stats_service: StatsService, user_service: UserService) -> None:
        self.stats_service = stats_service
        self.user_service = user_service

    async def execute(
        self, request: GetCommentStatsRequest
    ) -> GetCommentStatsResponse:
        """Execute get comment stats flow.

        Raises:
            NotAuthenticatedError: If there is no active actor
            ForbiddenError: If the actor is not an admin
        """
        can_perform(request.actor, Action.VIEW_STATS).enforce()

        stats = await self.stats_service.get_stats()
        authors = await self.user_service.get_authors(
            [comment.author_id for comment in stats.recent]
        )

        return GetCommentStatsResponse(
            total=stats.total,
            approved=stats.approved,
            pending=stats.pending,
            spam=stats.spam,
            recent=[
                CommentItem.from_comment(comment, authors.get(comment.author_id))
                for comment in stats.recent
            ],
        )
