"""Comment statistics domain service."""

from dataclasses import dataclass

import logfire

from remark.config import CommentSettings
from remark.domain.model import Comment
from remark.domain.repository import CommentRepository
from remark.domain.value import ModerationState

from .base import Service


@dataclass
class CommentStats:
    """Moderation dashboard figures."""

    total: int
    approved: int
    pending: int
    spam: int
    recent: list[Comment]


class StatsService(Service):
    """Read-only aggregate counts for the moderation dashboard."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        comment_settings: CommentSettings,
    ) -> None:
        self.comment_repository = comment_repository
        self.settings = comment_settings

    async def get_stats(self) -> CommentStats:
        """Count comments per moderation state and load the newest ones.

        spam counts every comment flagged as spam; approved and pending
        exclude spam, so approved + pending + spam == total.
        """
        with logfire.span("stats_service.get_stats"):
            total = await self.comment_repository.count_all()
            approved = await self.comment_repository.count_all(ModerationState.APPROVED)
            pending = await self.comment_repository.count_all(ModerationState.PENDING)
            spam = await self.comment_repository.count_all(ModerationState.SPAM)
            recent = await self.comment_repository.list_recent(self.settings.recent_limit)

            logfire.info(
                "Comment stats computed",
                total=total,
                approved=approved,
                pending=pending,
                spam=spam,
            )
            return CommentStats(
                total=total,
                approved=approved,
                pending=pending,
                spam=spam,
                recent=recent,
            )
