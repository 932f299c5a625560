"""Domain layer DI providers."""

from dishka import Scope, provide

from remark.config import AuthSettings, CommentSettings, LeadSettings
from remark.domain.repository import (
    CommentRepository,
    LeadRepository,
    PostRepository,
    UserRepository,
)
from remark.domain.service import (
    CommentService,
    JWTService,
    LeadService,
    ModerationService,
    PostService,
    StatsService,
    UserService,
)
from remark.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances sharing one transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        comment_settings: CommentSettings,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository, comment_settings=comment_settings
        )

    @provide
    def get_moderation_service(
        self, comment_repository: CommentRepository
    ) -> ModerationService:
        """Provide moderation domain service."""
        return ModerationService(comment_repository=comment_repository)

    @provide
    def get_post_service(self, post_repository: PostRepository) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_lead_service(
        self, lead_repository: LeadRepository, lead_settings: LeadSettings
    ) -> LeadService:
        """Provide lead domain service."""
        return LeadService(lead_repository=lead_repository, lead_settings=lead_settings)

    @provide
    def get_stats_service(
        self,
        comment_repository: CommentRepository,
        comment_settings: CommentSettings,
    ) -> StatsService:
        """Provide comment statistics domain service."""
        return StatsService(
            comment_repository=comment_repository, comment_settings=comment_settings
        )
