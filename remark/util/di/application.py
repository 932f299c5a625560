"""Application layer DI providers."""

from dishka import Scope, provide

from remark.application.usecase.auth import GetCurrentActorUseCase
from remark.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentStatsUseCase,
    GetCommentsUseCase,
    ListCommentsUseCase,
    ModerateCommentUseCase,
    UpdateCommentUseCase,
)
from remark.application.usecase.lead import (
    DeleteLeadUseCase,
    ExportLeadsUseCase,
    ListLeadsUseCase,
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


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Auth use cases
    @provide
    def get_current_actor_use_case(
        self, jwt_service: JWTService, user_service: UserService
    ) -> GetCurrentActorUseCase:
        """Provide get current actor use case."""
        return GetCurrentActorUseCase(
            jwt_service=jwt_service, user_service=user_service
        )

    # Comment use cases
    @provide
    def get_get_comments_use_case(
        self,
        comment_service: CommentService,
        post_service: PostService,
        user_service: UserService,
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(
            comment_service=comment_service,
            post_service=post_service,
            user_service=user_service,
        )

    @provide
    def get_create_comment_use_case(
        self,
        comment_service: CommentService,
        post_service: PostService,
        user_service: UserService,
        lead_service: LeadService,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service,
            post_service=post_service,
            user_service=user_service,
            lead_service=lead_service,
        )

    @provide
    def get_update_comment_use_case(
        self, comment_service: CommentService, user_service: UserService
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(
            comment_service=comment_service, user_service=user_service
        )

    @provide
    def get_delete_comment_use_case(
        self, comment_service: CommentService, post_service: PostService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(
            comment_service=comment_service, post_service=post_service
        )

    @provide
    def get_list_comments_use_case(
        self, comment_service: CommentService, user_service: UserService
    ) -> ListCommentsUseCase:
        """Provide admin comment listing use case."""
        return ListCommentsUseCase(
            comment_service=comment_service, user_service=user_service
        )

    @provide
    def get_moderate_comment_use_case(
        self,
        comment_service: CommentService,
        moderation_service: ModerationService,
        user_service: UserService,
    ) -> ModerateCommentUseCase:
        """Provide moderate comment use case."""
        return ModerateCommentUseCase(
            comment_service=comment_service,
            moderation_service=moderation_service,
            user_service=user_service,
        )

    @provide
    def get_comment_stats_use_case(
        self, stats_service: StatsService, user_service: UserService
    ) -> GetCommentStatsUseCase:
        """Provide comment stats use case."""
        return GetCommentStatsUseCase(
            stats_service=stats_service, user_service=user_service
        )

    # Lead use cases
    @provide
    def get_list_leads_use_case(self, lead_service: LeadService) -> ListLeadsUseCase:
        """Provide list leads use case."""
        return ListLeadsUseCase(lead_service=lead_service)

    @provide
    def get_delete_lead_use_case(self, lead_service: LeadService) -> DeleteLeadUseCase:
        """Provide delete lead use case."""
        return DeleteLeadUseCase(lead_service=lead_service)

    @provide
    def get_export_leads_use_case(
        self, lead_service: LeadService
    ) -> ExportLeadsUseCase:
        """Provide export leads use case."""
        return ExportLeadsUseCase(lead_service=lead_service)
