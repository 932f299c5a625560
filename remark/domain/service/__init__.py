"""Domain services."""

from .authorization import (
    Action,
    AuthorizationDecision,
    AuthorizationTarget,
    Denial,
    can_perform,
    sees_hidden_comments,
)
from .base import Service
from .comment_service import CommentPage, CommentService
from .jwt_service import JWTService
from .lead_service import LeadExport, LeadService
from .moderation import ModerationService
from .post_service import PostService
from .stats_service import CommentStats, StatsService
from .thread import CommentThread, assemble_threads
from .user_service import UserService

__all__ = [
    "Action",
    "AuthorizationDecision",
    "AuthorizationTarget",
    "CommentPage",
    "CommentService",
    "CommentStats",
    "CommentThread",
    "Denial",
    "JWTService",
    "LeadExport",
    "LeadService",
    "ModerationService",
    "PostService",
    "Service",
    "StatsService",
    "UserService",
    "assemble_threads",
    "can_perform",
    "sees_hidden_comments",
]
