"""Domain value objects for Remark."""

from remark.domain.value.identifiers import CommentId, LeadId, PostId, UserId
from remark.domain.value.moderation import (
    ModerationFlags,
    ModerationTransition,
    flag_patch,
    initial_flags,
)
from remark.domain.value.types import (
    CommenterContact,
    CommentSort,
    ExportFormat,
    LeadSource,
    ModerationState,
    PostStatus,
    UserRole,
)

__all__ = [
    # Identifiers
    "CommentId",
    "LeadId",
    "PostId",
    "UserId",
    # Types
    "CommenterContact",
    "CommentSort",
    "ExportFormat",
    "LeadSource",
    "ModerationState",
    "PostStatus",
    "UserRole",
    # Moderation
    "ModerationFlags",
    "ModerationTransition",
    "flag_patch",
    "initial_flags",
]
