"""Comment use cases."""

from .create_comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
)
from .delete_comment import (
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
)
from .get_comment_stats import (
    GetCommentStatsRequest,
    GetCommentStatsResponse,
    GetCommentStatsUseCase,
)
from .get_comments import (
    CommentAuthor,
    CommentItem,
    CommentThreadItem,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
)
from .list_comments import ListCommentsRequest, ListCommentsResponse, ListCommentsUseCase
from .moderate_comment import (
    ModerateCommentRequest,
    ModerateCommentResponse,
    ModerateCommentUseCase,
)
from .update_comment import (
    UpdateCommentRequest,
    UpdateCommentResponse,
    UpdateCommentUseCase,
)

__all__ = [
    "CommentAuthor",
    "CommentItem",
    "CommentThreadItem",
    "CreateCommentRequest",
    "CreateCommentResponse",
    "CreateCommentUseCase",
    "DeleteCommentRequest",
    "DeleteCommentResponse",
    "DeleteCommentUseCase",
    "GetCommentStatsRequest",
    "GetCommentStatsResponse",
    "GetCommentStatsUseCase",
    "GetCommentsRequest",
    "GetCommentsResponse",
    "GetCommentsUseCase",
    "ListCommentsRequest",
    "ListCommentsResponse",
    "ListCommentsUseCase",
    "ModerateCommentRequest",
    "ModerateCommentResponse",
    "ModerateCommentUseCase",
    "UpdateCommentRequest",
    "UpdateCommentResponse",
    "UpdateCommentUseCase",
]
