"""Domain model entities for Remark."""

from remark.domain.model.comment import Comment
from remark.domain.model.lead import Lead
from remark.domain.model.post import Post
from remark.domain.model.user import Actor, User

__all__ = [
    "Actor",
    "Comment",
    "Lead",
    "Post",
    "User",
]
