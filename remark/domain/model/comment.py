"""Comment entity.

Comments form a two-tier discussion tree on a post: a top-level comment
anchors a thread and replies hang directly off it. Replies to replies do
not exist.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator, model_validator

from remark.domain.model.common import DomainModel, utcnow
from remark.domain.value import CommentId, ModerationState, PostId, UserId

MAX_CONTENT_LENGTH = 2000


class Comment(DomainModel):
    """Comment entity.

    Moderation is tracked with two flags kept for compatibility with
    existing consumers:
    - is_approved: an admin accepted the comment
    - is_spam: an admin flagged the comment as spam

    Both flags are never true at the same time. Only approved, non-spam
    comments are visible to the public.
    """

    id: CommentId
    post_id: PostId
    author_id: UserId
    content: str = Field(min_length=1, max_length=MAX_CONTENT_LENGTH)
    parent_comment_id: Optional[CommentId] = None
    is_approved: bool = False
    is_spam: bool = False
    is_edited: bool = False
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @field_validator("content", mode="before")
    @classmethod
    def strip_content(cls, v: object) -> object:
        """Trim surrounding whitespace before length checks."""
        return v.strip() if isinstance(v, str) else v

    @model_validator(mode="after")
    def validate_moderation_flags(self) -> "Comment":
        """A comment cannot be approved and spam at once."""
        if self.is_approved and self.is_spam:
            raise ValueError("A comment cannot be both approved and marked as spam")
        return self

    @property
    def is_top_level(self) -> bool:
        return self.parent_comment_id is None

    @property
    def is_visible(self) -> bool:
        """Whether the public may see this comment."""
        return self.is_approved and not self.is_spam

    @property
    def moderation_state(self) -> ModerationState:
        if self.is_spam:
            return ModerationState.SPAM
        if self.is_approved:
            return ModerationState.APPROVED
        return ModerationState.PENDING
