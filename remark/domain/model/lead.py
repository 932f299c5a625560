"""Lead entity.

A lead is a contact record derived from a non-anonymous comment. It has its
own lifecycle: deleting the comment leaves the lead in place, and expires_at
is advisory metadata for downstream retention jobs.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from remark.domain.model.common import DomainModel, utcnow
from remark.domain.value import CommentId, LeadId, LeadSource, PostId


class Lead(DomainModel):
    """Contact details captured from a commenter.

    Unique per (email, post_id): resubmitting on the same post refreshes
    the existing lead instead of creating another one.
    """

    id: LeadId
    name: str = Field(min_length=1, max_length=100)
    email: str = Field(min_length=3, max_length=255)
    phone: Optional[str] = None
    source: LeadSource = LeadSource.COMMENT
    post_id: Optional[PostId] = None
    post_title: Optional[str] = None
    comment_id: Optional[CommentId] = None
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
    expires_at: datetime

    def is_expired(self, now: datetime) -> bool:
        return self.expires_at <= now
