"""Post entity.

Posts are owned by the content service. Remark only reads the handful of
fields it needs to decide whether a post accepts comments and who wrote it.
"""

from datetime import datetime

from pydantic import Field

from remark.domain.model.common import DomainModel, utcnow
from remark.domain.value import PostId, PostStatus, UserId


class Post(DomainModel):
    """Read-only view of a post."""

    id: PostId
    title: str = Field(min_length=1, max_length=300)
    author_id: UserId
    status: PostStatus = PostStatus.DRAFT
    created_at: datetime = Field(default_factory=utcnow)

    @property
    def is_published(self) -> bool:
        return self.status == PostStatus.PUBLISHED
