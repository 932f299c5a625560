"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from remark.domain.model.post import Post
from remark.domain.value import PostId


class PostRepository(ABC):
    """Read-only access to posts owned by the content service."""

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass
