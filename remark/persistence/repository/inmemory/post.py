"""In-memory post repository for testing."""

from typing import Optional

from remark.domain.model.post import Post
from remark.domain.repository.post import PostRepository
from remark.domain.value import PostId


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing.

    Posts are owned by another service, so save() exists only for seeding.
    """

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}

    async def save(self, post: Post) -> Post:
        self._posts[post.id] = post
        return post

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)
