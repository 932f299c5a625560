"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .lead import InMemoryLeadRepository
from .post import InMemoryPostRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryLeadRepository",
    "InMemoryPostRepository",
    "InMemoryUserRepository",
]
