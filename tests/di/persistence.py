"""Mock persistence providers for testing."""

from dishka import Scope, provide

from remark.domain.repository import (
    CommentRepository,
    LeadRepository,
    PostRepository,
    UserRepository,
)
from remark.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryLeadRepository,
    InMemoryPostRepository,
    InMemoryUserRepository,
)
from remark.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses APP scope so data seeded in one request is visible to the next
    (E2E tests seed users, then call the API). Isolation comes from every
    test building its own container.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_user_repository(self) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository()

    @provide(scope=Scope.APP)
    def get_post_repository(self) -> PostRepository:
        """Provide in-memory post repository."""
        return InMemoryPostRepository()

    @provide(scope=Scope.APP)
    def get_comment_repository(self) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository()

    @provide(scope=Scope.APP)
    def get_lead_repository(self) -> LeadRepository:
        """Provide in-memory lead repository."""
        return InMemoryLeadRepository()
