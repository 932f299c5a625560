"""PostgreSQL repository implementations."""

from remark.persistence.repository.comment import PostgresCommentRepository
from remark.persistence.repository.lead import PostgresLeadRepository
from remark.persistence.repository.post import PostgresPostRepository
from remark.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresCommentRepository",
    "PostgresLeadRepository",
    "PostgresPostRepository",
    "PostgresUserRepository",
]
