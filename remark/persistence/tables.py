"""SQLAlchemy table definitions for Remark.

comments and leads are owned by this service and created by the Alembic
migrations. users and posts belong to the account and content services;
they are declared here only so repositories can read them.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE (read-only, owned by the account service)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("username", String(255), nullable=False),
    Column("avatar_url", Text, nullable=True),
    Column("email", String(255), nullable=True),
    Column("role", String(20), nullable=False),  # 'admin', 'author', 'member'
    Column("is_active", Boolean, nullable=False),
    Column("created_at", TIMESTAMP(timezone=True), nullable=False),
)

# ============================================================================
# POSTS TABLE (read-only, owned by the content service)
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("title", String(300), nullable=False),
    Column("author_id", UUID(as_uuid=True), nullable=False),
    Column("status", String(20), nullable=False),  # 'draft', 'published', 'archived'
    Column("created_at", TIMESTAMP(timezone=True), nullable=False),
)

# ============================================================================
# COMMENTS TABLE (two-tier threads)
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("post_id", UUID(as_uuid=True), nullable=False),
    Column("author_id", UUID(as_uuid=True), nullable=False),
    Column("content", Text, nullable=False),
    # Replies must be removed before their parent
    Column(
        "parent_comment_id",
        UUID(as_uuid=True),
        ForeignKey("comments.id", ondelete="RESTRICT"),
        nullable=True,
    ),
    Column("is_approved", Boolean, nullable=False, server_default="false"),
    Column("is_spam", Boolean, nullable=False, server_default="false"),
    Column("is_edited", Boolean, nullable=False, server_default="false"),
    Column("ip_address", String(64), nullable=True),
    Column("user_agent", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "NOT (is_approved AND is_spam)",
        name="approved_or_spam",
    ),
    CheckConstraint(
        "char_length(content) BETWEEN 1 AND 2000",
        name="content_length",
    ),
)

Index(
    "idx_comments_post_top_level",
    comments_table.c.post_id,
    comments_table.c.created_at.desc(),
    postgresql_where=comments_table.c.parent_comment_id.is_(None),
)
Index(
    "idx_comments_parent",
    comments_table.c.parent_comment_id,
    comments_table.c.created_at,
)
Index("idx_comments_created_at", comments_table.c.created_at.desc())

# ============================================================================
# LEADS TABLE (contact capture, unique per email and post)
# ============================================================================
leads_table = Table(
    "leads",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("name", String(100), nullable=False),
    Column("email", String(255), nullable=False),
    Column("phone", String(50), nullable=True),
    Column("source", String(20), nullable=False),  # 'comment', 'newsletter', 'contact'
    Column("post_id", UUID(as_uuid=True), nullable=True),
    Column("post_title", String(300), nullable=True),
    # Leads outlive their comment
    Column(
        "comment_id",
        UUID(as_uuid=True),
        ForeignKey("comments.id", ondelete="SET NULL"),
        nullable=True,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("expires_at", TIMESTAMP(timezone=True), nullable=False),
    UniqueConstraint("email", "post_id", name="uq_leads_email_post"),
)

Index("idx_leads_source", leads_table.c.source)
Index("idx_leads_updated_at", leads_table.c.updated_at.desc())
