"""create_comments_and_leads

Create the tables owned by Remark:
- Comments (two-tier threads, approval and spam flags kept exclusive)
- Leads (contact capture, unique per email and post)

users and posts are owned by other services and must already exist.

Revision ID: 3c1f9a2b7d40
Revises:
Create Date: 2026-10-19 10:12:04.318276

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f9a2b7d40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # COMMENTS TABLE
    # ========================================================================
    op.create_table(
        "comments",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("post_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("author_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("parent_comment_id", postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column(
            "is_approved", sa.Boolean(), nullable=False, server_default=sa.false()
        ),
        sa.Column("is_spam", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column(
            "is_edited", sa.Boolean(), nullable=False, server_default=sa.false()
        ),
        sa.Column("ip_address", sa.String(64), nullable=True),
        sa.Column("user_agent", sa.Text(), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(
            ["post_id"], ["posts.id"], name="fk_comments_post", ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(
            ["author_id"], ["users.id"], name="fk_comments_author"
        ),
        sa.ForeignKeyConstraint(
            ["parent_comment_id"],
            ["comments.id"],
            name="fk_comments_parent",
            ondelete="RESTRICT",
        ),
        sa.CheckConstraint("NOT (is_approved AND is_spam)", name="approved_or_spam"),
        sa.CheckConstraint(
            "char_length(content) BETWEEN 1 AND 2000", name="content_length"
        ),
    )

    op.create_index(
        "idx_comments_post_top_level",
        "comments",
        ["post_id", sa.text("created_at DESC")],
        postgresql_where=sa.text("parent_comment_id IS NULL"),
    )
    op.create_index(
        "idx_comments_parent", "comments", ["parent_comment_id", "created_at"]
    )
    op.create_index(
        "idx_comments_created_at", "comments", [sa.text("created_at DESC")]
    )

    # ========================================================================
    # LEADS TABLE
    # ========================================================================
    op.create_table(
        "leads",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("phone", sa.String(50), nullable=True),
        sa.Column("source", sa.String(20), nullable=False),
        sa.Column("post_id", postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column("post_title", sa.String(300), nullable=True),
        sa.Column("comment_id", postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("expires_at", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(
            ["comment_id"],
            ["comments.id"],
            name="fk_leads_comment",
            ondelete="SET NULL",
        ),
        sa.UniqueConstraint("email", "post_id", name="uq_leads_email_post"),
        sa.CheckConstraint(
            "source IN ('comment', 'newsletter', 'contact')", name="lead_source"
        ),
    )

    op.create_index("idx_leads_source", "leads", ["source"])
    op.create_index("idx_leads_updated_at", "leads", [sa.text("updated_at DESC")])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_leads_updated_at", table_name="leads")
    op.drop_index("idx_leads_source", table_name="leads")
    op.drop_table("leads")

    op.drop_index("idx_comments_created_at", table_name="comments")
    op.drop_index("idx_comments_parent", table_name="comments")
    op.drop_index("idx_comments_post_top_level", table_name="comments")
    op.drop_table("comments")
