"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from remark.domain.model import Comment, Lead, Post, User
from remark.domain.value import (
    CommentId,
    LeadId,
    LeadSource,
    PostId,
    PostStatus,
    UserId,
    UserRole,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _optional_uuid(value: Any) -> UUID | None:
    return _uuid(value) if value is not None else None


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model."""
    return User(
        id=UserId(_uuid(row["id"])),
        username=row["username"],
        avatar_url=row.get("avatar_url"),
        email=row.get("email"),
        role=UserRole(row["role"]),
        is_active=row["is_active"],
        created_at=row["created_at"],
    )


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model."""
    return Post(
        id=PostId(_uuid(row["id"])),
        title=row["title"],
        author_id=UserId(_uuid(row["author_id"])),
        status=PostStatus(row["status"]),
        created_at=row["created_at"],
    )


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    parent_id = _optional_uuid(row.get("parent_comment_id"))
    return Comment(
        id=CommentId(_uuid(row["id"])),
        post_id=PostId(_uuid(row["post_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        content=row["content"],
        parent_comment_id=CommentId(parent_id) if parent_id else None,
        is_approved=row["is_approved"],
        is_spam=row["is_spam"],
        is_edited=row["is_edited"],
        ip_address=row.get("ip_address"),
        user_agent=row.get("user_agent"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion
    """
    return comment.model_dump()


def row_to_lead(row: Dict[str, Any]) -> Lead:
    """Convert database row to Lead domain model."""
    post_id = _optional_uuid(row.get("post_id"))
    comment_id = _optional_uuid(row.get("comment_id"))
    return Lead(
        id=LeadId(_uuid(row["id"])),
        name=row["name"],
        email=row["email"],
        phone=row.get("phone"),
        source=LeadSource(row["source"]),
        post_id=PostId(post_id) if post_id else None,
        post_title=row.get("post_title"),
        comment_id=CommentId(comment_id) if comment_id else None,
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        expires_at=row["expires_at"],
    )


def lead_to_dict(lead: Lead) -> Dict[str, Any]:
    """Convert Lead domain model to database dict."""
    data = lead.model_dump()
    data["source"] = lead.source.value
    return data
