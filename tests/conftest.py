"""Test configuration and fixtures."""

from datetime import datetime, timedelta
from uuid import uuid4

import logfire

from remark.config import AuthSettings
from remark.domain.model import Comment, Lead, Post, User
from remark.domain.model.common import utcnow
from remark.domain.value import (
    CommentId,
    LeadId,
    LeadSource,
    PostId,
    PostStatus,
    UserId,
    UserRole,
)
from remark.util.jwt import create_token

# Keep spans local; nothing is exported during tests
logfire.configure(send_to_logfire=False, console=False)


def make_user(
    username: str = "reader",
    role: UserRole = UserRole.MEMBER,
    is_active: bool = True,
) -> User:
    """Helper to build a user with a fresh ID."""
    return User(
        id=UserId(uuid4()),
        username=username,
        avatar_url=f"https://cdn.example.com/{username}.png",
        email=f"{username}@example.com",
        role=role,
        is_active=is_active,
    )


def make_post(
    author_id: UserId | None = None,
    status: PostStatus = PostStatus.PUBLISHED,
    title: str = "Test Post",
) -> Post:
    """Helper to build a post with a fresh ID."""
    return Post(
        id=PostId(uuid4()),
        title=title,
        author_id=author_id or UserId(uuid4()),
        status=status,
    )


def make_comment(
    post_id: PostId,
    author_id: UserId,
    content: str = "Nice write-up",
    parent_comment_id: CommentId | None = None,
    is_approved: bool = True,
    is_spam: bool = False,
    created_at: datetime | None = None,
) -> Comment:
    """Helper to build a comment; approved by default so it is publicly visible."""
    created_at = created_at or utcnow()
    return Comment(
        id=CommentId(uuid4()),
        post_id=post_id,
        author_id=author_id,
        content=content,
        parent_comment_id=parent_comment_id,
        is_approved=is_approved,
        is_spam=is_spam,
        created_at=created_at,
        updated_at=created_at,
    )


def make_lead(
    email: str = "ada@example.com",
    post_id: PostId | None = None,
    source: LeadSource = LeadSource.COMMENT,
    updated_at: datetime | None = None,
    ttl: timedelta = timedelta(days=7),
) -> Lead:
    """Helper to build a lead that expires ttl after updated_at."""
    updated_at = updated_at or utcnow()
    return Lead(
        id=LeadId(uuid4()),
        name="Ada Lovelace",
        email=email,
        source=source,
        post_id=post_id,
        post_title="Test Post",
        created_at=updated_at,
        updated_at=updated_at,
        expires_at=updated_at + ttl,
    )


def token_for(user: User, settings: AuthSettings | None = None) -> str:
    """Helper to sign a JWT for a user."""
    return create_token(str(user.id), settings or AuthSettings())
