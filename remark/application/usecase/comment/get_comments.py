"""Get comments use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from remark.domain.model import Actor, Comment, User
from remark.domain.service import (
    Action,
    AuthorizationTarget,
    CommentService,
    PostService,
    UserService,
    can_perform,
    sees_hidden_comments,
)
from remark.domain.value import ModerationState, PostId

from remark.application.usecase.base import BaseUseCase


class CommentAuthor(BaseModel):
    """Display details of a comment's author."""

    user_id: str
    username: str | None = None
    avatar_url: str | None = None


class CommentItem(BaseModel):
    """Comment item in responses."""

    comment_id: str
    post_id: str
    parent_comment_id: str | None
    content: str
    author: CommentAuthor
    status: ModerationState
    is_approved: bool
    is_spam: bool
    is_edited: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_comment(cls, comment: Comment, author: User | None = None) -> "CommentItem":
        return cls(
            comment_id=str(comment.id),
            post_id=str(comment.post_id),
            parent_comment_id=(
                str(comment.parent_comment_id) if comment.parent_comment_id else None
            ),
            content=comment.content,
            author=CommentAuthor(
                user_id=str(comment.author_id),
                username=author.username if author else None,
                avatar_url=author.avatar_url if author else None,
            ),
            status=comment.moderation_state,
            is_approved=comment.is_approved,
            is_spam=comment.is_spam,
            is_edited=comment.is_edited,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )


class CommentThreadItem(CommentItem):
    """Top-level comment with its replies."""

    replies: list[CommentItem]


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    post_id: str  # UUID string
    actor: Actor | None = None  # Anonymous visitors see visible comments only


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    post_id: str
    comments: list[CommentThreadItem]
    results: int  # Number of top-level comments
    total: int  # Top-level comments plus replies


class GetCommentsUseCase(BaseUseCase):
    """Use case for reading the threaded discussion of a post."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
        user_service: UserService,
    ) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
            user_service: User domain service for author annotation
        """
        self.comment_service = comment_service
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Steps:
        1. Verify the post exists
        2. Load top-level comments and their replies (two queries)
        3. Load every author with one batched lookup
        4. Nest replies under their parents

        Admins also see pending and spam comments.

        Raises:
            NotFoundError: If the post does not exist
        """
        post_id = PostId(UUID(request.post_id))
        post = await self.post_service.get_post_by_id(post_id)
        can_perform(
            request.actor,
            Action.LIST_FOR_POST,
            AuthorizationTarget(post_id=post_id, post=post),
        ).enforce()

        threads = await self.comment_service.get_threads_for_post(
            post_id, include_hidden=sees_hidden_comments(request.actor)
        )

        author_ids = [
            comment.author_id
            for thread in threads
            for comment in (thread.comment, *thread.replies)
        ]
        authors = await self.user_service.get_authors(author_ids)

        items = [
            CommentThreadItem(
                **CommentItem.from_comment(
                    thread.comment, authors.get(thread.comment.author_id)
                ).model_dump(),
                replies=[
                    CommentItem.from_comment(reply, authors.get(reply.author_id))
                    for reply in thread.replies
                ],
            )
            for thread in threads
        ]

        return GetCommentsResponse(
            post_id=request.post_id,
            comments=items,
            results=len(items),
            total=len(author_ids),
        )
