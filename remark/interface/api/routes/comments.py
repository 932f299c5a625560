"""Comment routes."""

from typing import Any
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Query, Request, status
from pydantic import BaseModel

from remark.application.usecase.auth import GetCurrentActorUseCase
from remark.application.usecase.comment import (
    CommentItem,
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    GetCommentStatsRequest,
    GetCommentStatsResponse,
    GetCommentStatsUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
    ListCommentsRequest,
    ListCommentsUseCase,
    ModerateCommentRequest,
    ModerateCommentUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from remark.domain.value import (
    CommentSort,
    ModerationState,
    ModerationTransition,
)
from remark.interface.api.auth import read_token, resolve_actor
from remark.interface.api.envelope import Envelope, PaginatedEnvelope, success

router = APIRouter(tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    content: str
    parent_comment_id: UUID | None = None  # Top-level comment replied to
    contact: dict[str, Any] | None = None  # Name, email, phone, is_anonymous


class UpdateCommentAPIRequest(BaseModel):
    """API request for updating a comment.

    Non-admins may only send content.
    """

    content: str | None = None
    is_approved: bool | None = None
    is_spam: bool | None = None
    is_edited: bool | None = None


@router.get(
    "/posts/{post_id}/comments", response_model=Envelope[GetCommentsResponse]
)
async def get_comments(
    post_id: UUID,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    current_actor: FromDishka[GetCurrentActorUseCase],
    token: str | None = Depends(read_token),
) -> Envelope[GetCommentsResponse]:
    """Get the threaded discussion of a post.

    Anonymous visitors and members see approved, non-spam comments only;
    admins see everything.
    """
    actor = await resolve_actor(current_actor, token, required=False)
    result = await get_comments_use_case.execute(
        GetCommentsRequest(post_id=str(post_id), actor=actor)
    )
    return success(result)


@router.post(
    "/posts/{post_id}/comments",
    response_model=Envelope[CreateCommentResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    post_id: UUID,
    body: CreateCommentAPIRequest,
    request: Request,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    current_actor: FromDishka[GetCurrentActorUseCase],
    token: str | None = Depends(read_token),
) -> Envelope[CreateCommentResponse]:
    """Comment on a published post or reply to a top-level comment.

    Requires authentication. Admin comments are approved immediately;
    everyone else's wait for moderation.
    """
    actor = await resolve_actor(current_actor, token)
    result = await create_comment_use_case.execute(
        CreateCommentRequest(
            post_id=str(post_id),
            actor=actor,
            content=body.content,
            parent_comment_id=(
                str(body.parent_comment_id) if body.parent_comment_id else None
            ),
            contact=body.contact,
            ip_address=request.client.host if request.client else None,
            user_agent=request.headers.get("user-agent"),
        )
    )
    message = (
        "Comment published"
        if result.comment.is_approved
        else "Comment submitted for moderation"
    )
    return success(result, message=message)


@router.get("/comments", response_model=PaginatedEnvelope[list[CommentItem]])
async def list_comments(
    list_comments_use_case: FromDishka[ListCommentsUseCase],
    current_actor: FromDishka[GetCurrentActorUseCase],
    token: str | None = Depends(read_token),
    status_filter: ModerationState | None = Query(default=None, alias="status"),
    sort: CommentSort = CommentSort.NEWEST,
    page: int = Query(default=1, ge=1),
    limit: int | None = Query(default=None, ge=1, le=100),
) -> PaginatedEnvelope[list[CommentItem]]:
    """List comments across all posts for moderation (admin only)."""
    actor = await resolve_actor(current_actor, token)
    result = await list_comments_use_case.execute(
        ListCommentsRequest(
            actor=actor, status=status_filter, sort=sort, page=page, limit=limit
        )
    )
    return PaginatedEnvelope[list[CommentItem]](
        data=result.comments,
        results=result.results,
        total=result.total,
        total_pages=result.total_pages,
        current_page=result.current_page,
    )


@router.get("/comments/stats", response_model=Envelope[GetCommentStatsResponse])
async def get_comment_stats(
    get_comment_stats_use_case: FromDishka[GetCommentStatsUseCase],
    current_actor: FromDishka[GetCurrentActorUseCase],
    token: str | None = Depends(read_token),
) -> Envelope[GetCommentStatsResponse]:
    """Moderation dashboard counts and the newest comments (admin only)."""
    actor = await resolve_actor(current_actor, token)
    result = await get_comment_stats_use_case.execute(
        GetCommentStatsRequest(actor=actor)
    )
    return success(result)


@router.patch("/comments/{comment_id}", response_model=Envelope[CommentItem])
async def update_comment(
    comment_id: UUID,
    body: UpdateCommentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    current_actor: FromDishka[GetCurrentActorUseCase],
    token: str | None = Depends(read_token),
) -> Envelope[CommentItem]:
    """Edit a comment.

    Authors may change their own content. Admins may also change the
    moderation flags of any comment.
    """
    actor = await resolve_actor(current_actor, token)
    result = await update_comment_use_case.execute(
        UpdateCommentRequest(
            comment_id=str(comment_id),
            actor=actor,
            changes=body.model_dump(exclude_unset=True),
        )
    )
    return success(result.comment)


@router.delete("/comments/{comment_id}", response_model=Envelope[DeleteCommentResponse])
async def delete_comment(
    comment_id: UUID,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    current_actor: FromDishka[GetCurrentActorUseCase],
    token: str | None = Depends(read_token),
) -> Envelope[DeleteCommentResponse]:
    """Delete a comment; deleting a top-level comment removes its replies."""
    actor = await resolve_actor(current_actor, token)
    result = await delete_comment_use_case.execute(
        DeleteCommentRequest(comment_id=str(comment_id), actor=actor)
    )
    return success(result, message="Comment deleted")


async def _moderate(
    use_case: ModerateCommentUseCase,
    current_actor: GetCurrentActorUseCase,
    token: str | None,
    comment_id: UUID,
    transition: ModerationTransition,
) -> Envelope[CommentItem]:
    actor = await resolve_actor(current_actor, token)
    result = await use_case.execute(
        ModerateCommentRequest(
            comment_id=str(comment_id), actor=actor, transition=transition
        )
    )
    return success(result.comment)


@router.patch("/comments/{comment_id}/approve", response_model=Envelope[CommentItem])
async def toggle_comment_approval(
    comment_id: UUID,
    moderate_comment_use_case: FromDishka[ModerateCommentUseCase],
    current_actor: FromDishka[GetCurrentActorUseCase],
    token: str | None = Depends(read_token),
) -> Envelope[CommentItem]:
    """Toggle approval (admin only). Approving also clears the spam flag."""
    return await _moderate(
        moderate_comment_use_case,
        current_actor,
        token,
        comment_id,
        ModerationTransition.TOGGLE_APPROVAL,
    )


@router.patch("/comments/{comment_id}/spam", response_model=Envelope[CommentItem])
async def mark_comment_as_spam(
    comment_id: UUID,
    moderate_comment_use_case: FromDishka[ModerateCommentUseCase],
    current_actor: FromDishka[GetCurrentActorUseCase],
    token: str | None = Depends(read_token),
) -> Envelope[CommentItem]:
    """Mark a comment as spam (admin only). Spam is never approved."""
    return await _moderate(
        moderate_comment_use_case,
        current_actor,
        token,
        comment_id,
        ModerationTransition.MARK_SPAM,
    )
