"""Authorization guard for comment operations.

Every decision is a pure function of the actor, the requested action and
the target resources the caller already loaded. Nothing here reads the
database or a request context, so rules can be exercised in isolation:

    decision = can_perform(actor, Action.DELETE, AuthorizationTarget(comment=c, post=p))
    decision.enforce()  # raises the matching domain error when denied

Roles:
- Admin: every action
- Comment author: edit own content, delete own comment
- Post author: delete any comment on own post
- Any active user: create comments on published posts
- Anonymous visitor: read visible comments of a post
"""

from enum import Enum
from typing import Callable, Optional

from remark.domain.error import (
    ForbiddenError,
    InvalidParentError,
    NotAuthenticatedError,
    NotFoundError,
)
from remark.domain.model import Actor, Comment, Post
from remark.domain.value import CommentId, PostId
from remark.domain.value.common import ValueObject

# Fields a non-admin author may change on their own comment
AUTHOR_EDITABLE_FIELDS = frozenset({"content"})

# Fields an admin may change on any comment
ADMIN_EDITABLE_FIELDS = frozenset({"content", "is_approved", "is_spam", "is_edited"})


class Action(str, Enum):
    """Operations subject to authorization."""

    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    MODERATE = "moderate"
    LIST_ALL = "list_all"
    VIEW_STATS = "view_stats"
    MANAGE_LEADS = "manage_leads"
    LIST_FOR_POST = "list_for_post"


class Denial(str, Enum):
    """Why an action was denied."""

    NOT_AUTHENTICATED = "not_authenticated"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    INVALID_PARENT = "invalid_parent"


class AuthorizationTarget(ValueObject):
    """Resources an action applies to.

    IDs are carried alongside the loaded entities so a missing entity can
    be told apart from one that was never requested.
    """

    post_id: Optional[PostId] = None
    post: Optional[Post] = None
    comment_id: Optional[CommentId] = None
    comment: Optional[Comment] = None
    parent_comment_id: Optional[CommentId] = None
    parent: Optional[Comment] = None
    fields: frozenset[str] = frozenset()


class AuthorizationDecision(ValueObject):
    """Outcome of an authorization check."""

    allowed: bool
    denial: Optional[Denial] = None
    reason: Optional[str] = None
    resource: Optional[str] = None
    identifier: Optional[str] = None

    def enforce(self) -> None:
        """Raise the domain error matching the denial, if any.

        Raises:
            NotAuthenticatedError: No actor, or actor deactivated
            ForbiddenError: Actor lacks permission
            NotFoundError: Target resource missing
            InvalidParentError: Reply target cannot hold replies
        """
        if self.allowed:
            return
        if self.denial == Denial.NOT_AUTHENTICATED:
            raise NotAuthenticatedError(self.reason or "Authentication required")
        if self.denial == Denial.NOT_FOUND:
            raise NotFoundError(self.resource or "Resource", self.identifier or "")
        if self.denial == Denial.INVALID_PARENT:
            raise InvalidParentError(self.reason or "Invalid parent comment")
        raise ForbiddenError(self.reason or "You do not have permission to perform this action")


def _allow() -> AuthorizationDecision:
    return AuthorizationDecision(allowed=True)


def _deny(denial: Denial, reason: str) -> AuthorizationDecision:
    return AuthorizationDecision(allowed=False, denial=denial, reason=reason)


def _not_found(resource: str, identifier: object) -> AuthorizationDecision:
    return AuthorizationDecision(
        allowed=False,
        denial=Denial.NOT_FOUND,
        reason=f"{resource} not found",
        resource=resource,
        identifier=str(identifier) if identifier is not None else "",
    )


def _missing_comment(
    actor: Actor, target: AuthorizationTarget, forbidden_reason: str
) -> AuthorizationDecision:
    # Non-admins cannot tell a missing comment from someone else's comment
    if actor.is_admin:
        return _not_found("Comment", target.comment_id)
    return _deny(Denial.FORBIDDEN, forbidden_reason)


def _can_create(actor: Actor, target: AuthorizationTarget) -> AuthorizationDecision:
    post = target.post
    if post is None or not post.is_published:
        return _not_found("Published post", target.post_id or (post.id if post else None))

    if target.parent_comment_id is None:
        return _allow()

    parent = target.parent
    if parent is None:
        return _not_found("Parent comment", target.parent_comment_id)
    if parent.post_id != post.id:
        return _deny(Denial.INVALID_PARENT, "Parent comment does not belong to this post")
    if not parent.is_top_level:
        return _deny(
            Denial.INVALID_PARENT, "Replies can only be added to top-level comments"
        )
    return _allow()


def _can_update(actor: Actor, target: AuthorizationTarget) -> AuthorizationDecision:
    reason = "You do not have permission to update this comment"
    comment = target.comment
    if comment is None:
        return _missing_comment(actor, target, reason)

    if actor.is_admin:
        unknown = target.fields - ADMIN_EDITABLE_FIELDS
        if unknown:
            return _deny(
                Denial.FORBIDDEN, f"Fields cannot be changed: {', '.join(sorted(unknown))}"
            )
        return _allow()

    if comment.author_id != actor.user_id:
        return _deny(Denial.FORBIDDEN, reason)
    if target.fields - AUTHOR_EDITABLE_FIELDS:
        return _deny(Denial.FORBIDDEN, "Only administrators can change moderation fields")
    return _allow()


def _can_delete(actor: Actor, target: AuthorizationTarget) -> AuthorizationDecision:
    reason = "You do not have permission to delete this comment"
    comment = target.comment
    if comment is None:
        return _missing_comment(actor, target, reason)

    is_comment_author = comment.author_id == actor.user_id
    is_post_author = target.post is not None and target.post.author_id == actor.user_id
    if actor.is_admin or is_comment_author or is_post_author:
        return _allow()
    return _deny(Denial.FORBIDDEN, reason)


def _can_moderate(actor: Actor, target: AuthorizationTarget) -> AuthorizationDecision:
    if not actor.is_admin:
        return _deny(Denial.FORBIDDEN, "Only administrators can moderate comments")
    if target.comment is None:
        return _not_found("Comment", target.comment_id)
    return _allow()


def _admin_only(reason: str) -> Callable[[Actor, AuthorizationTarget], AuthorizationDecision]:
    def rule(actor: Actor, target: AuthorizationTarget) -> AuthorizationDecision:
        if actor.is_admin:
            return _allow()
        return _deny(Denial.FORBIDDEN, reason)

    return rule


_RULES: dict[Action, Callable[[Actor, AuthorizationTarget], AuthorizationDecision]] = {
    Action.CREATE: _can_create,
    Action.UPDATE: _can_update,
    Action.DELETE: _can_delete,
    Action.MODERATE: _can_moderate,
    Action.LIST_ALL: _admin_only("You do not have permission to view all comments"),
    Action.VIEW_STATS: _admin_only("You do not have permission to view comment statistics"),
    Action.MANAGE_LEADS: _admin_only("You do not have permission to manage leads"),
}


def can_perform(
    actor: Optional[Actor],
    action: Action,
    target: Optional[AuthorizationTarget] = None,
) -> AuthorizationDecision:
    """Decide whether an actor may perform an action on a target.

    Args:
        actor: Identity performing the request (None for anonymous visitors)
        action: Requested action
        target: Resources the action applies to

    Returns:
        Decision describing whether the action is allowed and why not
    """
    target = target or AuthorizationTarget()

    if action is Action.LIST_FOR_POST:
        # Public read; visibility filtering is decided by sees_hidden_comments
        if target.post is None:
            return _not_found("Post", target.post_id)
        return _allow()

    if actor is None:
        return _deny(Denial.NOT_AUTHENTICATED, "Authentication required")
    if not actor.is_active:
        return _deny(Denial.NOT_AUTHENTICATED, "User account is deactivated")

    return _RULES[action](actor, target)


def sees_hidden_comments(actor: Optional[Actor]) -> bool:
    """Whether an actor may see pending and spam comments in a thread."""
    return actor is not None and actor.is_active and actor.is_admin
