"""Unit tests for the authorization guard."""

from uuid import uuid4

import pytest

from remark.domain.error import (
    ForbiddenError,
    InvalidParentError,
    NotAuthenticatedError,
    NotFoundError,
)
from remark.domain.service import (
    Action,
    AuthorizationTarget,
    Denial,
    can_perform,
    sees_hidden_comments,
)
from remark.domain.value import CommentId, PostId, PostStatus, UserRole
from tests.conftest import make_comment, make_post, make_user

ADMIN = make_user("admin", role=UserRole.ADMIN).to_actor()
MEMBER = make_user("member").to_actor()
OTHER = make_user("other").to_actor()
POST_AUTHOR = make_user("writer", role=UserRole.AUTHOR).to_actor()
INACTIVE = make_user("gone", is_active=False).to_actor()


@pytest.fixture
def post():
    return make_post(author_id=POST_AUTHOR.user_id)


@pytest.fixture
def comment(post):
    return make_comment(post.id, MEMBER.user_id)


class TestAuthentication:
    """Checks shared by every authenticated action."""

    @pytest.mark.parametrize(
        "action",
        [
            Action.CREATE,
            Action.UPDATE,
            Action.DELETE,
            Action.MODERATE,
            Action.LIST_ALL,
            Action.VIEW_STATS,
            Action.MANAGE_LEADS,
        ],
    )
    def test_anonymous_is_not_authenticated(self, action):
        decision = can_perform(None, action)

        assert not decision.allowed
        assert decision.denial == Denial.NOT_AUTHENTICATED

    def test_inactive_actor_is_rejected_before_any_rule(self, post):
        decision = can_perform(
            INACTIVE, Action.CREATE, AuthorizationTarget(post_id=post.id, post=post)
        )

        assert decision.denial == Denial.NOT_AUTHENTICATED
        with pytest.raises(NotAuthenticatedError, match="deactivated"):
            decision.enforce()

    def test_allowed_decision_enforces_silently(self):
        can_perform(ADMIN, Action.LIST_ALL).enforce()


class TestCreateRule:
    """Tests for creating comments and replies."""

    def test_member_may_comment_on_published_post(self, post):
        decision = can_perform(
            MEMBER, Action.CREATE, AuthorizationTarget(post_id=post.id, post=post)
        )

        assert decision.allowed

    @pytest.mark.parametrize("status", [PostStatus.DRAFT, PostStatus.ARCHIVED])
    def test_unpublished_post_looks_missing(self, status):
        post = make_post(status=status)

        decision = can_perform(
            ADMIN, Action.CREATE, AuthorizationTarget(post_id=post.id, post=post)
        )

        assert decision.denial == Denial.NOT_FOUND
        with pytest.raises(NotFoundError):
            decision.enforce()

    def test_missing_post_is_not_found(self):
        decision = can_perform(
            MEMBER, Action.CREATE, AuthorizationTarget(post_id=PostId(uuid4()))
        )

        assert decision.denial == Denial.NOT_FOUND

    def test_reply_to_top_level_comment_is_allowed(self, post, comment):
        decision = can_perform(
            OTHER,
            Action.CREATE,
            AuthorizationTarget(
                post_id=post.id,
                post=post,
                parent_comment_id=comment.id,
                parent=comment,
            ),
        )

        assert decision.allowed

    def test_missing_parent_is_not_found(self, post):
        decision = can_perform(
            MEMBER,
            Action.CREATE,
            AuthorizationTarget(
                post_id=post.id, post=post, parent_comment_id=CommentId(uuid4())
            ),
        )

        assert decision.denial == Denial.NOT_FOUND
        assert decision.resource == "Parent comment"

    def test_reply_to_reply_is_invalid_parent(self, post, comment):
        reply = make_comment(post.id, OTHER.user_id, parent_comment_id=comment.id)

        decision = can_perform(
            MEMBER,
            Action.CREATE,
            AuthorizationTarget(
                post_id=post.id, post=post, parent_comment_id=reply.id, parent=reply
            ),
        )

        assert decision.denial == Denial.INVALID_PARENT
        with pytest.raises(InvalidParentError):
            decision.enforce()

    def test_parent_on_other_post_is_invalid_parent(self, post):
        foreign = make_comment(make_post().id, OTHER.user_id)

        decision = can_perform(
            MEMBER,
            Action.CREATE,
            AuthorizationTarget(
                post_id=post.id,
                post=post,
                parent_comment_id=foreign.id,
                parent=foreign,
            ),
        )

        assert decision.denial == Denial.INVALID_PARENT


class TestUpdateRule:
    """Tests for editing comments."""

    def test_author_may_edit_own_content(self, comment):
        decision = can_perform(
            MEMBER,
            Action.UPDATE,
            AuthorizationTarget(
                comment_id=comment.id, comment=comment, fields=frozenset({"content"})
            ),
        )

        assert decision.allowed

    def test_author_may_not_change_moderation_fields(self, comment):
        decision = can_perform(
            MEMBER,
            Action.UPDATE,
            AuthorizationTarget(
                comment_id=comment.id,
                comment=comment,
                fields=frozenset({"content", "is_approved"}),
            ),
        )

        assert decision.denial == Denial.FORBIDDEN

    def test_other_member_may_not_edit(self, comment):
        decision = can_perform(
            OTHER,
            Action.UPDATE,
            AuthorizationTarget(
                comment_id=comment.id, comment=comment, fields=frozenset({"content"})
            ),
        )

        assert decision.denial == Denial.FORBIDDEN

    def test_admin_may_change_moderation_fields(self, comment):
        decision = can_perform(
            ADMIN,
            Action.UPDATE,
            AuthorizationTarget(
                comment_id=comment.id,
                comment=comment,
                fields=frozenset({"is_approved", "is_spam", "is_edited"}),
            ),
        )

        assert decision.allowed

    def test_admin_may_not_change_ownership(self, comment):
        decision = can_perform(
            ADMIN,
            Action.UPDATE,
            AuthorizationTarget(
                comment_id=comment.id, comment=comment, fields=frozenset({"author_id"})
            ),
        )

        assert decision.denial == Denial.FORBIDDEN

    def test_missing_comment_is_forbidden_for_members(self):
        """Members cannot tell a missing comment from someone else's."""
        decision = can_perform(
            MEMBER,
            Action.UPDATE,
            AuthorizationTarget(
                comment_id=CommentId(uuid4()), fields=frozenset({"content"})
            ),
        )

        assert decision.denial == Denial.FORBIDDEN
        with pytest.raises(ForbiddenError):
            decision.enforce()

    def test_missing_comment_is_not_found_for_admins(self):
        decision = can_perform(
            ADMIN,
            Action.UPDATE,
            AuthorizationTarget(
                comment_id=CommentId(uuid4()), fields=frozenset({"content"})
            ),
        )

        assert decision.denial == Denial.NOT_FOUND


class TestDeleteRule:
    """Tests for deleting comments."""

    def test_comment_author_may_delete(self, post, comment):
        decision = can_perform(
            MEMBER,
            Action.DELETE,
            AuthorizationTarget(comment_id=comment.id, comment=comment, post=post),
        )

        assert decision.allowed

    def test_post_author_may_delete_any_comment_on_post(self, post, comment):
        decision = can_perform(
            POST_AUTHOR,
            Action.DELETE,
            AuthorizationTarget(comment_id=comment.id, comment=comment, post=post),
        )

        assert decision.allowed

    def test_admin_may_delete(self, post, comment):
        decision = can_perform(
            ADMIN,
            Action.DELETE,
            AuthorizationTarget(comment_id=comment.id, comment=comment, post=post),
        )

        assert decision.allowed

    def test_unrelated_member_may_not_delete(self, post, comment):
        decision = can_perform(
            OTHER,
            Action.DELETE,
            AuthorizationTarget(comment_id=comment.id, comment=comment, post=post),
        )

        assert decision.denial == Denial.FORBIDDEN

    def test_missing_comment_denial_matches_foreign_comment(self, post, comment):
        """Forbidden for a missing comment reads exactly like forbidden for a real one."""
        missing = can_perform(
            OTHER, Action.DELETE, AuthorizationTarget(comment_id=CommentId(uuid4()))
        )
        foreign = can_perform(
            OTHER,
            Action.DELETE,
            AuthorizationTarget(comment_id=comment.id, comment=comment, post=post),
        )

        assert missing.denial == foreign.denial == Denial.FORBIDDEN
        assert missing.reason == foreign.reason


class TestAdminOnlyRules:
    """Tests for admin-only actions."""

    @pytest.mark.parametrize(
        "action", [Action.LIST_ALL, Action.VIEW_STATS, Action.MANAGE_LEADS]
    )
    def test_admin_is_allowed(self, action):
        assert can_perform(ADMIN, action).allowed

    @pytest.mark.parametrize(
        "action", [Action.LIST_ALL, Action.VIEW_STATS, Action.MANAGE_LEADS]
    )
    @pytest.mark.parametrize("actor", [MEMBER, POST_AUTHOR])
    def test_non_admin_is_forbidden(self, action, actor):
        assert can_perform(actor, action).denial == Denial.FORBIDDEN

    def test_moderate_checks_role_before_existence(self):
        """Members learn nothing about whether a comment exists."""
        decision = can_perform(
            MEMBER, Action.MODERATE, AuthorizationTarget(comment_id=CommentId(uuid4()))
        )

        assert decision.denial == Denial.FORBIDDEN

    def test_moderate_missing_comment_is_not_found_for_admin(self):
        decision = can_perform(
            ADMIN, Action.MODERATE, AuthorizationTarget(comment_id=CommentId(uuid4()))
        )

        assert decision.denial == Denial.NOT_FOUND


class TestListForPost:
    """Tests for reading a post's discussion."""

    def test_anonymous_may_read(self, post):
        decision = can_perform(
            None, Action.LIST_FOR_POST, AuthorizationTarget(post_id=post.id, post=post)
        )

        assert decision.allowed

    def test_missing_post_is_not_found(self):
        decision = can_perform(
            None, Action.LIST_FOR_POST, AuthorizationTarget(post_id=PostId(uuid4()))
        )

        assert decision.denial == Denial.NOT_FOUND

    def test_only_active_admins_see_hidden_comments(self):
        assert sees_hidden_comments(ADMIN)
        assert not sees_hidden_comments(MEMBER)
        assert not sees_hidden_comments(None)
        inactive_admin = make_user("ex-admin", role=UserRole.ADMIN, is_active=False)
        assert not sees_hidden_comments(inactive_admin.to_actor())
