"""Unit tests for ModerateCommentUseCase."""

from uuid import uuid4

import pytest

from remark.application.usecase.comment.moderate_comment import (
    ModerateCommentRequest,
    ModerateCommentUseCase,
)
from remark.domain.error import ForbiddenError, NotFoundError
from remark.domain.repository import CommentRepository
from remark.domain.value import ModerationState, ModerationTransition, PostId, UserRole
from tests.conftest import make_comment, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()

ADMIN = make_user("admin", role=UserRole.ADMIN).to_actor()


class TestModerateCommentUseCase:
    """Tests for ModerateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_toggle_approves_pending_comment(self, unit_env):
        # Arrange
        use_case = await unit_env.get(ModerateCommentUseCase)
        repo = await unit_env.get(CommentRepository)
        comment = await repo.create(
            make_comment(PostId(uuid4()), make_user().id, is_approved=False)
        )

        # Act
        response = await use_case.execute(
            ModerateCommentRequest(
                comment_id=str(comment.id),
                actor=ADMIN,
                transition=ModerationTransition.TOGGLE_APPROVAL,
            )
        )

        # Assert
        assert response.comment.status == ModerationState.APPROVED

    @pytest.mark.asyncio
    async def test_spam_clears_approval(self, unit_env):
        # Arrange
        use_case = await unit_env.get(ModerateCommentUseCase)
        repo = await unit_env.get(CommentRepository)
        comment = await repo.create(make_comment(PostId(uuid4()), make_user().id))

        # Act
        response = await use_case.execute(
            ModerateCommentRequest(
                comment_id=str(comment.id),
                actor=ADMIN,
                transition=ModerationTransition.MARK_SPAM,
            )
        )

        # Assert
        assert response.comment.is_spam
        assert not response.comment.is_approved

    @pytest.mark.asyncio
    async def test_member_is_forbidden(self, unit_env):
        # Arrange
        use_case = await unit_env.get(ModerateCommentUseCase)
        repo = await unit_env.get(CommentRepository)
        author = make_user()
        comment = await repo.create(
            make_comment(PostId(uuid4()), author.id, is_approved=False)
        )

        # Act & Assert
        with pytest.raises(ForbiddenError):
            await use_case.execute(
                ModerateCommentRequest(
                    comment_id=str(comment.id),
                    actor=author.to_actor(),
                    transition=ModerationTransition.APPROVE,
                )
            )

    @pytest.mark.asyncio
    async def test_missing_comment_is_not_found(self, unit_env):
        use_case = await unit_env.get(ModerateCommentUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                ModerateCommentRequest(
                    comment_id=str(uuid4()),
                    actor=ADMIN,
                    transition=ModerationTransition.APPROVE,
                )
            )
