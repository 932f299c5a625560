"""Unit tests for the in-memory repositories used by the test container.

These mirror the PostgreSQL behaviour callers depend on, so they are
checked directly.
"""

from datetime import timedelta
from uuid import uuid4

import pytest

from remark.domain.model.common import utcnow
from remark.domain.value import CommentSort, ModerationState, ModerationTransition, PostId
from remark.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryLeadRepository,
)
from tests.conftest import make_comment, make_lead, make_user


class TestInMemoryCommentRepository:
    """Tests for InMemoryCommentRepository."""

    @pytest.mark.asyncio
    async def test_parent_with_replies_cannot_be_deleted(self):
        """Same as the RESTRICT foreign key on parent_comment_id."""
        # Arrange
        repo = InMemoryCommentRepository()
        post_id = PostId(uuid4())
        author_id = make_user().id
        parent = await repo.create(make_comment(post_id, author_id))
        await repo.create(make_comment(post_id, author_id, parent_comment_id=parent.id))

        # Act & Assert
        with pytest.raises(ValueError):
            await repo.delete(parent.id)
        assert await repo.find_by_id(parent.id) is not None

    @pytest.mark.asyncio
    async def test_update_rejects_both_flags(self):
        """Same as the approved_or_spam CHECK constraint."""
        # Arrange
        repo = InMemoryCommentRepository()
        comment = await repo.create(make_comment(PostId(uuid4()), make_user().id))

        # Act & Assert
        with pytest.raises(ValueError):
            await repo.update(comment.id, {"is_spam": True})

    @pytest.mark.asyncio
    async def test_apply_transition_updates_timestamp(self):
        # Arrange
        repo = InMemoryCommentRepository()
        comment = await repo.create(
            make_comment(
                PostId(uuid4()),
                make_user().id,
                created_at=utcnow() - timedelta(days=1),
            )
        )

        # Act
        updated = await repo.apply_transition(comment.id, ModerationTransition.MARK_SPAM)

        # Assert
        assert updated.moderation_state == ModerationState.SPAM
        assert updated.updated_at > comment.updated_at

    @pytest.mark.asyncio
    async def test_list_all_filters_and_pages(self):
        # Arrange
        repo = InMemoryCommentRepository()
        post_id = PostId(uuid4())
        author_id = make_user().id
        now = utcnow()
        spam = [
            await repo.create(
                make_comment(
                    post_id,
                    author_id,
                    is_approved=False,
                    is_spam=True,
                    created_at=now - timedelta(minutes=i),
                )
            )
            for i in range(3)
        ]
        await repo.create(make_comment(post_id, author_id))

        # Act
        page = await repo.list_all(
            status=ModerationState.SPAM, sort=CommentSort.NEWEST, limit=2, offset=1
        )

        # Assert
        assert [c.id for c in page] == [spam[1].id, spam[2].id]
        assert await repo.count_all(ModerationState.SPAM) == 3
        assert await repo.count_all() == 4

    @pytest.mark.asyncio
    async def test_replies_for_empty_batch(self):
        repo = InMemoryCommentRepository()

        assert await repo.list_replies_for_parents([]) == []


class TestInMemoryLeadRepository:
    """Tests for InMemoryLeadRepository."""

    @pytest.mark.asyncio
    async def test_upsert_keeps_identity_and_refreshes_fields(self):
        # Arrange
        repo = InMemoryLeadRepository()
        post_id = PostId(uuid4())
        first = await repo.upsert(make_lead(post_id=post_id))
        later = make_lead(post_id=post_id, updated_at=utcnow() + timedelta(hours=1))

        # Act
        stored = await repo.upsert(later)

        # Assert
        assert stored.id == first.id
        assert stored.created_at == first.created_at
        assert stored.expires_at == later.expires_at
        assert len(await repo.find_all()) == 1

    @pytest.mark.asyncio
    async def test_delete_frees_the_email_post_pair(self):
        # Arrange
        repo = InMemoryLeadRepository()
        post_id = PostId(uuid4())
        lead = await repo.upsert(make_lead(post_id=post_id))

        # Act
        await repo.delete(lead.id)
        again = await repo.upsert(make_lead(post_id=post_id))

        # Assert
        assert again.id != lead.id
        assert not await repo.delete(lead.id)
