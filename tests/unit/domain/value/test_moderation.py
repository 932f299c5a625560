"""Unit tests for the moderation state machine."""

from itertools import product

import pytest

from remark.domain.value import (
    ModerationFlags,
    ModerationState,
    ModerationTransition,
    UserRole,
    flag_patch,
    initial_flags,
)

PENDING = ModerationFlags.for_state(ModerationState.PENDING)
APPROVED = ModerationFlags.for_state(ModerationState.APPROVED)
SPAM = ModerationFlags.for_state(ModerationState.SPAM)


class TestModerationTransition:
    """Tests for ModerationTransition.apply."""

    @pytest.mark.parametrize("start", [PENDING, APPROVED, SPAM])
    def test_approve_always_lands_in_approved(self, start):
        """Approve clears spam from any state."""
        assert ModerationTransition.APPROVE.apply(start).state == ModerationState.APPROVED

    @pytest.mark.parametrize("start", [PENDING, APPROVED, SPAM])
    def test_mark_spam_always_lands_in_spam(self, start):
        """Mark spam clears approval from any state."""
        assert ModerationTransition.MARK_SPAM.apply(start).state == ModerationState.SPAM

    def test_toggle_approves_pending(self):
        assert ModerationTransition.TOGGLE_APPROVAL.apply(PENDING) == APPROVED

    def test_toggle_unapproves_approved(self):
        assert ModerationTransition.TOGGLE_APPROVAL.apply(APPROVED) == PENDING

    def test_toggle_approves_spam_and_clears_spam(self):
        """Approving a spam comment through the toggle also rescues it."""
        assert ModerationTransition.TOGGLE_APPROVAL.apply(SPAM) == APPROVED

    def test_flags_never_both_true_over_any_sequence(self):
        """Every sequence of three transitions keeps the flags exclusive."""
        transitions = list(ModerationTransition)
        for start in (PENDING, APPROVED, SPAM):
            for sequence in product(transitions, repeat=3):
                flags = start
                for transition in sequence:
                    flags = transition.apply(flags)
                    assert not (flags.is_approved and flags.is_spam)

    def test_flags_reject_approved_and_spam(self):
        with pytest.raises(ValueError):
            ModerationFlags(is_approved=True, is_spam=True)


class TestInitialFlags:
    """Tests for the moderation state of new comments."""

    def test_admin_comments_start_approved(self):
        assert initial_flags(UserRole.ADMIN).state == ModerationState.APPROVED

    @pytest.mark.parametrize("role", [UserRole.MEMBER, UserRole.AUTHOR])
    def test_other_comments_start_pending(self, role):
        assert initial_flags(role).state == ModerationState.PENDING


class TestFlagPatch:
    """Tests for admin field patches on moderation flags."""

    def test_setting_approved_clears_spam(self):
        assert flag_patch(is_approved=True, is_spam=None) == {
            "is_approved": True,
            "is_spam": False,
        }

    def test_setting_spam_clears_approved(self):
        assert flag_patch(is_approved=None, is_spam=True) == {
            "is_spam": True,
            "is_approved": False,
        }

    def test_clearing_a_flag_writes_only_that_flag(self):
        assert flag_patch(is_approved=None, is_spam=False) == {"is_spam": False}
        assert flag_patch(is_approved=False, is_spam=None) == {"is_approved": False}

    def test_unset_fields_write_nothing(self):
        assert flag_patch(is_approved=None, is_spam=None) == {}

    @pytest.mark.parametrize("stored", [PENDING, APPROVED, SPAM])
    @pytest.mark.parametrize(
        "is_approved,is_spam",
        [
            (a, s)
            for a, s in product([True, False, None], repeat=2)
            if not (a and s)
        ],
    )
    def test_patch_never_yields_both_flags(self, stored, is_approved, is_spam):
        """Whatever is stored at write time, the result stays exclusive."""
        merged = {**stored.model_dump(), **flag_patch(is_approved, is_spam)}

        assert not (merged["is_approved"] and merged["is_spam"])

    def test_both_true_is_rejected(self):
        with pytest.raises(ValueError):
            flag_patch(is_approved=True, is_spam=True)
