"""Moderation state machine.

A comment is in one of three states, encoded by two flags:

    pending   is_approved=False, is_spam=False
    approved  is_approved=True,  is_spam=False
    spam      is_approved=False, is_spam=True

Every transition is a pure function of the current flags and always leaves
is_approved and is_spam not both true. There is no terminal state; any
state can reach any other through the admin transitions below.
"""

from enum import Enum

from pydantic import model_validator

from remark.domain.value.common import ValueObject
from remark.domain.value.types import ModerationState, UserRole


class ModerationFlags(ValueObject):
    """The pair of moderation flags stored on a comment."""

    is_approved: bool = False
    is_spam: bool = False

    @model_validator(mode="after")
    def validate_exclusive(self) -> "ModerationFlags":
        if self.is_approved and self.is_spam:
            raise ValueError("A comment cannot be both approved and marked as spam")
        return self

    @property
    def state(self) -> ModerationState:
        if self.is_spam:
            return ModerationState.SPAM
        if self.is_approved:
            return ModerationState.APPROVED
        return ModerationState.PENDING

    @classmethod
    def for_state(cls, state: ModerationState) -> "ModerationFlags":
        return cls(
            is_approved=state == ModerationState.APPROVED,
            is_spam=state == ModerationState.SPAM,
        )


class ModerationTransition(str, Enum):
    """Admin transitions between moderation states."""

    APPROVE = "approve"
    MARK_SPAM = "mark_spam"
    TOGGLE_APPROVAL = "toggle_approval"

    def apply(self, flags: ModerationFlags) -> ModerationFlags:
        """Compute the flags after this transition.

        Approving always clears spam, even when the comment was previously
        marked as spam. Marking as spam always clears approval.
        """
        if self is ModerationTransition.APPROVE:
            return ModerationFlags(is_approved=True, is_spam=False)
        if self is ModerationTransition.MARK_SPAM:
            return ModerationFlags(is_approved=False, is_spam=True)

        approved = not flags.is_approved
        return ModerationFlags(
            is_approved=approved,
            is_spam=False if approved else flags.is_spam,
        )


def initial_flags(role: UserRole) -> ModerationFlags:
    """Moderation flags for a comment created by an actor with this role."""
    if role == UserRole.ADMIN:
        return ModerationFlags.for_state(ModerationState.APPROVED)
    return ModerationFlags.for_state(ModerationState.PENDING)


def flag_patch(is_approved: bool | None, is_spam: bool | None) -> dict[str, bool]:
    """Columns to write for an admin patch of the moderation flags.

    Only the flags the admin sent are written, except that setting
    is_approved=True also clears spam and setting is_spam=True also clears
    approval. Clearing a flag never touches the other one, so the patch is
    safe to apply to whatever flags are stored at write time.

    Raises:
        ValueError: If the patch asks for approved and spam at once
    """
    if is_approved and is_spam:
        raise ValueError("A comment cannot be both approved and marked as spam")

    patch: dict[str, bool] = {}
    if is_approved is not None:
        patch["is_approved"] = is_approved
        if is_approved:
            patch["is_spam"] = False
    if is_spam is not None:
        patch["is_spam"] = is_spam
        if is_spam:
            patch["is_approved"] = False
    return patch
