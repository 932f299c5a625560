"""Domain value objects for Remark.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum

from pydantic import EmailStr, field_validator

from remark.domain.value.common import ValueObject


class UserRole(str, Enum):
    """Role of an account, as stored by the account service."""

    ADMIN = "admin"
    AUTHOR = "author"
    MEMBER = "member"


class PostStatus(str, Enum):
    """Publication status of a post."""

    DRAFT = "draft"
    PUBLISHED = "published"
    ARCHIVED = "archived"


class ModerationState(str, Enum):
    """Moderation state derived from the is_approved/is_spam flags."""

    PENDING = "pending"
    APPROVED = "approved"
    SPAM = "spam"


class CommentSort(str, Enum):
    """Sort order for the admin comment listing."""

    NEWEST = "newest"
    OLDEST = "oldest"


class LeadSource(str, Enum):
    """Where a lead was captured.

    Only COMMENT leads are written by this service; the other values are
    shared with the newsletter and contact form services.
    """

    COMMENT = "comment"
    NEWSLETTER = "newsletter"
    CONTACT = "contact"


class ExportFormat(str, Enum):
    """Lead export file format."""

    CSV = "csv"
    JSON = "json"


class CommenterContact(ValueObject):
    """Contact details a commenter may attach to a submission.

    A contact with is_anonymous=True never produces a lead.
    """

    name: str
    email: EmailStr | None = None
    phone: str | None = None
    is_anonymous: bool = False

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate name is present and reasonably sized."""
        v = v.strip()
        if not v or len(v) > 100:
            raise ValueError("Name must be 1-100 characters")
        return v

    @field_validator("email", mode="before")
    @classmethod
    def blank_email_is_none(cls, v: object) -> object:
        if isinstance(v, str):
            v = v.strip()
            return v or None
        return v

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str | None) -> str | None:
        """Normalize email to lowercase."""
        return v.lower() if v is not None else None

    @property
    def identifies_commenter(self) -> bool:
        """Whether this contact opts out of anonymity with an email."""
        return not self.is_anonymous and self.email is not None
