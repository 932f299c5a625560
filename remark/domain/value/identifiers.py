"""Strongly typed identifiers for Remark domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

# Owned by this service
CommentId = NewType("CommentId", UUID)
LeadId = NewType("LeadId", UUID)

# Owned by the content and account services (read-only here)
PostId = NewType("PostId", UUID)
UserId = NewType("UserId", UUID)
