"""Response envelopes shared by every route.

Successful responses look like {"status": "success", "data": ...}; errors
look like {"status": "error", "message": ...}. Paginated listings add
results, total, total_pages and current_page next to data.
"""

from typing import Generic, Literal, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class Envelope(BaseModel, Generic[T]):
    """Standard response envelope."""

    status: Literal["success", "error"] = "success"
    data: T | None = None
    message: str | None = None


class PaginatedEnvelope(Envelope[T], Generic[T]):
    """Envelope for paginated listings."""

    results: int
    total: int
    total_pages: int
    current_page: int


def success(data: T, message: str | None = None) -> Envelope[T]:
    return Envelope[T](data=data, message=message)
