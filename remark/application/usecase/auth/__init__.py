"""Authentication use cases."""

from .get_current_actor import (
    GetCurrentActorRequest,
    GetCurrentActorResponse,
    GetCurrentActorUseCase,
)

__all__ = [
    "GetCurrentActorRequest",
    "GetCurrentActorResponse",
    "GetCurrentActorUseCase",
]
