"""Get current actor use case."""

from pydantic import BaseModel

from remark.application.usecase.base import BaseUseCase
from remark.domain.error import NotAuthenticatedError
from remark.domain.model import Actor
from remark.domain.service import JWTService, UserService


class GetCurrentActorRequest(BaseModel):
    """Get current actor request."""

    token: str | None = None  # JWT token from cookie or Authorization header
    required: bool = True  # False for public endpoints


class GetCurrentActorResponse(BaseModel):
    """Get current actor response."""

    actor: Actor | None


class GetCurrentActorUseCase(BaseUseCase):
    """Use case for resolving the identity behind a request."""

    def __init__(self, jwt_service: JWTService, user_service: UserService) -> None:
        """Initialize get current actor use case.

        Args:
            jwt_service: JWT token domain service
            user_service: User domain service
        """
        self.jwt_service = jwt_service
        self.user_service = user_service

    async def execute(self, request: GetCurrentActorRequest) -> GetCurrentActorResponse:
        """Execute get current actor flow.

        Steps:
        1. Verify the JWT token, if any
        2. Load the user named by the token

        A missing, invalid or expired token, or a token for an unknown
        user, yields no actor. Deactivated users are returned as inactive
        actors and rejected by the authorization guard.

        Raises:
            NotAuthenticatedError: If required and no actor was resolved
        """
        user_id = self.jwt_service.get_user_id_from_token(request.token)
        actor = await self.user_service.resolve_actor(user_id)

        if actor is None and request.required:
            raise NotAuthenticatedError("Not authorized to access this route")

        return GetCurrentActorResponse(actor=actor)
