"""Request authentication helpers for routes."""

from fastapi import Cookie, Header

from remark.application.usecase.auth import (
    GetCurrentActorRequest,
    GetCurrentActorUseCase,
)
from remark.domain.model import Actor

BEARER_PREFIX = "bearer "


def read_token(
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> str | None:
    """Take the JWT from the Authorization header, falling back to the cookie."""
    if authorization and authorization.lower().startswith(BEARER_PREFIX):
        token = authorization[len(BEARER_PREFIX) :].strip()
        if token:
            return token
    return auth_token


async def resolve_actor(
    use_case: GetCurrentActorUseCase, token: str | None, required: bool = True
) -> Actor | None:
    """Resolve the actor behind a request.

    Raises:
        NotAuthenticatedError: If required and the token names no user
    """
    response = await use_case.execute(
        GetCurrentActorRequest(token=token, required=required)
    )
    return response.actor
