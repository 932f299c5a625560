"""Exception handlers rendering errors in the response envelope."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from remark.domain.error import (
    DomainError,
    ForbiddenError,
    InvalidParentError,
    NotAuthenticatedError,
    NotFoundError,
    UpstreamWriteFailure,
    ValidationError,
)

# Most specific first; DomainError catches the rest
STATUS_BY_ERROR: list[tuple[type[DomainError], int]] = [
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (InvalidParentError, status.HTTP_400_BAD_REQUEST),
    (NotAuthenticatedError, status.HTTP_401_UNAUTHORIZED),
    (ForbiddenError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (UpstreamWriteFailure, status.HTTP_500_INTERNAL_SERVER_ERROR),
]


def status_for(exc: DomainError) -> int:
    """HTTP status code for a domain error."""
    for error_type, code in STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return code
    return status.HTTP_400_BAD_REQUEST


def error_response(
    status_code: int, message: str, data: object | None = None
) -> JSONResponse:
    content: dict[str, object] = {"status": "error", "message": message}
    if data is not None:
        content["data"] = data
    return JSONResponse(status_code=status_code, content=content)


def register_exception_handlers(app: FastAPI) -> None:
    """Register all custom exception handlers on the FastAPI app."""

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
        status_code = status_for(exc)
        if status_code >= 500:
            logfire.error(
                "Domain error",
                path=request.url.path,
                error_type=type(exc).__name__,
                error=str(exc),
            )
            return error_response(status_code, "Something went wrong")

        logfire.info(
            "Request rejected",
            path=request.url.path,
            method=request.method,
            status_code=status_code,
            error_type=type(exc).__name__,
        )
        return error_response(status_code, str(exc))

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        errors = jsonable_encoder(exc.errors())
        first = errors[0]["msg"] if errors else "Invalid request"
        return error_response(
            422, f"Invalid input data: {first}", errors
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        logfire.exception(
            "Unhandled error",
            path=request.url.path,
            method=request.method,
            error_type=type(exc).__name__,
        )
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Something went wrong"
        )
