"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Missing, empty or oversized input."""

    pass


class NotAuthenticatedError(DomainError):
    """Raised when an operation needs an authenticated, active user."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)


class ForbiddenError(DomainError):
    """Raised when the actor lacks permission for the requested action."""

    def __init__(self, message: str = "You do not have permission to perform this action"):
        super().__init__(message)


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class InvalidParentError(DomainError):
    """Raised when a reply targets a parent that cannot hold replies."""

    def __init__(self, message: str):
        super().__init__(message)


class UpstreamWriteFailure(DomainError):
    """Raised when a best-effort secondary write fails."""

    def __init__(self, target: str, cause: Exception):
        self.target = target
        self.cause = cause
        super().__init__(f"Failed to write {target}: {cause}")
