"""Custom exceptions for the application."""

from typing import Any


class PortalException(Exception):
    """Base exception for all Advisor Portal errors."""
    error_code = "error"

    def __init__(self, message: str, status_code: int = 400):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)

    def to_body(self) -> dict[str, Any]:
        return {"error": self.error_code, "message": self.message}


# Request Exceptions
class ValidationError(PortalException):
    """Malformed or missing input."""
    error_code = "validation_error"

    def __init__(self, message: str):
        super().__init__(message, status_code=400)


class ConflictError(PortalException):
    """Username or email already registered."""
    error_code = "conflict"

    def __init__(self, message: str = "Account already exists"):
        super().__init__(message, status_code=400)


# Authentication Exceptions
class UnauthorizedError(PortalException):
    """Missing, expired or invalid session, or bad credentials."""
    error_code = "unauthorized"

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message, status_code=401)


# Resource Exceptions
class NotFoundError(PortalException):
    """Resource not found."""
    error_code = "not_found"

    def __init__(self, resource: str, id: Any):
        super().__init__(f"{resource} with id {id} not found", status_code=404)
        self.resource = resource
        self.id = id


# Remote Backend Exceptions
class RemoteUnavailableError(PortalException):
    """Remote backend unreachable or answered with something other than JSON."""
    error_code = "remote_unavailable"

    def __init__(self, message: str = "Remote service unavailable"):
        super().__init__(message, status_code=500)


class RemoteRejectedError(PortalException):
    """Remote backend answered with a non-2xx status.

    The remote status code and body are relayed to the client unchanged.
    """
    error_code = "remote_rejected"

    def __init__(self, status_code: int, body: Any):
        self.body = body
        super().__init__(_remote_message(body, status_code), status_code=status_code)

    def to_body(self) -> Any:
        return self.body


def _remote_message(body: Any, status_code: int) -> str:
    if isinstance(body, dict):
        detail = body.get("detail") or body.get("message")
        if isinstance(detail, str):
            return detail
    return f"Remote service returned {status_code}"
