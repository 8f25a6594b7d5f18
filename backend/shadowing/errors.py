"""Domain errors raised by the service layer and their HTTP mapping."""

from typing import Any


class AppError(Exception):
    """Base class for errors surfaced to API callers as ``{"message": ...}``."""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str | None = None, errors: list[dict[str, Any]] | None = None):
        self.message = message or self.default_message
        self.errors = errors
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {"message": self.message}
        if self.errors:
            body["errors"] = self.errors
        return body


class ValidationError(AppError):
    """Malformed or missing input."""

    status_code = 400
    default_message = "Invalid request"


class InvalidStatus(ValidationError):
    """Unknown application status, or a transition the state machine refuses."""

    default_message = "Invalid status"


class ProfileRequired(AppError):
    """The action needs the caller to have created a profile first."""

    status_code = 400
    default_message = "Profile required"


class NotAuthenticated(AppError):
    status_code = 401
    default_message = "Login required"


class AccessDenied(AppError):
    """The caller does not own the referenced resource."""

    status_code = 403
    default_message = "Access denied"


class NotFound(AppError):
    status_code = 404
    default_message = "Not found"


class StorageError(AppError):
    """Underlying store failure. The message never carries driver details."""

    status_code = 500
    default_message = "Storage failure"
