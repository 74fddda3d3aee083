"""
Custom exception classes for the application.

Every failure a handler raises on purpose is an ``ApiError``; its ``type``
decides the HTTP status the error mapper answers with.
"""

from enum import Enum
from typing import Any

from .constants import ResponseStatusCode


class ErrorType(str, Enum):
    """Closed set of error kinds; values are the names sent on the wire."""

    INVALID_REQUEST = "InvalidRequestError"
    NOT_FOUND = "NotFoundError"
    DUPLICATE = "DuplicateError"
    INTERNAL = "InternalError"


ERROR_STATUS: dict[ErrorType, ResponseStatusCode] = {
    ErrorType.INVALID_REQUEST: ResponseStatusCode.BAD_REQUEST,
    ErrorType.NOT_FOUND: ResponseStatusCode.NOT_FOUND,
    ErrorType.DUPLICATE: ResponseStatusCode.CONFLICT,
    ErrorType.INTERNAL: ResponseStatusCode.INTERNAL_ERROR,
}


class ApiError(Exception):
    """Base exception class for all application errors."""

    type: ErrorType = ErrorType.INTERNAL

    def __init__(self, message: str, params: dict[str, str] | None = None) -> None:
        """
        Initialize the error.

        Args:
            message: Human readable error message
            params: Optional mapping of field path to error message
        """
        self.message = message
        self.params = params
        super().__init__(self.message)

    @property
    def status(self) -> ResponseStatusCode:
        return ERROR_STATUS[self.type]

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to the error body of an API response."""
        body: dict[str, Any] = {
            "type": self.type.value,
            "status": int(self.status),
            "message": self.message,
        }
        if self.params:
            body["params"] = dict(self.params)
        return body


class InvalidRequestError(ApiError):
    """Raised when the request payload or the requested action is not acceptable."""

    type = ErrorType.INVALID_REQUEST

    def __init__(
        self,
        params: dict[str, str] | None = None,
        message: str = "An unknown invalid request error occurred.",
    ) -> None:
        super().__init__(message, params)


class NotFoundError(ApiError):
    """Raised when requested resource is not found."""

    type = ErrorType.NOT_FOUND

    def __init__(self, message: str = "Cannot find resource.") -> None:
        super().__init__(message)


class DuplicateError(ApiError):
    """Raised when a unique constraint would be violated."""

    type = ErrorType.DUPLICATE

    def __init__(
        self,
        params: dict[str, str] | None = None,
        message: str = "Duplicate entry error.",
    ) -> None:
        super().__init__(message, params)


class InternalError(ApiError):
    """Raised on programmer errors such as a misconfigured route or id prefix."""

    type = ErrorType.INTERNAL

    def __init__(self, message: str = "An unknown server error occurred.") -> None:
        super().__init__(message)
