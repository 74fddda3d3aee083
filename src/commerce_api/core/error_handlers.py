"""
Error Handling Utilities
========================

The single place where any failure (domain, storage or framework level) is
translated into an HTTP response. Every failure produces exactly one
``{type, status, message, params?}`` body.
"""

import json
import re
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic.alias_generators import to_camel
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException

from .exceptions import (
    ApiError,
    DuplicateError,
    InternalError,
    InvalidRequestError,
    NotFoundError,
)
from .logging import get_logger

# Driver specific markers of constraint violations
_UNIQUE_CODES = {"23505", "1062", "2067", "1555"}
_FOREIGN_KEY_CODES = {"23503", "1452", "787"}
_UNIQUE_MESSAGES = ("UNIQUE constraint failed", "duplicate key value", "Duplicate entry")
_FOREIGN_KEY_MESSAGES = ("FOREIGN KEY constraint failed", "foreign key constraint")

_SQLITE_UNIQUE_COLUMNS = re.compile(r"UNIQUE constraint failed: (?P<columns>[\w., ]+)")


def _driver_code(error: IntegrityError) -> str | None:
    orig = error.orig
    for attr in ("sqlstate", "pgcode", "sqlite_errorcode"):
        code = getattr(orig, attr, None)
        if code is not None:
            return str(code)
    args = getattr(orig, "args", ())
    if args and isinstance(args[0], int):
        return str(args[0])
    return None


def _unique_violation_params(message: str) -> dict[str, str] | None:
    match = _SQLITE_UNIQUE_COLUMNS.search(message)
    if not match:
        return None
    params: dict[str, str] = {}
    for qualified in match.group("columns").split(","):
        column = to_camel(qualified.strip().split(".")[-1])
        params[column] = f"{column} already exists"
    return params


class ErrorHandler:
    """Centralized error classification, logging and response formatting."""

    def __init__(self, logger_name: str | None = None) -> None:
        self.logger = get_logger(logger_name or __name__)

    def to_api_error(self, error: Exception, request: Request | None = None) -> ApiError:
        """Classify any exception into one of the four API error kinds."""
        if isinstance(error, ApiError):
            return error

        if isinstance(error, json.JSONDecodeError):
            return InvalidRequestError(message=f"Malformed JSON request body: {error.msg}.")

        if isinstance(error, IntegrityError):
            return self._classify_integrity_error(error)

        if isinstance(error, RequestValidationError):
            return InvalidRequestError(
                message="One or more request parameters are invalid or missing."
            )

        if isinstance(error, StarletteHTTPException):
            # Unknown path, or known path without a route for this method
            if error.status_code in (404, 405) and request is not None:
                return NotFoundError(
                    f"Resource is not found at: {{{request.method}}} {request.url.path}"
                )
            if error.status_code in (404, 405):
                return NotFoundError(str(error.detail))
            if error.status_code < 500:
                return InvalidRequestError(message=str(error.detail))
            return InternalError(str(error.detail))

        return InternalError(str(error) or InternalError().message)

    def _classify_integrity_error(self, error: IntegrityError) -> ApiError:
        code = _driver_code(error)
        message = str(error.orig)

        if code in _UNIQUE_CODES or any(m in message for m in _UNIQUE_MESSAGES):
            return DuplicateError(params=_unique_violation_params(message))

        if code in _FOREIGN_KEY_CODES or any(m in message for m in _FOREIGN_KEY_MESSAGES):
            return InvalidRequestError(
                message="A referenced resource does not exist."
            )

        return InternalError(message)

    def to_response(self, error: Exception, request: Request | None = None) -> JSONResponse:
        """Map an exception to the JSON error response sent to the client."""
        api_error = self.to_api_error(error, request)
        self._log(error, api_error, request)
        return JSONResponse(status_code=int(api_error.status), content=api_error.to_dict())

    def _log(self, error: Exception, api_error: ApiError, request: Request | None) -> None:
        context: dict[str, Any] = {
            "error_type": api_error.type.value,
            "status": int(api_error.status),
        }
        if request is not None:
            context["method"] = request.method
            context["path"] = request.url.path

        if api_error.status >= 500:
            self.logger.error(
                f"Request failed: {api_error.message}",
                exc_info=(type(error), error, error.__traceback__),
                extra=context,
            )
        elif api_error.status == 404:
            self.logger.info(f"Request failed: {api_error.message}", extra=context)
        else:
            self.logger.warning(f"Request rejected: {api_error.message}", extra=context)


# Global error handler instance
_global_error_handler = ErrorHandler()


def get_error_handler() -> ErrorHandler:
    return _global_error_handler


def create_error_response(error: Exception, request: Request | None = None) -> JSONResponse:
    """Create FastAPI JSON error response."""
    return _global_error_handler.to_response(error, request)


# FastAPI exception handlers
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Unmatched routes and other framework level HTTP errors."""
    return create_error_response(exc, request)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return create_error_response(exc, request)


async def api_exception_handler(request: Request, exc: ApiError) -> JSONResponse:
    return create_error_response(exc, request)


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle all other exceptions."""
    return create_error_response(exc, request)


def register_error_handlers(app: FastAPI) -> None:
    """Install the mapper for every exception type that can escape a route."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(ApiError, api_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
