"""Core module containing configuration, constants, errors and the request pipeline."""

from .config import settings
from .constants import ResourcePrefix, ResponseStatusCode
from .exceptions import (
    ApiError,
    DuplicateError,
    ErrorType,
    InternalError,
    InvalidRequestError,
    NotFoundError,
)
from .logging import get_logger

__all__ = [
    "settings",
    "ResourcePrefix",
    "ResponseStatusCode",
    "ApiError",
    "DuplicateError",
    "ErrorType",
    "InternalError",
    "InvalidRequestError",
    "NotFoundError",
    "get_logger",
]
