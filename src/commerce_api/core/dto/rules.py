"""
Validation rules for contract fields.

Each factory returns a ``Rule``: a callable taking the wire name of the field and
its value, returning an error message or ``None``.
"""

from collections.abc import Iterable
from datetime import datetime
from enum import Enum
from typing import Any

from email_validator import EmailNotValidError, validate_email

from ..constants import MAX_CURRENCY_AMOUNT, CurrencyCode, ResourcePrefix
from ..ids import is_resource_id as _is_resource_id
from .contract import Rule


def _is_number(value: Any) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)


def _is_integer(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and value.is_integer()


def is_max_length(maximum: int) -> Rule:
    """String with length inclusive between 1 and ``maximum``."""

    def rule(field: str, value: Any) -> str | None:
        if isinstance(value, str) and 1 <= len(value) <= maximum:
            return None
        return f"{field} must be a string with length inclusive between 1 and {maximum}"

    return rule


def is_length(minimum: int, maximum: int) -> Rule:
    def rule(field: str, value: Any) -> str | None:
        if isinstance(value, str) and minimum <= len(value) <= maximum:
            return None
        return (
            f"{field} must be longer than or equal to {minimum} and "
            f"shorter than or equal to {maximum} characters"
        )

    return rule


def is_email() -> Rule:
    def rule(field: str, value: Any) -> str | None:
        if not isinstance(value, str):
            return f"{field} must be an email"
        try:
            validate_email(value, check_deliverability=False)
        except EmailNotValidError:
            return f"{field} must be an email"
        return None

    return rule


def is_int() -> Rule:
    def rule(field: str, value: Any) -> str | None:
        return None if _is_integer(value) else f"{field} must be an integer number"

    return rule


def is_positive() -> Rule:
    def rule(field: str, value: Any) -> str | None:
        if _is_number(value) and value > 0:
            return None
        return f"{field} must be a positive number"

    return rule


def min_value(minimum: int | float) -> Rule:
    def rule(field: str, value: Any) -> str | None:
        if _is_number(value) and value >= minimum:
            return None
        return f"{field} must not be less than {minimum}"

    return rule


def max_value(maximum: int | float) -> Rule:
    def rule(field: str, value: Any) -> str | None:
        if _is_number(value) and value <= maximum:
            return None
        return f"{field} must not be greater than {maximum}"

    return rule


def is_currency_amount(maximum: int = MAX_CURRENCY_AMOUNT) -> Rule:
    """Zero or a positive integer amount in minor units, up to ``maximum``."""

    def rule(field: str, value: Any) -> str | None:
        if _is_integer(value) and 0 <= value <= maximum:
            return None
        return f"{field} must be 0 or a positive integer up to {maximum:,}".replace(",", " ")

    return rule


def is_currency_code() -> Rule:
    accepted = {code.value for code in CurrencyCode}

    def rule(field: str, value: Any) -> str | None:
        if isinstance(value, str) and value in accepted:
            return None
        return f"{field} must be a valid ISO 4217 currency code"

    return rule


def is_resource_id(prefix: ResourcePrefix | str | None = None) -> Rule:
    def rule(field: str, value: Any) -> str | None:
        return None if _is_resource_id(value, prefix) else f"{field} is not a valid resource ID"

    return rule


def is_in(choices: type[Enum] | Iterable[Any]) -> Rule:
    if isinstance(choices, type) and issubclass(choices, Enum):
        allowed = [member.value for member in choices]
    else:
        allowed = list(choices)

    def rule(field: str, value: Any) -> str | None:
        if value in allowed:
            return None
        return f"{field} must be one of the following values: {', '.join(map(str, allowed))}"

    return rule


def is_object() -> Rule:
    def rule(field: str, value: Any) -> str | None:
        return None if isinstance(value, dict) else f"{field} must be an object"

    return rule


def is_array() -> Rule:
    def rule(field: str, value: Any) -> str | None:
        return None if isinstance(value, list) else f"{field} must be an array"

    return rule


def array_not_empty() -> Rule:
    def rule(field: str, value: Any) -> str | None:
        if isinstance(value, list) and value:
            return None
        return f"{field} should not be empty"

    return rule


def is_datetime() -> Rule:
    """ISO 8601 date string (or an already parsed datetime)."""

    def rule(field: str, value: Any) -> str | None:
        if isinstance(value, datetime):
            return None
        if isinstance(value, str):
            try:
                datetime.fromisoformat(value.replace("Z", "+00:00"))
            except ValueError:
                pass
            else:
                return None
        return f"{field} must be a valid ISO 8601 date string"

    return rule
