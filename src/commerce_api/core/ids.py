"""
Prefixed resource identifiers.

An id is a four character entity prefix followed by 21 characters drawn from
``[0-9A-Za-z]`` with the ``secrets`` CSPRNG, 25 characters in total.
"""

import re
import secrets

from .constants import (
    RESOURCE_ID_ALPHABET,
    RESOURCE_ID_SUFFIX_LENGTH,
    RESOURCE_PREFIX_LENGTH,
    ResourcePrefix,
)
from .exceptions import InternalError

_RESOURCE_ID_PATTERN = re.compile(
    rf"^[A-Za-z]{{3}}_[0-9A-Za-z]{{{RESOURCE_ID_SUFFIX_LENGTH}}}$"
)


def random_string(length: int) -> str:
    """Cryptographically random string over [0-9A-Za-z]."""
    return "".join(secrets.choice(RESOURCE_ID_ALPHABET) for _ in range(length))


def generate_id(prefix: ResourcePrefix | str) -> str:
    """
    Generate a new resource identifier.

    Raises:
        InternalError: if the prefix is not exactly four characters long
    """
    value = prefix.value if isinstance(prefix, ResourcePrefix) else prefix
    if not isinstance(value, str) or len(value) != RESOURCE_PREFIX_LENGTH:
        raise InternalError(
            f"Resource id prefix '{value}' must be {RESOURCE_PREFIX_LENGTH} characters long."
        )
    return f"{value}{random_string(RESOURCE_ID_SUFFIX_LENGTH)}"


def is_resource_id(value: object, prefix: ResourcePrefix | str | None = None) -> bool:
    """True when ``value`` has the shape of a resource id, optionally of one kind."""
    if not isinstance(value, str) or not _RESOURCE_ID_PATTERN.match(value):
        return False
    if prefix is None:
        return True
    expected = prefix.value if isinstance(prefix, ResourcePrefix) else prefix
    return value.startswith(expected)
