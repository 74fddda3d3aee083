"""Data transfer contracts: declaration, sanitization and validation."""

from .contract import MISSING, Contract, FieldSpec, Rule
from .sanitizer import SanitizedDto, sanitize_from_dto, sanitize_to_dto, validate_dto

__all__ = [
    "MISSING",
    "Contract",
    "FieldSpec",
    "Rule",
    "SanitizedDto",
    "sanitize_from_dto",
    "sanitize_to_dto",
    "validate_dto",
]
