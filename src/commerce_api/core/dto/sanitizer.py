"""
Sanitization and validation against a ``Contract``.

``sanitize_to_dto`` projects an inbound JSON value onto the exposed fields of a
contract, ``validate_dto`` runs the field rules, and ``sanitize_from_dto``
projects an internal entity back to its wire shape.
"""

from __future__ import annotations

from typing import Any

from .contract import MISSING, Contract, FieldSpec


class SanitizedDto(dict):
    """Output of ``sanitize_to_dto``: keyed by attribute name instead of wire alias."""


def _read_inbound(raw: dict[str, Any], spec: FieldSpec) -> Any:
    if isinstance(raw, SanitizedDto):
        return raw.get(spec.name, MISSING)
    return raw.get(spec.alias, MISSING)


def sanitize_to_dto(contract: Contract, raw: Any) -> Any:
    """
    Keep only the exposed fields of ``contract``, keyed by attribute name.

    Client input is read by wire alias only; a value this function already
    returned is read by attribute name, so sanitizing twice changes nothing.

    Absent fields stay absent, nested objects that end up empty are removed,
    and values of the wrong shape pass through untouched so validation can
    report them.
    """
    if not isinstance(raw, dict):
        return raw

    result = SanitizedDto()
    for spec in contract.exposed:
        value = _read_inbound(raw, spec)
        if value is MISSING:
            continue

        if spec.nested is not None:
            if spec.many and isinstance(value, list):
                value = [sanitize_to_dto(spec.nested, item) for item in value]
            elif not spec.many and isinstance(value, dict):
                value = sanitize_to_dto(spec.nested, value)
                if not value:
                    continue

        result[spec.name] = value
    return result


def _validate_field(spec: FieldSpec, value: Any, path: str, errors: dict[str, str]) -> None:
    if value is MISSING:
        if not spec.undefinable:
            errors[path] = f"{spec.alias} is required"
        return

    if value is None:
        if not spec.nullable:
            errors[path] = f"{spec.alias} must not be null"
        return

    for rule in spec.rules:
        message = rule(spec.alias, value)
        if message:
            errors[path] = message
            return

    if spec.nested is None:
        return

    if spec.many:
        if not isinstance(value, list):
            errors[path] = f"{spec.alias} must be an array"
            return
        for index, item in enumerate(value):
            item_path = f"{path}.{index}"
            if not isinstance(item, dict):
                errors[item_path] = f"{spec.alias}.{index} must be an object"
                continue
            errors.update(validate_dto(spec.nested, item, prefix=f"{item_path}."))
        return

    if not isinstance(value, dict):
        errors[path] = f"{spec.alias} must be an object"
        return
    errors.update(validate_dto(spec.nested, value, prefix=f"{path}."))


def validate_dto(contract: Contract, value: Any, prefix: str = "") -> dict[str, str]:
    """
    Validate a sanitized value.

    Returns:
        Ordered mapping of wire path (``saleItems.0.productId``) to the first
        failing rule message of that field; empty when the value is valid.
    """
    errors: dict[str, str] = {}
    if not isinstance(value, dict):
        errors[prefix.rstrip(".") or contract.name] = f"{contract.name} must be an object"
        return errors

    for spec in contract.exposed:
        _validate_field(spec, value.get(spec.name, MISSING), f"{prefix}{spec.alias}", errors)
    return errors


def _read_outbound(source: Any, spec: FieldSpec) -> Any:
    if isinstance(source, dict):
        if spec.name in source:
            return source[spec.name]
        return source.get(spec.alias, MISSING)
    return getattr(source, spec.name, MISSING)


def sanitize_from_dto(contract: Contract, source: Any) -> Any:
    """
    Project an entity (ORM object or dict), or a list of them, to its wire shape.

    Only exposed fields are emitted, keyed by wire alias.
    """
    if source is None:
        return None
    if isinstance(source, list | tuple):
        return [sanitize_from_dto(contract, item) for item in source]

    result: dict[str, Any] = {}
    for spec in contract.exposed:
        value = _read_outbound(source, spec)
        if value is MISSING:
            continue
        if spec.nested is not None and value is not None:
            value = sanitize_from_dto(spec.nested, value)
        result[spec.alias] = value
    return result
