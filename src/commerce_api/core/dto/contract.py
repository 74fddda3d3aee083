"""
Declarative data transfer contracts.

A ``Contract`` is an immutable, ordered list of ``FieldSpec`` entries built once
at import time. Resource contracts are composed from shared fragments with
``merge``/``extend`` rather than subclassed.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field, replace
from typing import Any

from pydantic.alias_generators import to_camel

# A rule receives the wire name of the field and its value and returns an
# error message, or None when the value is acceptable.
Rule = Callable[[str, Any], "str | None"]


class _Missing:
    """Marker for a key absent from the payload (as opposed to an explicit null)."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


@dataclass(frozen=True)
class FieldSpec:
    """
    Metadata of a single contract field.

    Attributes:
        name: Attribute name used inside the application (snake_case)
        rules: Validation rules, evaluated in order, first failure wins
        exposed: Whether the field is read from input / written to output
        undefinable: The field may be omitted entirely
        nullable: The field may be an explicit null
        nested: Contract of an object (or array element) value
        many: The nested value is an array of objects
        alias: Key used on the wire, camelCase of ``name`` by default
    """

    name: str
    rules: tuple[Rule, ...] = ()
    exposed: bool = True
    undefinable: bool = False
    nullable: bool = False
    nested: Contract | None = None
    many: bool = False
    alias: str = ""

    def __post_init__(self) -> None:
        if not self.alias:
            object.__setattr__(self, "alias", to_camel(self.name))
        if not isinstance(self.rules, tuple):
            object.__setattr__(self, "rules", tuple(self.rules))


@dataclass(frozen=True)
class Contract:
    """Ordered, immutable collection of field specifications."""

    name: str
    fields: tuple[FieldSpec, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not isinstance(self.fields, tuple):
            object.__setattr__(self, "fields", tuple(self.fields))
        names = [spec.name for spec in self.fields]
        if len(names) != len(set(names)):
            raise ValueError(f"Contract {self.name} declares a field twice: {names}")

    def __iter__(self):
        return iter(self.fields)

    def __contains__(self, name: object) -> bool:
        return any(spec.name == name for spec in self.fields)

    @property
    def exposed(self) -> tuple[FieldSpec, ...]:
        return tuple(spec for spec in self.fields if spec.exposed)

    def get(self, name: str) -> FieldSpec:
        for spec in self.fields:
            if spec.name == name:
                return spec
        raise KeyError(f"{self.name} has no field '{name}'")

    def extend(self, *fields: FieldSpec, name: str | None = None) -> Contract:
        """Return a new contract with ``fields`` appended; same-named fields are replaced in place."""
        incoming = {spec.name: spec for spec in fields}
        result = [incoming.pop(spec.name, spec) for spec in self.fields]
        result.extend(spec for spec in fields if spec.name in incoming)
        return Contract(name or self.name, tuple(result))

    def merge(self, other: Contract, name: str | None = None) -> Contract:
        return self.extend(*other.fields, name=name or self.name)

    def pick(self, *names: str, name: str | None = None) -> Contract:
        """Return a contract restricted to ``names``, in the order given."""
        return Contract(name or self.name, tuple(self.get(n) for n in names))

    def omit(self, *names: str, name: str | None = None) -> Contract:
        return Contract(
            name or self.name,
            tuple(spec for spec in self.fields if spec.name not in names),
        )

    def as_optional(self, name: str | None = None, nullable: Iterable[str] = ()) -> Contract:
        """
        Every field becomes undefinable, recursively for nested contracts.

        ``nullable`` names fields that additionally accept an explicit null.
        """
        nullable = set(nullable)
        fields = []
        for spec in self.fields:
            nested = spec.nested.as_optional() if spec.nested and not spec.many else spec.nested
            fields.append(
                replace(
                    spec,
                    undefinable=True,
                    nullable=spec.nullable or spec.name in nullable,
                    nested=nested,
                )
            )
        return Contract(name or self.name, tuple(fields))
