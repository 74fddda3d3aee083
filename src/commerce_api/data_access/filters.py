"""
Typed filter specifications.

Filters are a small closed set of predicates (``Eq``, ``NestedEq``) composed
with AND into a ``Specification`` that the unit of work applies to a select,
update or delete statement.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from sqlalchemy import and_, true
from sqlmodel import SQLModel

from commerce_api.core.constants import DEFAULT_LIST_LIMIT, DEFAULT_LIST_PAGE
from commerce_api.core.exceptions import InternalError


class Predicate(ABC):
    """A single filter condition."""

    @abstractmethod
    def to_sql_condition(self) -> Any:
        """Convert the predicate to a SQL expression."""


@dataclass(frozen=True)
class Eq(Predicate):
    """``column = value`` (``IS NULL`` for None)."""

    column: Any
    value: Any

    def to_sql_condition(self) -> Any:
        if self.value is None:
            return self.column.is_(None)
        return self.column == self.value


@dataclass(frozen=True)
class NestedEq(Predicate):
    """Equality on a column of a many-to-one related table."""

    relationship: Any
    column: Any
    value: Any

    def to_sql_condition(self) -> Any:
        return self.relationship.has(Eq(self.column, self.value).to_sql_condition())


class Specification:
    """AND-composition of predicates."""

    def __init__(self, predicates: list[Predicate] | None = None):
        self.predicates = list(predicates or [])

    def __len__(self) -> int:
        return len(self.predicates)

    def and_(self, other: Specification | Predicate) -> Specification:
        if isinstance(other, Predicate):
            return Specification([*self.predicates, other])
        return Specification(self.predicates + other.predicates)

    def to_sql_condition(self) -> Any:
        if not self.predicates:
            return true()
        if len(self.predicates) == 1:
            return self.predicates[0].to_sql_condition()
        return and_(*(predicate.to_sql_condition() for predicate in self.predicates))

    def apply(self, statement: Any) -> Any:
        """Add the WHERE clause to a select/update/delete statement."""
        if not self.predicates:
            return statement
        return statement.where(self.to_sql_condition())


def by_id(model: type[SQLModel], resource_id: str) -> Specification:
    return Specification([Eq(model.id, resource_id)])


def by_column(model: type[SQLModel], column: str, value: Any) -> Specification:
    return Specification([Eq(_column(model, column), value)])


def _column(model: type[SQLModel], name: str) -> Any:
    column = getattr(model, name, None)
    if column is None:
        raise InternalError(f"{model.__name__} cannot be filtered by '{name}'.")
    return column


def build_specification(
    model: type[SQLModel],
    filters: Mapping[str, Any] | None,
    nested: Mapping[str, type[SQLModel]] | None = None,
) -> Specification:
    """
    Build a specification from a sparse filter mapping.

    Args:
        model: Table model being listed
        filters: Attribute name to value; keys listed in ``nested`` hold a
            mapping of the related model's attributes instead
        nested: Relationship attribute name to related table model

    Example:
        build_specification(Company, {"name": "Acme", "address": {"city": "Paris"}},
                            nested={"address": Address})
    """
    nested = nested or {}
    predicates: list[Predicate] = []
    for name, value in (filters or {}).items():
        if name in nested and isinstance(value, Mapping):
            relationship = _column(model, name)
            for nested_name, nested_value in value.items():
                predicates.append(
                    NestedEq(relationship, _column(nested[name], nested_name), nested_value)
                )
        else:
            predicates.append(Eq(_column(model, name), value))
    return Specification(predicates)


@dataclass(frozen=True)
class ListOptions:
    """Simple limit/page pagination."""

    limit: int = DEFAULT_LIST_LIMIT
    page: int = DEFAULT_LIST_PAGE

    @property
    def offset(self) -> int:
        return self.limit * (self.page - 1)

    @classmethod
    def from_dto(cls, options: Mapping[str, Any] | None, default_limit: int | None = None) -> ListOptions:
        options = options or {}
        return cls(
            limit=int(options.get("limit") or default_limit or DEFAULT_LIST_LIMIT),
            page=int(options.get("page") or DEFAULT_LIST_PAGE),
        )
