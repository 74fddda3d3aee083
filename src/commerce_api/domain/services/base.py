"""
CRUD service base.

Services are stateless; every method receives the unit of work it runs in, so
the caller always decides the transaction boundary.
"""

from collections.abc import Mapping, Sequence
from typing import Any, ClassVar, Generic, TypeVar

from sqlmodel import SQLModel

from commerce_api.core.config import settings
from commerce_api.core.constants import ResourcePrefix
from commerce_api.core.exceptions import NotFoundError
from commerce_api.core.ids import generate_id
from commerce_api.data_access.filters import ListOptions, build_specification, by_id
from commerce_api.data_access.patterns import UnitOfWork

T = TypeVar("T", bound=SQLModel)


class CrudService(Generic[T]):
    """
    Shared create/get/update/delete/list plumbing for one table model.

    Subclasses set ``model``, ``prefix`` and ``entity_name``; ``nested_filters``
    maps a relationship name to the model its nested list filters apply to.
    """

    model: ClassVar[type[SQLModel]]
    prefix: ClassVar[ResourcePrefix]
    entity_name: ClassVar[str]
    nested_filters: ClassVar[Mapping[str, type[SQLModel]]] = {}

    def generate_id(self) -> str:
        return generate_id(self.prefix)

    async def get(self, uow: UnitOfWork, resource_id: str) -> T | None:
        return await uow.find_one(self.model, by_id(self.model, resource_id))

    async def get_or_fail(self, uow: UnitOfWork, resource_id: str, action: str = "retrieve") -> T:
        entity = await self.get(uow, resource_id)
        if entity is None:
            raise NotFoundError(
                f"Cannot {action} {self.entity_name}. ID {resource_id} does not exist."
            )
        return entity

    async def _insert(self, uow: UnitOfWork, values: Mapping[str, Any]) -> str:
        return await uow.insert(self.model, {"id": self.generate_id(), **values})

    async def _update_row(self, uow: UnitOfWork, resource_id: str, changes: Mapping[str, Any]) -> None:
        affected = await uow.update(self.model, by_id(self.model, resource_id), dict(changes))
        if affected != 1:
            raise NotFoundError(
                f"Cannot update {self.entity_name}. ID {resource_id} does not exist."
            )

    async def _delete_row(self, uow: UnitOfWork, resource_id: str) -> None:
        affected = await uow.delete(self.model, by_id(self.model, resource_id))
        if affected != 1:
            raise NotFoundError(
                f"Cannot delete {self.entity_name}. ID {resource_id} does not exist."
            )

    async def list(self, uow: UnitOfWork, dto: Mapping[str, Any]) -> Sequence[T]:
        """List rows matching the sparse equality filters in ``dto``, paginated by ``dto['options']``."""
        filters = dict(dto)
        options = ListOptions.from_dto(filters.pop("options", None), settings.list_default_limit)
        spec = build_specification(self.model, filters, nested=self.nested_filters)
        return await uow.find(self.model, spec, limit=options.limit, offset=options.offset)
