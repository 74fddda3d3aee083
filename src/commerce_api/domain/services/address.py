from collections.abc import Mapping
from typing import Any

from commerce_api.core.constants import ResourcePrefix
from commerce_api.core.logging import get_logger
from commerce_api.data_access.models import Address
from commerce_api.data_access.patterns import UnitOfWork

from .base import CrudService, T

logger = get_logger(__name__)


class AddressService(CrudService[Address]):
    """Addresses live and die with their owner; there is no public route for them."""

    model = Address
    prefix = ResourcePrefix.ADDRESS
    entity_name = "Address"

    async def create(self, uow: UnitOfWork, dto: Mapping[str, Any]) -> str:
        return await self._insert(uow, dto)

    async def update(self, uow: UnitOfWork, address_id: str, dto: Mapping[str, Any]) -> None:
        await self._update_row(uow, address_id, dto)

    async def delete(self, uow: UnitOfWork, address_id: str) -> None:
        await self._delete_row(uow, address_id)


address_service = AddressService()


class AddressOwnerService(CrudService[T]):
    """
    Aggregate of a row and the address it exclusively owns.

    Create, update and delete touch both rows inside the caller's unit of work,
    so either both changes persist or neither does.
    """

    nested_filters = {"address": Address}

    async def create(self, uow: UnitOfWork, dto: Mapping[str, Any]) -> str:
        values = dict(dto)
        address_id = await address_service.create(uow, values.pop("address"))
        resource_id = await self._insert(uow, {**values, "address_id": address_id})
        logger.info(f"Created {self.entity_name} {resource_id} with address {address_id}")
        return resource_id

    async def update(self, uow: UnitOfWork, dto: Mapping[str, Any]) -> None:
        values = dict(dto)
        resource_id = values.pop("id")
        address = values.pop("address", None)

        await self._update_row(uow, resource_id, values)
        if address:
            owner = await self.get_or_fail(uow, resource_id, action="update")
            await address_service.update(uow, owner.address_id, address)
        logger.info(f"Updated {self.entity_name} {resource_id}")

    async def delete(self, uow: UnitOfWork, resource_id: str) -> None:
        owner = await self.get_or_fail(uow, resource_id, action="delete")
        await self._delete_row(uow, resource_id)
        await address_service.delete(uow, owner.address_id)
        logger.info(f"Deleted {self.entity_name} {resource_id} and its address")
