from collections.abc import Mapping, Sequence
from typing import Any

from commerce_api.core.constants import ResourcePrefix
from commerce_api.core.exceptions import InternalError
from commerce_api.data_access.filters import by_column
from commerce_api.data_access.models import SaleItem
from commerce_api.data_access.patterns import UnitOfWork

from .base import CrudService


class SaleItemService(CrudService[SaleItem]):
    """Sale items are only written as part of their sale."""

    model = SaleItem
    prefix = ResourcePrefix.SALE_ITEM
    entity_name = "SaleItem"

    async def create(self, uow: UnitOfWork, dto: Mapping[str, Any]) -> str:
        return await self._insert(uow, dto)

    async def update(self, uow: UnitOfWork, dto: Mapping[str, Any]) -> None:
        raise InternalError("Sale item update not implemented.")

    async def delete(self, uow: UnitOfWork, sale_item_id: str) -> None:
        raise InternalError("Sale item delete not implemented.")

    async def batch_delete(self, uow: UnitOfWork, sale_id: str) -> int:
        """Delete every item of a sale; returns how many were removed."""
        return await uow.delete(SaleItem, by_column(SaleItem, "sale_id", sale_id))

    async def list_by_sale(self, uow: UnitOfWork, sale_id: str) -> Sequence[SaleItem]:
        return await uow.find(SaleItem, by_column(SaleItem, "sale_id", sale_id))


sale_item_service = SaleItemService()
