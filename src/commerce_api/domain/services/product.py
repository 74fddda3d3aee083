from collections.abc import Mapping, Sequence
from typing import Any

from sqlmodel import select

from commerce_api.core.constants import ResourcePrefix
from commerce_api.core.logging import get_logger
from commerce_api.data_access.models import Product
from commerce_api.data_access.patterns import UnitOfWork

from .base import CrudService

logger = get_logger(__name__)


class ProductService(CrudService[Product]):
    model = Product
    prefix = ResourcePrefix.PRODUCT
    entity_name = "Product"

    async def create(self, uow: UnitOfWork, dto: Mapping[str, Any]) -> str:
        product_id = await self._insert(uow, dto)
        logger.info(f"Created Product {product_id} for company {dto['company_id']}")
        return product_id

    async def update(self, uow: UnitOfWork, dto: Mapping[str, Any]) -> None:
        values = dict(dto)
        await self._update_row(uow, values.pop("id"), values)

    async def delete(self, uow: UnitOfWork, product_id: str) -> None:
        await self._delete_row(uow, product_id)

    async def get_company_ids(self, uow: UnitOfWork, product_ids: Sequence[str]) -> Sequence[str]:
        """Distinct ids of the companies owning ``product_ids``."""
        if not product_ids:
            return []
        statement = (
            select(Product.company_id)
            .where(Product.id.in_(set(product_ids)))
            .distinct()
            .order_by(Product.company_id)
        )
        return await uow.scalars(statement)


product_service = ProductService()
