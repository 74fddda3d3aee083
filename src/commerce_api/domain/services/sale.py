"""
Sale aggregate: a sale and its items, plus the status lifecycle.
"""

from collections.abc import Mapping
from typing import Any

from commerce_api.core.constants import ResourcePrefix
from commerce_api.core.exceptions import InternalError, InvalidRequestError
from commerce_api.core.logging import get_logger
from commerce_api.data_access.filters import Eq, by_id
from commerce_api.data_access.models import Sale
from commerce_api.data_access.patterns import UnitOfWork
from commerce_api.domain.sale_status import INITIAL_STATUS, SaleAction, next_status

from .base import CrudService
from .customer import customer_service
from .product import product_service
from .sale_item import sale_item_service

logger = get_logger(__name__)


def check_item_totals(sale_items: list[Mapping[str, Any]]) -> None:
    """Every line total must equal quantity times unit price."""
    errors = {}
    for index, item in enumerate(sale_items):
        expected = item["quantity"] * item["price_per_unit"]
        if item["total"] != expected:
            errors[f"saleItems.{index}.total"] = (
                f"saleItems.{index}.total must equal quantity * pricePerUnit ({expected})"
            )
    if errors:
        raise InvalidRequestError(
            params=errors,
            message="Cannot create Sale. Sale item totals do not match quantity and price per unit.",
        )


class SaleService(CrudService[Sale]):
    model = Sale
    prefix = ResourcePrefix.SALE
    entity_name = "Sale"

    async def _check_company(self, uow: UnitOfWork, dto: Mapping[str, Any]) -> None:
        product_ids = [item["product_id"] for item in dto["sale_items"]]
        company_ids = await product_service.get_company_ids(uow, product_ids)
        if len(company_ids) != 1:
            raise InvalidRequestError(
                message="Cannot create Sale. Products must belong only to a single Company."
            )
        if company_ids[0] != dto["company_id"]:
            raise InvalidRequestError(
                message="Cannot create Sale. Products must belong same Company as Customer."
            )

        customer = await customer_service.get(uow, dto["customer_id"])
        if customer is not None and customer.company_id != dto["company_id"]:
            raise InvalidRequestError(
                params={"customerId": "customerId must belong to the Company of the Sale"},
                message="Cannot create Sale. Customer must belong to the same Company.",
            )

    async def create(self, uow: UnitOfWork, dto: Mapping[str, Any]) -> str:
        values = dict(dto)
        sale_items = values.pop("sale_items")

        check_item_totals(sale_items)
        await self._check_company(uow, dto)

        total = sum(item["total"] for item in sale_items)
        sale_id = await self._insert(
            uow, {**values, "status_code": INITIAL_STATUS, "total": total}
        )
        for item in sale_items:
            await sale_item_service.create(uow, {**item, "sale_id": sale_id})

        logger.info(f"Created Sale {sale_id} with {len(sale_items)} items, total {total}")
        return sale_id

    async def update(self, uow: UnitOfWork, dto: Mapping[str, Any]) -> None:
        values = dict(dto)
        await self._update_row(uow, values.pop("id"), values)

    async def transition(self, uow: UnitOfWork, sale_id: str, action: SaleAction) -> None:
        """Guarded status update: fetch, check the lifecycle, update only if unchanged."""
        sale = await self.get_or_fail(uow, sale_id)
        target = next_status(sale.status_code, action, sale_id)

        guard = by_id(Sale, sale_id).and_(Eq(Sale.status_code, sale.status_code))
        affected = await uow.update(Sale, guard, {"status_code": target})
        if affected != 1:
            # Status changed between the read and the write
            current = await self.get_or_fail(uow, sale_id)
            next_status(current.status_code, action, sale_id)
            raise InternalError(f"Sale {sale_id} changed while applying {action.value}.")

        logger.info(f"Sale {sale_id} {action.value}: {sale.status_code.value} -> {target.value}")

    async def cancel(self, uow: UnitOfWork, sale_id: str) -> None:
        await self.transition(uow, sale_id, SaleAction.CANCEL)

    async def pay(self, uow: UnitOfWork, sale_id: str) -> None:
        await self.transition(uow, sale_id, SaleAction.PAY)

    async def refund(self, uow: UnitOfWork, sale_id: str) -> None:
        await self.transition(uow, sale_id, SaleAction.REFUND)

    async def delete(self, uow: UnitOfWork, sale_id: str) -> None:
        removed = await sale_item_service.batch_delete(uow, sale_id)
        await self._delete_row(uow, sale_id)
        logger.info(f"Deleted Sale {sale_id} and {removed} items")


sale_service = SaleService()
