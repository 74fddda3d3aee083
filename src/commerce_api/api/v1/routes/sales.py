from typing import Any

from fastapi import APIRouter

from commerce_api.core import controller
from commerce_api.data_access.patterns import unit_of_work
from commerce_api.domain.contracts import SALE_CREATE, SALE_ID, SALE_LIST, SALE_MODEL, SALE_UPDATE
from commerce_api.domain.sale_status import SaleAction
from commerce_api.domain.services import sale_service

router = APIRouter(prefix="/sales", tags=["sales"])


@router.post("")
@controller.create(SALE_CREATE, SALE_MODEL)
async def create_sale(dto: dict[str, Any]):
    """Create a sale and its items; the sale total is the sum of the item totals."""
    async with unit_of_work() as uow:
        sale_id = await sale_service.create(uow, dto)
    async with unit_of_work() as uow:
        return await sale_service.get_or_fail(uow, sale_id)


@router.get("/{id}")
@controller.get(SALE_ID, SALE_MODEL)
async def get_sale(dto: dict[str, Any]):
    async with unit_of_work() as uow:
        return await sale_service.get_or_fail(uow, dto["id"])


@router.patch("/{id}")
@controller.update(SALE_UPDATE, SALE_MODEL)
async def update_sale(dto: dict[str, Any]):
    async with unit_of_work() as uow:
        await sale_service.update(uow, dto)
    async with unit_of_work() as uow:
        return await sale_service.get_or_fail(uow, dto["id"])


async def _apply(action: SaleAction, sale_id: str):
    async with unit_of_work() as uow:
        await sale_service.transition(uow, sale_id, action)
    async with unit_of_work() as uow:
        return await sale_service.get_or_fail(uow, sale_id)


@router.post("/{id}/cancel")
@controller.update(SALE_ID, SALE_MODEL)
async def cancel_sale(dto: dict[str, Any]):
    return await _apply(SaleAction.CANCEL, dto["id"])


@router.post("/{id}/pay")
@controller.update(SALE_ID, SALE_MODEL)
async def pay_sale(dto: dict[str, Any]):
    return await _apply(SaleAction.PAY, dto["id"])


@router.post("/{id}/refund")
@controller.update(SALE_ID, SALE_MODEL)
async def refund_sale(dto: dict[str, Any]):
    return await _apply(SaleAction.REFUND, dto["id"])


@router.delete("/{id}")
@controller.delete(SALE_ID)
async def delete_sale(dto: dict[str, Any]) -> None:
    """Delete a sale and all of its items."""
    async with unit_of_work() as uow:
        await sale_service.delete(uow, dto["id"])


@router.get("")
@controller.list_(SALE_LIST, SALE_MODEL)
async def list_sales(dto: dict[str, Any]):
    async with unit_of_work() as uow:
        return await sale_service.list(uow, dto)
