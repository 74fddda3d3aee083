from typing import Any

from fastapi import APIRouter

from commerce_api.core import controller
from commerce_api.data_access.patterns import unit_of_work
from commerce_api.domain.contracts import (
    PRODUCT_CREATE,
    PRODUCT_ID,
    PRODUCT_LIST,
    PRODUCT_MODEL,
    PRODUCT_UPDATE,
)
from commerce_api.domain.services import product_service

router = APIRouter(prefix="/products", tags=["products"])


@router.post("")
@controller.create(PRODUCT_CREATE, PRODUCT_MODEL)
async def create_product(dto: dict[str, Any]):
    """Create a product; the sku must be unique within the company."""
    async with unit_of_work() as uow:
        product_id = await product_service.create(uow, dto)
    async with unit_of_work() as uow:
        return await product_service.get_or_fail(uow, product_id)


@router.get("/{id}")
@controller.get(PRODUCT_ID, PRODUCT_MODEL)
async def get_product(dto: dict[str, Any]):
    async with unit_of_work() as uow:
        return await product_service.get_or_fail(uow, dto["id"])


@router.patch("/{id}")
@controller.update(PRODUCT_UPDATE, PRODUCT_MODEL)
async def update_product(dto: dict[str, Any]):
    async with unit_of_work() as uow:
        await product_service.update(uow, dto)
    async with unit_of_work() as uow:
        return await product_service.get_or_fail(uow, dto["id"])


@router.delete("/{id}")
@controller.delete(PRODUCT_ID)
async def delete_product(dto: dict[str, Any]) -> None:
    async with unit_of_work() as uow:
        await product_service.delete(uow, dto["id"])


@router.get("")
@controller.list_(PRODUCT_LIST, PRODUCT_MODEL)
async def list_products(dto: dict[str, Any]):
    """Filters and ``options`` are read from the JSON body."""
    async with unit_of_work() as uow:
        return await product_service.list(uow, dto)
