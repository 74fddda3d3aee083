from typing import Any

from fastapi import APIRouter

from commerce_api.core import controller
from commerce_api.data_access.patterns import unit_of_work
from commerce_api.domain.contracts import (
    CUSTOMER_CREATE,
    CUSTOMER_ID,
    CUSTOMER_LIST,
    CUSTOMER_MODEL,
    CUSTOMER_UPDATE,
)
from commerce_api.domain.services import customer_service

router = APIRouter(prefix="/customers", tags=["customers"])


@router.post("")
@controller.create(CUSTOMER_CREATE, CUSTOMER_MODEL)
async def create_customer(dto: dict[str, Any]):
    """Create a customer together with its address."""
    async with unit_of_work() as uow:
        customer_id = await customer_service.create(uow, dto)
    async with unit_of_work() as uow:
        return await customer_service.get_or_fail(uow, customer_id)


@router.get("/{id}")
@controller.get(CUSTOMER_ID, CUSTOMER_MODEL)
async def get_customer(dto: dict[str, Any]):
    async with unit_of_work() as uow:
        return await customer_service.get_or_fail(uow, dto["id"])


@router.patch("/{id}")
@controller.update(CUSTOMER_UPDATE, CUSTOMER_MODEL)
async def update_customer(dto: dict[str, Any]):
    """Update customer fields and, when given, its address."""
    async with unit_of_work() as uow:
        await customer_service.update(uow, dto)
    async with unit_of_work() as uow:
        return await customer_service.get_or_fail(uow, dto["id"])


@router.delete("/{id}")
@controller.delete(CUSTOMER_ID)
async def delete_customer(dto: dict[str, Any]) -> None:
    async with unit_of_work() as uow:
        await customer_service.delete(uow, dto["id"])


@router.get("")
@controller.list_(CUSTOMER_LIST, CUSTOMER_MODEL)
async def list_customers(dto: dict[str, Any]):
    """Filters (including ``address.*``) and ``options`` are read from the JSON body."""
    async with unit_of_work() as uow:
        return await customer_service.list(uow, dto)
