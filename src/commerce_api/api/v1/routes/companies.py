from typing import Any

from fastapi import APIRouter

from commerce_api.core import controller
from commerce_api.data_access.patterns import unit_of_work
from commerce_api.domain.contracts import (
    COMPANY_CREATE,
    COMPANY_ID,
    COMPANY_LIST,
    COMPANY_MODEL,
    COMPANY_UPDATE,
)
from commerce_api.domain.services import company_service

router = APIRouter(prefix="/companies", tags=["companies"])


@router.post("")
@controller.create(COMPANY_CREATE, COMPANY_MODEL)
async def create_company(dto: dict[str, Any]):
    """Create a company together with its address."""
    async with unit_of_work() as uow:
        company_id = await company_service.create(uow, dto)
    # Read back the committed row
    async with unit_of_work() as uow:
        return await company_service.get_or_fail(uow, company_id)


@router.get("/{id}")
@controller.get(COMPANY_ID, COMPANY_MODEL)
async def get_company(dto: dict[str, Any]):
    async with unit_of_work() as uow:
        return await company_service.get_or_fail(uow, dto["id"])


@router.patch("/{id}")
@controller.update(COMPANY_UPDATE, COMPANY_MODEL)
async def update_company(dto: dict[str, Any]):
    """Update company fields and, when given, its address."""
    async with unit_of_work() as uow:
        await company_service.update(uow, dto)
    async with unit_of_work() as uow:
        return await company_service.get_or_fail(uow, dto["id"])


@router.delete("/{id}")
@controller.delete(COMPANY_ID)
async def delete_company(dto: dict[str, Any]) -> None:
    async with unit_of_work() as uow:
        await company_service.delete(uow, dto["id"])


@router.get("")
@controller.list_(COMPANY_LIST, COMPANY_MODEL)
async def list_companies(dto: dict[str, Any]):
    """Filters (including ``address.*``) and ``options`` are read from the JSON body."""
    async with unit_of_work() as uow:
        return await company_service.list(uow, dto)
