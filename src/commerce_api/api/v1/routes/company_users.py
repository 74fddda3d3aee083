from typing import Any

from fastapi import APIRouter

from commerce_api.core import controller
from commerce_api.data_access.patterns import unit_of_work
from commerce_api.domain.contracts import (
    COMPANY_USER_CREATE,
    COMPANY_USER_ID,
    COMPANY_USER_MODEL,
    COMPANY_USER_UPDATE,
)
from commerce_api.domain.services import company_user_service

router = APIRouter(prefix="/company-users", tags=["company-users"])


@router.post("")
@controller.create(COMPANY_USER_CREATE, COMPANY_USER_MODEL)
async def create_company_user(dto: dict[str, Any]):
    """Create a user and link it to a company in one transaction."""
    async with unit_of_work() as uow:
        company_user_id = await company_user_service.create(uow, dto)
    async with unit_of_work() as uow:
        return await company_user_service.get_or_fail(uow, company_user_id)


@router.get("/{id}")
@controller.get(COMPANY_USER_ID, COMPANY_USER_MODEL)
async def get_company_user(dto: dict[str, Any]):
    async with unit_of_work() as uow:
        return await company_user_service.get_or_fail(uow, dto["id"])


@router.patch("/{id}")
@controller.update(COMPANY_USER_UPDATE, COMPANY_USER_MODEL)
async def update_company_user(dto: dict[str, Any]):
    async with unit_of_work() as uow:
        await company_user_service.update(uow, dto)
    async with unit_of_work() as uow:
        return await company_user_service.get_or_fail(uow, dto["id"])


@router.delete("/{id}")
@controller.delete(COMPANY_USER_ID)
async def delete_company_user(dto: dict[str, Any]) -> None:
    """Delete the link and the user it owns."""
    async with unit_of_work() as uow:
        await company_user_service.delete(uow, dto["id"])
