from collections.abc import Mapping
from typing import Any

from commerce_api.core.constants import ResourcePrefix
from commerce_api.core.exceptions import InternalError
from commerce_api.core.logging import get_logger
from commerce_api.data_access.models import CompanyUser
from commerce_api.data_access.patterns import UnitOfWork

from .base import CrudService
from .user import user_service

logger = get_logger(__name__)


class CompanyUserService(CrudService[CompanyUser]):
    """A user account acting for one company; the user row is owned by the link."""

    model = CompanyUser
    prefix = ResourcePrefix.COMPANY_USER
    entity_name = "CompanyUser"

    async def create(self, uow: UnitOfWork, dto: Mapping[str, Any]) -> str:
        user_id = await user_service.create(uow, dto["user"])
        company_user_id = await self._insert(
            uow, {"company_id": dto["company_id"], "user_id": user_id}
        )
        logger.info(f"Created CompanyUser {company_user_id} for company {dto['company_id']}")
        return company_user_id

    async def update(self, uow: UnitOfWork, dto: Mapping[str, Any]) -> None:
        raise InternalError("Company User update not implemented.")

    async def delete(self, uow: UnitOfWork, company_user_id: str) -> None:
        company_user = await self.get_or_fail(uow, company_user_id, action="delete")
        await self._delete_row(uow, company_user_id)
        await user_service.delete(uow, company_user.user_id)
        logger.info(f"Deleted CompanyUser {company_user_id} and user {company_user.user_id}")


company_user_service = CompanyUserService()
