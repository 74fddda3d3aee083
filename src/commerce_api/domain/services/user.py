"""
Users and their credentials.

Passwords are hashed with argon2 (memory-hard) through passlib, using a random
per-user salt and a fixed digest size taken from settings.
"""

from collections.abc import Mapping
from typing import Any

from passlib.context import CryptContext

from commerce_api.core.config import settings
from commerce_api.core.constants import ResourcePrefix
from commerce_api.core.ids import random_string
from commerce_api.core.logging import get_logger
from commerce_api.data_access.models import User
from commerce_api.data_access.patterns import UnitOfWork

from .base import CrudService

logger = get_logger(__name__)

pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")


def hash_password(password: str, salt: str) -> str:
    hasher = pwd_context.handler("argon2").using(
        salt=salt.encode("utf-8"),
        digest_size=settings.password_hash_length,
    )
    return hasher.hash(password)


class UserService(CrudService[User]):
    model = User
    prefix = ResourcePrefix.USER
    entity_name = "User"

    def _credentials(self, password: str) -> dict[str, str]:
        salt = random_string(settings.password_salt_length)
        return {"password_hash": hash_password(password, salt), "salt": salt}

    async def create(self, uow: UnitOfWork, dto: Mapping[str, Any]) -> str:
        user_id = await self._insert(
            uow, {"email": dto["email"], **self._credentials(dto["password"])}
        )
        logger.info(f"Created User {user_id}")
        return user_id

    async def update(self, uow: UnitOfWork, dto: Mapping[str, Any]) -> None:
        values = dict(dto)
        user_id = values.pop("id")
        password = values.pop("password", None)
        if password is not None:
            values.update(self._credentials(password))
        await self._update_row(uow, user_id, values)

    async def delete(self, uow: UnitOfWork, user_id: str) -> None:
        await self._delete_row(uow, user_id)

    @staticmethod
    def verify_password(user: User, password: str) -> bool:
        return pwd_context.verify(password, user.password_hash)


user_service = UserService()
