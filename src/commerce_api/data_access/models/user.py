from sqlalchemy import UniqueConstraint
from sqlmodel import Field, Relationship

from commerce_api.core.constants import EMAIL_MAX_LENGTH, RESOURCE_ID_LENGTH, TableNames

from .base import ResourceModel


class User(ResourceModel, table=True):
    """Login identity; only the salted password hash is stored."""

    __tablename__ = TableNames.USERS.value

    email: str = Field(max_length=EMAIL_MAX_LENGTH, unique=True)
    password_hash: str = Field(max_length=512)
    salt: str = Field(max_length=64)


class CompanyUser(ResourceModel, table=True):
    """Links a user to the company it acts for."""

    __tablename__ = TableNames.COMPANY_USERS.value
    __table_args__ = (UniqueConstraint("company_id", "user_id", name="uq_company_users_company_user"),)

    company_id: str = Field(
        foreign_key=f"{TableNames.COMPANIES.value}.id",
        index=True,
        max_length=RESOURCE_ID_LENGTH,
    )
    user_id: str = Field(
        foreign_key=f"{TableNames.USERS.value}.id",
        unique=True,
        max_length=RESOURCE_ID_LENGTH,
    )

    user: User = Relationship(sa_relationship_kwargs={"lazy": "selectin"})
