from sqlalchemy import UniqueConstraint
from sqlmodel import Field, Relationship

from commerce_api.core.constants import EMAIL_MAX_LENGTH, NAME_MAX_LENGTH, RESOURCE_ID_LENGTH, TableNames

from .address import Address
from .base import ResourceModel


class Customer(ResourceModel, table=True):
    """A company's customer; email is unique within the company."""

    __tablename__ = TableNames.CUSTOMERS.value
    __table_args__ = (UniqueConstraint("company_id", "email", name="uq_customers_company_email"),)

    first_name: str = Field(max_length=NAME_MAX_LENGTH)
    last_name: str = Field(max_length=NAME_MAX_LENGTH)
    email: str = Field(max_length=EMAIL_MAX_LENGTH)
    company_id: str = Field(
        foreign_key=f"{TableNames.COMPANIES.value}.id",
        index=True,
        max_length=RESOURCE_ID_LENGTH,
    )
    address_id: str = Field(
        foreign_key=f"{TableNames.ADDRESSES.value}.id",
        unique=True,
        max_length=RESOURCE_ID_LENGTH,
    )

    address: Address = Relationship(sa_relationship_kwargs={"lazy": "selectin"})
