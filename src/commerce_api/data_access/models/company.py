from sqlmodel import Field, Relationship

from commerce_api.core.constants import EMAIL_MAX_LENGTH, NAME_MAX_LENGTH, RESOURCE_ID_LENGTH, TableNames

from .address import Address
from .base import ResourceModel


class Company(ResourceModel, table=True):
    """Database table model for companies."""

    __tablename__ = TableNames.COMPANIES.value

    name: str = Field(max_length=NAME_MAX_LENGTH)
    email: str = Field(max_length=EMAIL_MAX_LENGTH, unique=True)
    address_id: str = Field(
        foreign_key=f"{TableNames.ADDRESSES.value}.id",
        unique=True,
        max_length=RESOURCE_ID_LENGTH,
    )

    address: Address = Relationship(sa_relationship_kwargs={"lazy": "selectin"})
