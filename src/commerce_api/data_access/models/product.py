from sqlalchemy import UniqueConstraint
from sqlmodel import Field

from commerce_api.core.constants import (
    DESCRIPTION_MAX_LENGTH,
    PRODUCT_NAME_MAX_LENGTH,
    RESOURCE_ID_LENGTH,
    SKU_MAX_LENGTH,
    TableNames,
)

from .base import ResourceModel


class Product(ResourceModel, table=True):
    """Product sold by a company; price in currency minor units."""

    __tablename__ = TableNames.PRODUCTS.value
    __table_args__ = (UniqueConstraint("company_id", "sku", name="uq_products_company_sku"),)

    name: str = Field(max_length=PRODUCT_NAME_MAX_LENGTH)
    description: str | None = Field(default=None, max_length=DESCRIPTION_MAX_LENGTH)
    sku: str = Field(max_length=SKU_MAX_LENGTH)
    price: int = Field(ge=0)
    currency: str = Field(max_length=3)
    company_id: str = Field(
        foreign_key=f"{TableNames.COMPANIES.value}.id",
        index=True,
        max_length=RESOURCE_ID_LENGTH,
    )
