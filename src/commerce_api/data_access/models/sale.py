from sqlalchemy import BigInteger, UniqueConstraint
from sqlmodel import Field, Relationship

from commerce_api.core.constants import DESCRIPTION_MAX_LENGTH, RESOURCE_ID_LENGTH, TableNames
from commerce_api.domain.sale_status import INITIAL_STATUS, SaleStatusCode

from .base import ResourceModel


class SaleItem(ResourceModel, table=True):
    """One product line of a sale; a product appears at most once per sale."""

    __tablename__ = TableNames.SALE_ITEMS.value
    __table_args__ = (UniqueConstraint("sale_id", "product_id", name="uq_sale_items_sale_product"),)

    quantity: int = Field(sa_type=BigInteger)
    price_per_unit: int = Field(sa_type=BigInteger)
    total: int = Field(sa_type=BigInteger)
    sale_id: str = Field(
        foreign_key=f"{TableNames.SALES.value}.id",
        index=True,
        max_length=RESOURCE_ID_LENGTH,
    )
    product_id: str = Field(
        foreign_key=f"{TableNames.PRODUCTS.value}.id",
        max_length=RESOURCE_ID_LENGTH,
    )


class Sale(ResourceModel, table=True):
    """Database table model for sales."""

    __tablename__ = TableNames.SALES.value

    status_code: SaleStatusCode = Field(default=INITIAL_STATUS, index=True)
    total: int = Field(default=0, sa_type=BigInteger)
    comments: str | None = Field(default=None, max_length=DESCRIPTION_MAX_LENGTH)
    company_id: str = Field(
        foreign_key=f"{TableNames.COMPANIES.value}.id",
        index=True,
        max_length=RESOURCE_ID_LENGTH,
    )
    customer_id: str = Field(
        foreign_key=f"{TableNames.CUSTOMERS.value}.id",
        index=True,
        max_length=RESOURCE_ID_LENGTH,
    )

    sale_items: list[SaleItem] = Relationship(
        sa_relationship_kwargs={"lazy": "selectin", "order_by": "SaleItem.created_at"}
    )
