"""SQLModel table models. Importing this package registers every table."""

from .address import Address
from .base import ResourceModel, utcnow
from .company import Company
from .customer import Customer
from .product import Product
from .sale import Sale, SaleItem
from .user import CompanyUser, User

__all__ = [
    "Address",
    "Company",
    "CompanyUser",
    "Customer",
    "Product",
    "ResourceModel",
    "Sale",
    "SaleItem",
    "User",
    "utcnow",
]
