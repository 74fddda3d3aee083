"""Request and response contracts of every resource."""

from .address import ADDRESS_CREATE, ADDRESS_MODEL
from .company import COMPANY_CREATE, COMPANY_ID, COMPANY_LIST, COMPANY_MODEL, COMPANY_UPDATE
from .customer import CUSTOMER_CREATE, CUSTOMER_ID, CUSTOMER_LIST, CUSTOMER_MODEL, CUSTOMER_UPDATE
from .product import PRODUCT_CREATE, PRODUCT_ID, PRODUCT_LIST, PRODUCT_MODEL, PRODUCT_UPDATE
from .sale import (
    SALE_CREATE,
    SALE_ID,
    SALE_ITEM_CREATE,
    SALE_ITEM_MODEL,
    SALE_LIST,
    SALE_MODEL,
    SALE_UPDATE,
)
from .user import (
    COMPANY_USER_CREATE,
    COMPANY_USER_ID,
    COMPANY_USER_MODEL,
    COMPANY_USER_UPDATE,
    USER_CREATE,
    USER_MODEL,
    USER_UPDATE,
)

__all__ = [
    "ADDRESS_CREATE",
    "ADDRESS_MODEL",
    "COMPANY_CREATE",
    "COMPANY_ID",
    "COMPANY_LIST",
    "COMPANY_MODEL",
    "COMPANY_UPDATE",
    "COMPANY_USER_CREATE",
    "COMPANY_USER_ID",
    "COMPANY_USER_MODEL",
    "COMPANY_USER_UPDATE",
    "CUSTOMER_CREATE",
    "CUSTOMER_ID",
    "CUSTOMER_LIST",
    "CUSTOMER_MODEL",
    "CUSTOMER_UPDATE",
    "PRODUCT_CREATE",
    "PRODUCT_ID",
    "PRODUCT_LIST",
    "PRODUCT_MODEL",
    "PRODUCT_UPDATE",
    "SALE_CREATE",
    "SALE_ID",
    "SALE_ITEM_CREATE",
    "SALE_ITEM_MODEL",
    "SALE_LIST",
    "SALE_MODEL",
    "SALE_UPDATE",
    "USER_CREATE",
    "USER_MODEL",
    "USER_UPDATE",
]
