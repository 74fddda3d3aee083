"""
Application constants and enumerations.
Central location for magic numbers and constant values.
"""

from enum import Enum, IntEnum
from typing import Final


class ResponseStatusCode(IntEnum):
    """HTTP status codes produced by the request pipeline."""

    OK = 200
    CREATED = 201
    NO_CONTENT = 204
    BAD_REQUEST = 400
    NOT_FOUND = 404
    CONFLICT = 409
    INTERNAL_ERROR = 500


class ResourcePrefix(str, Enum):
    """Four character prefix carried by every identifier of an entity kind."""

    COMPANY = "com_"
    CUSTOMER = "cus_"
    PRODUCT = "pro_"
    SALE = "sal_"
    SALE_ITEM = "sai_"
    USER = "usr_"
    ADDRESS = "add_"
    COMPANY_USER = "cou_"


class CurrencyCode(str, Enum):
    """ISO 4217 codes accepted for product prices."""

    AUD = "AUD"
    CAD = "CAD"
    CHF = "CHF"
    CNY = "CNY"
    EUR = "EUR"
    GBP = "GBP"
    INR = "INR"
    JPY = "JPY"
    MXN = "MXN"
    NZD = "NZD"
    SEK = "SEK"
    USD = "USD"


class TableNames(str, Enum):
    """Database table names."""

    ADDRESSES = "addresses"
    COMPANIES = "companies"
    CUSTOMERS = "customers"
    PRODUCTS = "products"
    SALES = "sales"
    SALE_ITEMS = "sale_items"
    USERS = "users"
    COMPANY_USERS = "company_users"


# Identifiers
RESOURCE_PREFIX_LENGTH: Final[int] = 4
RESOURCE_ID_SUFFIX_LENGTH: Final[int] = 21
RESOURCE_ID_LENGTH: Final[int] = RESOURCE_PREFIX_LENGTH + RESOURCE_ID_SUFFIX_LENGTH
RESOURCE_ID_ALPHABET: Final[str] = (
    "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
)

# Monetary amounts are stored in minor units
MAX_CURRENCY_AMOUNT: Final[int] = 99_999_999
MAX_UNSIGNED_INT: Final[int] = 4_294_967_295

# Column lengths
ADDRESS_LINE_MAX_LENGTH: Final[int] = 150
ADDRESS_POSTCODE_MAX_LENGTH: Final[int] = 10
ADDRESS_REGION_MAX_LENGTH: Final[int] = 100
NAME_MAX_LENGTH: Final[int] = 50
EMAIL_MAX_LENGTH: Final[int] = 100
PRODUCT_NAME_MAX_LENGTH: Final[int] = 100
SKU_MAX_LENGTH: Final[int] = 100
DESCRIPTION_MAX_LENGTH: Final[int] = 255
PASSWORD_MIN_LENGTH: Final[int] = 8
PASSWORD_MAX_LENGTH: Final[int] = 20

# Listing
DEFAULT_LIST_LIMIT: Final[int] = 10
DEFAULT_LIST_PAGE: Final[int] = 1
MAX_LIST_LIMIT: Final[int] = 1_000
MAX_LIST_PAGE: Final[int] = MAX_UNSIGNED_INT
