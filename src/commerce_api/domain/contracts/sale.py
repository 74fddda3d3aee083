from commerce_api.core.constants import (
    DESCRIPTION_MAX_LENGTH,
    MAX_CURRENCY_AMOUNT,
    MAX_UNSIGNED_INT,
    ResourcePrefix,
)
from commerce_api.core.dto import Contract, FieldSpec
from commerce_api.core.dto.rules import (
    array_not_empty,
    is_array,
    is_currency_amount,
    is_in,
    is_int,
    is_max_length,
    is_resource_id,
    max_value,
    min_value,
)
from commerce_api.domain.sale_status import SaleStatusCode

from .base import OPTIONS, model_contract, request_id

COMMENTS = FieldSpec(
    "comments",
    (is_max_length(DESCRIPTION_MAX_LENGTH),),
    undefinable=True,
    nullable=True,
)

SALE_ITEM_CREATE = Contract(
    "SaleItemCreate",
    (
        FieldSpec("quantity", (is_int(), min_value(1), max_value(MAX_UNSIGNED_INT))),
        FieldSpec("price_per_unit", (is_currency_amount(MAX_CURRENCY_AMOUNT),)),
        FieldSpec("total", (is_currency_amount(MAX_CURRENCY_AMOUNT),)),
        FieldSpec("product_id", (is_resource_id(ResourcePrefix.PRODUCT),)),
    ),
)

SALE_CREATE = Contract(
    "SaleCreate",
    (
        COMMENTS,
        FieldSpec("company_id", (is_resource_id(ResourcePrefix.COMPANY),)),
        FieldSpec("customer_id", (is_resource_id(ResourcePrefix.CUSTOMER),)),
        FieldSpec(
            "sale_items",
            (is_array(), array_not_empty()),
            nested=SALE_ITEM_CREATE,
            many=True,
        ),
    ),
)

SALE_ID = request_id(ResourcePrefix.SALE, name="SaleId")

# Only free-form comments are editable; status changes go through the actions
SALE_UPDATE = SALE_ID.extend(COMMENTS, name="SaleUpdate")

SALE_LIST = Contract(
    "SaleList",
    (
        FieldSpec("status_code", (is_in(SaleStatusCode),), undefinable=True),
        COMMENTS,
        FieldSpec("company_id", (is_resource_id(ResourcePrefix.COMPANY),), undefinable=True),
        FieldSpec("customer_id", (is_resource_id(ResourcePrefix.CUSTOMER),), undefinable=True),
        OPTIONS,
    ),
)

SALE_ITEM_MODEL = Contract(
    "SaleItem",
    (
        FieldSpec("id"),
        FieldSpec("quantity"),
        FieldSpec("price_per_unit"),
        FieldSpec("total"),
        FieldSpec("product_id"),
    ),
)

SALE_MODEL = model_contract(
    "Sale",
    FieldSpec("status_code"),
    FieldSpec("total"),
    FieldSpec("comments"),
    FieldSpec("company_id"),
    FieldSpec("customer_id"),
    FieldSpec("sale_items", nested=SALE_ITEM_MODEL, many=True),
)
