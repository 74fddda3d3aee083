from commerce_api.core.constants import (
    DESCRIPTION_MAX_LENGTH,
    PRODUCT_NAME_MAX_LENGTH,
    SKU_MAX_LENGTH,
    ResourcePrefix,
)
from commerce_api.core.dto import Contract, FieldSpec
from commerce_api.core.dto.rules import (
    is_currency_amount,
    is_currency_code,
    is_max_length,
    is_resource_id,
)

from .base import list_contract, model_contract, request_id

_PRODUCT_FIELDS = Contract(
    "ProductFields",
    (
        FieldSpec("name", (is_max_length(PRODUCT_NAME_MAX_LENGTH),)),
        FieldSpec(
            "description",
            (is_max_length(DESCRIPTION_MAX_LENGTH),),
            undefinable=True,
            nullable=True,
        ),
        FieldSpec("sku", (is_max_length(SKU_MAX_LENGTH),)),
        FieldSpec("price", (is_currency_amount(),)),
        FieldSpec("currency", (is_currency_code(),)),
    ),
)

PRODUCT_CREATE = _PRODUCT_FIELDS.extend(
    FieldSpec("company_id", (is_resource_id(ResourcePrefix.COMPANY),)),
    name="ProductCreate",
)

PRODUCT_ID = request_id(ResourcePrefix.PRODUCT, name="ProductId")

PRODUCT_UPDATE = PRODUCT_ID.merge(_PRODUCT_FIELDS.as_optional(), name="ProductUpdate")

PRODUCT_LIST = list_contract("ProductList", PRODUCT_CREATE)

PRODUCT_MODEL = model_contract(
    "Product",
    FieldSpec("name"),
    FieldSpec("description"),
    FieldSpec("sku"),
    FieldSpec("price"),
    FieldSpec("currency"),
    FieldSpec("company_id"),
)
