from commerce_api.core.constants import (
    ADDRESS_LINE_MAX_LENGTH,
    ADDRESS_POSTCODE_MAX_LENGTH,
    ADDRESS_REGION_MAX_LENGTH,
)
from commerce_api.core.dto import Contract, FieldSpec
from commerce_api.core.dto.rules import is_max_length

ADDRESS_CREATE = Contract(
    "AddressCreate",
    (
        FieldSpec("line1", (is_max_length(ADDRESS_LINE_MAX_LENGTH),)),
        FieldSpec("postcode", (is_max_length(ADDRESS_POSTCODE_MAX_LENGTH),)),
        FieldSpec("city", (is_max_length(ADDRESS_REGION_MAX_LENGTH),)),
        FieldSpec("province", (is_max_length(ADDRESS_REGION_MAX_LENGTH),)),
        FieldSpec("country", (is_max_length(ADDRESS_REGION_MAX_LENGTH),)),
    ),
)

ADDRESS_MODEL = Contract(
    "Address",
    tuple(FieldSpec(spec.name) for spec in ADDRESS_CREATE),
)
