from commerce_api.core.constants import EMAIL_MAX_LENGTH, NAME_MAX_LENGTH, ResourcePrefix
from commerce_api.core.dto import Contract, FieldSpec
from commerce_api.core.dto.rules import is_email, is_max_length, is_object, is_resource_id

from .address import ADDRESS_CREATE, ADDRESS_MODEL
from .base import list_contract, model_contract, request_id

_CUSTOMER_FIELDS = Contract(
    "CustomerFields",
    (
        FieldSpec("first_name", (is_max_length(NAME_MAX_LENGTH),)),
        FieldSpec("last_name", (is_max_length(NAME_MAX_LENGTH),)),
        FieldSpec("email", (is_max_length(EMAIL_MAX_LENGTH), is_email())),
        FieldSpec("address", (is_object(),), nested=ADDRESS_CREATE),
    ),
)

CUSTOMER_CREATE = _CUSTOMER_FIELDS.extend(
    FieldSpec("company_id", (is_resource_id(ResourcePrefix.COMPANY),)),
    name="CustomerCreate",
)

CUSTOMER_ID = request_id(ResourcePrefix.CUSTOMER, name="CustomerId")

# A customer cannot move to another company
CUSTOMER_UPDATE = CUSTOMER_ID.merge(_CUSTOMER_FIELDS.as_optional(), name="CustomerUpdate")

CUSTOMER_LIST = list_contract("CustomerList", CUSTOMER_CREATE)

CUSTOMER_MODEL = model_contract(
    "Customer",
    FieldSpec("first_name"),
    FieldSpec("last_name"),
    FieldSpec("email"),
    FieldSpec("company_id"),
    FieldSpec("address", nested=ADDRESS_MODEL),
)
