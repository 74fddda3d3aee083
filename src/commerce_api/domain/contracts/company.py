from commerce_api.core.constants import EMAIL_MAX_LENGTH, NAME_MAX_LENGTH, ResourcePrefix
from commerce_api.core.dto import Contract, FieldSpec
from commerce_api.core.dto.rules import is_email, is_max_length, is_object

from .address import ADDRESS_CREATE, ADDRESS_MODEL
from .base import list_contract, model_contract, request_id

COMPANY_CREATE = Contract(
    "CompanyCreate",
    (
        FieldSpec("name", (is_max_length(NAME_MAX_LENGTH),)),
        FieldSpec("email", (is_max_length(EMAIL_MAX_LENGTH), is_email())),
        FieldSpec("address", (is_object(),), nested=ADDRESS_CREATE),
    ),
)

COMPANY_ID = request_id(ResourcePrefix.COMPANY, name="CompanyId")

COMPANY_UPDATE = COMPANY_ID.merge(COMPANY_CREATE.as_optional(), name="CompanyUpdate")

COMPANY_LIST = list_contract("CompanyList", COMPANY_CREATE)

COMPANY_MODEL = model_contract(
    "Company",
    FieldSpec("name"),
    FieldSpec("email"),
    FieldSpec("address", nested=ADDRESS_MODEL),
)
