from commerce_api.core.constants import (
    EMAIL_MAX_LENGTH,
    PASSWORD_MAX_LENGTH,
    PASSWORD_MIN_LENGTH,
    ResourcePrefix,
)
from commerce_api.core.dto import Contract, FieldSpec
from commerce_api.core.dto.rules import is_email, is_length, is_max_length, is_object, is_resource_id

from .base import model_contract, request_id

USER_CREATE = Contract(
    "UserCreate",
    (
        FieldSpec("email", (is_max_length(EMAIL_MAX_LENGTH), is_email())),
        FieldSpec("password", (is_length(PASSWORD_MIN_LENGTH, PASSWORD_MAX_LENGTH),)),
    ),
)

USER_UPDATE = USER_CREATE.as_optional(name="UserUpdate")

# Password hash and salt are never part of a response
USER_MODEL = Contract("User", (FieldSpec("id"), FieldSpec("email")))

COMPANY_USER_CREATE = Contract(
    "CompanyUserCreate",
    (
        FieldSpec("company_id", (is_resource_id(ResourcePrefix.COMPANY),)),
        FieldSpec("user", (is_object(),), nested=USER_CREATE),
    ),
)

COMPANY_USER_ID = request_id(ResourcePrefix.COMPANY_USER, name="CompanyUserId")

COMPANY_USER_UPDATE = COMPANY_USER_ID.extend(
    FieldSpec("user", (is_object(),), undefinable=True, nested=USER_UPDATE),
    name="CompanyUserUpdate",
)

COMPANY_USER_MODEL = model_contract(
    "CompanyUser",
    FieldSpec("company_id"),
    FieldSpec("user", nested=USER_MODEL),
)
