"""Contract fragments shared by every resource."""

from commerce_api.core.constants import MAX_LIST_LIMIT, MAX_LIST_PAGE, ResourcePrefix
from commerce_api.core.dto import Contract, FieldSpec
from commerce_api.core.dto.rules import is_int, is_object, is_positive, is_resource_id, max_value

CREATED_AT = FieldSpec("created_at")
UPDATED_AT = FieldSpec("updated_at")

LIST_OPTIONS = Contract(
    "ListOptions",
    (
        FieldSpec("limit", (is_int(), is_positive(), max_value(MAX_LIST_LIMIT)), undefinable=True),
        FieldSpec("page", (is_int(), is_positive(), max_value(MAX_LIST_PAGE)), undefinable=True),
    ),
)

OPTIONS = FieldSpec("options", (is_object(),), undefinable=True, nested=LIST_OPTIONS)


def id_field(prefix: ResourcePrefix | None = None) -> FieldSpec:
    return FieldSpec("id", (is_resource_id(prefix),))


def request_id(prefix: ResourcePrefix, name: str = "RequestId") -> Contract:
    """Contract of requests carrying only the resource id from the URL."""
    return Contract(name, (id_field(prefix),))


def model_contract(name: str, *fields: FieldSpec) -> Contract:
    """Response contract: id, the resource fields, then audit timestamps."""
    return Contract(name, (FieldSpec("id"), *fields, CREATED_AT, UPDATED_AT))


def list_contract(name: str, filters: Contract) -> Contract:
    """Every filter optional, plus pagination options."""
    return filters.as_optional(name=name).extend(OPTIONS)
