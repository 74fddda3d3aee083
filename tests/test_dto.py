"""
Tests for contracts, sanitization and validation.
"""
import pytest

from commerce_api.core.dto import (
    MISSING,
    Contract,
    FieldSpec,
    SanitizedDto,
    sanitize_from_dto,
    sanitize_to_dto,
    validate_dto,
)
from commerce_api.core.dto.rules import is_max_length, is_object
from commerce_api.domain.contracts import (
    COMPANY_CREATE,
    COMPANY_UPDATE,
    COMPANY_USER_MODEL,
    CUSTOMER_CREATE,
    PRODUCT_CREATE,
    SALE_CREATE,
)

ADDRESS = {
    "line1": "1 Market Street",
    "postcode": "2000",
    "city": "Sydney",
    "province": "NSW",
    "country": "Australia",
}


class TestContract:
    """Test contract declaration and composition."""

    def test_alias_defaults_to_camel_case(self):
        assert FieldSpec("price_per_unit").alias == "pricePerUnit"
        assert FieldSpec("line1").alias == "line1"

    def test_duplicate_field_rejected(self):
        with pytest.raises(ValueError):
            Contract("Broken", (FieldSpec("name"), FieldSpec("name")))

    def test_extend_replaces_same_named_field(self):
        base = Contract("Base", (FieldSpec("a"), FieldSpec("b")))
        replacement = FieldSpec("a", undefinable=True)
        extended = base.extend(replacement, FieldSpec("c"), name="Extended")

        assert [spec.name for spec in extended] == ["a", "b", "c"]
        assert extended.get("a").undefinable
        assert extended.name == "Extended"
        assert not base.get("a").undefinable

    def test_pick_and_omit(self):
        contract = Contract("C", (FieldSpec("a"), FieldSpec("b"), FieldSpec("c")))
        assert [spec.name for spec in contract.pick("c", "a")] == ["c", "a"]
        assert [spec.name for spec in contract.omit("b")] == ["a", "c"]

    def test_get_unknown_field(self):
        with pytest.raises(KeyError):
            COMPANY_CREATE.get("missing")

    def test_as_optional_is_recursive(self):
        optional = COMPANY_CREATE.as_optional()
        assert all(spec.undefinable for spec in optional)
        assert all(spec.undefinable for spec in optional.get("address").nested)
        assert not any(spec.undefinable for spec in COMPANY_CREATE)

    def test_missing_marker(self):
        assert not MISSING
        assert repr(MISSING) == "MISSING"


class TestSanitizeToDto:
    """Test inbound projection of request bodies."""

    def test_unknown_fields_are_stripped(self):
        raw = {"name": "Acme", "email": "a@acme.io", "address": {**ADDRESS, "extra": 1}, "admin": True}
        dto = sanitize_to_dto(COMPANY_CREATE, raw)

        assert dto == {"name": "Acme", "email": "a@acme.io", "address": ADDRESS}

    def test_aliases_become_attribute_names(self):
        raw = {"companyId": "com_123", "pricePerUnit": 1}
        dto = sanitize_to_dto(PRODUCT_CREATE, raw)
        assert dto == {"company_id": "com_123"}

    def test_attribute_names_are_not_wire_keys(self):
        raw = {"first_name": "Jane", "lastName": "Doe", "company_id": "com_1"}
        dto = sanitize_to_dto(CUSTOMER_CREATE, raw)

        assert dto == {"last_name": "Doe"}
        assert validate_dto(CUSTOMER_CREATE, dto)["firstName"] == "firstName is required"

    def test_sanitized_output_is_read_by_attribute_name(self):
        once = sanitize_to_dto(CUSTOMER_CREATE, {"firstName": "Jane", "companyId": "com_1"})

        assert isinstance(once, SanitizedDto)
        assert sanitize_to_dto(CUSTOMER_CREATE, once) == {"first_name": "Jane", "company_id": "com_1"}

    def test_sanitize_is_idempotent(self):
        raw = {
            "companyId": "com_aaaaaaaaaaaaaaaaaaaaa",
            "customerId": "cus_aaaaaaaaaaaaaaaaaaaaa",
            "saleItems": [{"quantity": 1, "total": 2, "bogus": 3}, "not-an-object"],
        }
        once = sanitize_to_dto(SALE_CREATE, raw)
        twice = sanitize_to_dto(SALE_CREATE, once)

        assert once == twice
        assert once["sale_items"][0] == {"quantity": 1, "total": 2}
        assert once["sale_items"][1] == "not-an-object"

    def test_absent_stays_absent_and_null_stays_null(self):
        assert "description" not in sanitize_to_dto(PRODUCT_CREATE, {"name": "x"})
        assert sanitize_to_dto(PRODUCT_CREATE, {"description": None})["description"] is None

    def test_empty_nested_object_is_dropped(self):
        dto = sanitize_to_dto(COMPANY_UPDATE, {"id": "com_1", "address": {"unknown": "x"}})
        assert dto == {"id": "com_1"}

    def test_non_object_input_passes_through(self):
        assert sanitize_to_dto(COMPANY_CREATE, [1, 2]) == [1, 2]
        assert sanitize_to_dto(COMPANY_CREATE, "text") == "text"


class TestValidateDto:
    """Test rule evaluation and error paths."""

    def test_valid_payload_has_no_errors(self):
        dto = sanitize_to_dto(COMPANY_CREATE, {"name": "Acme", "email": "a@acme.io", "address": ADDRESS})
        assert validate_dto(COMPANY_CREATE, dto) == {}

    def test_missing_required_field(self):
        errors = validate_dto(COMPANY_CREATE, {"name": "Acme", "address": ADDRESS})
        assert errors == {"email": "email is required"}

    def test_null_is_rejected_unless_nullable(self):
        errors = validate_dto(COMPANY_UPDATE, {"id": "com_aaaaaaaaaaaaaaaaaaaaa", "name": None})
        assert errors == {"name": "name must not be null"}

        dto = {
            "name": "Widget",
            "description": None,
            "sku": "W-1",
            "price": 1,
            "currency": "EUR",
            "company_id": "com_aaaaaaaaaaaaaaaaaaaaa",
        }
        assert validate_dto(PRODUCT_CREATE, dto) == {}

    def test_undefinable_field_may_be_omitted(self):
        errors = validate_dto(COMPANY_UPDATE, {"id": "com_aaaaaaaaaaaaaaaaaaaaa"})
        assert errors == {}

    def test_first_failing_rule_wins(self):
        errors = validate_dto(COMPANY_CREATE, {"name": "Acme", "email": "", "address": ADDRESS})
        assert errors["email"] == "email must be a string with length inclusive between 1 and 100"

    def test_nested_object_paths(self):
        errors = validate_dto(
            COMPANY_CREATE,
            {"name": "Acme", "email": "a@acme.io", "address": {**ADDRESS, "postcode": "12345678901"}},
        )
        assert errors == {
            "address.postcode": "postcode must be a string with length inclusive between 1 and 10"
        }

    def test_nested_array_paths(self):
        dto = {
            "company_id": "com_aaaaaaaaaaaaaaaaaaaaa",
            "customer_id": "cus_aaaaaaaaaaaaaaaaaaaaa",
            "sale_items": [
                {"quantity": 1, "price_per_unit": 1, "total": 1, "product_id": "pro_aaaaaaaaaaaaaaaaaaaaa"},
                {"quantity": 1, "price_per_unit": 1, "total": 1, "product_id": "bad"},
                "oops",
            ],
        }
        errors = validate_dto(SALE_CREATE, dto)
        assert errors == {
            "saleItems.1.productId": "productId is not a valid resource ID",
            "saleItems.2": "saleItems.2 must be an object",
        }

    def test_empty_array_rejected(self):
        dto = {
            "company_id": "com_aaaaaaaaaaaaaaaaaaaaa",
            "customer_id": "cus_aaaaaaaaaaaaaaaaaaaaa",
            "sale_items": [],
        }
        assert validate_dto(SALE_CREATE, dto) == {"saleItems": "saleItems should not be empty"}

    def test_nested_value_of_wrong_shape(self):
        contract = Contract("Holder", (FieldSpec("inner", nested=Contract("Inner", (FieldSpec("a"),))),))
        assert validate_dto(contract, {"inner": 3}) == {"inner": "inner must be an object"}

        checked = Contract(
            "Holder",
            (FieldSpec("inner", (is_object(),), nested=Contract("Inner", (FieldSpec("a", (is_max_length(2),)),))),),
        )
        assert validate_dto(checked, {"inner": {"a": "abc"}}) == {
            "inner.a": "a must be a string with length inclusive between 1 and 2"
        }

    def test_non_object_root(self):
        assert validate_dto(COMPANY_CREATE, [1]) == {"CompanyCreate": "CompanyCreate must be an object"}


class TestSanitizeFromDto:
    """Test outbound projection of entities."""

    def test_hidden_fields_never_leave(self):
        entity = {
            "id": "cou_1",
            "company_id": "com_1",
            "user": {"id": "usr_1", "email": "u@acme.io", "password_hash": "x", "salt": "y"},
            "created_at": "2024-01-01T00:00:00",
            "updated_at": "2024-01-01T00:00:00",
        }
        output = sanitize_from_dto(COMPANY_USER_MODEL, entity)

        assert output["user"] == {"id": "usr_1", "email": "u@acme.io"}
        assert output["companyId"] == "com_1"
        assert "company_id" not in output

    def test_objects_and_lists(self):
        class Entity:
            id = "usr_1"
            email = "u@acme.io"
            password_hash = "secret"

        contract = Contract("User", (FieldSpec("id"), FieldSpec("email")))
        assert sanitize_from_dto(contract, [Entity(), Entity()]) == [
            {"id": "usr_1", "email": "u@acme.io"},
            {"id": "usr_1", "email": "u@acme.io"},
        ]
        assert sanitize_from_dto(contract, None) is None
