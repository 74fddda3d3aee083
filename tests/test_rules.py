"""
Tests for field validation rules.
"""
from datetime import datetime

import pytest

from commerce_api.core.dto import rules
from commerce_api.domain.sale_status import SaleStatusCode


class TestStringRules:
    """Test length and format rules."""

    @pytest.mark.parametrize("value", ["", "x" * 51, 5, None])
    def test_max_length_rejects(self, value):
        assert rules.is_max_length(50)("name", value) == (
            "name must be a string with length inclusive between 1 and 50"
        )

    def test_max_length_accepts_bounds(self):
        rule = rules.is_max_length(50)
        assert rule("name", "x") is None
        assert rule("name", "x" * 50) is None

    def test_length(self):
        rule = rules.is_length(8, 20)
        assert rule("password", "12345678") is None
        assert rule("password", "1234567") == (
            "password must be longer than or equal to 8 and shorter than or equal to 20 characters"
        )

    @pytest.mark.parametrize("value", ["a@acme.io", "first.last@acme.com.au"])
    def test_email_accepts(self, value):
        assert rules.is_email()("email", value) is None

    @pytest.mark.parametrize("value", ["acme.io", "a@", 42])
    def test_email_rejects(self, value):
        assert rules.is_email()("email", value) == "email must be an email"


class TestNumberRules:
    """Test integer, range and currency rules."""

    def test_is_int(self):
        rule = rules.is_int()
        assert rule("limit", 3) is None
        assert rule("limit", 3.0) is None
        assert rule("limit", 3.5) == "limit must be an integer number"
        assert rule("limit", True) == "limit must be an integer number"
        assert rule("limit", "3") == "limit must be an integer number"

    def test_is_positive(self):
        rule = rules.is_positive()
        assert rule("page", 1) is None
        assert rule("page", 0) == "page must be a positive number"

    def test_min_and_max_value(self):
        assert rules.min_value(1)("quantity", 0) == "quantity must not be less than 1"
        assert rules.max_value(10)("quantity", 11) == "quantity must not be greater than 10"
        assert rules.min_value(1)("quantity", 1) is None
        assert rules.max_value(10)("quantity", 10) is None

    @pytest.mark.parametrize("value", [0, 1, 99_999_999])
    def test_currency_amount_accepts(self, value):
        assert rules.is_currency_amount()("price", value) is None

    @pytest.mark.parametrize("value", [-1, 100_000_000, 1.5, "10"])
    def test_currency_amount_rejects(self, value):
        assert rules.is_currency_amount()("price", value) == (
            "price must be 0 or a positive integer up to 99 999 999"
        )

    def test_currency_code(self):
        rule = rules.is_currency_code()
        assert rule("currency", "AUD") is None
        assert rule("currency", "aud") == "currency must be a valid ISO 4217 currency code"
        assert rule("currency", "XXX") == "currency must be a valid ISO 4217 currency code"


class TestShapeRules:
    """Test identifier, enum, object and array rules."""

    def test_resource_id_prefix(self):
        rule = rules.is_resource_id("com_")
        assert rule("companyId", "com_" + "a" * 21) is None
        assert rule("companyId", "cus_" + "a" * 21) == "companyId is not a valid resource ID"

    def test_is_in_enum(self):
        rule = rules.is_in(SaleStatusCode)
        assert rule("statusCode", "PAID") is None
        assert rule("statusCode", "LOST") == (
            "statusCode must be one of the following values: CREATED, PAID, CANCELLED, REFUNDED"
        )

    def test_object_and_array(self):
        assert rules.is_object()("address", []) == "address must be an object"
        assert rules.is_array()("saleItems", {}) == "saleItems must be an array"
        assert rules.array_not_empty()("saleItems", []) == "saleItems should not be empty"
        assert rules.array_not_empty()("saleItems", [1]) is None

    def test_datetime(self):
        rule = rules.is_datetime()
        assert rule("createdAt", "2024-05-01T10:00:00Z") is None
        assert rule("createdAt", datetime(2024, 5, 1)) is None
        assert rule("createdAt", "yesterday") == "createdAt must be a valid ISO 8601 date string"
