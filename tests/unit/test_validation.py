"""
Unit tests for field validation and identifier generation.
"""

import pytest

from crud_service.logic.ids import generate_id
from crud_service.logic.validation import is_valid_email, validate_required_fields


class TestValidateRequiredFields:
    """Test cases for validate_required_fields."""

    def test_all_fields_present(self):
        assert validate_required_fields({"name": "Ada", "email": "ada@example.com"}, ["name", "email"]) is None

    def test_reports_missing_field(self):
        message = validate_required_fields({"email": "ada@example.com"}, ["name", "email"])
        assert message == "Missing required field: name"

    @pytest.mark.parametrize("value", [None, ""])
    def test_empty_values_count_as_missing(self, value):
        message = validate_required_fields({"name": "Ada", "email": value}, ["name", "email"])
        assert message == "Missing required field: email"

    def test_reports_first_missing_field_only(self):
        message = validate_required_fields({}, ["email", "name"])
        assert message == "Missing required field: email"

    def test_falsy_non_empty_values_are_present(self):
        assert validate_required_fields({"count": 0, "flag": False}, ["count", "flag"]) is None

    def test_no_required_fields(self):
        assert validate_required_fields({}, []) is None


class TestIsValidEmail:
    """Test cases for is_valid_email."""

    @pytest.mark.parametrize("email", ["ada@example.com", "a.b+c@sub.domain.org", "x@y.z"])
    def test_valid_emails(self, email):
        assert is_valid_email(email)

    @pytest.mark.parametrize("email", ["not-an-email", "ada@example", "@example.com", "ada @example.com", "ada@exa mple.com", ""])
    def test_invalid_emails(self, email):
        assert not is_valid_email(email)

    @pytest.mark.parametrize("email", [None, 42, ["ada@example.com"]])
    def test_non_strings_are_invalid(self, email):
        assert not is_valid_email(email)


class TestGenerateId:
    """Test cases for generate_id."""

    def test_prefixed_id(self):
        identifier = generate_id("user")
        assert identifier.startswith("user_")
        assert len(identifier) > len("user_")

    def test_unprefixed_id(self):
        identifier = generate_id()
        assert "_" not in identifier
        assert len(identifier) == 32

    def test_ids_are_unique(self):
        identifiers = {generate_id("item") for _ in range(1000)}
        assert len(identifiers) == 1000
