"""Tests for basic validators."""

import pytest

from src.shared.validators import (
    ValidatorConfigurationError,
    require_email,
    require_in_range,
    require_non_blank,
    require_number,
    require_number_in_range,
)


class TestRequireNonBlank:
    """Test required field validation."""

    @pytest.mark.parametrize("value", ["", " ", "   ", "\t", "\n\r", " \t\n ", " "])
    def test_whitespace_only_is_required(self, value):
        """Test empty and whitespace-only values are rejected."""
        assert require_non_blank(value) == "required"

    @pytest.mark.parametrize("value", ["a", " a", "Ana ", "  Ana María  ", "0", "."])
    def test_non_whitespace_is_valid(self, value):
        """Test values with at least one visible character pass."""
        assert require_non_blank(value) is None


class TestRequireEmail:
    """Test email format validation."""

    @pytest.mark.parametrize("value", ["a@b.co", "ana@x.com", "first.last@sub.example.org", "a@b.c.de", "a+tag@b.io"])
    def test_valid_emails(self, value):
        """Test well-formed emails pass."""
        assert require_email(value) is None

    @pytest.mark.parametrize("value", ["", "   "])
    def test_blank_email_is_required(self, value):
        """Test blank email is required."""
        assert require_email(value) == "required"

    @pytest.mark.parametrize(
        "value",
        [
            "a@b",  # no top-level segment
            "a@b.c",  # top-level segment too short
            "ab.co",  # no @
            "a@@b.co",
            "a b@c.de",
            " a@b.co",  # surrounding whitespace is not trimmed
            "a@b.co ",
            "@b.co",
            "a@.co",
        ],
    )
    def test_malformed_emails(self, value):
        """Test malformed emails are rejected with bad format."""
        assert require_email(value) == "bad format"


class TestRequireNumber:
    """Test number format validation."""

    @pytest.mark.parametrize("value", ["0", "-12", "3.5", "1000", "-0.25", "007"])
    def test_valid_numbers(self, value):
        """Test integers and decimals pass."""
        assert require_number(value) is None

    @pytest.mark.parametrize("value", ["", "  "])
    def test_blank_number_is_required(self, value):
        """Test blank number is required."""
        assert require_number(value) == "required"

    @pytest.mark.parametrize("value", ["abc", "1e3", "+1", "1.", ".5", " 12", "12\n", "1,5", "--1", "١٢", "nan"])
    def test_invalid_numbers(self, value):
        """Test values outside the decimal format are rejected."""
        assert require_number(value) == "not a number"


class TestRequireInRange:
    """Test numeric range validation."""

    def test_bounds_are_inclusive(self):
        """Test minimum and maximum are accepted."""
        validator = require_in_range(1, 1000)
        assert validator("1") is None
        assert validator("1000") is None
        assert validator("500") is None

    def test_outside_bounds(self):
        """Test values outside the range report the range."""
        validator = require_in_range(1, 1000)
        assert validator("0") == "out of range: 1..1000"
        assert validator("1001") == "out of range: 1..1000"
        assert validator("-5") == "out of range: 1..1000"

    def test_decimal_values(self):
        """Test decimal values are compared numerically."""
        validator = require_in_range(1, 1000)
        assert validator("1000.5") == "out of range: 1..1000"
        assert validator("0.999") == "out of range: 1..1000"
        assert validator("999.99") is None

    def test_decimal_bounds_in_message(self):
        """Test decimal bounds are shown as given."""
        assert require_in_range(0.5, 1.5)("2") == "out of range: 0.5..1.5"

    @pytest.mark.parametrize("value", ["abc", "", "nan", "inf", "-inf", "Infinity", "1e3"])
    def test_unparseable_values(self, value):
        """Test values that are not finite numbers are rejected."""
        assert require_in_range(1, 1000)(value) == "not a number"

    def test_single_value_range(self):
        """Test range with equal bounds accepts only that value."""
        validator = require_in_range(3, 3)
        assert validator("3") is None
        assert validator("4") == "out of range: 3..3"

    def test_inverted_range_fails_at_construction(self):
        """Test minimum greater than maximum is a configuration error."""
        with pytest.raises(ValidatorConfigurationError, match="cannot exceed maximum"):
            require_in_range(1000, 1)


class TestRequireNumberInRange:
    """Test chained number and range validation."""

    def test_format_error_short_circuits(self):
        """Test format errors are reported before range errors."""
        validator = require_number_in_range(1, 1000)
        assert validator("") == "required"
        assert validator("1e3") == "not a number"
        assert validator("inf") == "not a number"

    def test_range_after_format(self):
        """Test numbers are then checked against the range."""
        validator = require_number_in_range(1, 1000)
        assert validator("0") == "out of range: 1..1000"
        assert validator("1000") is None
        assert validator("1001") == "out of range: 1..1000"
        assert validator("5") is None

    def test_inverted_range_fails_at_construction(self):
        """Test construction error propagates from the range validator."""
        with pytest.raises(ValidatorConfigurationError):
            require_number_in_range(10, 1)

    def test_overflowing_number_is_out_of_range(self):
        """Test digit strings too large for a float are reported as out of range."""
        validator = require_number_in_range(1, 1000)
        assert validator("1" * 400) == "out of range: 1..1000"
        assert validator("-" + "1" * 400) == "out of range: 1..1000"
