"""
Unit Tests for Parameter Helpers

Run with:
    pytest tests/unit/test_params.py -v
"""

from decimal import Decimal

import pytest

from ionomy.core.errors import ArgumentError
from ionomy.core.utils.params import require, require_choice, sanitize_params, to_fixed_8


class TestSanitizeParams:
    """Tests for sanitize_params"""

    def test_drops_none_values(self):
        result = sanitize_params({"market": "btc-hive", "type": None})
        assert result == {"market": "btc-hive"}
        assert "type" not in result

    def test_keeps_falsy_but_present_values(self):
        """0, empty string and False are real values and must survive"""
        params = {"a": 0, "b": "", "c": False, "d": None}
        assert sanitize_params(params) == {"a": 0, "b": "", "c": False}

    def test_preserves_insertion_order(self):
        params = {"z": 1, "a": None, "m": 2, "b": 3}
        assert list(sanitize_params(params)) == ["z", "m", "b"]

    def test_returns_new_mapping(self):
        params = {"market": "btc-hive"}
        result = sanitize_params(params)
        result["extra"] = 1
        assert params == {"market": "btc-hive"}

    def test_empty_and_missing_input(self):
        assert sanitize_params({}) == {}
        assert sanitize_params(None) == {}
        assert sanitize_params() == {}


class TestToFixed8:
    """Tests for 8-decimal normalization"""

    @pytest.mark.parametrize("value,expected", [
        ("1", "1.00000000"),
        ("0.00005", "0.00005000"),
        (1, "1.00000000"),
        (0.00005, "0.00005000"),
        (Decimal("12.5"), "12.50000000"),
        (" 2.5 ", "2.50000000"),
        ("0.123456789", "0.12345679"),
        ("123456789012345678901", "123456789012345678901.00000000"),
        (1e21, "1000000000000000000000.00000000"),
    ])
    def test_formats_with_eight_decimals(self, value, expected):
        assert to_fixed_8(value) == expected

    @pytest.mark.parametrize("value", ["abc", "", "nan", "inf"])
    def test_rejects_non_numbers(self, value):
        with pytest.raises(ArgumentError):
            to_fixed_8(value)


class TestValidation:
    """Tests for require / require_choice"""

    def test_require_passes_when_present(self):
        require(market="btc-hive", amount="1")

    @pytest.mark.parametrize("missing", [None, ""])
    def test_require_names_missing_field(self, missing):
        with pytest.raises(ArgumentError, match="currency is required"):
            require(currency=missing)

    def test_require_reports_first_missing_field(self):
        with pytest.raises(ArgumentError, match="amount is required"):
            require(market="btc-hive", amount=None, price=None)

    def test_argument_error_is_value_error(self):
        with pytest.raises(ValueError):
            require(market=None)

    def test_require_choice(self):
        require_choice("type", "bid", ("ask", "bid", "both"))
        with pytest.raises(ArgumentError, match="type must be one of: ask, bid, both"):
            require_choice("type", "asks", ("ask", "bid", "both"))
