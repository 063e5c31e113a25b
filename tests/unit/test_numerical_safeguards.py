"""
Tests for configurator.core.math.numerical_safeguards

Checks:
1. Finite/non-negative/positive validation with a chosen error class
2. safe_divide fallbacks
3. Money comparisons and cent rounding
"""

import math

import pytest

from configurator.core.errors import InvalidTermsError
from configurator.core.math.numerical_safeguards import (
    EPS_MONEY,
    is_valid_float,
    is_zero_money,
    money_equal,
    round_to_cents,
    safe_divide,
    validate_non_negative,
    validate_positive,
)


# =============================================================================
# VALIDATION
# =============================================================================


class TestValidation:
    """Tests for is_valid_float / validate_*"""

    def test_is_valid_float(self):
        assert is_valid_float(1.0)
        assert not is_valid_float(math.nan)
        assert not is_valid_float(math.inf)
        assert not is_valid_float(-math.inf)

    def test_validate_non_negative(self):
        assert validate_non_negative(0.0, "x") == 0.0
        assert validate_non_negative(5.5, "x") == 5.5
        with pytest.raises(ValueError, match="x cannot be negative"):
            validate_non_negative(-0.01, "x")
        with pytest.raises(ValueError, match="finite"):
            validate_non_negative(math.nan, "x")

    def test_validate_positive(self):
        assert validate_positive(1.0, "y") == 1.0
        with pytest.raises(ValueError, match="y must be positive"):
            validate_positive(0.0, "y")

    def test_custom_error_class(self):
        with pytest.raises(InvalidTermsError):
            validate_non_negative(-1.0, "down payment", InvalidTermsError)


# =============================================================================
# SAFE DIVISION
# =============================================================================


class TestSafeDivide:
    """Tests for safe_divide"""

    def test_regular(self):
        assert safe_divide(10.0, 4.0) == 2.5

    def test_zero_denominator(self):
        assert safe_divide(10.0, 0.0) == 0.0
        assert safe_divide(10.0, 1e-15, fallback=-1.0) == -1.0

    def test_non_finite_inputs(self):
        assert safe_divide(math.nan, 2.0) == 0.0
        assert safe_divide(1.0, math.inf, fallback=7.0) == 7.0


# =============================================================================
# MONEY
# =============================================================================


class TestMoney:
    """Tests for money comparisons and rounding"""

    def test_money_equal(self):
        assert money_equal(0.1 + 0.2, 0.3)
        assert money_equal(100.0, 100.0 + EPS_MONEY / 2)
        assert not money_equal(100.0, 100.01)

    def test_is_zero_money(self):
        assert is_zero_money(0.004)
        assert not is_zero_money(0.01)

    @pytest.mark.parametrize(
        "value,expected",
        [
            (4717.5, 4717.5),
            (1.005, 1.01),
            (0.125, 0.13),
            (968.5149, 968.51),
            (-2.345, -2.35),
            (0.0, 0.0),
        ],
    )
    def test_round_to_cents(self, value, expected):
        assert round_to_cents(value) == expected
