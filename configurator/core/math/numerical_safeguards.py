"""
Numerical Safeguards — Safe Money Math Primitives

Every price, tax and financing computation in the configurator goes through
floats. This module keeps those computations well-behaved:
- Input validation (finite, non-negative, positive) with a caller-chosen error
- Safe division with a fallback instead of ZeroDivisionError
- Tolerance-aware comparisons for money amounts
- Rounding to whole cents for display and contracts

INVARIANTS:
1. NaN/Inf never reach a price (validation rejects them up front)
2. Division by zero never happens (fallback is returned)
3. Money comparisons tolerate sub-cent float noise
"""

import math
from typing import Final

# =============================================================================
# EPSILON PARAMETERS
# =============================================================================

# Money comparison tolerance (USD): half a cent
EPS_MONEY: Final[float] = 0.005

# One cent, the quantization step for displayed and serialized amounts
CENT: Final[float] = 0.01

# General-purpose epsilon for denominators
EPS_CALC: Final[float] = 1e-12


# =============================================================================
# VALIDATION
# =============================================================================


def is_valid_float(value: float) -> bool:
    """True if value is finite (not NaN, not Inf)."""
    return math.isfinite(value)


def validate_non_negative(
    value: float,
    name: str,
    error: type[Exception] = ValueError,
) -> float:
    """
    Check that value is finite and >= 0.

    Args:
        value: Value to check
        name: Parameter name for the error message
        error: Exception class to raise (default: ValueError)

    Returns:
        value unchanged

    Raises:
        error: If value is NaN/Inf or negative
    """
    if not is_valid_float(value):
        raise error(f"{name} must be a finite number, got {value}")
    if value < 0:
        raise error(f"{name} cannot be negative, got {value}")
    return value


def validate_positive(
    value: float,
    name: str,
    error: type[Exception] = ValueError,
) -> float:
    """
    Check that value is finite and > 0.

    Args:
        value: Value to check
        name: Parameter name for the error message
        error: Exception class to raise (default: ValueError)

    Returns:
        value unchanged

    Raises:
        error: If value is NaN/Inf, zero or negative
    """
    if not is_valid_float(value):
        raise error(f"{name} must be a finite number, got {value}")
    if value <= 0:
        raise error(f"{name} must be positive, got {value}")
    return value


# =============================================================================
# SAFE DIVISION
# =============================================================================


def safe_divide(numerator: float, denominator: float, fallback: float = 0.0) -> float:
    """
    Division that returns fallback when the denominator is (near) zero.

    Examples:
        >>> safe_divide(10.0, 4.0)
        2.5
        >>> safe_divide(10.0, 0.0)
        0.0
        >>> safe_divide(10.0, 0.0, fallback=-1.0)
        -1.0
    """
    if not is_valid_float(numerator) or not is_valid_float(denominator):
        return fallback
    if abs(denominator) < EPS_CALC:
        return fallback
    result = numerator / denominator
    return result if is_valid_float(result) else fallback


# =============================================================================
# MONEY COMPARISONS
# =============================================================================


def money_equal(a: float, b: float, tol: float = EPS_MONEY) -> bool:
    """
    Compare two USD amounts, ignoring sub-cent float noise.

    Examples:
        >>> money_equal(0.1 + 0.2, 0.3)
        True
        >>> money_equal(100.00, 100.01)
        False
    """
    return abs(a - b) <= tol


def is_zero_money(value: float, tol: float = EPS_MONEY) -> bool:
    """True if |value| is below half a cent."""
    return abs(value) <= tol


# =============================================================================
# ROUNDING
# =============================================================================


def round_to_cents(value: float) -> float:
    """
    Round a USD amount to whole cents (half away from zero).

    Python's round() is banker's rounding on the binary value; for money we
    want 0.125 -> 0.13, so the step count is computed explicitly.

    Examples:
        >>> round_to_cents(4717.5)
        4717.5
        >>> round_to_cents(1.005)
        1.01
        >>> round_to_cents(-2.345)
        -2.35
    """
    # Scale with a tiny nudge so representational error (1.005 -> 1.00499..)
    # does not flip the half-cent
    ratio = value / CENT
    if ratio >= 0:
        steps = math.floor(ratio + 0.5 + 1e-9)
    else:
        steps = math.ceil(ratio - 0.5 - 1e-9)
    return round(steps * CENT, 2)
