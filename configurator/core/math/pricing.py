"""
Pricing — Tax, totals and loan amortization

Stateless pure functions consumed by Order and by reporting collaborators.
Nothing here knows about concrete vehicle or feature classes: a vehicle is
anything with calculate_price(), a feature anything with a price.

FORMULAS:
    subtotal = vehicle.calculate_price() + Σ feature.price
    tax      = subtotal × TAX_RATE
    total    = subtotal + tax

    L = total − down_payment
    r = apr_percent / 100 / 12
    P = L · r · (1 + r)^n / ((1 + r)^n − 1)

    L ≤ 0  → P = 0
    r == 0 → P = L / n
"""

import math
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from configurator.core.errors import InvalidTermsError
from configurator.core.math.numerical_safeguards import (
    safe_divide,
    validate_non_negative,
)

if TYPE_CHECKING:
    from configurator.core.domain.feature import Feature
    from configurator.core.domain.vehicle import Vehicle

# =============================================================================
# PRICING PARAMETERS
# =============================================================================

# Sales tax applied to the subtotal
TAX_RATE: Final[float] = 0.085

# Default financing terms
DEFAULT_LOAN_TERM_MONTHS: Final[int] = 60
DEFAULT_DOWN_PAYMENT_USD: Final[float] = 10000.0
DEFAULT_APR_PERCENT: Final[float] = 5.9

# Suggested down payment as a fraction of the total
SUGGESTED_DOWN_PAYMENT_FRAC: Final[float] = 0.20

MONTHS_PER_YEAR: Final[int] = 12


# =============================================================================
# FINANCING TERMS
# =============================================================================


@dataclass(frozen=True)
class FinancingTerms:
    """Loan terms for a monthly payment estimate.

    Defaults: 60 months, $10,000 down, 5.9% APR.
    """

    months: int = DEFAULT_LOAN_TERM_MONTHS
    down_payment_usd: float = DEFAULT_DOWN_PAYMENT_USD
    apr_percent: float = DEFAULT_APR_PERCENT

    def validate(self) -> "FinancingTerms":
        """
        Raises:
            InvalidTermsError: months <= 0, negative down payment or APR
        """
        if isinstance(self.months, bool) or not isinstance(self.months, int):
            raise InvalidTermsError(f"months must be an integer, got {self.months!r}")
        if self.months <= 0:
            raise InvalidTermsError(f"months must be positive, got {self.months}")
        validate_non_negative(self.down_payment_usd, "down payment", InvalidTermsError)
        validate_non_negative(self.apr_percent, "APR", InvalidTermsError)
        return self

    @property
    def monthly_rate(self) -> float:
        return self.apr_percent / 100 / MONTHS_PER_YEAR


# =============================================================================
# TOTALS
# =============================================================================


def features_total(features: "Iterable[Feature] | None") -> float:
    """Sum of feature prices (0 for None or empty)."""
    if features is None:
        return 0.0
    return float(sum(feature.price for feature in features))


def subtotal(vehicle: "Vehicle", features: "Iterable[Feature] | None" = None) -> float:
    """Vehicle price (per its pricing strategy) plus features."""
    return vehicle.calculate_price() + features_total(features)


def tax(amount: float) -> float:
    """
    Sales tax on an amount.

    Raises:
        InvalidTermsError: If amount is negative
    """
    validate_non_negative(amount, "taxable amount", InvalidTermsError)
    return amount * TAX_RATE


def total(vehicle: "Vehicle", features: "Iterable[Feature] | None" = None) -> float:
    """Subtotal plus tax."""
    amount = subtotal(vehicle, features)
    return amount + tax(amount)


# =============================================================================
# AMORTIZATION
# =============================================================================


def monthly_payment(
    total_price: float,
    months: int = DEFAULT_LOAN_TERM_MONTHS,
    down_payment: float = DEFAULT_DOWN_PAYMENT_USD,
    apr_percent: float = DEFAULT_APR_PERCENT,
) -> float:
    """
    Fixed monthly payment of an amortizing loan.

    Args:
        total_price: Amount due (after tax)
        months: Loan term, must be > 0
        down_payment: Paid up front, must be >= 0
        apr_percent: Annual rate in percent (5.9 = 5.9%), must be >= 0

    Returns:
        Monthly payment in USD; 0 when the down payment covers the price

    Raises:
        InvalidTermsError: On non-positive term or negative inputs

    Examples:
        >>> monthly_payment(12000.0, months=12, down_payment=0.0, apr_percent=0.0)
        1000.0
        >>> monthly_payment(5000.0, months=12, down_payment=5000.0)
        0.0
    """
    validate_non_negative(total_price, "total price", InvalidTermsError)
    terms = FinancingTerms(months, down_payment, apr_percent).validate()

    loan_amount = total_price - terms.down_payment_usd
    if loan_amount <= 0:
        return 0.0

    r = terms.monthly_rate
    if r == 0:
        return loan_amount / terms.months

    # P = L·r / (1 − (1 + r)^−n); log1p/expm1 keep tiny rates and long terms finite
    return loan_amount * r / -math.expm1(-terms.months * math.log1p(r))


def total_interest(
    total_price: float,
    months: int = DEFAULT_LOAN_TERM_MONTHS,
    down_payment: float = DEFAULT_DOWN_PAYMENT_USD,
    apr_percent: float = DEFAULT_APR_PERCENT,
) -> float:
    """
    Interest paid over the life of the loan.

    payment × n − L, 0 when nothing is financed.
    """
    payment = monthly_payment(total_price, months, down_payment, apr_percent)
    loan_amount = total_price - down_payment
    if loan_amount <= 0:
        return 0.0
    return payment * months - loan_amount


def down_payment_percentage(total_price: float, down_payment: float) -> float:
    """Down payment as percent of total (0 for a non-positive total)."""
    if total_price <= 0:
        return 0.0
    return safe_divide(down_payment, total_price) * 100


def suggest_down_payment(total_price: float) -> float:
    """20% of the total."""
    return total_price * SUGGESTED_DOWN_PAYMENT_FRAC


def tax_rate_percentage() -> float:
    """TAX_RATE in percent (8.5)."""
    return round(TAX_RATE * 100, 6)


def format_price(price: float) -> str:
    """
    Examples:
        >>> format_price(55500)
        '$55,500.00'
        >>> format_price(4717.5)
        '$4,717.50'
    """
    return f"${price:,.2f}"
