"""
Core math modules

Pure pricing, financing and environmental computations plus the numerical
safeguards they rely on.
"""

# Numerical Safeguards
from configurator.core.math.numerical_safeguards import (
    CENT,
    EPS_CALC,
    EPS_MONEY,
    is_valid_float,
    is_zero_money,
    money_equal,
    round_to_cents,
    safe_divide,
    validate_non_negative,
    validate_positive,
)

# Pricing
from configurator.core.math.pricing import (
    DEFAULT_APR_PERCENT,
    DEFAULT_DOWN_PAYMENT_USD,
    DEFAULT_LOAN_TERM_MONTHS,
    TAX_RATE,
    FinancingTerms,
    down_payment_percentage,
    features_total,
    format_price,
    monthly_payment,
    subtotal,
    suggest_down_payment,
    tax,
    tax_rate_percentage,
    total,
    total_interest,
)

# Environmental
from configurator.core.math.environmental import (
    annual_electricity_cost,
    annual_gas_cost,
    charging_summary,
    co2_saved_tons,
    fast_charging_minutes,
    fuel_savings,
    home_charging_hours,
    impact_summary,
    trees_equivalent,
)

__all__ = [
    # Numerical Safeguards: Constants
    "CENT",
    "EPS_CALC",
    "EPS_MONEY",
    # Numerical Safeguards: Functions
    "is_valid_float",
    "is_zero_money",
    "money_equal",
    "round_to_cents",
    "safe_divide",
    "validate_non_negative",
    "validate_positive",
    # Pricing: Constants
    "DEFAULT_APR_PERCENT",
    "DEFAULT_DOWN_PAYMENT_USD",
    "DEFAULT_LOAN_TERM_MONTHS",
    "TAX_RATE",
    # Pricing: Types
    "FinancingTerms",
    # Pricing: Functions
    "down_payment_percentage",
    "features_total",
    "format_price",
    "monthly_payment",
    "subtotal",
    "suggest_down_payment",
    "tax",
    "tax_rate_percentage",
    "total",
    "total_interest",
    # Environmental: Functions
    "annual_electricity_cost",
    "annual_gas_cost",
    "charging_summary",
    "co2_saved_tons",
    "fast_charging_minutes",
    "fuel_savings",
    "home_charging_hours",
    "impact_summary",
    "trees_equivalent",
]
