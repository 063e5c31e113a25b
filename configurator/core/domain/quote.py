"""
OrderQuote — Serializable price breakdown of an order

Immutable snapshot of every derived price and financing field, rounded to
cents. `model_dump(mode="json")` satisfies the order_quote JSON contract.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from configurator.core.domain.feature import FeatureKind


# =============================================================================
# NESTED MODELS
# =============================================================================


class QuotedVehicle(BaseModel):
    """Vehicle identity as shown on a quote."""

    model: str = Field(..., min_length=1)
    level: int = Field(..., ge=1, le=4)
    trim: str = Field(..., min_length=1)
    color: str = Field(..., min_length=1)
    is_signature: bool = Field(False)
    signature_id: str | None = Field(None)
    signature_name: str | None = Field(None)

    model_config = {"frozen": True}


class QuotedFeature(BaseModel):
    """One line of the order's feature list."""

    kind: FeatureKind
    name: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1)
    price: float = Field(..., ge=0)

    model_config = {"frozen": True}


class QuotedPricing(BaseModel):
    """Subtotal, tax and total."""

    vehicle_price: float = Field(..., ge=0)
    features_total: float = Field(..., ge=0)
    subtotal: float = Field(..., ge=0)
    tax_rate_percent: float = Field(..., ge=0)
    tax: float = Field(..., ge=0)
    total: float = Field(..., ge=0)
    regular_price: float | None = Field(None, ge=0, description="Signature a-la-carte price")
    savings: float | None = Field(None, gt=0, description="Signature discount")

    model_config = {"frozen": True}


class QuotedFinancing(BaseModel):
    """Monthly payment estimate and the terms it assumes."""

    months: int = Field(..., gt=0)
    down_payment: float = Field(..., ge=0)
    apr_percent: float = Field(..., ge=0)
    loan_amount: float = Field(..., ge=0)
    monthly_payment: float = Field(..., ge=0)
    total_interest: float = Field(..., ge=0)

    model_config = {"frozen": True}


# =============================================================================
# QUOTE MODEL
# =============================================================================


class OrderQuote(BaseModel):
    """Full price breakdown of an order at one point in time."""

    order_id: str = Field(..., min_length=1)
    created_at: datetime
    vehicle: QuotedVehicle
    features: tuple[QuotedFeature, ...] = ()
    pricing: QuotedPricing
    financing: QuotedFinancing

    model_config = {"frozen": True}
