"""
SignatureBundle — Fixed-price preset metadata

A signature bundle locks one (level, trim, color) vehicle together with a
list of "included" features and sells the lot at a flat price below the
a-la-carte sum:

    regular_price   = base_price + Σ included_features.price
    signature_price = regular_price − savings,  savings > 0

Included features are informational only: they are never copied into an
order's feature list.
"""

from pydantic import BaseModel, Field, computed_field, model_validator

from configurator.core.domain.feature import Feature


class SignatureBundle(BaseModel):
    """Immutable bundle description attached to a signature vehicle."""

    signature_id: str = Field(..., min_length=1, description="Stable id ('urban-commuter')")
    name: str = Field(..., min_length=1, description="Display name")
    description: str = Field("", description="Marketing pitch")
    target_customer: str = Field("", description="Who the preset is for")
    highlights: tuple[str, ...] = Field((), description="Marketing bullet points")

    base_price: float = Field(
        ..., ge=0, allow_inf_nan=False, description="Base price of the constituent trim"
    )
    included_features: tuple[Feature, ...] = Field(..., description="Bundled features")
    savings: float = Field(..., gt=0, description="Discount versus a-la-carte (USD)")

    model_config = {"frozen": True}

    @computed_field  # type: ignore[prop-decorator]
    @property
    def included_features_total(self) -> float:
        return float(sum(feature.price for feature in self.included_features))

    @computed_field  # type: ignore[prop-decorator]
    @property
    def regular_price(self) -> float:
        """A-la-carte price: base vehicle plus every included feature."""
        return self.base_price + self.included_features_total

    @computed_field  # type: ignore[prop-decorator]
    @property
    def signature_price(self) -> float:
        """Flat price charged for the bundle."""
        return self.regular_price - self.savings

    @model_validator(mode="after")
    def validate_savings_below_regular(self) -> "SignatureBundle":
        if self.savings >= self.regular_price:
            raise ValueError(
                f"savings {self.savings:.2f} must be below regular price {self.regular_price:.2f}"
            )
        return self

    def included_features_text(self) -> str:
        """Multi-line description of what the bundle includes."""
        lines = [f"INCLUDED IN {self.name.upper()} SIGNATURE:"]
        for feature in self.included_features:
            lines.append(f"- {feature.name} (${feature.price:,.0f} value)")
        lines.extend(f"- {item}" for item in self.highlights)
        return "\n".join(lines) + "\n"
