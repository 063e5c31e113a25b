"""
Vehicle — Validated vehicle specification with an attached pricing strategy

One value object covers all four levels; `level` is the variant tag. Specs
are derived once at build time from (level, trim) by the constructor
functions in `levels`, and the model is frozen afterwards.

Pricing is a capability attached to the instance rather than a subclass
override:
- REGULAR:      calculate_price() == base_price
- FIXED_BUNDLE: calculate_price() == flat_price (signature presets)
"""

from enum import Enum

from pydantic import BaseModel, Field, model_validator

from configurator.core.domain.bundle import SignatureBundle
from configurator.core.domain.color import Color
from configurator.core.domain.trim import Trim
from configurator.core.math import environmental
from configurator.core.math.numerical_safeguards import money_equal
from configurator.core.math.pricing import format_price


# =============================================================================
# PRICING STRATEGY
# =============================================================================


class PricingKind(str, Enum):
    """How a vehicle's price is computed"""

    REGULAR = "regular"
    FIXED_BUNDLE = "fixed_bundle"


class PricingStrategy(BaseModel):
    """Pricing capability of a vehicle instance."""

    kind: PricingKind = Field(PricingKind.REGULAR, description="Pricing path")
    flat_price: float | None = Field(
        None, ge=0, allow_inf_nan=False, description="Flat price for FIXED_BUNDLE (USD)"
    )

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_flat_price(self) -> "PricingStrategy":
        if self.kind == PricingKind.FIXED_BUNDLE and self.flat_price is None:
            raise ValueError("fixed_bundle pricing requires flat_price")
        if self.kind == PricingKind.REGULAR and self.flat_price is not None:
            raise ValueError("regular pricing does not take a flat_price")
        return self

    @classmethod
    def regular(cls) -> "PricingStrategy":
        return cls(kind=PricingKind.REGULAR)

    @classmethod
    def fixed_bundle(cls, flat_price: float) -> "PricingStrategy":
        return cls(kind=PricingKind.FIXED_BUNDLE, flat_price=flat_price)


# =============================================================================
# VEHICLE MODEL
# =============================================================================


class Vehicle(BaseModel):
    """
    Configured vehicle.

    Invariant: trim and color are both offered on `level`. The constructor
    functions raise the typed configuration errors before this model is
    ever built; the validator below keeps direct construction honest.
    """

    # Identity
    level: int = Field(..., ge=1, le=4, description="Product line 1..4")
    model_name: str = Field(..., min_length=1, description="e.g. 'Raion Level 1'")
    body_style: str = Field(..., min_length=1, description="e.g. 'Compact Sedan'")
    trim: Trim = Field(..., description="Trim level")
    color: Color = Field(..., description="Paint color")

    # Specs
    base_price: float = Field(..., ge=0, allow_inf_nan=False, description="Base price (USD)")
    power_hp: int = Field(..., gt=0, description="Power (hp)")
    range_miles: int = Field(..., gt=0, description="EPA range (miles)")
    battery_capacity_kwh: float = Field(..., gt=0, description="Battery (kWh)")
    acceleration_seconds: float = Field(..., gt=0, description="0-60 mph (s)")
    top_speed_mph: int = Field(..., gt=0, description="Top speed (mph)")
    drivetrain: str = Field(..., min_length=1, description="RWD, AWD, ...")
    seating_capacity: int | None = Field(None, gt=0, description="Seats, if fixed by level")
    trim_features: str = Field("", description="What the trim adds")

    # Pricing
    pricing: PricingStrategy = Field(
        default_factory=PricingStrategy.regular, description="Pricing strategy"
    )
    signature: SignatureBundle | None = Field(None, description="Signature preset, if any")

    model_config = {"frozen": True}  # Immutable

    @model_validator(mode="after")
    def validate_configuration(self) -> "Vehicle":
        """Trim/color membership and signature pricing consistency."""
        if not self.trim.is_valid_for(self.level):
            raise ValueError(f"trim {self.trim.name} is not offered on level {self.level}")
        if not self.color.is_valid_for(self.level):
            raise ValueError(f"color {self.color.name} is not offered on level {self.level}")
        if self.signature is not None:
            if self.pricing.kind != PricingKind.FIXED_BUNDLE:
                raise ValueError("signature vehicles must use fixed_bundle pricing")
            if not money_equal(self.pricing.flat_price, self.signature.signature_price):
                raise ValueError(
                    f"flat_price {self.pricing.flat_price} does not match "
                    f"signature price {self.signature.signature_price}"
                )
            if not money_equal(self.signature.base_price, self.base_price):
                raise ValueError("signature base_price must match the vehicle base_price")
        return self

    # -------------------------------------------------------------------------
    # Pricing
    # -------------------------------------------------------------------------

    def calculate_price(self) -> float:
        """
        Price of the vehicle alone.

        Returns:
            flat_price for FIXED_BUNDLE, base_price otherwise
        """
        if self.pricing.kind == PricingKind.FIXED_BUNDLE:
            return self.pricing.flat_price
        return self.base_price

    @property
    def is_signature(self) -> bool:
        return self.signature is not None

    @property
    def regular_price(self) -> float | None:
        """A-la-carte price of a signature preset (None for plain vehicles)."""
        return self.signature.regular_price if self.signature else None

    @property
    def savings(self) -> float | None:
        """Signature discount (None for plain vehicles)."""
        return self.signature.savings if self.signature else None

    # -------------------------------------------------------------------------
    # Derived specs
    # -------------------------------------------------------------------------

    @property
    def home_charging_hours(self) -> float:
        return environmental.home_charging_hours(self.battery_capacity_kwh)

    @property
    def fast_charging_minutes(self) -> float:
        return environmental.fast_charging_minutes(self.battery_capacity_kwh)

    @property
    def display_name(self) -> str:
        return f"{self.model_name} {self.trim.display_name} - {self.color.display_name}"

    def with_signature(self, bundle: SignatureBundle) -> "Vehicle":
        """
        Copy of this vehicle sold as a signature preset.

        The copy is re-validated, so a bundle whose base price disagrees
        with the vehicle is rejected.
        """
        data = self.model_dump()
        data["pricing"] = PricingStrategy.fixed_bundle(bundle.signature_price)
        data["signature"] = bundle
        return Vehicle(**data)

    def specifications(self) -> str:
        """Human-readable spec sheet."""
        lines = []
        if self.signature is not None:
            lines.append(f"=== {self.signature.name} Signature ===")
            lines.append(f"Based on: {self.model_name} {self.trim.display_name}")
            lines.append(f"Signature Price: {format_price(self.signature.signature_price)}")
            lines.append(f"Regular Price: {format_price(self.signature.regular_price)}")
            lines.append(f"You Save: {format_price(self.signature.savings)}")
            lines.append("")
        else:
            lines.append(f"=== {self.model_name} {self.trim.display_name} ===")

        lines.append(f"Body Style: {self.body_style}")
        if self.seating_capacity is not None:
            lines.append(f"Seating: {self.seating_capacity} passengers")
        lines.append(f"Color: {self.color.display_name}")
        lines.append(f"Drivetrain: {self.drivetrain}")
        lines.append(f"Power: {self.power_hp} hp")
        lines.append(f"0-60 mph: {self.acceleration_seconds} seconds")
        lines.append(f"Top Speed: {self.top_speed_mph} mph")
        lines.append(f"Range: {self.range_miles} miles")
        lines.append(f"Battery: {self.battery_capacity_kwh:g} kWh")
        lines.append(f"Base Price: {format_price(self.base_price)}")
        lines.append("")
        lines.append("Charging Times:")
        lines.append(f"Home (Level 2): {self.home_charging_hours:.1f} hours")
        lines.append(f"DC Fast Charge (to 80%): {self.fast_charging_minutes:.0f} minutes")
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        if self.signature is not None:
            return (
                f"Raion {self.signature.name} Signature - "
                f"{format_price(self.calculate_price())} "
                f"(Save {format_price(self.signature.savings)})"
            )
        return self.display_name
