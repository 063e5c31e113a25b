"""
Feature — Purchasable add-ons (Option, ServicePackage, Accessory)

Closed tagged variant: every feature shares one field set and is dispatched
by its `kind` tag. Eligibility is a plain predicate over the vehicle level,
driven by `restricted_to_level` (None means every level).

Immutable Pydantic model (frozen=True). Catalog factories pin the canonical
name/price/description/category, so the same instance can be shared by any
number of orders.
"""

from enum import Enum

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from configurator.core.errors import InvalidFeatureError
from configurator.core.math.pricing import format_price


# =============================================================================
# ENUMS
# =============================================================================


class FeatureKind(str, Enum):
    """Feature variant tag"""

    OPTION = "option"
    SERVICE_PACKAGE = "service_package"
    ACCESSORY = "accessory"


SERVICE_PACKAGE_CATEGORY = "Service Package"
ACCESSORY_CATEGORY = "Accessory"


# =============================================================================
# FEATURE MODEL
# =============================================================================


class Feature(BaseModel):
    """
    Add-on that can be attached to an order.

    Two features are equal iff kind, name and price match; descriptions and
    informational flags do not take part in identity.
    """

    kind: FeatureKind = Field(..., description="Variant tag")
    name: str = Field(..., min_length=1, description="Display name")
    price: float = Field(..., ge=0, allow_inf_nan=False, description="Price in USD")
    description: str = Field("", description="Marketing description")
    category: str = Field(..., min_length=1, description="Catalog category")
    restricted_to_level: int | None = Field(
        None, ge=1, le=4, description="Only level allowed to carry it (None = all levels)"
    )

    # Service packages
    duration_years: int | None = Field(None, ge=1, description="Coverage length in years")
    is_recurring: bool = Field(False, description="Billed every year rather than once")

    # Accessories
    is_installed: bool = Field(False, description="Installed by the dealer")

    model_config = {"frozen": True}  # Immutable

    @field_validator("name")
    @classmethod
    def validate_name_not_blank(cls, v: str) -> str:
        """Whitespace-only names are rejected like empty ones."""
        if not v.strip():
            raise ValueError("feature name cannot be empty")
        return v

    @model_validator(mode="after")
    def validate_service_package_duration(self) -> "Feature":
        """Service packages always carry a duration of at least one year."""
        if self.kind == FeatureKind.SERVICE_PACKAGE and self.duration_years is None:
            raise ValueError("service package duration must be at least 1 year")
        return self

    @classmethod
    def create(cls, **fields) -> "Feature":
        """
        Validated construction for caller-supplied features.

        Raises:
            InvalidFeatureError: If any field violates the feature rules
        """
        try:
            return cls(**fields)
        except ValidationError as e:
            raise InvalidFeatureError(f"invalid feature {fields.get('name')!r}: {e}") from e

    def is_eligible_for(self, level: int) -> bool:
        """
        Eligibility predicate.

        Returns:
            True if unrestricted or level matches the restriction
        """
        if self.restricted_to_level is None:
            return True
        return self.restricted_to_level == level

    def identity(self) -> tuple[FeatureKind, str, float]:
        """Structural identity used for equality and removal."""
        return (self.kind, self.name, self.price)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Feature):
            return NotImplemented
        return self.identity() == other.identity()

    def __hash__(self) -> int:
        return hash(self.identity())

    def __str__(self) -> str:
        text = f"{self.name} - {format_price(self.price)}"
        if self.kind == FeatureKind.SERVICE_PACKAGE:
            recurring = "/year" if self.is_recurring else ""
            return f"{text}{recurring} ({self.duration_years} years)"
        if self.kind == FeatureKind.ACCESSORY and self.is_installed:
            return f"{text} (Installed)"
        return text


# =============================================================================
# KIND CONSTRUCTORS
# =============================================================================


def option(
    name: str,
    price: float,
    description: str,
    category: str,
    restricted_to_level: int | None = None,
) -> Feature:
    """Build an Option; raises InvalidFeatureError on bad input."""
    return Feature.create(
        kind=FeatureKind.OPTION,
        name=name,
        price=price,
        description=description,
        category=category,
        restricted_to_level=restricted_to_level,
    )


def service_package(
    name: str,
    price: float,
    description: str,
    duration_years: int,
    is_recurring: bool = False,
) -> Feature:
    """Build a ServicePackage; raises InvalidFeatureError on bad input."""
    return Feature.create(
        kind=FeatureKind.SERVICE_PACKAGE,
        name=name,
        price=price,
        description=description,
        category=SERVICE_PACKAGE_CATEGORY,
        duration_years=duration_years,
        is_recurring=is_recurring,
    )


def accessory(
    name: str,
    price: float,
    description: str,
    is_installed: bool = False,
) -> Feature:
    """Build an Accessory; raises InvalidFeatureError on bad input."""
    return Feature.create(
        kind=FeatureKind.ACCESSORY,
        name=name,
        price=price,
        description=description,
        category=ACCESSORY_CATEGORY,
        is_installed=is_installed,
    )


# =============================================================================
# CATALOG: OPTIONS
# =============================================================================


def enhanced_autopilot() -> Feature:
    return option(
        "Enhanced Autopilot",
        6000.00,
        "Navigate on Autopilot, Auto Lane Change, Autopark, Summon, Smart Summon",
        "Autopilot",
    )


def full_self_driving() -> Feature:
    return option(
        "Full Self-Driving Capability",
        8000.00,
        "All Enhanced Autopilot features plus Traffic Light and Stop Sign Control, "
        "Autosteer on city streets",
        "Autopilot",
    )


def massage_seats(for_level4: bool = False) -> Feature:
    """
    Massage seats.

    Level 4 gets its own 18-point executive variant, priced higher and
    restricted to Level 4; everyone else gets the standard variant.
    """
    if for_level4:
        return option(
            "Massage Seats (Front & Rear)",
            5000.00,
            "18-point massage functionality for front and rear executive seats",
            "Comfort",
            restricted_to_level=4,
        )
    return option(
        "Massage Seats (Front & Rear)",
        3000.00,
        "Multi-point massage functionality for front and rear seats",
        "Comfort",
    )


def custom_paint() -> Feature:
    return option(
        "Custom Paint Color",
        2000.00,
        "Exclusive custom paint finish beyond standard color options",
        "Exterior",
    )


def track_package() -> Feature:
    """Track Package (Level 3 only)."""
    return option(
        "Track Package",
        10000.00,
        "Carbon ceramic brakes, track telemetry system, lap timer with GPS, "
        "performance data recorder",
        "Performance",
        restricted_to_level=3,
    )


# =============================================================================
# CATALOG: SERVICE PACKAGES
# =============================================================================


def basic_warranty() -> Feature:
    """Included free with every vehicle."""
    return service_package(
        "Basic Warranty",
        0.00,
        "4 years / 50,000 miles comprehensive warranty. "
        "8 years / 100,000 miles battery warranty",
        4,
    )


def extended_warranty_8_year() -> Feature:
    return service_package(
        "Extended Warranty - 8 Years",
        5000.00,
        "Extends comprehensive warranty to 8 years / 100,000 miles. "
        "Covers all vehicle components",
        8,
    )


def premium_maintenance_5_year() -> Feature:
    return service_package(
        "Premium Maintenance Package - 5 Years",
        3500.00,
        "All scheduled maintenance included for 5 years. "
        "Tire rotations, brake inspections, software updates",
        5,
    )


def roadside_assistance() -> Feature:
    return service_package(
        "Premium Roadside Assistance",
        500.00,
        "24/7 roadside support, towing, mobile service, loaner vehicle",
        1,
        is_recurring=True,
    )


# =============================================================================
# CATALOG: ACCESSORIES
# =============================================================================


def premium_floor_mats() -> Feature:
    return accessory(
        "Premium Floor Mats",
        400.00,
        "All-weather floor mats with Raion logo for all rows",
    )


def home_charger() -> Feature:
    return accessory(
        "Home EV Charger (Level 2, 240V)",
        800.00,
        "Wall-mounted Level 2 charger with 25-foot cable. Includes installation kit",
    )


def paint_protection_film() -> Feature:
    return accessory(
        "Paint Protection Film (Full Front)",
        2000.00,
        "Clear protective film for front bumper, hood, fenders, and mirrors. "
        "Professional installation included",
        is_installed=True,
    )


def ceramic_coating() -> Feature:
    return accessory(
        "Ceramic Coating (Full Vehicle)",
        1500.00,
        "Professional-grade ceramic coating for entire vehicle. "
        "Provides long-lasting protection and shine",
        is_installed=True,
    )
