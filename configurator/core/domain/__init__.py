"""
Domain models and value objects.

Contains the configurator entities: Color, Trim, Feature, Vehicle,
SignatureBundle, Order.
"""

from configurator.core.domain.bundle import SignatureBundle
from configurator.core.domain.color import Color
from configurator.core.domain.feature import (
    Feature,
    FeatureKind,
    accessory,
    basic_warranty,
    ceramic_coating,
    custom_paint,
    enhanced_autopilot,
    extended_warranty_8_year,
    full_self_driving,
    home_charger,
    massage_seats,
    option,
    paint_protection_film,
    premium_floor_mats,
    premium_maintenance_5_year,
    roadside_assistance,
    service_package,
    track_package,
)
from configurator.core.domain.levels import (
    LEVEL_SPECS,
    LEVELS,
    LevelSpec,
    TrimSpec,
    colors_for,
    create_level1,
    create_level2,
    create_level3,
    create_level4,
    create_vehicle,
    level_spec,
    trims_for,
)
from configurator.core.domain.order import Order, OrderIdGenerator
from configurator.core.domain.quote import (
    OrderQuote,
    QuotedFeature,
    QuotedFinancing,
    QuotedPricing,
    QuotedVehicle,
)
from configurator.core.domain.signature import (
    SIGNATURE_PRESETS,
    all_signatures,
    executive,
    track_beast,
    trail_titan,
    urban_commuter,
)
from configurator.core.domain.trim import Trim
from configurator.core.domain.vehicle import PricingKind, PricingStrategy, Vehicle

__all__ = [
    # Enumerations
    "Color",
    "Trim",
    # Features
    "Feature",
    "FeatureKind",
    "option",
    "service_package",
    "accessory",
    "enhanced_autopilot",
    "full_self_driving",
    "massage_seats",
    "custom_paint",
    "track_package",
    "basic_warranty",
    "extended_warranty_8_year",
    "premium_maintenance_5_year",
    "roadside_assistance",
    "premium_floor_mats",
    "home_charger",
    "paint_protection_film",
    "ceramic_coating",
    # Vehicles
    "Vehicle",
    "PricingKind",
    "PricingStrategy",
    "LevelSpec",
    "TrimSpec",
    "LEVELS",
    "LEVEL_SPECS",
    "level_spec",
    "create_vehicle",
    "create_level1",
    "create_level2",
    "create_level3",
    "create_level4",
    "trims_for",
    "colors_for",
    # Signatures
    "SignatureBundle",
    "SIGNATURE_PRESETS",
    "all_signatures",
    "urban_commuter",
    "trail_titan",
    "track_beast",
    "executive",
    # Orders
    "Order",
    "OrderIdGenerator",
    "OrderQuote",
    "QuotedVehicle",
    "QuotedFeature",
    "QuotedPricing",
    "QuotedFinancing",
]
