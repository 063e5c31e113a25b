"""
Catalog lookups — String-id surface for the HTTP collaborator

Turns raw request values (level numbers, trim/color codes, signature and
feature ids) into domain objects. Unrecognized trim/color/level/signature
values raise ConfigurationError; unknown feature ids resolve to None so a
request can skip them.
"""

import logging
from collections.abc import Callable

from configurator.core.domain import feature as catalog
from configurator.core.domain.color import Color
from configurator.core.domain.feature import Feature
from configurator.core.domain.levels import colors_for, create_vehicle, level_spec, trims_for
from configurator.core.domain.signature import SIGNATURE_PRESETS
from configurator.core.domain.trim import Trim
from configurator.core.domain.vehicle import Vehicle
from configurator.core.errors import ConfigurationError, UnknownLevelError, UnknownSignatureError

logger = logging.getLogger(__name__)


# =============================================================================
# FEATURE IDS
# =============================================================================

# Canonical id -> factory taking the vehicle level (None when unknown)
FEATURE_FACTORIES: dict[str, Callable[[int | None], Feature]] = {
    "enhanced-autopilot": lambda level: catalog.enhanced_autopilot(),
    "fsd": lambda level: catalog.full_self_driving(),
    "massage-seats": lambda level: catalog.massage_seats(for_level4=level == 4),
    "custom-paint": lambda level: catalog.custom_paint(),
    "track-package": lambda level: catalog.track_package(),
    "warranty-8yr": lambda level: catalog.extended_warranty_8_year(),
    "maintenance-5yr": lambda level: catalog.premium_maintenance_5_year(),
    "roadside-assistance": lambda level: catalog.roadside_assistance(),
    "floor-mats": lambda level: catalog.premium_floor_mats(),
    "home-charger": lambda level: catalog.home_charger(),
    "paint-protection": lambda level: catalog.paint_protection_film(),
    "ceramic-coating": lambda level: catalog.ceramic_coating(),
}

FEATURE_ID_ALIASES: dict[str, str] = {
    "full-self-driving": "fsd",
    "extended-warranty": "warranty-8yr",
    "premium-maintenance": "maintenance-5yr",
}


def _normalize_id(value: str) -> str:
    return value.strip().lower()


def feature_by_id(feature_id: str | None, level: int | None = None) -> Feature | None:
    """
    Resolve a feature id.

    Args:
        feature_id: Id such as "enhanced-autopilot" (case/whitespace-insensitive)
        level: Vehicle level; selects the Level 4 massage-seat variant

    Returns:
        Feature, or None for an unknown id
    """
    if not feature_id or not feature_id.strip():
        return None
    key = _normalize_id(feature_id)
    key = FEATURE_ID_ALIASES.get(key, key)
    factory = FEATURE_FACTORIES.get(key)
    if factory is None:
        logger.warning("Unknown feature id: %s", feature_id)
        return None
    return factory(level)


# =============================================================================
# VEHICLES
# =============================================================================


def parse_level(value: int | str) -> int:
    """
    Accept 1..4 as an int or a numeric string.

    Raises:
        UnknownLevelError: For anything else
    """
    if isinstance(value, bool):
        raise UnknownLevelError(value)
    if isinstance(value, str):
        stripped = value.strip()
        if not stripped.isdigit():
            raise UnknownLevelError(value)
        value = int(stripped)
    if not isinstance(value, int):
        raise UnknownLevelError(value)
    level_spec(value)
    return value


def parse_trim(code: str) -> Trim:
    """
    Raises:
        ConfigurationError: If code names no trim
    """
    trim = Trim.from_code(code)
    if trim is None:
        raise ConfigurationError(f"Unknown trim: {code!r}")
    return trim


def parse_color(code: str) -> Color:
    """
    Raises:
        ConfigurationError: If code names no color
    """
    color = Color.from_code(code)
    if color is None:
        raise ConfigurationError(f"Unknown color: {code!r}")
    return color


def build_vehicle(level: int | str, trim_code: str, color_code: str) -> Vehicle:
    """
    Construct a vehicle from raw request values.

    Level 4 only comes in FLAGSHIP; the trim code is still validated, so a
    request for a Level 4 "Premium" fails like any other illegal trim.

    Raises:
        ConfigurationError: Unknown level/trim/color or illegal combination
    """
    return create_vehicle(parse_level(level), parse_trim(trim_code), parse_color(color_code))


def signature_by_id(signature_id: str) -> Vehicle:
    """
    Build a signature preset by id.

    Raises:
        UnknownSignatureError: If the id names no preset
    """
    if not isinstance(signature_id, str):
        raise UnknownSignatureError(signature_id)
    build = SIGNATURE_PRESETS.get(_normalize_id(signature_id))
    if build is None:
        raise UnknownSignatureError(signature_id)
    return build()


# =============================================================================
# LISTINGS
# =============================================================================


def available_trims(level: int) -> list[Trim]:
    return trims_for(level)


def available_colors(level: int) -> list[Color]:
    return colors_for(level)


def available_features(level: int) -> dict[str, Feature]:
    """Feature id -> feature, for every feature eligible on the level."""
    level_spec(level)
    features = {}
    for feature_id, factory in FEATURE_FACTORIES.items():
        feature = factory(level)
        if feature.is_eligible_for(level):
            features[feature_id] = feature
    return features
