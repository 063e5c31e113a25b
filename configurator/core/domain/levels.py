"""
Levels — Per-level spec tables and vehicle constructor functions

Each level fixes its body, battery and range; the trim picks a deterministic
spec row (price, power, acceleration, top speed). Level 4 has a single trim
(FLAGSHIP) and is built from a color alone.

Construction checks, in order:
1. Level is one of 1..4              → UnknownLevelError
2. Trim is offered on the level      → InvalidTrimForLevel
3. Color is offered on the level     → InvalidColorForLevel
"""

import logging
from dataclasses import dataclass
from typing import NamedTuple

from configurator.core.domain.color import Color
from configurator.core.domain.trim import Trim
from configurator.core.domain.vehicle import Vehicle
from configurator.core.errors import (
    InvalidColorForLevel,
    InvalidTrimForLevel,
    UnknownLevelError,
)

logger = logging.getLogger(__name__)


# =============================================================================
# SPEC TABLES
# =============================================================================


class TrimSpec(NamedTuple):
    """Spec row selected by the trim"""

    base_price: float
    power_hp: int
    acceleration_seconds: float
    top_speed_mph: int
    features: str


@dataclass(frozen=True)
class LevelSpec:
    """Fixed characteristics of one product line."""

    level: int
    model_name: str
    body_style: str
    battery_capacity_kwh: float
    range_miles: int
    drivetrain: str
    seating_capacity: int | None
    trims: dict[Trim, TrimSpec]

    def trim_spec(self, trim: Trim) -> TrimSpec:
        return self.trims[trim]


LEVEL_1 = LevelSpec(
    level=1,
    model_name="Raion Level 1",
    body_style="Compact Sedan",
    battery_capacity_kwh=80,
    range_miles=400,
    drivetrain="RWD",
    seating_capacity=None,
    trims={
        Trim.STANDARD: TrimSpec(
            45000, 290, 5.0, 140,
            "Standard features include: basic leather seats, 15-inch touchscreen, "
            "basic autopilot, glass panoramic roof, heated/ventilated front seats, "
            "heated rear seats, 360-degree cameras, wireless charging",
        ),
        Trim.PREMIUM: TrimSpec(
            50000, 290, 5.0, 140,
            "Premium adds: premium audio (18 speakers), upgraded Nappa leather, "
            "20-inch alloy wheels, enhanced ambient lighting, ventilated rear seats, "
            "premium interior materials",
        ),
        Trim.PERFORMANCE: TrimSpec(
            55000, 360, 4.0, 155,
            "Performance adds: sport seats with bolsters, adaptive sport suspension, "
            "performance brakes, 20-inch performance wheels, track mode, launch control, "
            "sport steering wheel, carbon fiber accents",
        ),
    },
)

# Dual motor: every trim shares power, acceleration and top speed
LEVEL_2 = LevelSpec(
    level=2,
    model_name="Raion Level 2",
    body_style="Full-Size SUV",
    battery_capacity_kwh=100,
    range_miles=450,
    drivetrain="AWD",
    seating_capacity=7,
    trims={
        Trim.STANDARD: TrimSpec(
            85000, 670, 6.0, 130,
            "Standard features include: Level 1 leather, 15-inch touchscreen, "
            "Basic Autopilot, glass panoramic roof, heated/ventilated front seats, "
            "heated seats in all 3 rows, 360-degree cameras, wireless charging, "
            "power folding third row",
        ),
        Trim.PREMIUM: TrimSpec(
            90000, 670, 6.0, 130,
            "Premium adds: premium audio (22 speakers), Nappa leather throughout, "
            "22-inch alloy wheels, enhanced ambient lighting, executive second-row "
            "captain's chairs, ventilated second-row seats, premium wood trim",
        ),
        Trim.OFFROAD: TrimSpec(
            95000, 670, 6.0, 130,
            "Off-Road adds: lifted air suspension (+2 inches clearance), off-road drive "
            "modes (Rock, Sand, Mud), skid plates, all-terrain tires, reinforced 20-inch "
            "wheels, front tow hooks, off-road camera system, hill descent control",
        ),
    },
)

# Battery is 93.7 kWh, rounded
LEVEL_3 = LevelSpec(
    level=3,
    model_name="Raion Level 3",
    body_style="Performance Sedan",
    battery_capacity_kwh=94,
    range_miles=350,
    drivetrain="AWD (Tri-Motor)",
    seating_capacity=None,
    trims={
        Trim.PRO: TrimSpec(
            125000, 1527, 2.0, 217,
            "Pro features include: sport seats with aggressive bolsters, carbon fiber "
            "interior trim, Alcantara steering wheel, Track Mode, Launch Control, carbon "
            "ceramic brakes, adaptive sport suspension, 21-inch forged wheels",
        ),
        Trim.MAX: TrimSpec(
            130000, 1527, 2.0, 217,
            "Max adds: Nappa leather sport seats, premium audio (24 speakers), full "
            "Alcantara headliner, extended carbon fiber package, 21-inch lightweight "
            "forged wheels, upgraded instrument cluster display",
        ),
        Trim.ULTRA: TrimSpec(
            135000, 1600, 1.8, 224,
            "Ultra adds: full carbon fiber exterior package, race-tuned adjustable track "
            "suspension, upgraded carbon ceramic brakes, 21-inch carbon wheels, race-spec "
            "tires, track telemetry, lap timer with GPS, active rear wing",
        ),
    },
)

LEVEL_4 = LevelSpec(
    level=4,
    model_name="Raion Level 4",
    body_style="Ultra-Luxury SUV",
    battery_capacity_kwh=120,
    range_miles=620,
    drivetrain="AWD (Quad Motor)",
    seating_capacity=4,
    trims={
        Trim.FLAGSHIP: TrimSpec(
            185000, 1180, 3.2, 155,
            "Everything included: Nappa leather everywhere, Sapele wood trim, 24+ speaker "
            "audio, self-leveling air suspension, Full Self-Driving Capability, executive "
            "rear seats with zero-gravity mode, starlight headliner, AR head-up display, "
            "rear-wheel steering",
        ),
    },
)

LEVEL_SPECS: dict[int, LevelSpec] = {
    spec.level: spec for spec in (LEVEL_1, LEVEL_2, LEVEL_3, LEVEL_4)
}

LEVELS: tuple[int, ...] = tuple(LEVEL_SPECS)


def level_spec(level: int) -> LevelSpec:
    """
    Raises:
        UnknownLevelError: If level is not 1..4
    """
    if isinstance(level, bool) or level not in LEVEL_SPECS:
        raise UnknownLevelError(level)
    return LEVEL_SPECS[level]


# =============================================================================
# CONSTRUCTORS
# =============================================================================


def create_vehicle(level: int, trim: Trim, color: Color) -> Vehicle:
    """
    Build a validated vehicle for any level.

    Args:
        level: Product line 1..4
        trim: Trim (must be offered on the level)
        color: Color (must be offered on the level)

    Returns:
        Frozen Vehicle with REGULAR pricing

    Raises:
        UnknownLevelError: Level outside of 1..4
        InvalidTrimForLevel: Trim not offered on the level
        InvalidColorForLevel: Color not offered on the level
    """
    spec = level_spec(level)

    if not trim.is_valid_for(level):
        raise InvalidTrimForLevel(trim, level)
    if not color.is_valid_for(level):
        raise InvalidColorForLevel(color, level)

    row = spec.trim_spec(trim)
    vehicle = Vehicle(
        level=spec.level,
        model_name=spec.model_name,
        body_style=spec.body_style,
        trim=trim,
        color=color,
        base_price=row.base_price,
        power_hp=row.power_hp,
        range_miles=spec.range_miles,
        battery_capacity_kwh=spec.battery_capacity_kwh,
        acceleration_seconds=row.acceleration_seconds,
        top_speed_mph=row.top_speed_mph,
        drivetrain=spec.drivetrain,
        seating_capacity=spec.seating_capacity,
        trim_features=row.features,
    )
    logger.debug("Built %s (%s)", vehicle.display_name, vehicle.base_price)
    return vehicle


def create_level1(trim: Trim, color: Color) -> Vehicle:
    return create_vehicle(1, trim, color)


def create_level2(trim: Trim, color: Color) -> Vehicle:
    return create_vehicle(2, trim, color)


def create_level3(trim: Trim, color: Color) -> Vehicle:
    return create_vehicle(3, trim, color)


def create_level4(color: Color = Color.BLACK) -> Vehicle:
    """Level 4 comes in FLAGSHIP trim only."""
    return create_vehicle(4, Trim.FLAGSHIP, color)


def trims_for(level: int) -> list[Trim]:
    """Trims offered on a level, in catalog order."""
    level_spec(level)
    return [trim for trim in Trim if trim.is_valid_for(level)]


def colors_for(level: int) -> list[Color]:
    """Colors offered on a level, in catalog order."""
    level_spec(level)
    return [color for color in Color if color.is_valid_for(level)]
