"""
Signature — The four fixed-price presets

Each preset builds its locked (trim, color) vehicle through the regular
level constructor and attaches a SignatureBundle, which switches the vehicle
to FIXED_BUNDLE pricing at the bundle's signature price.

| id             | base                  | included                       | savings |
|----------------|-----------------------|--------------------------------|---------|
| urban-commuter | L1 PREMIUM / SILVER   | Enhanced Autopilot             |    $500 |
| trail-titan    | L2 OFFROAD / BLACK    | Premium Maintenance 5 yr       |  $1,000 |
| track-beast    | L3 ULTRA / GREEN      | Track Package                  |  $2,000 |
| executive      | L4 FLAGSHIP / BLACK   | L4 Massage Seats + Warranty 8y |  $2,000 |
"""

from collections.abc import Callable

from configurator.core.domain import feature as catalog
from configurator.core.domain.bundle import SignatureBundle
from configurator.core.domain.color import Color
from configurator.core.domain.levels import create_level1, create_level2, create_level3, create_level4
from configurator.core.domain.trim import Trim
from configurator.core.domain.vehicle import Vehicle

URBAN_COMMUTER_ID = "urban-commuter"
TRAIL_TITAN_ID = "trail-titan"
TRACK_BEAST_ID = "track-beast"
EXECUTIVE_ID = "executive"


def urban_commuter() -> Vehicle:
    base = create_level1(Trim.PREMIUM, Color.SILVER)
    bundle = SignatureBundle(
        signature_id=URBAN_COMMUTER_ID,
        name="Urban Commuter",
        description=(
            "The perfect daily driver for city professionals. Combines Premium luxury "
            "with advanced autonomous driving features for stress-free commuting."
        ),
        target_customer=(
            "Perfect for: city professionals, daily commuters, tech enthusiasts who "
            "want autonomous driving in a compact package"
        ),
        highlights=(
            "Level 1 Premium trim (290 hp, 400 miles range)",
            "Liquid Silver metallic paint",
            "Premium audio system (18 speakers)",
            "20-inch alloy wheels",
        ),
        base_price=base.base_price,
        included_features=(catalog.enhanced_autopilot(),),
        savings=500.00,
    )
    return base.with_signature(bundle)


def trail_titan() -> Vehicle:
    base = create_level2(Trim.OFFROAD, Color.BLACK)
    bundle = SignatureBundle(
        signature_id=TRAIL_TITAN_ID,
        name="Trail Titan",
        description=(
            "Dominate any terrain with confidence. Combines rugged off-road capability "
            "with worry-free maintenance coverage for epic adventures."
        ),
        target_customer=(
            "Perfect for: outdoor adventurers, large families who camp, anyone who "
            "needs seven seats and real off-road capability"
        ),
        highlights=(
            "Level 2 Off-Road trim (670 hp, 450 miles range)",
            "Obsidian Black paint",
            "Lifted air suspension (+2 inches ground clearance)",
            "Off-road drive modes (Rock, Sand, Mud)",
        ),
        base_price=base.base_price,
        included_features=(catalog.premium_maintenance_5_year(),),
        savings=1000.00,
    )
    return base.with_signature(bundle)


def track_beast() -> Vehicle:
    base = create_level3(Trim.ULTRA, Color.GREEN)
    bundle = SignatureBundle(
        signature_id=TRACK_BEAST_ID,
        name="Track Beast",
        description=(
            "Unleash pure performance on the track. 1,600 hp of fury with "
            "professional-grade track equipment for the ultimate driving experience."
        ),
        target_customer=(
            "Perfect for: track day enthusiasts, speed lovers, drivers who demand the "
            "absolute pinnacle of acceleration and handling"
        ),
        highlights=(
            "Level 3 Ultra trim (1,600 hp, 350 miles range)",
            "Racing Green exclusive paint",
            "Full carbon fiber exterior package",
            "0-60 mph in 1.8 seconds, 224 mph top speed",
        ),
        base_price=base.base_price,
        included_features=(catalog.track_package(),),
        savings=2000.00,
    )
    return base.with_signature(bundle)


def executive() -> Vehicle:
    base = create_level4(Color.BLACK)
    bundle = SignatureBundle(
        signature_id=EXECUTIVE_ID,
        name="Executive",
        description=(
            "The pinnacle of automotive luxury. Every conceivable comfort and "
            "technology, with comprehensive coverage for the most discerning executives."
        ),
        target_customer=(
            "Perfect for: executives, chauffeur-driven owners, anyone who expects "
            "the very best in comfort and coverage"
        ),
        highlights=(
            "Level 4 Flagship (1,180 hp, 620 miles range)",
            "Obsidian Black exclusive paint",
            "18-point executive massage seats",
            "Comprehensive coverage to 8 years / 100,000 miles",
        ),
        base_price=base.base_price,
        included_features=(
            catalog.massage_seats(for_level4=True),
            catalog.extended_warranty_8_year(),
        ),
        savings=2000.00,
    )
    return base.with_signature(bundle)


SIGNATURE_PRESETS: dict[str, Callable[[], Vehicle]] = {
    URBAN_COMMUTER_ID: urban_commuter,
    TRAIL_TITAN_ID: trail_titan,
    TRACK_BEAST_ID: track_beast,
    EXECUTIVE_ID: executive,
}


def all_signatures() -> list[Vehicle]:
    """Every preset, in catalog order."""
    return [build() for build in SIGNATURE_PRESETS.values()]
