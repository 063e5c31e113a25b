"""
Environmental — CO2 offset, charging and running-cost estimates

Pure functions over a vehicle's battery and range figures, used by reporting
collaborators (receipts, spec sheets). The CO2 estimate compares against an
average gasoline car and is the same for every level.
"""

from typing import TYPE_CHECKING, Final

from configurator.core.math.numerical_safeguards import safe_divide

if TYPE_CHECKING:
    from configurator.core.domain.vehicle import Vehicle

# =============================================================================
# PARAMETERS
# =============================================================================

# Average gasoline car emissions (metric tons CO2 per year)
GAS_CAR_CO2_TONS_PER_YEAR: Final[float] = 4.6

# Trees needed to absorb one ton of CO2
TREES_PER_TON: Final[int] = 50

ANNUAL_MILES: Final[int] = 12000
OWNERSHIP_YEARS: Final[int] = 5

# Energy prices
ELECTRICITY_USD_PER_KWH: Final[float] = 0.13
GAS_USD_PER_GALLON: Final[float] = 3.50
GAS_CAR_MPG: Final[float] = 25.0

# Charging
HOME_CHARGER_KW: Final[float] = 11.0
DC_FAST_CHARGER_KW: Final[float] = 350.0
DC_FAST_CHARGE_TARGET: Final[float] = 0.8  # charge to 80%


def _require_vehicle(vehicle: "Vehicle | None") -> "Vehicle":
    if vehicle is None:
        raise ValueError("Vehicle cannot be None")
    return vehicle


# =============================================================================
# CO2
# =============================================================================


def co2_saved_tons(vehicle: "Vehicle") -> float:
    """CO2 avoided over the ownership period versus a gas car (metric tons)."""
    _require_vehicle(vehicle)
    return GAS_CAR_CO2_TONS_PER_YEAR * OWNERSHIP_YEARS


def trees_equivalent(co2_tons: float) -> int:
    """
    Number of trees absorbing the same CO2.

    Examples:
        >>> trees_equivalent(23.0)
        1150
        >>> trees_equivalent(-1.0)
        0
    """
    if co2_tons < 0:
        return 0
    return int(round(co2_tons * TREES_PER_TON))


def impact_summary(vehicle: "Vehicle") -> str:
    co2 = co2_saved_tons(vehicle)
    trees = trees_equivalent(co2)
    return (
        f"Over {OWNERSHIP_YEARS} years, you'll save approximately {co2:.0f} tons of CO2 "
        f"(equivalent to planting {trees:,} trees) compared to a gas vehicle."
    )


# =============================================================================
# CHARGING
# =============================================================================


def home_charging_hours(battery_capacity_kwh: float) -> float:
    """Full charge on an 11 kW home charger."""
    return battery_capacity_kwh / HOME_CHARGER_KW


def fast_charging_minutes(battery_capacity_kwh: float) -> float:
    """DC fast charge to 80% on a 350 kW charger."""
    return battery_capacity_kwh * DC_FAST_CHARGE_TARGET / DC_FAST_CHARGER_KW * 60


def charging_summary(vehicle: "Vehicle") -> str:
    _require_vehicle(vehicle)
    return (
        f"Charging: {vehicle.home_charging_hours:.1f} hours (home) / "
        f"{vehicle.fast_charging_minutes:.0f} minutes (DC fast charge to 80%)"
    )


# =============================================================================
# RUNNING COSTS
# =============================================================================


def annual_electricity_cost(vehicle: "Vehicle") -> float:
    """Yearly charging cost at ANNUAL_MILES."""
    _require_vehicle(vehicle)
    miles_per_kwh = safe_divide(vehicle.range_miles, vehicle.battery_capacity_kwh)
    kwh_per_year = safe_divide(ANNUAL_MILES, miles_per_kwh)
    return kwh_per_year * ELECTRICITY_USD_PER_KWH


def annual_gas_cost() -> float:
    """Yearly fuel cost of the comparison gas car."""
    return ANNUAL_MILES / GAS_CAR_MPG * GAS_USD_PER_GALLON


def fuel_savings(vehicle: "Vehicle") -> float:
    """Gas minus electricity cost over the ownership period."""
    electric = annual_electricity_cost(vehicle) * OWNERSHIP_YEARS
    gas = annual_gas_cost() * OWNERSHIP_YEARS
    return gas - electric
