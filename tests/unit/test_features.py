"""
Tests for Feature and the feature catalog

Checks:
1. Catalog factories (names, prices, categories, restrictions)
2. Eligibility predicate
3. Structural equality and hashing
4. Validation through Feature.create and the kind constructors
5. Immutability (frozen=True)
"""

import pytest
from pydantic import ValidationError

from configurator.core.domain import (
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
from configurator.core.errors import InvalidFeatureError


# =============================================================================
# CATALOG
# =============================================================================


class TestFeatureCatalog:
    """Tests for the canonical catalog entries"""

    @pytest.mark.parametrize(
        "factory,kind,name,price,category",
        [
            (enhanced_autopilot, FeatureKind.OPTION, "Enhanced Autopilot", 6000, "Autopilot"),
            (full_self_driving, FeatureKind.OPTION, "Full Self-Driving Capability", 8000, "Autopilot"),
            (custom_paint, FeatureKind.OPTION, "Custom Paint Color", 2000, "Exterior"),
            (track_package, FeatureKind.OPTION, "Track Package", 10000, "Performance"),
            (basic_warranty, FeatureKind.SERVICE_PACKAGE, "Basic Warranty", 0, "Service Package"),
            (
                extended_warranty_8_year,
                FeatureKind.SERVICE_PACKAGE,
                "Extended Warranty - 8 Years",
                5000,
                "Service Package",
            ),
            (
                premium_maintenance_5_year,
                FeatureKind.SERVICE_PACKAGE,
                "Premium Maintenance Package - 5 Years",
                3500,
                "Service Package",
            ),
            (
                roadside_assistance,
                FeatureKind.SERVICE_PACKAGE,
                "Premium Roadside Assistance",
                500,
                "Service Package",
            ),
            (premium_floor_mats, FeatureKind.ACCESSORY, "Premium Floor Mats", 400, "Accessory"),
            (home_charger, FeatureKind.ACCESSORY, "Home EV Charger (Level 2, 240V)", 800, "Accessory"),
            (
                paint_protection_film,
                FeatureKind.ACCESSORY,
                "Paint Protection Film (Full Front)",
                2000,
                "Accessory",
            ),
            (ceramic_coating, FeatureKind.ACCESSORY, "Ceramic Coating (Full Vehicle)", 1500, "Accessory"),
        ],
    )
    def test_factory_fields(self, factory, kind, name, price, category):
        feature = factory()
        assert feature.kind == kind
        assert feature.name == name
        assert feature.price == price
        assert feature.category == category
        assert feature.description

    def test_massage_seat_variants(self):
        standard = massage_seats()
        executive = massage_seats(for_level4=True)

        assert standard.price == 3000
        assert standard.restricted_to_level is None
        assert executive.price == 5000
        assert executive.restricted_to_level == 4
        assert standard.name == executive.name
        assert standard != executive

    def test_service_package_durations(self):
        assert basic_warranty().duration_years == 4
        assert extended_warranty_8_year().duration_years == 8
        assert premium_maintenance_5_year().duration_years == 5
        assert roadside_assistance().duration_years == 1
        assert roadside_assistance().is_recurring
        assert not extended_warranty_8_year().is_recurring

    def test_installed_accessories(self):
        assert paint_protection_film().is_installed
        assert ceramic_coating().is_installed
        assert not home_charger().is_installed

    def test_str(self):
        assert str(enhanced_autopilot()) == "Enhanced Autopilot - $6,000.00"
        assert str(roadside_assistance()) == "Premium Roadside Assistance - $500.00/year (1 years)"
        assert str(ceramic_coating()) == "Ceramic Coating (Full Vehicle) - $1,500.00 (Installed)"


# =============================================================================
# ELIGIBILITY
# =============================================================================


class TestEligibility:
    """Tests for is_eligible_for"""

    @pytest.mark.parametrize("level", [1, 2, 3, 4])
    def test_unrestricted_features_fit_every_level(self, level):
        for factory in (enhanced_autopilot, full_self_driving, custom_paint, home_charger):
            assert factory().is_eligible_for(level)

    @pytest.mark.parametrize("level,expected", [(1, False), (2, False), (3, True), (4, False)])
    def test_track_package_is_level3_only(self, level, expected):
        assert track_package().is_eligible_for(level) is expected

    @pytest.mark.parametrize("level,expected", [(1, False), (2, False), (3, False), (4, True)])
    def test_level4_massage_is_level4_only(self, level, expected):
        assert massage_seats(for_level4=True).is_eligible_for(level) is expected


# =============================================================================
# IDENTITY
# =============================================================================


class TestFeatureIdentity:
    """Tests for structural equality"""

    def test_factories_produce_equal_features(self):
        assert enhanced_autopilot() == enhanced_autopilot()
        assert hash(enhanced_autopilot()) == hash(enhanced_autopilot())

    def test_description_does_not_affect_equality(self):
        a = option("Widget", 100.0, "first", "Misc")
        b = option("Widget", 100.0, "second", "Other")
        assert a == b
        assert len({a, b}) == 1

    def test_price_and_kind_affect_equality(self):
        assert option("Widget", 100.0, "", "Misc") != option("Widget", 101.0, "", "Misc")
        assert option("Widget", 100.0, "", "Misc") != accessory("Widget", 100.0, "")

    def test_not_equal_to_other_types(self):
        assert enhanced_autopilot() != "Enhanced Autopilot"


# =============================================================================
# VALIDATION
# =============================================================================


class TestFeatureValidation:
    """Tests for malformed features"""

    def test_empty_name_rejected(self):
        with pytest.raises(InvalidFeatureError):
            option("", 100.0, "", "Misc")

    def test_blank_name_rejected(self):
        with pytest.raises(InvalidFeatureError):
            accessory("   ", 100.0, "")

    def test_negative_price_rejected(self):
        with pytest.raises(InvalidFeatureError):
            option("Widget", -1.0, "", "Misc")

    @pytest.mark.parametrize("price", [float("inf"), float("nan")])
    def test_non_finite_price_rejected(self, price):
        with pytest.raises(InvalidFeatureError):
            Feature.create(kind=FeatureKind.OPTION, name="Widget", price=price, category="Misc")

    def test_zero_price_allowed(self):
        assert accessory("Sticker", 0.0, "").price == 0.0

    def test_service_package_duration_must_be_positive(self):
        with pytest.raises(InvalidFeatureError):
            service_package("Coverage", 100.0, "", 0)

    def test_service_package_requires_duration(self):
        with pytest.raises(InvalidFeatureError):
            Feature.create(
                kind=FeatureKind.SERVICE_PACKAGE,
                name="Coverage",
                price=100.0,
                category="Service Package",
            )

    def test_restriction_out_of_range(self):
        with pytest.raises(InvalidFeatureError):
            option("Widget", 1.0, "", "Misc", restricted_to_level=5)

    def test_direct_construction_raises_validation_error(self):
        with pytest.raises(ValidationError):
            Feature(kind=FeatureKind.OPTION, name="", price=1.0, category="Misc")

    def test_immutable(self):
        feature = enhanced_autopilot()
        with pytest.raises(ValidationError):
            feature.price = 1.0  # type: ignore[misc]
