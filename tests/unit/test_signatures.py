"""
Tests for the signature presets and SignatureBundle

Checks:
1. Literal prices: regular, savings, signature
2. price identities (regular = base + included, signature = regular - savings)
3. Preset vehicles keep the full Vehicle contract
4. Bundle validation
"""

import pytest
from pydantic import ValidationError

from configurator.core.domain import (
    SIGNATURE_PRESETS,
    Color,
    PricingKind,
    SignatureBundle,
    Trim,
    all_signatures,
    create_level1,
    enhanced_autopilot,
    executive,
    track_beast,
    trail_titan,
    urban_commuter,
)


# =============================================================================
# PRESET PRICES
# =============================================================================


class TestSignaturePrices:
    """Literal price table of the four presets"""

    @pytest.mark.parametrize(
        "build,level,trim,color,regular,savings,signature",
        [
            (urban_commuter, 1, Trim.PREMIUM, Color.SILVER, 56000, 500, 55500),
            (trail_titan, 2, Trim.OFFROAD, Color.BLACK, 98500, 1000, 97500),
            (track_beast, 3, Trim.ULTRA, Color.GREEN, 145000, 2000, 143000),
            (executive, 4, Trim.FLAGSHIP, Color.BLACK, 195000, 2000, 193000),
        ],
    )
    def test_preset(self, build, level, trim, color, regular, savings, signature):
        vehicle = build()

        assert vehicle.level == level
        assert vehicle.trim == trim
        assert vehicle.color == color
        assert vehicle.is_signature
        assert vehicle.pricing.kind == PricingKind.FIXED_BUNDLE
        assert vehicle.regular_price == pytest.approx(regular)
        assert vehicle.savings == pytest.approx(savings)
        assert vehicle.calculate_price() == pytest.approx(signature)

    @pytest.mark.parametrize("build", list(SIGNATURE_PRESETS.values()))
    def test_price_identities(self, build):
        vehicle = build()
        bundle = vehicle.signature
        included = sum(feature.price for feature in bundle.included_features)

        assert bundle.base_price == vehicle.base_price
        assert bundle.regular_price == pytest.approx(vehicle.base_price + included)
        assert bundle.signature_price == pytest.approx(bundle.regular_price - bundle.savings)
        assert bundle.savings > 0
        assert vehicle.calculate_price() < bundle.regular_price

    def test_executive_includes_level4_massage_and_warranty(self):
        names_and_prices = [
            (feature.name, feature.price) for feature in executive().signature.included_features
        ]
        assert names_and_prices == [
            ("Massage Seats (Front & Rear)", 5000),
            ("Extended Warranty - 8 Years", 5000),
        ]


# =============================================================================
# PRESET CATALOG
# =============================================================================


class TestSignatureCatalog:
    """Tests for SIGNATURE_PRESETS and all_signatures"""

    def test_ids(self):
        assert list(SIGNATURE_PRESETS) == [
            "urban-commuter",
            "trail-titan",
            "track-beast",
            "executive",
        ]

    def test_all_signatures_order(self):
        names = [vehicle.signature.name for vehicle in all_signatures()]
        assert names == ["Urban Commuter", "Trail Titan", "Track Beast", "Executive"]

    def test_ids_match_bundles(self):
        for signature_id, build in SIGNATURE_PRESETS.items():
            assert build().signature.signature_id == signature_id

    def test_presets_are_independent_values(self):
        assert urban_commuter() == urban_commuter()
        assert urban_commuter() is not urban_commuter()

    def test_str_and_specifications(self):
        vehicle = urban_commuter()
        assert str(vehicle) == "Raion Urban Commuter Signature - $55,500.00 (Save $500.00)"
        text = vehicle.specifications()
        assert "=== Urban Commuter Signature ===" in text
        assert "Regular Price: $56,000.00" in text
        assert "You Save: $500.00" in text

    def test_included_features_text(self):
        text = trail_titan().signature.included_features_text()
        assert text.startswith("INCLUDED IN TRAIL TITAN SIGNATURE:")
        assert "- Premium Maintenance Package - 5 Years ($3,500 value)" in text


# =============================================================================
# BUNDLE VALIDATION
# =============================================================================


class TestSignatureBundle:
    """Tests for SignatureBundle validation"""

    def _bundle(self, **overrides) -> SignatureBundle:
        fields = dict(
            signature_id="test",
            name="Test",
            base_price=50000.0,
            included_features=(enhanced_autopilot(),),
            savings=500.0,
        )
        fields.update(overrides)
        return SignatureBundle(**fields)

    def test_savings_must_be_positive(self):
        with pytest.raises(ValidationError):
            self._bundle(savings=0.0)

    def test_savings_below_regular_price(self):
        with pytest.raises(ValidationError):
            self._bundle(savings=56000.0)

    def test_base_price_must_be_finite(self):
        with pytest.raises(ValidationError):
            self._bundle(base_price=float("inf"))

    def test_with_signature_rejects_mismatched_base_price(self):
        base = create_level1(Trim.PREMIUM, Color.SILVER)
        with pytest.raises(ValidationError):
            base.with_signature(self._bundle(base_price=45000.0))

    def test_with_signature_keeps_specs(self):
        base = create_level1(Trim.PREMIUM, Color.SILVER)
        vehicle = base.with_signature(self._bundle())
        assert vehicle.power_hp == base.power_hp
        assert vehicle.calculate_price() == pytest.approx(55500.0)
        assert base.calculate_price() == 50000.0
