"""
Order — One vehicle plus an ordered list of selected features

Linear lifecycle: construct → zero or more add/remove → query. The feature
list is an immutable tuple rebuilt on every add/remove, so readers always get
a snapshot they cannot mutate.

Eligibility is checked when a feature is added and never re-validated.

Order ids: "YYYYMMDD-HHMMSS-NNNN". The timestamp has one-second resolution;
NNNN is a process-wide monotonic sequence so two orders created within the
same second never share an id.
"""

import itertools
import logging
import threading
from collections.abc import Callable
from datetime import datetime

from configurator.core.domain.feature import Feature
from configurator.core.domain.quote import (
    OrderQuote,
    QuotedFeature,
    QuotedFinancing,
    QuotedPricing,
    QuotedVehicle,
)
from configurator.core.domain.vehicle import Vehicle
from configurator.core.errors import FeatureIneligibleError, InvalidFeatureError, NullVehicleError
from configurator.core.math import pricing
from configurator.core.math.numerical_safeguards import round_to_cents
from configurator.core.math.pricing import FinancingTerms, format_price

logger = logging.getLogger(__name__)

ORDER_ID_TIMESTAMP_FORMAT = "%Y%m%d-%H%M%S"
ORDER_DATE_DISPLAY_FORMAT = "%B %d, %Y %H:%M:%S"


# =============================================================================
# ORDER ID GENERATOR
# =============================================================================


class OrderIdGenerator:
    """Timestamp-plus-sequence order ids."""

    def __init__(self, start: int = 1):
        self._sequence = itertools.count(start)
        self._lock = threading.Lock()

    def next_id(self, moment: datetime) -> str:
        with self._lock:
            sequence = next(self._sequence)
        return f"{moment.strftime(ORDER_ID_TIMESTAMP_FORMAT)}-{sequence:04d}"


# Shared by every order that does not bring its own generator
DEFAULT_ORDER_ID_GENERATOR = OrderIdGenerator()


# =============================================================================
# ORDER
# =============================================================================


class Order:
    """
    Customer order.

    Args:
        vehicle: The configured vehicle (plain or signature)
        clock: Returns the creation time (default: datetime.now)
        id_generator: Source of order ids (default: process-wide generator)

    Raises:
        NullVehicleError: If vehicle is None
    """

    def __init__(
        self,
        vehicle: Vehicle,
        clock: Callable[[], datetime] | None = None,
        id_generator: OrderIdGenerator | None = None,
    ):
        if vehicle is None:
            raise NullVehicleError("Vehicle cannot be None")

        self._vehicle = vehicle
        self._features: tuple[Feature, ...] = ()
        self._created_at = (clock or datetime.now)()
        self._order_id = (id_generator or DEFAULT_ORDER_ID_GENERATOR).next_id(self._created_at)

        logger.debug("Created order %s for %s", self._order_id, vehicle.display_name)

    # -------------------------------------------------------------------------
    # Read surface
    # -------------------------------------------------------------------------

    @property
    def order_id(self) -> str:
        return self._order_id

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def formatted_created_at(self) -> str:
        """e.g. 'October 17, 2026 14:25:30'"""
        return self._created_at.strftime(ORDER_DATE_DISPLAY_FORMAT)

    @property
    def vehicle(self) -> Vehicle:
        return self._vehicle

    @property
    def features(self) -> tuple[Feature, ...]:
        """Snapshot of the selected features, in insertion order."""
        return self._features

    # -------------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------------

    def add_feature(self, feature: Feature) -> None:
        """
        Append a feature (duplicates allowed).

        Raises:
            InvalidFeatureError: If feature is None
            FeatureIneligibleError: If the feature is not offered on the
                vehicle's level
        """
        if feature is None:
            raise InvalidFeatureError("Feature cannot be None")
        if not feature.is_eligible_for(self._vehicle.level):
            raise FeatureIneligibleError(feature, self._vehicle)

        self._features = self._features + (feature,)
        logger.debug("Order %s: added %s", self._order_id, feature.name)

    def remove_feature(self, feature: Feature) -> None:
        """Remove the first feature matching (kind, name, price); no-op if absent."""
        if feature is None:
            return
        for index, selected in enumerate(self._features):
            if selected.identity() == feature.identity():
                self._features = self._features[:index] + self._features[index + 1 :]
                logger.debug("Order %s: removed %s", self._order_id, feature.name)
                return

    # -------------------------------------------------------------------------
    # Pricing
    # -------------------------------------------------------------------------

    def features_total(self) -> float:
        return pricing.features_total(self._features)

    def subtotal(self) -> float:
        """Vehicle price (per its pricing strategy) plus all features."""
        return pricing.subtotal(self._vehicle, self._features)

    def tax(self) -> float:
        return pricing.tax(self.subtotal())

    def total(self) -> float:
        return self.subtotal() + self.tax()

    def monthly_payment(
        self,
        months: int = pricing.DEFAULT_LOAN_TERM_MONTHS,
        down_payment: float = pricing.DEFAULT_DOWN_PAYMENT_USD,
        apr_percent: float = pricing.DEFAULT_APR_PERCENT,
    ) -> float:
        """
        Estimated monthly payment for financing the total.

        Raises:
            InvalidTermsError: months <= 0, down_payment < 0 or apr_percent < 0
        """
        return pricing.monthly_payment(self.total(), months, down_payment, apr_percent)

    def total_interest(
        self,
        months: int = pricing.DEFAULT_LOAN_TERM_MONTHS,
        down_payment: float = pricing.DEFAULT_DOWN_PAYMENT_USD,
        apr_percent: float = pricing.DEFAULT_APR_PERCENT,
    ) -> float:
        return pricing.total_interest(self.total(), months, down_payment, apr_percent)

    # -------------------------------------------------------------------------
    # Reporting
    # -------------------------------------------------------------------------

    def quote(self, terms: FinancingTerms | None = None) -> OrderQuote:
        """
        Snapshot of every price field, rounded to cents.

        Raises:
            InvalidTermsError: If terms are invalid
        """
        terms = (terms or FinancingTerms()).validate()
        vehicle = self._vehicle
        signature = vehicle.signature
        total = self.total()

        return OrderQuote(
            order_id=self._order_id,
            created_at=self._created_at,
            vehicle=QuotedVehicle(
                model=vehicle.model_name,
                level=vehicle.level,
                trim=vehicle.trim.display_name,
                color=vehicle.color.display_name,
                is_signature=vehicle.is_signature,
                signature_id=signature.signature_id if signature else None,
                signature_name=signature.name if signature else None,
            ),
            features=tuple(
                QuotedFeature(
                    kind=feature.kind,
                    name=feature.name,
                    category=feature.category,
                    price=round_to_cents(feature.price),
                )
                for feature in self._features
            ),
            pricing=QuotedPricing(
                vehicle_price=round_to_cents(vehicle.calculate_price()),
                features_total=round_to_cents(self.features_total()),
                subtotal=round_to_cents(self.subtotal()),
                tax_rate_percent=pricing.tax_rate_percentage(),
                tax=round_to_cents(self.tax()),
                total=round_to_cents(total),
                regular_price=round_to_cents(signature.regular_price) if signature else None,
                savings=round_to_cents(signature.savings) if signature else None,
            ),
            financing=QuotedFinancing(
                months=terms.months,
                down_payment=terms.down_payment_usd,
                apr_percent=terms.apr_percent,
                loan_amount=round_to_cents(max(total - terms.down_payment_usd, 0.0)),
                monthly_payment=round_to_cents(
                    self.monthly_payment(terms.months, terms.down_payment_usd, terms.apr_percent)
                ),
                total_interest=round_to_cents(
                    max(
                        self.total_interest(
                            terms.months, terms.down_payment_usd, terms.apr_percent
                        ),
                        0.0,
                    )
                ),
            ),
        )

    def summary(self) -> str:
        """Plain-text order summary."""
        lines = [
            f"Order ID: {self._order_id}",
            f"Date: {self.formatted_created_at}",
            "",
            f"Vehicle: {self._vehicle}",
            f"Base Price: {format_price(self._vehicle.calculate_price())}",
            "",
        ]
        if self._features:
            lines.append("Added Features:")
            lines.extend(
                f"  - {feature.name}: {format_price(feature.price)}" for feature in self._features
            )
            lines.append("")
        lines.append(f"Subtotal: {format_price(self.subtotal())}")
        lines.append(f"Tax ({pricing.tax_rate_percentage():g}%): {format_price(self.tax())}")
        lines.append(f"Total: {format_price(self.total())}")
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return f"Order {self._order_id} - {self._vehicle.model_name} - {format_price(self.total())}"

    def __repr__(self) -> str:
        return (
            f"Order(order_id={self._order_id!r}, vehicle={self._vehicle.display_name!r}, "
            f"features={len(self._features)})"
        )
