"""
Order placement from a configuration request

A request is a JSON object matching the configuration_request contract:
either a custom build (level, trim, color) or a signature id, plus optional
feature ids. Unknown feature ids are skipped; ineligible ones fail the order.
"""

import logging
from collections.abc import Callable
from datetime import datetime
from typing import Any, Dict

from configurator.catalog.lookup import build_vehicle, feature_by_id, signature_by_id
from configurator.core.contracts import ConfigurationRequestValidator
from configurator.core.domain.order import Order, OrderIdGenerator
from configurator.core.domain.vehicle import Vehicle
from configurator.core.errors import InvalidRequestError
from configurator.core.math.pricing import format_price

logger = logging.getLogger(__name__)

_REQUEST_VALIDATOR = ConfigurationRequestValidator()


def vehicle_for_request(request: Dict[str, Any]) -> Vehicle:
    """
    Build the vehicle a validated request describes.

    Raises:
        ConfigurationError: Unknown or illegal level/trim/color/signature
    """
    if "signature" in request:
        return signature_by_id(request["signature"])
    return build_vehicle(request["level"], request["trim"], request["color"])


def place_order(
    request: Dict[str, Any],
    clock: Callable[[], datetime] | None = None,
    id_generator: OrderIdGenerator | None = None,
) -> Order:
    """
    Validate a configuration request and turn it into an order.

    Args:
        request: Parsed JSON request body
        clock: Forwarded to Order
        id_generator: Forwarded to Order

    Returns:
        Order with every recognized feature added, in request order

    Raises:
        InvalidRequestError: Request does not match the contract
        ConfigurationError: Unknown or illegal vehicle configuration
        FeatureIneligibleError: A requested feature is not offered on the level

    Examples:
        >>> order = place_order({"signature": "urban-commuter"})
        >>> order.total()
        60217.5
    """
    if not isinstance(request, dict):
        raise InvalidRequestError("Request must be a JSON object")

    messages = _REQUEST_VALIDATOR.error_messages(request)
    if messages:
        raise InvalidRequestError("; ".join(messages))

    vehicle = vehicle_for_request(request)
    order = Order(vehicle, clock=clock, id_generator=id_generator)

    for feature_id in request.get("features", []):
        feature = feature_by_id(feature_id, vehicle.level)
        if feature is None:
            continue
        order.add_feature(feature)

    logger.info(
        "Placed order %s: %s, %d feature(s), total %s",
        order.order_id,
        vehicle.display_name,
        len(order.features),
        format_price(order.total()),
    )
    return order
