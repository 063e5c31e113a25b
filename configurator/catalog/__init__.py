"""
Catalog Module

String-id lookups and order placement for the HTTP collaborator.
"""

from .lookup import (
    FEATURE_FACTORIES,
    FEATURE_ID_ALIASES,
    available_colors,
    available_features,
    available_trims,
    build_vehicle,
    feature_by_id,
    parse_color,
    parse_level,
    parse_trim,
    signature_by_id,
)
from .ordering import place_order, vehicle_for_request

__all__ = [
    # Tables
    "FEATURE_FACTORIES",
    "FEATURE_ID_ALIASES",
    # Lookups
    "parse_level",
    "parse_trim",
    "parse_color",
    "build_vehicle",
    "signature_by_id",
    "feature_by_id",
    # Listings
    "available_trims",
    "available_colors",
    "available_features",
    # Orders
    "place_order",
    "vehicle_for_request",
]
