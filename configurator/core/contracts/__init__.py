"""
Contract Validation Module

Validation of the configurator's JSON contracts.
"""

from .validators import (
    ConfigurationRequestValidator,
    ContractValidator,
    OrderQuoteValidator,
    SchemaLoader,
    validate_configuration_request,
    validate_order_quote,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ConfigurationRequestValidator",
    "OrderQuoteValidator",
    # Functions
    "validate_configuration_request",
    "validate_order_quote",
]
