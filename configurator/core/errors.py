"""
Errors — Configurator error taxonomy

Every error raised by the pricing core derives from ConfiguratorError, so the
HTTP collaborator can map the whole family to a 4xx response and treat
anything else as an internal failure.

Hierarchy:
    ConfiguratorError
    ├── ConfigurationError
    │   ├── InvalidTrimForLevel
    │   ├── InvalidColorForLevel
    │   ├── UnknownLevelError
    │   ├── UnknownSignatureError
    │   └── InvalidRequestError
    ├── InvalidFeatureError
    ├── FeatureIneligibleError
    ├── InvalidTermsError
    └── NullVehicleError
"""


class ConfiguratorError(Exception):
    """Base class for all domain errors."""


# =============================================================================
# CONFIGURATION
# =============================================================================


class ConfigurationError(ConfiguratorError):
    """Vehicle configuration is not legal (trim, color, level, preset)."""


class InvalidTrimForLevel(ConfigurationError):
    """Trim is not offered on the requested level."""

    def __init__(self, trim, level: int):
        self.trim = trim
        self.level = level
        super().__init__(f"Trim {trim.display_name} is not available for Level {level}")


class InvalidColorForLevel(ConfigurationError):
    """Color is not offered on the requested level."""

    def __init__(self, color, level: int):
        self.color = color
        self.level = level
        super().__init__(f"Color {color.display_name} is not available for Level {level}")


class UnknownLevelError(ConfigurationError):
    """Level outside of 1..4."""

    def __init__(self, level):
        self.level = level
        super().__init__(f"Unknown vehicle level: {level!r} (must be 1, 2, 3 or 4)")


class UnknownSignatureError(ConfigurationError):
    """Signature id does not name a preset."""

    def __init__(self, signature_id):
        self.signature_id = signature_id
        super().__init__(f"Unknown signature: {signature_id!r}")


class InvalidRequestError(ConfigurationError):
    """Configuration request does not satisfy its JSON contract."""


# =============================================================================
# FEATURES
# =============================================================================


class InvalidFeatureError(ConfiguratorError):
    """Malformed feature (empty name, negative price, bad duration)."""


class FeatureIneligibleError(ConfiguratorError):
    """Feature cannot be attached to a vehicle of this level."""

    def __init__(self, feature, vehicle):
        self.feature = feature
        self.vehicle = vehicle
        super().__init__(f"{feature.name} is not available for {vehicle.model_name}")


# =============================================================================
# ORDER / FINANCING
# =============================================================================


class InvalidTermsError(ConfiguratorError, ValueError):
    """Financing inputs out of range (non-positive term, negative amounts)."""


class NullVehicleError(ConfiguratorError):
    """Order created without a vehicle."""
