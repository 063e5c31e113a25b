"""
Trim — Configuration tiers and their level membership

STANDARD and PREMIUM are shared by Level 1 and Level 2; every other trim
belongs to exactly one level.
"""

from enum import Enum


class Trim(str, Enum):
    """Trim level"""

    STANDARD = "STANDARD"
    PREMIUM = "PREMIUM"
    PERFORMANCE = "PERFORMANCE"
    OFFROAD = "OFFROAD"
    PRO = "PRO"
    MAX = "MAX"
    ULTRA = "ULTRA"
    FLAGSHIP = "FLAGSHIP"

    @property
    def display_name(self) -> str:
        return _TRIM_INFO[self][0]

    @property
    def description(self) -> str:
        return _TRIM_INFO[self][1]

    @property
    def levels(self) -> frozenset[int]:
        """Levels this trim is offered on."""
        return _TRIM_INFO[self][2]

    def is_valid_for(self, level: int) -> bool:
        """Membership check for a level (False for unknown levels)."""
        return level in self.levels

    @classmethod
    def from_code(cls, value: str | None) -> "Trim | None":
        """
        Convert a code or display name to a Trim.

        Accepts "PREMIUM", "premium", "Off-Road", "off road", "offroad".
        Returns None if the value names no trim.
        """
        if not value:
            return None
        normalized = value.strip().upper().replace("-", "").replace(" ", "").replace("_", "")
        try:
            return cls(normalized)
        except ValueError:
            return None

    def __str__(self) -> str:
        return f"{self.display_name} ({self.name})"


_TRIM_INFO: dict[Trim, tuple[str, str, frozenset[int]]] = {
    Trim.STANDARD: (
        "Standard",
        "Essential features with impressive performance",
        frozenset({1, 2}),
    ),
    Trim.PREMIUM: ("Premium", "Enhanced luxury and premium materials", frozenset({1, 2})),
    Trim.PERFORMANCE: (
        "Performance",
        "Sport-tuned with enhanced power and handling",
        frozenset({1}),
    ),
    Trim.OFFROAD: ("Off-Road", "Rugged capability for adventure enthusiasts", frozenset({2})),
    Trim.PRO: ("Pro", "Professional-grade performance for driving purists", frozenset({3})),
    Trim.MAX: ("Max", "Maximum luxury meets blistering performance", frozenset({3})),
    Trim.ULTRA: ("Ultra", "Ultimate expression of speed and technology", frozenset({3})),
    Trim.FLAGSHIP: ("Flagship", "The pinnacle of luxury and innovation", frozenset({4})),
}
