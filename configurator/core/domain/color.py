"""
Color — Paint colors and their level membership

Closed enumeration of the seven factory paints. Each color declares the set
of levels it may be painted on; Level 4 is offered in Obsidian Black only.
"""

from enum import Enum


class Color(str, Enum):
    """Factory paint color"""

    WHITE = "WHITE"
    BLACK = "BLACK"
    SILVER = "SILVER"
    BLUE = "BLUE"
    PURPLE = "PURPLE"
    BURGUNDY = "BURGUNDY"
    GREEN = "GREEN"

    @property
    def display_name(self) -> str:
        return _COLOR_INFO[self][0]

    @property
    def hex_code(self) -> str:
        return _COLOR_INFO[self][1]

    @property
    def levels(self) -> frozenset[int]:
        """Levels this color may be painted on."""
        return _COLOR_INFO[self][2]

    @property
    def is_performance_color(self) -> bool:
        """Level 3 exclusive paints."""
        return self.is_valid_for(3)

    def is_valid_for(self, level: int) -> bool:
        """
        Membership check for a level.

        Total over any input: unknown levels are simply not members.
        """
        return level in self.levels

    @classmethod
    def from_code(cls, value: str | None) -> "Color | None":
        """Convert a raw code ("white", " BLUE ") to a Color, None if unknown."""
        if not value:
            return None
        try:
            return cls(value.strip().upper())
        except ValueError:
            return None

    def __str__(self) -> str:
        return f"{self.display_name} ({self.hex_code})"


_LEVELS_1_2 = frozenset({1, 2})

_COLOR_INFO: dict[Color, tuple[str, str, frozenset[int]]] = {
    Color.WHITE: ("Pearl White", "#FFFFFF", _LEVELS_1_2),
    Color.BLACK: ("Obsidian Black", "#000000", frozenset({1, 2, 4})),
    Color.SILVER: ("Liquid Silver", "#C0C0C0", _LEVELS_1_2),
    Color.BLUE: ("Electric Blue", "#0066CC", _LEVELS_1_2),
    Color.PURPLE: ("Ultraviolet Purple", "#6A0DAD", frozenset({3})),
    Color.BURGUNDY: ("Deep Burgundy", "#800020", frozenset({3})),
    Color.GREEN: ("Racing Green", "#00563B", frozenset({3})),
}
