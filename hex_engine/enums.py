"""
Enum definitions for Hex engine semantic types.

This module is the single source of truth for cell colors. Other modules
should import these Enums rather than duplicating constants.
"""

from enum import Enum


class StrictEnum(Enum):
    """Base class for enums that prevent cross-type comparisons."""
    def __eq__(self, other):
        if not isinstance(other, self.__class__):
            raise TypeError(f"Cannot compare {self.__class__.__name__} with {type(other).__name__}")
        return super().__eq__(other)

    def __hash__(self):
        """Make enums hashable so they can be used as dictionary keys."""
        return hash(self.value)


class Color(StrictEnum):
    """
    Cell colors. Integer values are what the board stores.

    BLUE connects the left and right board edges (columns 0 and N-1),
    RED connects the top and bottom edges (rows 0 and N-1).
    """
    EMPTY = 0
    BLUE = 1
    RED = 2


# ============================================================================
# Helper Functions for Enum-Primitive Conversion
# ============================================================================

def int_to_color(value: int) -> Color:
    """Convert a stored cell value to Color enum."""
    if value not in (Color.EMPTY.value, Color.BLUE.value, Color.RED.value):
        raise ValueError(f"Invalid cell value: {value}")
    return Color(value)


def opponent_of(color: Color) -> Color:
    """Return the other playing color."""
    if color is Color.BLUE:
        return Color.RED
    if color is Color.RED:
        return Color.BLUE
    raise ValueError(f"{color} has no opponent")


def get_color_display_symbol(color: Color) -> str:
    """Get the display symbol for a cell color."""
    symbols = {
        Color.EMPTY: ".",
        Color.BLUE: "B",
        Color.RED: "R"
    }
    return symbols[color]
