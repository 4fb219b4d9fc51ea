"""Enumerations of the gnuplot settings a figure can use.

Every member's ``value`` is the gnuplot code it stands for.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Axis(Enum):
    """A coordinate axis, in the order gnuplot settings are emitted."""

    BOTTOM_X = "x"
    LEFT_Y = "y"
    RIGHT_Y = "y2"
    TOP_X = "x2"


class Axes(Enum):
    """A pair of axes that defines a coordinate system."""

    BOTTOM_X_LEFT_Y = "x1y1"
    BOTTOM_X_RIGHT_Y = "x1y2"
    TOP_X_LEFT_Y = "x2y1"
    TOP_X_RIGHT_Y = "x2y2"


class Color(Enum):
    """A named color."""

    BLACK = "black"
    BLUE = "blue"
    CYAN = "cyan"
    DARK_VIOLET = "dark-violet"
    FOREST_GREEN = "forest-green"
    GOLD = "gold"
    GRAY = "gray"
    GREEN = "green"
    MAGENTA = "magenta"
    RED = "red"
    WHITE = "white"
    YELLOW = "yellow"


@dataclass(frozen=True)
class Rgb:
    """A custom color given by its red, green and blue components (0-255)."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for component in (self.r, self.g, self.b):
            if isinstance(component, bool) or not isinstance(component, int):
                raise TypeError("color components must be integers")
            if not 0 <= component <= 255:
                raise ValueError("color components must be in the range 0..255")

    @property
    def value(self) -> str:
        """The color as gnuplot code, like the ``value`` of a named color."""
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    def display(self) -> str:
        """Return the color as a ``#rrggbb`` string."""
        return self.value


class Grid(Enum):
    """Major or minor gridlines, in emission order."""

    MAJOR = ""
    MINOR = "m"


class LineType(Enum):
    """Line dash pattern."""

    DASH = "2"
    DOT = "3"
    DOT_DASH = "4"
    DOT_DOT_DASH = "5"
    SMALL_DOT = "0"
    SOLID = "1"


class PointType(Enum):
    """Marker drawn at each data point."""

    CIRCLE = "6"
    FILLED_CIRCLE = "7"
    FILLED_SQUARE = "5"
    FILLED_TRIANGLE = "9"
    PLUS = "1"
    SQUARE = "4"
    STAR = "3"
    TRIANGLE = "8"
    X = "2"


class Scale(Enum):
    """Axis scale."""

    LINEAR = "linear"
    LOGARITHMIC = "logarithmic"


class Terminal(Enum):
    """Output terminal."""

    SVG = "svg dynamic"


class Horizontal(Enum):
    """Horizontal position of the key."""

    CENTER = "center"
    LEFT = "left"
    RIGHT = "right"


class Vertical(Enum):
    """Vertical position of the key."""

    BOTTOM = "bottom"
    CENTER = "center"
    TOP = "top"


class Justification(Enum):
    """Text justification of the key entries."""

    LEFT = "Left"
    RIGHT = "Right"


class Order(Enum):
    """Order of sample and text in each key entry."""

    SAMPLE_TEXT = "reverse"
    TEXT_SAMPLE = "noreverse"


class Stacked(Enum):
    """How the entries of the key are stacked."""

    HORIZONTALLY = "horizontal"
    VERTICALLY = "vertical"


class Boxed(Enum):
    """Whether the key is surrounded by a box."""

    NO = "no"
    YES = "yes"