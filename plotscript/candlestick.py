"""Candlestick plots: a box with a whisker above and below."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from plotscript.axis import _format_float
from plotscript.data import Matrix, build_matrix, to_float
from plotscript.styles import Color, LineType, Rgb


class CandlestickProperties:
    """Properties of a candlestick plot; lines are solid by default."""

    def __init__(self) -> None:
        self._color: Color | Rgb | None = None
        self._label: str | None = None
        self._line_type = LineType.SOLID
        self._line_width: float | None = None

    def color(self, color: Color | Rgb) -> CandlestickProperties:
        """Set the line color."""
        self._color = color
        return self

    def label(self, text: str) -> CandlestickProperties:
        """Set the legend label."""
        self._label = str(text)
        return self

    def line_type(self, line_type: LineType) -> CandlestickProperties:
        """Change the line type."""
        self._line_type = line_type
        return self

    def line_width(self, width: float) -> CandlestickProperties:
        """Change the width of the line; it must be positive."""
        width = to_float(width)
        if not width > 0:
            raise ValueError("line width must be positive")
        self._line_width = width
        return self

    def script(self) -> str:
        """Return the gnuplot code describing how to draw the candlesticks."""
        parts = ["with candlesticks", f"lt {self._line_type.value}"]
        if self._line_width is not None:
            parts.append(f"lw {_format_float(self._line_width)}")
        if self._color is not None:
            parts.append(f"lc rgb '{self._color.value}'")
        parts.append(f"title '{self._label}'" if self._label is not None else "notitle")
        return " ".join(parts)


@dataclass
class Candlesticks:
    """Candlesticks at ``x``, each a box from ``box_min`` to ``box_high``
    with whiskers reaching ``whisker_min`` and ``whisker_high``."""

    x: Iterable[float]
    whisker_min: Iterable[float]
    box_min: Iterable[float]
    box_high: Iterable[float]
    whisker_high: Iterable[float]

    def default_properties(self) -> CandlestickProperties:
        """Return fresh properties for this plot."""
        return CandlestickProperties()

    def to_matrix(self, x_factor: float, y_factor: float) -> Matrix:
        """Return the plot data, in gnuplot's column order, scaled by the axis factors."""
        rows = zip(self.x, self.box_min, self.whisker_min, self.whisker_high, self.box_high)
        return build_matrix(rows, (x_factor, y_factor, y_factor, y_factor, y_factor))