"""Asymmetric error bar plots."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from plotscript.axis import _format_float
from plotscript.data import Matrix, build_matrix, to_float
from plotscript.styles import Color, LineType, PointType, Rgb


class ErrorBarStyle(Enum):
    """Kind of error bar; the value is the gnuplot style name."""

    X_ERROR_BARS = "xerrorbars"
    X_ERROR_LINES = "xerrorlines"
    Y_ERROR_BARS = "yerrorbars"
    Y_ERROR_LINES = "yerrorlines"

    @property
    def horizontal(self) -> bool:
        """Whether the bars extend along the x axis."""
        return self in (ErrorBarStyle.X_ERROR_BARS, ErrorBarStyle.X_ERROR_LINES)


class ErrorBarProperties:
    """Properties of an error bar plot; lines are solid by default."""

    def __init__(self, style: ErrorBarStyle) -> None:
        self._style = style
        self._color: Color | Rgb | None = None
        self._label: str | None = None
        self._line_type = LineType.SOLID
        self._line_width: float | None = None
        self._point_size: float | None = None
        self._point_type: PointType | None = None

    @property
    def style(self) -> ErrorBarStyle:
        return self._style

    def color(self, color: Color | Rgb) -> ErrorBarProperties:
        """Change the color of the error bars."""
        self._color = color
        return self

    def label(self, text: str) -> ErrorBarProperties:
        """Set the legend label."""
        self._label = str(text)
        return self

    def line_type(self, line_type: LineType) -> ErrorBarProperties:
        """Change the line type."""
        self._line_type = line_type
        return self

    def line_width(self, width: float) -> ErrorBarProperties:
        """Change the line width; it must be positive."""
        width = to_float(width)
        if not width > 0:
            raise ValueError("line width must be positive")
        self._line_width = width
        return self

    def point_size(self, size: float) -> ErrorBarProperties:
        """Change the size of the points; it must be positive."""
        size = to_float(size)
        if not size > 0:
            raise ValueError("point size must be positive")
        self._point_size = size
        return self

    def point_type(self, point_type: PointType) -> ErrorBarProperties:
        """Change the point type."""
        self._point_type = point_type
        return self

    def script(self) -> str:
        """Return the gnuplot code describing how to draw the error bars."""
        parts = [f"with {self._style.value}", f"lt {self._line_type.value}"]
        if self._line_width is not None:
            parts.append(f"lw {_format_float(self._line_width)}")
        if self._color is not None:
            parts.append(f"lc rgb '{self._color.value}'")
        if self._point_type is not None:
            parts.append(f"pt {self._point_type.value}")
        if self._point_size is not None:
            parts.append(f"ps {_format_float(self._point_size)}")
        parts.append(f"title '{self._label}'" if self._label is not None else "notitle")
        return " ".join(parts)


@dataclass
class ErrorBar:
    """Points ``(x, y)`` with error bars from ``low`` to ``high``.

    For horizontal styles ``low`` and ``high`` are x coordinates, otherwise
    they are y coordinates.
    """

    style: ErrorBarStyle
    x: Iterable[float]
    y: Iterable[float]
    low: Iterable[float]
    high: Iterable[float]

    def default_properties(self) -> ErrorBarProperties:
        """Return fresh properties for this plot's style."""
        return ErrorBarProperties(self.style)

    def to_matrix(self, x_factor: float, y_factor: float) -> Matrix:
        """Return the plot data scaled by the axis factors."""
        e_factor = x_factor if self.style.horizontal else y_factor
        rows = zip(self.x, self.y, self.low, self.high)
        return build_matrix(rows, (x_factor, y_factor, e_factor, e_factor))