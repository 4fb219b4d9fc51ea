"""Simple curve-like plots: dots, impulses, lines, points and steps."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from plotscript.axis import _format_float
from plotscript.data import Matrix, build_matrix, to_float
from plotscript.styles import Axes, Color, LineType, PointType, Rgb


class CurveStyle(Enum):
    """How a curve is drawn; the value is the gnuplot style name."""

    DOTS = "dots"
    IMPULSES = "impulses"
    LINES = "lines"
    LINES_POINTS = "linespoints"
    POINTS = "points"
    STEPS = "steps"


class CurveProperties:
    """Properties of a curve plot; lines are solid by default."""

    def __init__(self, style: CurveStyle) -> None:
        self._style = style
        self._axes: Axes | None = None
        self._color: Color | Rgb | None = None
        self._label: str | None = None
        self._line_type = LineType.SOLID
        self._line_width: float | None = None
        self._point_size: float | None = None
        self._point_type: PointType | None = None

    @property
    def style(self) -> CurveStyle:
        return self._style

    @property
    def plot_axes(self) -> Axes:
        """The axes the data is plotted against."""
        return self._axes if self._axes is not None else Axes.BOTTOM_X_LEFT_Y

    def axes(self, axes: Axes) -> CurveProperties:
        """Select the axes to plot against."""
        self._axes = axes
        return self

    def color(self, color: Color | Rgb) -> CurveProperties:
        """Set the line color."""
        self._color = color
        return self

    def label(self, text: str) -> CurveProperties:
        """Set the legend label."""
        self._label = str(text)
        return self

    def line_type(self, line_type: LineType) -> CurveProperties:
        """Change the line type."""
        self._line_type = line_type
        return self

    def line_width(self, width: float) -> CurveProperties:
        """Change the width of the line; it must be positive."""
        width = to_float(width)
        if not width > 0:
            raise ValueError("line width must be positive")
        self._line_width = width
        return self

    def point_size(self, size: float) -> CurveProperties:
        """Change the size of the points; it must be positive."""
        size = to_float(size)
        if not size > 0:
            raise ValueError("point size must be positive")
        self._point_size = size
        return self

    def point_type(self, point_type: PointType) -> CurveProperties:
        """Change the point type."""
        self._point_type = point_type
        return self

    def script(self) -> str:
        """Return the gnuplot code describing how to draw the curve."""
        parts = []
        if self._axes is not None:
            parts.append(f"axes {self._axes.value}")
        parts.append(f"with {self._style.value}")
        parts.append(f"lt {self._line_type.value}")
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
class Curve:
    """A curve through the points ``(x, y)`` drawn in the given style."""

    style: CurveStyle
    x: Iterable[float]
    y: Iterable[float]

    def default_properties(self) -> CurveProperties:
        """Return fresh properties for this curve's style."""
        return CurveProperties(self.style)

    def to_matrix(self, x_factor: float, y_factor: float) -> Matrix:
        """Return the plot data scaled by the axis factors."""
        return build_matrix(zip(self.x, self.y), (x_factor, y_factor))