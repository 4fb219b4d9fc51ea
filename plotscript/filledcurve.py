"""Plots that fill the area between two curves."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from plotscript.axis import _format_float
from plotscript.data import Matrix, build_matrix, to_float
from plotscript.styles import Axes, Color, Rgb


class FilledCurveProperties:
    """Properties of a filled curve plot."""

    def __init__(self) -> None:
        self._axes: Axes | None = None
        self._color: Color | Rgb | None = None
        self._label: str | None = None
        self._opacity: float | None = None

    @property
    def plot_axes(self) -> Axes:
        """The axes the data is plotted against."""
        return self._axes if self._axes is not None else Axes.BOTTOM_X_LEFT_Y

    def axes(self, axes: Axes) -> FilledCurveProperties:
        """Select the axes to plot against."""
        self._axes = axes
        return self

    def color(self, color: Color | Rgb) -> FilledCurveProperties:
        """Set the fill color."""
        self._color = color
        return self

    def label(self, text: str) -> FilledCurveProperties:
        """Set the legend label."""
        self._label = str(text)
        return self

    def opacity(self, opacity: float) -> FilledCurveProperties:
        """Change the opacity of the fill color."""
        self._opacity = to_float(opacity)
        return self

    def script(self) -> str:
        """Return the gnuplot code describing how to draw the plot."""
        parts = []
        if self._axes is not None:
            parts.append(f"axes {self._axes.value}")
        parts.append("with filledcurves")
        parts.append("fillstyle")
        if self._opacity is not None:
            parts.append(f"solid {_format_float(self._opacity)}")
        parts.append("noborder")
        if self._color is not None:
            parts.append(f"lc rgb '{self._color.value}'")
        parts.append(f"title '{self._label}'" if self._label is not None else "notitle")
        return " ".join(parts)


@dataclass
class FilledCurve:
    """The area between the curves ``y1`` and ``y2`` over ``x``."""

    x: Iterable[float]
    y1: Iterable[float]
    y2: Iterable[float]

    def default_properties(self) -> FilledCurveProperties:
        """Return fresh properties for this plot."""
        return FilledCurveProperties()

    def to_matrix(self, x_factor: float, y_factor: float) -> Matrix:
        """Return the plot data scaled by the axis factors."""
        return build_matrix(zip(self.x, self.y1, self.y2), (x_factor, y_factor, y_factor))