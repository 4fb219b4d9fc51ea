"""Coordinate axis settings."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable
from decimal import Decimal

from plotscript.data import to_float
from plotscript.grid import GridProperties
from plotscript.styles import Axis, Grid, Scale


def _format_float(value: float) -> str:
    """Format a float the way gnuplot scripts expect: shortest form, no exponent."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


class AxisProperties:
    """Properties of one coordinate axis.

    Axes are visible, auto-scaled, linear and unscaled by default.
    """

    def __init__(self) -> None:
        self._grids: dict[Grid, GridProperties] = {}
        self._hidden = False
        self._label: str | None = None
        self._logarithmic = False
        self._range: tuple[float, float] | None = None
        self._scale_factor = 1.0
        self._tics: str | None = None

    @property
    def hidden(self) -> bool:
        return self._hidden

    @property
    def scale_factor(self) -> float:
        """Factor applied to every coordinate plotted against this axis."""
        return self._scale_factor

    def hide(self) -> AxisProperties:
        """Hide the axis."""
        self._hidden = True
        return self

    def show(self) -> AxisProperties:
        """Make the axis visible."""
        self._hidden = False
        return self

    def configure(
        self, grid: Grid, configure: Callable[[GridProperties], object]
    ) -> AxisProperties:
        """Configure the major or minor gridlines of this axis."""
        configure(self._grids.setdefault(grid, GridProperties()))
        return self

    def label(self, text: str) -> AxisProperties:
        """Attach a label to the axis."""
        self._label = str(text)
        return self

    def range(self, low: float, high: float) -> AxisProperties:
        """Limit the range of the axis that is shown."""
        self._hidden = False
        self._range = (to_float(low), to_float(high))
        return self

    def autoscale(self) -> AxisProperties:
        """Let gnuplot choose the range of the axis."""
        self._hidden = False
        self._range = None
        return self

    def scale(self, scale: Scale) -> AxisProperties:
        """Set the axis to a linear or logarithmic scale."""
        self._hidden = False
        self._logarithmic = scale is Scale.LOGARITHMIC
        return self

    def scaled_by(self, factor: float) -> AxisProperties:
        """Set the factor that data plotted against this axis is multiplied by."""
        self._scale_factor = to_float(factor)
        return self

    def tic_labels(
        self, positions: Iterable[float], labels: Iterable[str]
    ) -> AxisProperties:
        """Attach labels to tics at the given positions."""
        pairs = [
            f"'{label}' {_format_float(to_float(position))}"
            for position, label in zip(positions, labels)
        ]
        self._tics = ", ".join(pairs) if pairs else None
        return self

    def script(self, axis: Axis) -> str:
        """Return the gnuplot code for these properties applied to ``axis``."""
        name = axis.value
        if self._hidden:
            return f"unset {name}tics\n"

        script = f"set {name}tics nomirror "
        if self._tics is not None:
            script += f"({self._tics})"
        script += "\n"

        if self._label is not None:
            script += f"set {name}label '{self._label}'\n"

        if self._range is not None:
            low, high = self._range
            script += f"set {name}range [{_format_float(low)}:{_format_float(high)}]\n"

        if self._logarithmic:
            script += f"set logscale {name}\n"

        for grid in Grid:
            properties = self._grids.get(grid)
            if properties is not None:
                script += properties.script(axis, grid)

        return script