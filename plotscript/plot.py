"""A single plot of a figure and the axis scale factors it is drawn with."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from plotscript.axis import AxisProperties
from plotscript.data import Matrix
from plotscript.styles import Axes, Axis

_AXES_PAIRS: dict[Axes, tuple[Axis, Axis]] = {
    Axes.BOTTOM_X_LEFT_Y: (Axis.BOTTOM_X, Axis.LEFT_Y),
    Axes.BOTTOM_X_RIGHT_Y: (Axis.BOTTOM_X, Axis.RIGHT_Y),
    Axes.TOP_X_LEFT_Y: (Axis.TOP_X, Axis.LEFT_Y),
    Axes.TOP_X_RIGHT_Y: (Axis.TOP_X, Axis.RIGHT_Y),
}


@dataclass(frozen=True)
class Plot:
    """The data of one plot together with the gnuplot code that styles it."""

    data: Matrix
    script: str


def scale_factor(
    axes_map: Mapping[Axis, AxisProperties], axes: Axes
) -> tuple[float, float]:
    """Return the x and y scale factors of ``axes``.

    An axis that has not been configured has a factor of 1.
    """
    x_axis, y_axis = _AXES_PAIRS[axes]

    def factor(axis: Axis) -> float:
        properties = axes_map.get(axis)
        return properties.scale_factor if properties is not None else 1.0

    return factor(x_axis), factor(y_axis)