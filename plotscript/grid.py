"""Gridline settings of an axis."""

from __future__ import annotations

from dataclasses import dataclass

from plotscript.styles import Axis, Grid


@dataclass
class GridProperties:
    """Gridline properties; gridlines are hidden by default."""

    hidden: bool = True

    def hide(self) -> GridProperties:
        """Hide the gridlines."""
        self.hidden = True
        return self

    def show(self) -> GridProperties:
        """Show the gridlines."""
        self.hidden = False
        return self

    def script(self, axis: Axis, grid: Grid) -> str:
        """Return the gnuplot code for these gridlines on ``axis``."""
        if self.hidden:
            return ""
        return f"set grid {grid.value}{axis.value}tics\n"