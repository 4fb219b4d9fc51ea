"""Figures: collections of plots rendered to a gnuplot script."""

from __future__ import annotations

import os
import subprocess
from collections.abc import Callable
from typing import BinaryIO, Protocol

from plotscript.axis import AxisProperties, _format_float
from plotscript.data import Matrix, to_float
from plotscript.key import KeyProperties
from plotscript.plot import Plot, scale_factor
from plotscript.styles import Axes, Axis, Terminal


class _Series(Protocol):
    def default_properties(self) -> object: ...

    def to_matrix(self, x_factor: float, y_factor: float) -> Matrix: ...


class Figure:
    """A plot container that produces a gnuplot script.

    The output file defaults to ``output.plot`` and the terminal to SVG.
    """

    def __init__(self) -> None:
        self._axes: dict[Axis, AxisProperties] = {}
        self._box_width: float | None = None
        self._font: str | None = None
        self._font_size: float | None = None
        self._key: KeyProperties | None = None
        self._output = "output.plot"
        self._plots: list[Plot] = []
        self._size: tuple[int, int] | None = None
        self._terminal = Terminal.SVG
        self._title: str | None = None

    @property
    def plots(self) -> tuple[Plot, ...]:
        return tuple(self._plots)

    def configure_axis(
        self, axis: Axis, configure: Callable[[AxisProperties], object]
    ) -> Figure:
        """Configure one of the coordinate axes."""
        configure(self._axes.setdefault(axis, AxisProperties()))
        return self

    def configure_key(self, configure: Callable[[KeyProperties], object]) -> Figure:
        """Configure the key (legend)."""
        if self._key is None:
            self._key = KeyProperties()
        configure(self._key)
        return self

    def box_width(self, width: float) -> Figure:
        """Change the box width of all box related plots; it must not be negative."""
        width = to_float(width)
        if not width >= 0:
            raise ValueError("box width must not be negative")
        self._box_width = width
        return self

    def font(self, name: str) -> Figure:
        """Change the font."""
        self._font = str(name)
        return self

    def font_size(self, size: float) -> Figure:
        """Change the size of the font; it must not be negative."""
        size = to_float(size)
        if not size >= 0:
            raise ValueError("font size must not be negative")
        self._font_size = size
        return self

    def output(self, path: str | os.PathLike[str]) -> Figure:
        """Change the output file."""
        self._output = os.fspath(path)
        return self

    def size(self, width: int, height: int) -> Figure:
        """Change the figure size."""
        if width < 0 or height < 0:
            raise ValueError("figure size must not be negative")
        self._size = (int(width), int(height))
        return self

    def terminal(self, terminal: Terminal) -> Figure:
        """Change the output terminal."""
        self._terminal = terminal
        return self

    def title(self, title: str) -> Figure:
        """Set the title."""
        self._title = str(title)
        return self

    def plot(
        self,
        series: _Series,
        configure: Callable[[object], object] | None = None,
    ) -> Figure:
        """Add ``series`` to the figure, styled by ``configure``."""
        properties = series.default_properties()
        if configure is not None:
            configure(properties)
        axes = getattr(properties, "plot_axes", Axes.BOTTOM_X_LEFT_Y)
        x_factor, y_factor = scale_factor(self._axes, axes)
        data = series.to_matrix(x_factor, y_factor)
        self._plots.append(Plot(data=data, script=properties.script()))
        return self

    def script(self) -> bytes:
        """Return the gnuplot script, including the binary plot data."""
        output = self._output.replace("'", "''")
        lines = [f"set output '{output}'\n"]

        if self._box_width is not None:
            lines.append(f"set boxwidth {_format_float(self._box_width)}\n")
        if self._title is not None:
            lines.append(f"set title '{self._title}'\n")

        for axis in Axis:
            properties = self._axes.get(axis)
            if properties is not None:
                lines.append(properties.script(axis))

        if self._key is not None:
            lines.append(self._key.script())

        lines.append(f"set terminal {self._terminal.value} dashed")
        if self._size is not None:
            width, height = self._size
            lines.append(f" size {width}, {height}")
        if self._font is not None:
            if self._font_size is not None:
                lines.append(f" font '{self._font},{_format_float(self._font_size)}'")
            else:
                lines.append(f" font '{self._font}'")
        lines.append("\nunset bars\n")

        drawn = [plot for plot in self._plots if plot.data.nrows > 0]
        if drawn:
            commands = []
            for plot in drawn:
                columns = ":".join(str(col) for col in range(1, plot.data.ncols + 1))
                commands.append(
                    f"'-' binary endian=little record={plot.data.nrows} "
                    f"format='%float64' using {columns} {plot.script}"
                )
            lines.append("plot " + ", ".join(commands))

        buffer = "".join(lines).encode("utf-8")
        if self._plots:
            buffer += b"\n" + b"".join(plot.data.to_bytes() for plot in self._plots)
        return buffer

    def dump(self, sink: BinaryIO) -> Figure:
        """Write the script into the binary stream ``sink``."""
        sink.write(self.script())
        return self

    def save(self, path: str | os.PathLike[str]) -> Figure:
        """Save the script to the file at ``path``."""
        with open(path, "wb") as handle:
            handle.write(self.script())
        return self

    def draw(self) -> subprocess.Popen:
        """Start gnuplot with piped streams and feed it the script."""
        process = subprocess.Popen(
            ["gnuplot"],
            stdin=subprocess.PIPE,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
        )
        process.stdin.write(self.script())
        process.stdin.flush()
        return process