# plotscript

`plotscript` lets you describe a figure in Python and writes it out as a gnuplot
script. The script carries its data as little-endian binary `float64` records.
You can save it to a file, write it to any binary stream, or pipe it straight
into a `gnuplot` process.

## Installation

```
pip install plotscript
```

You need `gnuplot` on your `PATH` only to render figures with `Figure.draw()`
or to query its version with `version()`. Building and saving scripts needs
only Python 3.10 or later.

## Building a figure

```python
import math

from plotscript.figure import Figure
from plotscript.curve import Curve, CurveStyle
from plotscript.key import Position
from plotscript.styles import Axis, Color, Grid, Horizontal, LineType, PointType, Rgb, Vertical

xs = [i / 5 for i in range(-50, 51)]

figure = Figure()
figure.title("Trigonometry").output("trig.svg").size(1280, 720)
figure.configure_axis(Axis.BOTTOM_X, lambda a: a.label("x").configure(Grid.MAJOR, lambda g: g.show()))
figure.configure_axis(Axis.LEFT_Y, lambda a: a.range(-2, 2))
figure.configure_key(lambda k: k.position(Position(Vertical.TOP, Horizontal.LEFT)))
figure.plot(
    Curve(CurveStyle.LINES_POINTS, xs, [math.sin(x) for x in xs]),
    lambda p: p.color(Color.DARK_VIOLET).label("sin(x)").line_type(LineType.DASH).point_type(PointType.CIRCLE),
)
figure.plot(
    Curve(CurveStyle.STEPS, xs, [math.atan(x) for x in xs]),
    lambda p: p.color(Rgb(0, 158, 115)).label("atan(x)").line_width(2),
)

figure.save("trig.plot")     # write the script to a file
process = figure.draw()      # or start gnuplot and feed it the script
process.communicate()
```

`Figure.script()` returns the script as `bytes`, and `Figure.dump(sink)` writes
it into any binary stream. The output file defaults to `output.plot` and the
terminal to `Terminal.SVG`.

Each `configure` callback receives a properties object whose setters return the
object itself, so calls can be chained. Line widths and point sizes must be
positive; box widths and font sizes must not be negative. Anything else raises
`ValueError`.

Pass `Position(vertical, horizontal, outside=True)` to place the key outside the
area bounded by the axes. The key can also be hidden, boxed (`Boxed.YES`),
justified, reordered, stacked and given a title.

## Series types

- `plotscript.curve.Curve` draws dots, impulses, lines, lines with points,
  points or steps. `CurveStyle` chooses between them.
- `plotscript.errorbar.ErrorBar` draws horizontal or vertical error bars, with or
  without connecting lines. `ErrorBarStyle` chooses between them.
- `plotscript.candlestick.Candlesticks` draws a box with two whiskers.
- `plotscript.filledcurve.FilledCurve` fills the area between two curves and can
  be given an opacity.

Curves and filled curves can be plotted against any pair of axes
(`plotscript.styles.Axes`). Error bars and candlesticks always use the bottom x
and left y axes. The scale factor set with `AxisProperties.scaled_by` multiplies
the data of every series drawn against that axis.

## Checking gnuplot

```python
from plotscript.version import VersionError, parse_version, version

try:
    v = version()
    print(v.major, v.minor, v.patch)
except VersionError as err:
    print(err.kind, err)

parse_version("gnuplot 5.2 patchlevel 5a")   # Version(major=5, minor=2, patch='5a')
```

`parse_version` raises `ValueError` on text it cannot read. `version` raises
`VersionError`, whose `kind` is `"exec"`, `"error"`, `"output"` or `"parse"`.

## What this package does not do

`plotscript` does not render images itself. Drawing a figure depends on an
installed `gnuplot`. There is no command-line tool; the package is used only
as a library.

## Running the tests

```
pip install -e ".[test]"
pytest
```