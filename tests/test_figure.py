import io
import struct
from unittest import mock

import pytest

from plotscript.candlestick import Candlesticks
from plotscript.curve import Curve, CurveStyle
from plotscript.figure import Figure
from plotscript.key import Position
from plotscript.styles import Axes, Axis, Color, Horizontal, Vertical


def _lines(xs, ys):
    return Curve(CurveStyle.LINES, xs, ys)


def test_default_script():
    assert Figure().script() == (
        b"set output 'output.plot'\nset terminal svg dynamic dashed\nunset bars\n"
    )


def test_output_quotes_are_escaped():
    script = Figure().output("it's.svg").script()
    assert script.startswith(b"set output 'it''s.svg'\n")


def test_single_curve_header_and_data():
    figure = Figure().plot(_lines([1, 2], [3, 4]))
    script = figure.script()
    header = (
        b"plot '-' binary endian=little record=2 format='%float64' "
        b"using 1:2 with lines lt 1 notitle\n"
    )
    assert header in script
    assert script.endswith(header + struct.pack("<4d", 1, 3, 2, 4))


def test_plot_applies_configuration():
    figure = Figure().plot(_lines([1], [2]), lambda p: p.color(Color.RED).label("sin"))
    assert b"with lines lt 1 lc rgb 'red' title 'sin'" in figure.script()


def test_scale_factor_of_bottom_axis_applies():
    figure = Figure().configure_axis(Axis.BOTTOM_X, lambda a: a.scaled_by(2))
    figure.plot(_lines([1, 2], [3, 4]))
    expected = _lines([1, 2], [3, 4]).to_matrix(2.0, 1.0).to_bytes()
    assert figure.script().endswith(expected)


def test_curve_on_right_axis_uses_right_scale():
    figure = Figure().configure_axis(Axis.RIGHT_Y, lambda a: a.scaled_by(3))
    figure.plot(_lines([1], [2]), lambda p: p.axes(Axes.BOTTOM_X_RIGHT_Y))
    expected = _lines([1], [2]).to_matrix(1.0, 3.0).to_bytes()
    assert figure.script().endswith(expected)
    assert b"axes x1y2 with lines" in figure.script()


def test_candlesticks_use_five_columns():
    sticks = Candlesticks([1], [2], [3], [4], [5])
    script = Figure().plot(sticks).script()
    assert b"using 1:2:3:4:5 with candlesticks" in script
    assert script.endswith(sticks.to_matrix(1.0, 1.0).to_bytes())


def test_multiple_plots_joined_with_comma():
    figure = Figure().plot(_lines([1], [2])).plot(_lines([3], [4]))
    script = figure.script()
    assert script.count(b"'-' binary") == 2
    assert b"notitle, '-' binary" in script


def test_empty_plot_is_skipped_but_newline_added():
    script = Figure().plot(_lines([], [])).script()
    assert b"plot " not in script
    assert script.endswith(b"unset bars\n\n")


def test_axis_scripts_in_axis_order():
    figure = Figure()
    figure.configure_axis(Axis.LEFT_Y, lambda a: a.label("y"))
    figure.configure_axis(Axis.BOTTOM_X, lambda a: a.label("x"))
    script = figure.script()
    assert script.index(b"set xlabel 'x'") < script.index(b"set ylabel 'y'")


def test_configure_axis_twice_keeps_properties():
    figure = Figure()
    figure.configure_axis(Axis.BOTTOM_X, lambda a: a.label("first"))
    figure.configure_axis(Axis.BOTTOM_X, lambda a: a.range(0, 11))
    script = figure.script()
    assert b"set xlabel 'first'\n" in script
    assert b"set xrange [0:11]\n" in script


def test_title_and_box_width():
    script = Figure().title("Frequency response").box_width(0.2).script()
    assert b"set boxwidth 0.2\n" in script
    assert b"set title 'Frequency response'\n" in script


def test_key_configuration():
    figure = Figure().configure_key(lambda k: k.hide())
    assert b"set key off\n" in figure.script()
    figure.configure_key(
        lambda k: k.show().position(Position(Vertical.TOP, Horizontal.LEFT))
    )
    assert b"set key on inside top left \n" in figure.script()


def test_terminal_size_and_font():
    script = Figure().size(1280, 720).font("Helvetica").font_size(12.0).script()
    assert b"set terminal svg dynamic dashed size 1280, 720 font 'Helvetica,12'\n" in script


def test_font_without_size():
    assert b" font 'Helvetica'\n" in Figure().font("Helvetica").script()


@pytest.mark.parametrize("setter", ["box_width", "font_size"])
def test_negative_values_rejected(setter):
    with pytest.raises(ValueError):
        getattr(Figure(), setter)(-1.0)


def test_dump_writes_script():
    figure = Figure().plot(_lines([1], [2]))
    sink = io.BytesIO()
    assert figure.dump(sink) is figure
    assert sink.getvalue() == figure.script()


def test_save_writes_script(tmp_path):
    figure = Figure().title("t")
    path = tmp_path / "figure.plot"
    figure.save(path)
    assert path.read_bytes() == figure.script()


def test_draw_feeds_gnuplot():
    figure = Figure().plot(_lines([1], [2]))
    with mock.patch("subprocess.Popen") as popen:
        process = figure.draw()
    assert popen.call_args.args[0] == ["gnuplot"]
    assert process is popen.return_value
    process.stdin.write.assert_called_once_with(figure.script())