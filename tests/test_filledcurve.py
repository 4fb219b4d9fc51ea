import struct

import pytest

from plotscript.filledcurve import FilledCurve, FilledCurveProperties
from plotscript.styles import Axes, Color, Rgb


def test_default_script():
    assert FilledCurveProperties().script() == "with filledcurves fillstyle noborder notitle"


def test_default_plot_axes():
    assert FilledCurveProperties().plot_axes is Axes.BOTTOM_X_LEFT_Y


def test_axes_prefix():
    props = FilledCurveProperties().axes(Axes.BOTTOM_X_RIGHT_Y)
    assert props.plot_axes is Axes.BOTTOM_X_RIGHT_Y
    assert props.script().startswith(f"axes {Axes.BOTTOM_X_RIGHT_Y.value} with filledcurves")


def test_opacity():
    script = FilledCurveProperties().opacity(0.5).script()
    assert "fillstyle solid 0.5 noborder" in script


def test_named_color():
    script = FilledCurveProperties().color(Color.FOREST_GREEN).script()
    assert f"lc rgb '{Color.FOREST_GREEN.value}'" in script


def test_rgb_color():
    color = Rgb(0, 158, 115)
    script = FilledCurveProperties().color(color).script()
    assert f"lc rgb '{color.display()}'" in script


def test_label_replaces_notitle():
    script = FilledCurveProperties().label("mu = 0.5").script()
    assert script.endswith("title 'mu = 0.5'")
    assert "notitle" not in script


def test_setters_return_self():
    props = FilledCurveProperties()
    assert props.color(Color.GOLD) is props
    assert props.label("x") is props
    assert props.opacity(1) is props


def test_default_properties_are_fresh():
    curve = FilledCurve(x=[1], y1=[2], y2=[0])
    first = curve.default_properties()
    first.label("changed")
    assert curve.default_properties().script() == FilledCurveProperties().script()


def test_to_matrix_unscaled_keeps_values():
    curve = FilledCurve(x=[1, 2, 3], y1=[4.5, 5.5, 6.5], y2=[0, 0, 0])
    matrix = curve.to_matrix(1.0, 1.0)
    assert matrix.ncols == 3
    assert matrix.nrows == 3
    assert matrix.rows[1] == (2.0, 5.5, 0.0)


def test_to_matrix_scales_columns():
    xs, y1, y2 = [1.0, 2.0], [3.0, 4.0], [5.0, 6.0]
    matrix = FilledCurve(x=xs, y1=y1, y2=y2).to_matrix(2.0, 10.0)
    for row, x, a, b in zip(matrix.rows, xs, y1, y2):
        assert row == (x * 2.0, a * 10.0, b * 10.0)


def test_to_matrix_stops_at_shortest():
    matrix = FilledCurve(x=[1, 2, 3], y1=[1, 2], y2=[0, 0, 0]).to_matrix(1, 1)
    assert matrix.nrows == 2


def test_to_matrix_bytes_round_trip():
    matrix = FilledCurve(x=[1.0], y1=[2.0], y2=[3.0]).to_matrix(1, 1)
    assert struct.unpack("<3d", matrix.to_bytes()) == (1.0, 2.0, 3.0)


def test_to_matrix_rejects_non_numbers():
    with pytest.raises(TypeError):
        FilledCurve(x=["a"], y1=[1], y2=[0]).to_matrix(1, 1)