import matplotlib
import matplotlib.pyplot as plt
import numpy as np
import pytest
from pytest import raises
from plotcmap.drawables import LineDescriptor, PointDescriptor
from plotcmap.errors import InvalidStyleOptions
from plotcmap.request import StyleOptions
from plotcmap.surfaces import MatplotlibSurface, Surface, as_surface


def test_as_surface(ax):
    s = as_surface(ax)
    assert isinstance(s, MatplotlibSurface)
    assert s.ax is ax
    assert s.fig is ax.get_figure()
    assert as_surface(s) is s
    assert as_surface([1, 2, 3]) is None
    assert as_surface("viridis") is None
    assert repr(s) == "matplotlib surface"


def test_is_3D(ax, ax3d):
    assert not MatplotlibSurface(ax).is_3D
    assert MatplotlibSurface(ax3d).is_3D
    assert MatplotlibSurface(ax).supports_dimension(2)
    assert not MatplotlibSurface(ax).supports_dimension(3)
    assert MatplotlibSurface(ax3d).supports_dimension(2)
    assert MatplotlibSurface(ax3d).supports_dimension(3)


@pytest.mark.parametrize("fmt, expected", [
    ("--", ("--", None, None)),
    ("-.", ("-.", None, None)),
    (":", (":", None, None)),
    ("o", (None, "o", None)),
    ("--o", ("--", "o", None)),
    ("r--o", ("--", "o", "r")),
    ("s:k", (":", "s", "k")),
    ("C1-", ("-", None, "C1")),
    ("^C12", (None, "^", "C12")),
])
def test_parse_fmt(fmt, expected):
    assert MatplotlibSurface.parse_fmt(fmt) == expected


@pytest.mark.parametrize("fmt", ["--:", "oo", "rk", "-z", "Cx"])
def test_parse_fmt_errors(fmt):
    raises(InvalidStyleOptions, lambda: MatplotlibSurface.parse_fmt(fmt))


def test_strip_color():
    style, removed = MatplotlibSurface.strip_color(
        StyleOptions(fmt="r--o", kwargs={"color": "k", "linewidth": 2}))
    assert removed
    assert style.fmt == "--o"
    assert style.kwargs == {"linewidth": 2}

    style, removed = MatplotlibSurface.strip_color(
        StyleOptions(fmt="r", kwargs={}))
    assert removed
    assert style.fmt is None

    style, removed = MatplotlibSurface.strip_color(
        StyleOptions(fmt=":", kwargs={"c": "r"}))
    assert removed
    assert style.fmt == ":"
    assert style.kwargs == {}

    style, removed = MatplotlibSurface.strip_color(
        StyleOptions(fmt="-", kwargs={"markerfacecolor": "r"}))
    assert not removed
    assert style.kwargs == {"markerfacecolor": "r"}


@pytest.mark.parametrize("fmt, kwargs, expected", [
    (None, {}, ("-", "none")),
    ("--", {}, ("--", "none")),
    ("o", {}, ("none", "o")),
    ("--o", {}, ("--", "o")),
    (None, {"marker": "s"}, ("-", "s")),
    (None, {"linestyle": "none", "marker": "s"}, ("none", "s")),
    (None, {"ls": "", "marker": "x"}, ("none", "x")),
    ("o", {"linestyle": "-"}, ("-", "o")),
    ("--", {"linestyle": "None"}, ("none", "none")),
    (None, {"linestyle": (0, (1, 1))}, ("(0, (1, 1))", "none")),
    (None, {"linestyle": None, "marker": "o"}, ("-", "o")),
    (None, {"ls": None, "marker": None}, ("-", "none")),
    ("o", {"linestyle": None}, ("none", "o")),
])
def test_resolve_style(fmt, kwargs, expected):
    with matplotlib.rc_context({"lines.linestyle": "-", "lines.marker": "None"}):
        r = MatplotlibSurface.resolve_style(StyleOptions(fmt=fmt, kwargs=kwargs))
    assert (r.linestyle, r.marker) == expected


def test_resolve_style_defaults_from_rcparams():
    with matplotlib.rc_context({"lines.linestyle": "None", "lines.marker": "o"}):
        r = MatplotlibSurface.resolve_style(StyleOptions())
    assert (r.linestyle, r.marker) == ("none", "o")


def test_style_keys():
    keys = MatplotlibSurface.style_keys()
    for k in ["linewidth", "lw", "linestyle", "ls", "marker", "markersize",
        "ms", "markerfacecolor", "mfc", "alpha", "label", "zorder"]:
        assert k in keys


def test_draw_line_and_point(ax, ax3d):
    s = MatplotlibSurface(ax)
    s.set_hold(True)
    style = StyleOptions(fmt="--", kwargs={"linewidth": 3})
    line = s.draw_line(LineDescriptor(
        start=(0, 0), end=(1, 2), style=style, color=(1, 0, 0),
        marker_face_color=(1, 0, 0)))
    assert isinstance(line, matplotlib.lines.Line2D)
    assert np.allclose(line.get_xdata(), [0, 1])
    assert np.allclose(line.get_ydata(), [0, 2])
    assert line.get_linestyle() == "--"
    assert line.get_linewidth() == 3
    assert line.get_color() == (1, 0, 0)
    assert line.get_markerfacecolor() == (1, 0, 0)
    assert ax.lines[-1] is line

    point = s.draw_point(PointDescriptor(
        point=(3, 4), style=StyleOptions(fmt="o"), color=(0, 0, 1)))
    assert np.allclose(point.get_xdata(), [3])
    assert point.get_marker() == "o"
    assert len(ax.lines) == 2

    s3 = MatplotlibSurface(ax3d)
    line = s3.draw_line(LineDescriptor(
        start=(0, 0, 0), end=(1, 1, 1), color=(0, 1, 0)))
    x, y, z = line.get_data_3d()
    assert np.allclose(z, [0, 1])


def test_hold(ax):
    s = MatplotlibSurface(ax)
    assert s.get_hold() is False
    ax.plot([0, 1], [0, 1])

    with s.hold_scope():
        assert s.get_hold() is True
        # another surface wrapping the same axes shares the state
        assert MatplotlibSurface(ax).get_hold() is True
        s.draw_line(LineDescriptor(start=(0, 0), end=(1, 1)))
        assert len(ax.lines) == 2
    assert s.get_hold() is False

    # hold off: new elements replace the old ones
    s.draw_line(LineDescriptor(start=(0, 0), end=(1, 1)))
    assert len(ax.lines) == 1

    s.set_hold(True)
    with s.hold_scope():
        pass
    assert s.get_hold() is True


def test_hold_scope_restores_on_error(ax):
    s = MatplotlibSurface(ax)
    with raises(RuntimeError):
        with s.hold_scope():
            raise RuntimeError("drawing failed")
    assert s.get_hold() is False


def test_delete_drawables(ax):
    s = MatplotlibSurface(ax)
    s.set_hold(True)
    handles = [
        s.draw_line(LineDescriptor(start=(0, 0), end=(1, i)))
        for i in range(3)
    ]
    assert len(ax.lines) == 3
    s.delete_drawables(handles[:2])
    assert ax.lines[:] == [handles[2]]


def test_set_view(ax, ax3d):
    MatplotlibSurface(ax3d).set_view(30, 40)
    assert ax3d.azim == 30
    assert ax3d.elev == 40
    # nothing happens on 2D axes
    MatplotlibSurface(ax).set_view(30, 40)


def test_colorbar(ax):
    s = MatplotlibSurface(ax)
    s.set_palette([[1, 0, 0], [0, 0, 1]])
    s.set_color_range(-1, 3)
    cb = s.show_colorbar("values")
    assert isinstance(cb, matplotlib.colorbar.Colorbar)
    assert cb.norm.vmin == -1 and cb.norm.vmax == 3
    assert cb.cmap.N == 2
    assert cb.ax.get_ylabel() == "values"
    assert len(s.fig.axes) == 2


def test_colorbar_constant_range(ax):
    s = MatplotlibSurface(ax)
    s.set_palette([[1, 0, 0], [0, 0, 1]])
    s.set_color_range(5, 5)
    cb = s.show_colorbar()
    assert cb.norm.vmin < 5 < cb.norm.vmax


def test_current():
    plt.figure()
    s = MatplotlibSurface.current()
    assert s.ax is plt.gca()
    assert not s.is_3D

    # empty 2D axes are replaced by 3D axes
    fig = plt.figure()
    plt.gca()
    s = MatplotlibSurface.current(3)
    assert s.is_3D
    assert s.fig is fig
    assert len(fig.axes) == 1

    # 2D axes with data: a new figure is created
    fig = plt.figure()
    plt.plot([0, 1], [0, 1])
    s = MatplotlibSurface.current(3)
    assert s.is_3D
    assert s.fig is not fig


def test_base_surface_is_abstract():
    s = Surface()
    raises(NotImplementedError, lambda: s.draw_line(None))
    raises(NotImplementedError, lambda: Surface.current())
    raises(NotImplementedError, lambda: Surface.style_keys())
    assert s.supports_dimension(2)
    assert not s.supports_dimension(3)
