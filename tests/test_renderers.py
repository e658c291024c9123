import numpy as np
import pytest
from pytest import raises
from plotcmap.drawables import LineDescriptor, PointDescriptor
from plotcmap.normalizer import compute_color_indices
from plotcmap.renderers import (
    SegmentRenderer, PointRenderer, needs_marker_correction,
    get_renderer_class
)
from plotcmap.request import ResolvedStyle
from plotcmap.resolver import resolve_arguments
from plotcmap.surfaces import MatplotlibSurface


def _renderer(cls, surface, *args, **kwargs):
    request = resolve_arguments(*args, **kwargs)
    indices = compute_color_indices(request.values, request.n_colors)
    return cls(surface, request, indices)


@pytest.mark.parametrize("linestyle, marker, expected", [
    ("-", "none", False),
    ("--", "o", False),
    ("none", "none", False),
    ("none", "o", True),
    ("none", "s", True),
])
def test_needs_marker_correction(linestyle, marker, expected):
    style = ResolvedStyle(linestyle=linestyle, marker=marker)
    assert needs_marker_correction(style) is expected
    renderer_class = PointRenderer if expected else SegmentRenderer
    assert get_renderer_class(style) is renderer_class


def test_segment_descriptors(ax, xy4, palette4):
    x, y = xy4
    r = _renderer(SegmentRenderer, MatplotlibSurface(ax),
        x, y, palette4, [0, 1, 2, 3], "--")
    assert np.array_equal(r.indices, [1, 2, 3, 4])
    d = r.get_descriptors()
    assert len(d) == 3
    assert all(isinstance(t, LineDescriptor) for t in d)
    assert [t.start for t in d] == [(0, 0), (1, 1), (2, 0)]
    assert [t.end for t in d] == [(1, 1), (2, 0), (3, 1)]
    # each segment uses the color of its first point
    assert [t.color for t in d] == [(1, 0, 0), (0, 1, 0), (0, 0, 1)]
    assert all(t.style.fmt == "--" for t in d)
    assert all(t.marker_face_color is None for t in d)


def test_point_descriptors(ax, xy4, palette4):
    x, y = xy4
    r = _renderer(PointRenderer, MatplotlibSurface(ax),
        x, y, palette4, [0, 1, 2, 3], "o", "MatchMarkerFaceColor")
    d = r.get_descriptors()
    assert len(d) == 4
    assert all(isinstance(t, PointDescriptor) for t in d)
    assert [t.point for t in d] == [(0, 0), (1, 1), (2, 0), (3, 1)]
    assert [t.color for t in d] == [
        (1, 0, 0), (0, 1, 0), (0, 0, 1), (1, 1, 0)]
    assert [t.marker_face_color for t in d] == [t.color for t in d]


def test_constant_values(ax, xy4, palette4):
    x, y = xy4
    r = _renderer(SegmentRenderer, MatplotlibSurface(ax),
        x, y, palette4, [2, 2, 2, 2])
    assert [t.color for t in r.get_descriptors()] == [(1, 0, 0)] * 3


def test_draw_order_and_handles(ax, xy4, palette4):
    x, y = xy4
    s = MatplotlibSurface(ax)
    s.set_hold(True)
    r = _renderer(SegmentRenderer, s, x, y, palette4, [3, 2, 1, 0])
    handles = r.draw()
    assert handles is r.handles
    assert len(handles) == 3
    assert ax.lines[:] == handles
    assert [h.get_color() for h in handles] == [
        (1, 1, 0), (0, 0, 1), (0, 1, 0)]
    assert np.allclose(handles[1].get_xdata(), [1, 2])


def test_draw_points(ax, xy4, palette4):
    x, y = xy4
    s = MatplotlibSurface(ax)
    s.set_hold(True)
    r = _renderer(PointRenderer, s, x, y, palette4, "s",
        match_marker_face_color=True)
    handles = r.draw()
    assert len(handles) == 4
    assert all(h.get_marker() == "s" for h in handles)
    assert handles[2].get_markerfacecolor() == (0.0, 0.0, 1.0)


def test_draw_3D_sets_view(ax3d, default_view, palette4):
    s = MatplotlibSurface(ax3d)
    s.set_hold(True)
    ax3d.view_init(elev=60, azim=60)
    r = _renderer(SegmentRenderer, s,
        [0, 1, 2], [0, 1, 0], [1, 2, 3], palette4)
    r.draw()
    azim, elev = default_view
    assert ax3d.azim == azim
    assert ax3d.elev == elev


def test_draw_failure_removes_partial_drawables(mocker, ax, xy4, palette4):
    x, y = xy4
    s = MatplotlibSurface(ax)
    s.set_hold(True)
    draw_line = s.draw_line
    drawn = []

    def failing_draw_line(descriptor):
        if len(drawn) == 2:
            raise RuntimeError("unable to draw")
        drawn.append(draw_line(descriptor))
        return drawn[-1]

    mocker.patch.object(s, "draw_line", side_effect=failing_draw_line)
    spy = mocker.spy(s, "delete_drawables")
    r = _renderer(SegmentRenderer, s, x, y, palette4)
    raises(RuntimeError, lambda: r.draw())
    spy.assert_called_once()
    assert len(ax.lines) == 0
    assert r.handles == []
