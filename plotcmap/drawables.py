"""
Immutable descriptors of the primitives drawn by ``plotcmap``.

A descriptor carries everything a surface needs to create the primitive:
coordinates, style and colors. Surfaces build the final graphical object in
one step from it.
"""

import param
from plotcmap.request import StyleOptions


class Drawable(param.Parameterized):
    """Base class of the drawing descriptors."""

    style = param.ClassSelector(
        default=None, class_=StyleOptions, constant=True, doc="""
        Style options of the primitive.""")

    color = param.NumericTuple(default=(0, 0, 0), constant=True, doc="""
        RGB color of the line and of the marker edges.""")

    marker_face_color = param.NumericTuple(
        default=None, length=3, allow_None=True, constant=True, doc="""
        RGB color used to fill the markers. None: let the surface decide.""")

    def __init__(self, **params):
        if params.get("style", None) is None:
            params["style"] = StyleOptions()
        super().__init__(**params)

    def get_coordinates(self):
        """Return one list of coordinates per axis, as expected by
        Matplotlib's ``Axes.plot``."""
        points = self.get_points()
        return [list(c) for c in zip(*points)]

    def get_points(self):
        raise NotImplementedError


class LineDescriptor(Drawable):
    """A segment connecting two consecutive points of the line."""

    start = param.Parameter(default=(0, 0), constant=True, doc="""
        Coordinates of the first point, a tuple of 2 or 3 floats.""")

    end = param.Parameter(default=(0, 0), constant=True, doc="""
        Coordinates of the second point, a tuple of 2 or 3 floats.""")

    def get_points(self):
        return [self.start, self.end]


class PointDescriptor(Drawable):
    """A single point of the line, shown with a marker."""

    point = param.Parameter(default=(0, 0), constant=True, doc="""
        Coordinates of the point, a tuple of 2 or 3 floats.""")

    def get_points(self):
        return [self.point]
