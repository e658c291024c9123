import param
from sympy.external import import_module


# keyword arguments that set the color of a line, or the face color of the
# markers. They are replaced by the colors computed from the palette.
_COLOR_KEYS = ["color", "c"]
_MARKER_FACE_COLOR_KEYS = ["markerfacecolor", "mfc"]


class StyleOptions(param.Parameterized):
    """Options controlling the appearance of the line, forwarded to the
    drawing surface. The color is not part of it: it is always computed
    from the palette.
    """

    fmt = param.String(default=None, allow_None=True, constant=True, doc="""
        Format string, like ``"--o"`` (dashed line with circle markers).
        The format string must not contain a color.""")

    kwargs = param.Dict(default={}, constant=True, doc="""
        Keyword arguments understood by the drawing surface, for example
        ``{"linewidth": 2}``.""")

    def __repr__(self):
        return "StyleOptions(fmt=%r, kwargs=%r)" % (self.fmt, self.kwargs)


class ResolvedStyle(param.Parameterized):
    """The line style and marker actually used by the drawing surface,
    after applying its defaults to the user-provided ``StyleOptions``.
    Values are normalized so that a missing line or marker is ``"none"``.
    """

    linestyle = param.String(default="-", constant=True)

    marker = param.String(default="none", constant=True)

    def __repr__(self):
        return "ResolvedStyle(linestyle=%r, marker=%r)" % (
            self.linestyle, self.marker)


class PlotRequest(param.Parameterized):
    """Validated description of a single call to ``plotcmap``."""

    axis = param.Parameter(default=None, constant=True, doc="""
        The surface on which the line will be drawn. If None, the
        current surface will be used.""")

    dimension = param.Selector(
        default=2, objects=[2, 3], constant=True, doc="""
        Whether the line is 2D or 3D.""")

    x = param.Array(default=None, constant=True, doc="""
        x-coordinates of the points.""")

    y = param.Array(default=None, constant=True, doc="""
        y-coordinates of the points.""")

    z = param.Array(default=None, allow_None=True, constant=True, doc="""
        z-coordinates of the points. None for 2D lines.""")

    palette = param.Array(default=None, constant=True, doc="""
        ``N x 3`` table of RGB colors.""")

    values = param.Array(default=None, constant=True, doc="""
        Values mapped onto the palette, one for each point.""")

    style = param.ClassSelector(
        default=None, class_=StyleOptions, constant=True, doc="""
        Style options forwarded to the surface.""")

    match_marker_face_color = param.Boolean(
        default=False, constant=True, doc="""
        If True, the face color of the markers is set to the color of the
        segment (or point) they belong to.""")

    def __init__(self, **params):
        if params.get("style", None) is None:
            params["style"] = StyleOptions()
        super().__init__(**params)

    @property
    def n_points(self):
        return len(self.x)

    @property
    def n_colors(self):
        return len(self.palette)

    @property
    def is_3D(self):
        return self.dimension == 3

    def get_points(self):
        """Return the list of points of the line, each one being a tuple
        of 2 or 3 floats."""
        np = import_module('numpy')
        coords = [self.x, self.y] + ([self.z] if self.is_3D else [])
        return [tuple(float(c) for c in p) for p in np.column_stack(coords)]

    def __str__(self):
        return "%sD colormapped line with %s points and %s colors" % (
            self.dimension, self.n_points, self.n_colors)
