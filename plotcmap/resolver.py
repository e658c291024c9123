"""
Interpret the positional arguments of ``plotcmap``.

The call signatures are::

    plotcmap(Y, cmap)
    plotcmap(X, Y, cmap)
    plotcmap(X, Y, Z, cmap)
    plotcmap(__, values)
    plotcmap(__, fmt)
    plotcmap(__, "Name", value, ...)
    plotcmap(__, "MatchMarkerFaceColor")
    plotcmap(ax, __)

The palette ``cmap`` is the first argument that is not a numeric vector:
its position establishes how many vectors of coordinates were given.
Because of this, a palette with a single row, which looks like a vector,
can't be used: use a palette with at least two rows instead.
"""

import warnings
from mergedeep import merge
from sympy.external import import_module
from plotcmap.defaults import cfg
from plotcmap.errors import (
    InsufficientArguments, MissingPalette, CoordinateMismatch,
    TooManyLeadingArguments, ValueLengthMismatch, InvalidValues,
    InvalidStyleOptions, IncompatibleSurface, AmbiguousSurface
)
from plotcmap.palettes import PaletteRegistry
from plotcmap.request import PlotRequest, StyleOptions
from plotcmap.surfaces import MatplotlibSurface, as_surface
from plotcmap.utils import (
    _as_numeric_array, _to_vector, _find_misspelled_keys,
    _format_misspelled_keys
)

# number of vectors of coordinates preceding the palette -> their names
_COORDINATES_NAMES = {
    1: ["Y"],
    2: ["X", "Y"],
    3: ["X", "Y", "Z"],
}


class ArgumentResolver:
    """Convert the arguments of a call to ``plotcmap`` into a validated
    ``PlotRequest``.

    Parameters
    ==========
    surface_class : type
        Subclass of ``Surface`` used to validate the style options when the
        user doesn't provide a surface.
    registry : PaletteRegistry
        Used to convert named palettes to tables of colors.
    """

    def __init__(self, surface_class=MatplotlibSurface, registry=None):
        self.surface_class = surface_class
        self.registry = PaletteRegistry() if registry is None else registry

    def resolve(self, args, ax=None, match_marker_face_color=False,
        palette_size=None, **kwargs):
        """
        Parameters
        ==========
        args : tuple
            Positional arguments of ``plotcmap``.
        ax : Axes or Surface, optional
            Alternative to passing the target surface as the first
            positional argument.
        match_marker_face_color : bool
            Alternative to the ``"MatchMarkerFaceColor"`` token.
        palette_size : int, optional
            Number of colors extracted from a named palette.
        **kwargs :
            Style options forwarded to the surface.

        Returns
        =======
        request : PlotRequest
        """
        np = import_module('numpy')
        args = list(args)

        # optional leading axis
        surface = as_surface(args[0]) if len(args) > 0 else None
        iax = 0 if surface is None else 1
        if (surface is not None) and (ax is not None):
            raise AmbiguousSurface(
                "plotcmap(ax, __): the target axes was provided both as the "
                "first argument and with the `ax` keyword argument.")
        if (surface is None) and (ax is not None):
            surface = as_surface(ax)
            if surface is None:
                raise IncompatibleSurface(
                    "plotcmap(__, ax=ax): `ax` must be a Matplotlib axes or "
                    "an instance of Surface. Received: %s" % type(ax).__name__)
        axmsg = "ax, " if iax else ""

        if len(args) < 2 + iax:
            raise InsufficientArguments(
                "plotcmap(%sX, Y, Z, cmap, values, fmt): not enough input "
                "arguments, must specify at least the Y vector and cmap "
                "array." % axmsg)

        # locate the palette: the first argument which is not a vector
        vectors = []
        ipal = None
        for i, a in enumerate(args[iax:]):
            v = _to_vector(a)
            if v is None:
                ipal = i
                break
            vectors.append(v)

        if ipal is None:
            raise MissingPalette(
                "plotcmap(%s__, cmap): cmap must be an N X 3 numeric array "
                "or the name of a palette, but all arguments are numeric "
                "vectors." % axmsg)
        if ipal == 0:
            raise TooManyLeadingArguments(
                "plotcmap(%sY, cmap): the Y vector must precede cmap." % axmsg)
        if ipal not in _COORDINATES_NAMES:
            raise TooManyLeadingArguments(
                "plotcmap(%sX, Y, Z, cmap): too many input arguments, at "
                "most 3 vectors of coordinates can precede cmap, received "
                "%s." % (axmsg, ipal))

        names = _COORDINATES_NAMES[ipal]
        signature = "plotcmap(%s%s, cmap)" % (axmsg, ", ".join(names))
        coords = dict(zip(names, vectors))
        self._check_coordinates(coords, signature)
        L = len(coords["Y"])
        if "X" not in coords:
            coords["X"] = np.arange(L, dtype=float)
        dimension = 3 if "Z" in coords else 2

        palette = self.registry.resolve(
            args[iax + ipal], n=palette_size, axmsg=axmsg)

        if (surface is not None) and (not surface.supports_dimension(dimension)):
            raise IncompatibleSurface(
                "%s: a %sD line can't be shown on a %sD axes." % (
                    signature, dimension, 3 if surface.is_3D else 2))

        # trailing arguments
        trailing = args[iax + ipal + 1:]
        token = cfg["match_marker_face_color_token"]
        match_mfc = bool(match_marker_face_color)
        if (len(trailing) > 0) and isinstance(trailing[-1], str) and (
            trailing[-1] == token
        ):
            match_mfc = True
            trailing = trailing[:-1]

        values = np.arange(L, dtype=float)
        if (len(trailing) > 0) and (_as_numeric_array(trailing[0]) is not None):
            values = self._check_values(trailing[0], L, signature)
            trailing = trailing[1:]

        surface_class = self.surface_class if surface is None else type(surface)
        style = self._resolve_style(trailing, kwargs, surface_class)

        return PlotRequest(
            axis=surface,
            dimension=dimension,
            x=coords["X"],
            y=coords["Y"],
            z=coords.get("Z", None),
            palette=palette,
            values=values,
            style=style,
            match_marker_face_color=match_mfc
        )

    @staticmethod
    def _check_coordinates(coords, signature):
        lengths = {k: len(v) for k, v in coords.items()}
        if len(set(lengths.values())) > 1:
            received = ", ".join("%s=%s" % (k, n) for k, n in lengths.items())
            raise CoordinateMismatch(
                "%s: %s must be numeric vectors and have the same length. "
                "Received lengths: %s." % (
                    signature, " and ".join(coords.keys()), received))
        L = lengths["Y"]
        if L < 2:
            raise CoordinateMismatch(
                "%s: at least 2 points are required to draw a line, "
                "received %s." % (signature, L))

    @staticmethod
    def _check_values(obj, L, signature):
        np = import_module('numpy')
        values = _to_vector(obj)
        if (values is None) or (len(values) != L):
            received = (
                "a numeric table" if values is None
                else "%s values" % len(values))
            raise ValueLengthMismatch(
                "%s: values must be a vector and have the same length as Y "
                "(%s). Received %s." % (
                    signature.replace("cmap)", "cmap, values)"), L, received))
        if not np.all(np.isfinite(values)):
            raise InvalidValues(
                "%s: values must be finite real numbers." % (
                    signature.replace("cmap)", "cmap, values)")))
        return values

    @staticmethod
    def _resolve_style(tokens, kwargs, surface_class):
        """Build the style options from the trailing positional tokens
        (an optional format string followed by name/value pairs) and the
        keyword arguments.
        """
        fmt = None
        if len(tokens) % 2 == 1:
            fmt, tokens = tokens[0], tokens[1:]
            if not isinstance(fmt, str):
                raise InvalidStyleOptions(
                    "plotcmap(__, fmt): the format string must be a str. "
                    "Received: %s" % type(fmt).__name__)

        pairs = {}
        for name, value in zip(tokens[::2], tokens[1::2]):
            if not isinstance(name, str):
                raise InvalidStyleOptions(
                    "plotcmap(__, Name, Value): option names must be "
                    "strings. Received: %r" % (name, ))
            # MATLAB-like names: 'LineWidth' -> 'linewidth'
            pairs[name.lower()] = value
        options = merge({}, pairs, kwargs)

        misspelled = _find_misspelled_keys(
            options.keys(), surface_class.style_keys())
        if len(misspelled) > 0:
            raise InvalidStyleOptions(
                "The following style options are not understood by "
                "%s:\n" % surface_class.__name__
                + _format_misspelled_keys(misspelled))

        style, removed = surface_class.strip_color(
            StyleOptions(fmt=fmt or None, kwargs=options))
        if removed and cfg["warn_color_override"]:
            warnings.warn(
                "plotcmap sets the color of the line from the palette: "
                "the provided color is going to be ignored.", stacklevel=4)
        return style


def resolve_arguments(*args, **kwargs):
    """Shortcut for ``ArgumentResolver().resolve(args, **kwargs)``."""
    return ArgumentResolver().resolve(args, **kwargs)
