"""
Errors raised while resolving a call to ``plotcmap``.

All of them are raised before anything is drawn, so a failed call never
leaves a partially rendered line on the target axes. They derive from
``ValueError``, hence existing ``except ValueError`` clauses keep working.
"""


class PlotcmapError(ValueError):
    """Base class of the errors raised while validating the arguments."""


class InsufficientArguments(PlotcmapError):
    """Less than a vector of coordinates and a palette were provided."""


class MissingPalette(PlotcmapError):
    """No positional argument can be interpreted as a palette."""


class InvalidPalette(PlotcmapError):
    """The palette is not a ``N x 3`` table of colors, or its name is
    unknown."""


class CoordinateMismatch(PlotcmapError):
    """The coordinates are not numeric vectors sharing the same length."""


class TooManyLeadingArguments(PlotcmapError):
    """More than three vectors of coordinates precede the palette."""


class ValueLengthMismatch(PlotcmapError):
    """The values driving the colors don't match the number of points."""


class InvalidValues(PlotcmapError):
    """The values driving the colors contain NaN or infinite numbers."""


class InvalidStyleOptions(PlotcmapError):
    """The style options can't be understood by the drawing surface."""


class IncompatibleSurface(PlotcmapError):
    """The target surface can't show a line with the requested number
    of dimensions."""


class AmbiguousSurface(PlotcmapError):
    """The target surface was provided both as the first positional argument
    and with the ``ax`` keyword argument."""
