from plotcmap._version import __version__
from plotcmap.plot_functions import plotcmap
from plotcmap.normalizer import compute_color_indices
from plotcmap.palettes import PaletteRegistry, validate_palette
from plotcmap.resolver import ArgumentResolver, resolve_arguments
from plotcmap.renderers import needs_marker_correction
from plotcmap.request import PlotRequest, StyleOptions, ResolvedStyle
from plotcmap.surfaces import Surface, MatplotlibSurface
from plotcmap.errors import (
    PlotcmapError, InsufficientArguments, MissingPalette, InvalidPalette,
    CoordinateMismatch, TooManyLeadingArguments, ValueLengthMismatch,
    InvalidValues, InvalidStyleOptions, IncompatibleSurface, AmbiguousSurface
)

__all__ = [
    "__version__", "plotcmap", "compute_color_indices", "PaletteRegistry",
    "validate_palette", "ArgumentResolver", "resolve_arguments",
    "needs_marker_correction", "PlotRequest", "StyleOptions",
    "ResolvedStyle", "Surface", "MatplotlibSurface",
    "PlotcmapError", "InsufficientArguments", "MissingPalette",
    "InvalidPalette", "CoordinateMismatch", "TooManyLeadingArguments",
    "ValueLengthMismatch", "InvalidValues", "InvalidStyleOptions",
    "IncompatibleSurface", "AmbiguousSurface"
]
