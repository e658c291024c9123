"""
Palettes are ``N x 3`` tables of RGB colors, with components in [0, 1].
Row ``i`` (1-based) is the color selected by the color index ``i``.

Other than explicit tables, ``plotcmap`` understands a few "named" palettes
which are converted to tables by ``PaletteRegistry`` before validation:

* the name of a Matplotlib colormap, for example ``"viridis"``.
* the name of a colorcet palette, for example ``"fire"`` (requires colorcet).
* an instance of ``matplotlib.colors.Colormap``.
* a list of color strings, like HEX colors (colorcet palettes) or CSS names.
"""

from numbers import Integral
from PIL import ImageColor
from packaging import version
from sympy.external import import_module
from plotcmap.defaults import cfg
from plotcmap.errors import InvalidPalette
from plotcmap.utils import _as_numeric_array, find_closest_string


def validate_palette(palette, axmsg=""):
    """Verify that ``palette`` is a proper table of colors.

    Parameters
    ==========
    palette :
        The candidate palette.
    axmsg : str
        Prefix inserted in the error message, used to show the signature
        that was used to call ``plotcmap``.

    Returns
    =======
    table : np.ndarray
        A ``N x 3`` array of floats.

    Raises
    ======
    InvalidPalette
        If ``palette`` is not a numeric table with 3 columns and at least
        one row, or if some component is outside the [0, 1] range.
    """
    np = import_module('numpy')
    table = _as_numeric_array(palette)
    if (table is None) or (table.ndim != 2) or (table.shape[1] != 3) or (
        table.shape[0] < 1
    ):
        received = "a non-numeric object of type %s" % type(palette).__name__
        if table is not None:
            received = "an array with shape %s" % (table.shape,)
        raise InvalidPalette(
            "plotcmap(%s__, cmap): cmap must be an N X 3 numeric array.\n"
            "Received %s." % (axmsg, received)
        )
    if not np.all(np.isfinite(table)) or (table.min() < 0) or (
        table.max() > 1
    ):
        raise InvalidPalette(
            "plotcmap(%s__, cmap): the components of the colors of cmap "
            "must be finite numbers in the range [0, 1]." % axmsg
        )
    return table


def _check_palette_size(n):
    """Return ``n`` as a python integer, raising InvalidPalette if it is
    not a positive integer."""
    if isinstance(n, bool) or not isinstance(n, Integral) or (n < 1):
        raise InvalidPalette(
            "plotcmap(__, cmap): the number of colors extracted from a named "
            "palette must be a positive integer. Received: %r" % (n, ))
    return int(n)


def _is_color_list(obj):
    return (
        isinstance(obj, (list, tuple))
        and (len(obj) > 0)
        and all(isinstance(c, str) for c in obj)
    )


class PaletteRegistry:
    """Convert named palettes to ``N x 3`` tables of colors.

    Only the conversion happens here: the resulting table must still be
    validated with ``validate_palette``.
    """

    def __init__(self):
        self.matplotlib = import_module(
            'matplotlib',
            import_kwargs={'fromlist': ['cm', 'colors']},
            min_module_version='1.1.0',
            catch=(RuntimeError,))
        self.np = import_module('numpy')
        self.colorcet = import_module('colorcet')

    def is_name(self, obj):
        """Return True if ``obj`` must be resolved by the registry before it
        can be used as a table of colors."""
        return (
            isinstance(obj, str)
            or isinstance(obj, self.matplotlib.colors.Colormap)
            or _is_color_list(obj)
        )

    def names(self):
        """Return the names of the available palettes."""
        names = list(self._matplotlib_colormaps())
        if self.colorcet is not None:
            names += list(self.colorcet.palette.keys())
        return sorted(set(names))

    def _matplotlib_colormaps(self):
        mpl = self.matplotlib
        if version.parse(mpl.__version__) >= version.parse("3.5.0"):
            return list(mpl.colormaps)
        return mpl.cm.cmap_d.keys()

    def _get_colormap(self, name):
        mpl = self.matplotlib
        if version.parse(mpl.__version__) >= version.parse("3.5.0"):
            return mpl.colormaps[name]
        return mpl.cm.get_cmap(name)

    def resolve_by_name(self, identifier, n=None):
        """Return the table of colors associated to ``identifier``.

        Parameters
        ==========
        identifier : str, Colormap or list of str
            See the module docstring.
        n : int or None
            Number of colors to extract from the palette. If None, the
            name of a Matplotlib colormap and continuous ``Colormap``
            instances are sampled at ``cfg["palette"]["n"]`` points, while
            ``ListedColormap`` instances and lists of colors keep all their
            colors.

        Returns
        =======
        table : np.ndarray
        """
        np = self.np
        Colormap = self.matplotlib.colors.Colormap
        ListedColormap = self.matplotlib.colors.ListedColormap
        if n is not None:
            n = _check_palette_size(n)

        if isinstance(identifier, str):
            if identifier in self._matplotlib_colormaps():
                identifier = self._get_colormap(identifier)
                if n is None:
                    n = _check_palette_size(cfg["palette"]["n"])
            elif (self.colorcet is not None) and (
                identifier in self.colorcet.palette.keys()
            ):
                identifier = list(self.colorcet.palette[identifier])
            else:
                raise InvalidPalette(
                    "plotcmap(__, cmap): '%s' is not the name of a known "
                    "palette. Did you mean '%s'?" % (
                        identifier,
                        find_closest_string(identifier, self.names()))
                )

        if isinstance(identifier, Colormap):
            if (n is None) and isinstance(identifier, ListedColormap):
                colors = identifier(np.arange(identifier.N))
            else:
                if n is None:
                    n = _check_palette_size(cfg["palette"]["n"])
                colors = identifier(np.linspace(0, 1, n))
            return np.asarray(colors, dtype=float)[:, :3]

        if _is_color_list(identifier):
            try:
                colors = [
                    ImageColor.getcolor(c, "RGB") for c in identifier]
            except ValueError as err:
                raise InvalidPalette(
                    "plotcmap(__, cmap): unable to interpret the list of "
                    "colors: %s" % err
                ) from err
            table = np.array(colors, dtype=float) / 255
            if (n is not None) and (n != len(table)):
                idx = np.round(np.linspace(0, len(table) - 1, n))
                table = table[idx.astype(int)]
            return table

        raise InvalidPalette(
            "plotcmap(__, cmap): unable to resolve a palette from an "
            "object of type %s." % type(identifier).__name__
        )

    def resolve(self, palette, n=None, axmsg=""):
        """Convert ``palette`` to a validated table of colors."""
        if self.is_name(palette):
            palette = self.resolve_by_name(palette, n)
        return validate_palette(palette, axmsg)
