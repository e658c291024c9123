import weakref
from mergedeep import merge
from sympy.external import import_module
from plotcmap.errors import InvalidStyleOptions
from plotcmap.request import (
    ResolvedStyle, StyleOptions, _COLOR_KEYS, _MARKER_FACE_COLOR_KEYS
)
from plotcmap.surfaces.base_surface import Surface


# Matplotlib doesn't have the concept of hold: new lines are always added
# to an axes. The state is kept here, for each axes, so that all the
# surfaces wrapping the same axes share it.
_hold_states = weakref.WeakKeyDictionary()

_NONE_STYLES = [None, "", " ", "None", "none"]


def _normalize_style(value):
    if isinstance(value, str) or (value is None):
        return "none" if value in _NONE_STYLES else value
    # dash tuples, MarkerStyle, Path, integer markers: something is shown
    return str(value)


def _import_matplotlib():
    return import_module(
        'matplotlib',
        import_kwargs={
            'fromlist': [
                'pyplot', 'cm', 'colors', 'lines', 'artist', 'transforms'
            ]
        },
        warn_not_installed=True,
        min_module_version='1.1.0',
        catch=(RuntimeError,))


def _import_mplot3d():
    return import_module(
        'mpl_toolkits',  # noqa
        import_kwargs={'fromlist': ['mplot3d']},
        catch=(RuntimeError,))


class MatplotlibSurface(Surface):
    """A surface drawing on a Matplotlib's ``Axes`` (or ``Axes3D``).

    Each segment and each point is a ``Line2D`` (or ``Line3D``) created
    with ``Axes.plot``, so the usual format strings and keyword arguments
    of ``Axes.plot`` are supported, like ``"--o"`` or ``linewidth=2``.

    Parameters
    ==========
    ax : matplotlib.axes.Axes
        The axes in which the lines will be added.
    """

    _library = "matplotlib"

    # keyword arguments accepted by Axes.plot which are not properties
    # of Line2D
    _plot_keys = ["scalex", "scaley", "zdir"]

    def __init__(self, ax):
        self.matplotlib = _import_matplotlib()
        self.mpl_toolkits = _import_mplot3d()
        self.np = import_module('numpy')
        self.plt = self.matplotlib.pyplot
        self.cm = self.matplotlib.cm
        self.ListedColormap = self.matplotlib.colors.ListedColormap
        self.Normalize = self.matplotlib.colors.Normalize
        self.Axes3D = self.mpl_toolkits.mplot3d.Axes3D
        self._ax = ax
        self._cmap = None
        self._norm = None

    @classmethod
    def current(cls, dimension=2):
        """Return a surface wrapping the current axes.

        When a 3D line is requested but the current axes is 2D, a 3D axes
        takes its place if it is empty, otherwise a new figure is created.
        """
        plt = _import_matplotlib().pyplot
        Axes3D = _import_mplot3d().mplot3d.Axes3D
        fig = plt.gcf()
        ax = fig.gca()
        if (dimension == 3) and (not isinstance(ax, Axes3D)):
            if ax.has_data():
                fig = plt.figure()
            else:
                fig.delaxes(ax)
            ax = fig.add_subplot(1, 1, 1, projection="3d")
        return cls(ax)

    @property
    def ax(self):
        """Returns the wrapped axes."""
        return self._ax

    @property
    def fig(self):
        """Returns the figure containing the axes."""
        return self._ax.get_figure()

    @property
    def is_3D(self):
        return isinstance(self._ax, self.Axes3D)

    def get_hold(self):
        return _hold_states.get(self._ax, False)

    def set_hold(self, hold):
        _hold_states[self._ax] = bool(hold)

    def _prepare_axes(self):
        if not self.get_hold():
            self._ax.cla()

    def _get_rendering_kw(self, descriptor):
        drop = list(_COLOR_KEYS)
        lkw = dict(color=descriptor.color)
        if descriptor.marker_face_color is not None:
            drop += _MARKER_FACE_COLOR_KEYS
            lkw["markerfacecolor"] = descriptor.marker_face_color
        # Axes.plot refuses a property together with its alias
        kw = {k: v for k, v in descriptor.style.kwargs.items() if k not in drop}
        return merge({}, kw, lkw)

    def _plot(self, descriptor):
        self._prepare_axes()
        args = descriptor.get_coordinates()
        if descriptor.style.fmt:
            args.append(descriptor.style.fmt)
        kw = self._get_rendering_kw(descriptor)
        lines = self._ax.plot(*args, **kw)
        return lines[0]

    def draw_line(self, descriptor):
        return self._plot(descriptor)

    def draw_point(self, descriptor):
        return self._plot(descriptor)

    def delete_drawables(self, handles):
        for h in handles:
            h.remove()

    @classmethod
    def parse_fmt(cls, fmt):
        """Split a format string into its line style, marker and color.

        Returns
        =======
        linestyle, marker, color : str or None
            None if the component is not present in ``fmt``.

        Raises
        ======
        InvalidStyleOptions
            If ``fmt`` contains unknown symbols, or repeated components.
        """
        mpl = _import_matplotlib()
        line_styles = [k for k in mpl.lines.lineStyles if k.strip()]
        markers = [
            k for k in mpl.lines.lineMarkers
            if isinstance(k, str) and k.strip()
        ]
        colors = list(mpl.colors.BASE_COLORS)

        parsed = dict(linestyle=None, marker=None, color=None)

        def store(key, value):
            if parsed[key] is not None:
                raise InvalidStyleOptions(
                    "Illegal format string '%s': two %s symbols." % (fmt, key))
            parsed[key] = value

        i = 0
        while i < len(fmt):
            c = fmt[i]
            if fmt[i:i+2] in line_styles:
                # '--' and '-.'
                store("linestyle", fmt[i:i+2])
                i += 2
            elif c in line_styles:
                store("linestyle", c)
                i += 1
            elif c in markers:
                store("marker", c)
                i += 1
            elif c in colors:
                store("color", c)
                i += 1
            elif (c == "C") and fmt[i+1:i+2].isdigit():
                # color cycle, like 'C0' or 'C12'
                j = i + 1
                while fmt[j:j+1].isdigit():
                    j += 1
                store("color", fmt[i:j])
                i = j
            else:
                raise InvalidStyleOptions(
                    "Unrecognized character '%s' in format string '%s'." % (
                        c, fmt))
        return parsed["linestyle"], parsed["marker"], parsed["color"]

    @classmethod
    def strip_color(cls, style):
        """Return a copy of ``style`` without color information, and a
        boolean indicating if some color was removed.
        """
        removed = False
        fmt = style.fmt
        if fmt:
            linestyle, marker, color = cls.parse_fmt(fmt)
            if color is not None:
                removed = True
                fmt = (linestyle or "") + (marker or "")
        kwargs = {}
        for k, v in style.kwargs.items():
            if k in _COLOR_KEYS:
                removed = True
            else:
                kwargs[k] = v
        return StyleOptions(fmt=fmt or None, kwargs=kwargs), removed

    @classmethod
    def resolve_style(cls, style):
        """Return the line style and marker that ``Axes.plot`` applies
        when it receives ``style``.
        """
        rc = _import_matplotlib().rcParams
        if style.fmt:
            linestyle, marker, _ = cls.parse_fmt(style.fmt)
            if (linestyle is None) and (marker is None):
                linestyle = rc["lines.linestyle"]
            if linestyle is None:
                # a format string with only a marker hides the line
                linestyle = "None"
            if marker is None:
                marker = "None"
        else:
            linestyle = rc["lines.linestyle"]
            marker = rc["lines.marker"]

        # keyword arguments take precedence over the format string. A None
        # value means "use the default" to Axes.plot
        kw = {k: v for k, v in style.kwargs.items() if v is not None}
        linestyle = kw.get("linestyle", kw.get("ls", linestyle))
        marker = kw.get("marker", marker)
        return ResolvedStyle(
            linestyle=_normalize_style(linestyle),
            marker=_normalize_style(marker))

    @classmethod
    def style_keys(cls):
        """Return the names of the keyword arguments understood by
        ``Axes.plot``, aliases included."""
        mpl = _import_matplotlib()
        inspector = mpl.artist.ArtistInspector(mpl.lines.Line2D)
        keys = list(inspector.get_setters())
        for aliases in inspector.aliasd.values():
            keys.extend(aliases)
        return keys + cls._plot_keys

    def set_view(self, azim, elev):
        if self.is_3D:
            self._ax.view_init(elev=elev, azim=azim)

    def set_palette(self, table):
        self._cmap = self.ListedColormap(self.np.asarray(table, dtype=float))

    def set_color_range(self, vmin, vmax):
        # a colorbar can't show an empty range
        vmin, vmax = self.matplotlib.transforms.nonsingular(
            vmin, vmax, expander=0.5)
        self._norm = self.Normalize(vmin=vmin, vmax=vmax)

    def show_colorbar(self, label=""):
        """Add a colorbar next to the axes, using the palette and the range
        set with ``set_palette`` and ``set_color_range``.
        """
        mappable = self.cm.ScalarMappable(cmap=self._cmap, norm=self._norm)
        cb = self.fig.colorbar(mappable, ax=self._ax)
        if label:
            cb.set_label(label, rotation=90)
        return cb
