from plotcmap.defaults import cfg
from plotcmap.normalizer import compute_color_indices
from plotcmap.renderers import get_renderer_class
from plotcmap.resolver import ArgumentResolver
from plotcmap.surfaces import MatplotlibSurface


def plotcmap(*args, ax=None, colorbar=False, colorbar_label=None,
    match_marker_face_color=False, palette_size=None, **kwargs):
    """
    Plot a 2D or 3D line whose color changes along its length, mapping the
    values of another variable onto a palette.

    Typical usage examples are in the followings:

    - Plot a 2D colormapped line, using the implicit values ``0, ..., L-1``:
        `plotcmap(X, Y, cmap)`
    - Map the values of ``values`` onto the palette:
        `plotcmap(X, Y, cmap, values)`
    - Use the implicit x-coordinates ``0, ..., L-1``:
        `plotcmap(Y, cmap, values)`
    - Plot a 3D colormapped line:
        `plotcmap(X, Y, Z, cmap, values)`
    - Customize line style, markers and line width:
        `plotcmap(__, "--o", "LineWidth", 2)` or
        `plotcmap(__, "--o", linewidth=2)`
    - Fill the markers with the color of the line:
        `plotcmap(__, "MatchMarkerFaceColor")`
    - Plot on a specific axes:
        `plotcmap(ax, __)`

    Parameters
    ==========

    args :
        X, Y, Z : array-like
            Numeric vectors with the same length (at least 2 points).

        cmap : array-like, str, Colormap, list of str
            A ``N x 3`` table of RGB colors with components in [0, 1], the
            name of a Matplotlib colormap or colorcet palette, an instance
            of ``matplotlib.colors.Colormap``, or a list of color strings.
            The first row is used by the minimum value, the last row by the
            maximum value.

        values : array-like, optional
            Numeric vector with the same length as Y. If not provided,
            ``0, 1, ..., L-1`` is used.

        fmt : str, optional
            Matplotlib format string, for example ``"--"``, ``"o"`` or
            ``":s"``. Colors in the format string are ignored.

        Name, Value : optional
            Pairs of style options, like ``"LineWidth", 2``. Names are
            converted to lower case.

    ax : Axes or Surface, optional
        The target axes. Alternative to passing it as the first positional
        argument. If not provided, the current axes is used.

    colorbar : bool, optional
        If True, show a colorbar spanning the range of ``values`` and
        return its handle too. Default to False.

    colorbar_label : str, optional
        Label of the colorbar. Default to ``cfg["colorbar"]["label"]``.

    match_marker_face_color : bool, optional
        Alternative to the ``"MatchMarkerFaceColor"`` token: fill the
        markers with the color of the segment (or point) they belong to.

    palette_size : int, optional
        Number of colors extracted from a named palette.

    **kwargs :
        Style options forwarded to the surface, like ``linewidth=2``.
        ``color`` is ignored: the colors come from the palette.

    Returns
    =======

    handles : list
        The graphical elements that were drawn. There are ``L - 1``
        segments, unless the style shows markers without connecting lines,
        in which case there are ``L`` points.

    cb : Colorbar
        Only returned when ``colorbar=True``.

    Raises
    ======

    PlotcmapError
        If the arguments don't follow one of the signatures shown above.
        Nothing is drawn in this case.

    Notes
    =====

    1. Segments are colored with the value of their starting point.
    2. The minimum value selects the first row of the palette, the maximum
       value selects the last row. When all values are equal, all segments
       use the first row.
    3. A palette with a single row can't be distinguished from a vector of
       coordinates: use at least two rows.

    Examples
    ========

    .. plot::
       :context: reset
       :format: doctest
       :include-source: True

       >>> import numpy as np
       >>> from plotcmap import plotcmap
       >>> t = np.linspace(0, 4 * np.pi, 200)
       >>> handles = plotcmap(t, np.sin(t), "viridis", np.cos(t), linewidth=2)
       >>> len(handles)
       199

    Filled markers, with a colorbar:

    .. plot::
       :context: close-figs
       :format: doctest
       :include-source: True

       >>> cmap = [[1, 0, 0], [0, 1, 0], [0, 0, 1], [1, 1, 0]]
       >>> handles, cb = plotcmap([0, 1, 2, 3], [0, 1, 0, 1], cmap, "o",
       ...     "MatchMarkerFaceColor", colorbar=True)
       >>> len(handles)
       4

    3D line:

    .. plot::
       :context: close-figs
       :format: doctest
       :include-source: True

       >>> handles = plotcmap(np.cos(t), np.sin(t), t, "plasma", ":")

    """
    resolver = ArgumentResolver()
    request = resolver.resolve(
        args, ax=ax, match_marker_face_color=match_marker_face_color,
        palette_size=palette_size, **kwargs)

    surface = request.axis
    if surface is None:
        surface = MatplotlibSurface.current(request.dimension)

    indices = compute_color_indices(request.values, request.n_colors)
    renderer_class = get_renderer_class(
        surface.resolve_style(request.style))
    renderer = renderer_class(surface, request, indices)

    with surface.hold_scope():
        handles = renderer.draw()

    if not colorbar:
        return handles

    label = cfg["colorbar"]["label"] if colorbar_label is None else colorbar_label
    surface.set_palette(request.palette)
    surface.set_color_range(
        float(request.values.min()), float(request.values.max()))
    cb = surface.show_colorbar(label)
    return handles, cb
