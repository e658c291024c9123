from sympy.external import import_module


def compute_color_indices(values, n_colors):
    """Map each value to the index of a color in a palette with
    ``n_colors`` rows.

    The location of each value inside the range ``[min(values), max(values)]``
    is scaled to ``[0, n_colors - 1]`` and rounded to the nearest integer
    (halves are rounded away from zero). The minimum value selects the first
    color and the maximum value selects the last one.

    When all values are equal, the fraction ``0 / 0`` is replaced by zero:
    every point selects the first color.

    Parameters
    ==========
    values : array-like
        Finite real numbers, one for each point of the line.
    n_colors : int
        Number of rows of the palette, must be greater than zero.

    Returns
    =======
    indices : np.ndarray
        1-based integer indices, with values in ``[1, n_colors]``.

    Examples
    ========

        >>> from plotcmap.normalizer import compute_color_indices
        >>> compute_color_indices([0, 1, 2, 3], 4)
        array([1, 2, 3, 4])
        >>> compute_color_indices([5, 5, 5], 4)
        array([1, 1, 1])

    """
    np = import_module('numpy')
    if n_colors < 1:
        raise ValueError(
            "`n_colors` must be a positive integer. Received: %s" % n_colors)

    values = np.asarray(values, dtype=float)
    vmin, vmax = np.min(values), np.max(values)
    if vmax > vmin:
        with np.errstate(over="ignore"):
            span = vmax - vmin
        if np.isfinite(span):
            frac = (values - vmin) / span
        else:
            # the range of finite values can exceed the largest float
            half = values / 2
            frac = (half - vmin / 2) / (vmax / 2 - vmin / 2)
    else:
        frac = np.zeros_like(values)

    # np.round uses the "round half to even" rule
    scaled = frac * (n_colors - 1)
    rounded = np.floor(scaled + 0.5)
    return np.clip(rounded.astype(int) + 1, 1, n_colors)


def colors_from_indices(palette, indices):
    """Pick the colors associated to the 1-based ``indices`` from the
    ``N x 3`` palette, as a list of RGB tuples."""
    np = import_module('numpy')
    palette = np.asarray(palette, dtype=float)
    return [tuple(float(c) for c in palette[i - 1]) for i in indices]
