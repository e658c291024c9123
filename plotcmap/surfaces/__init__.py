from sympy.external import import_module
from plotcmap.surfaces.base_surface import Surface
from plotcmap.surfaces.matplotlib import MatplotlibSurface


def as_surface(obj):
    """Return a ``Surface`` wrapping ``obj``, or None if ``obj`` is not
    something that can be drawn on."""
    if isinstance(obj, Surface):
        return obj
    matplotlib = import_module(
        'matplotlib',
        import_kwargs={'fromlist': ['axes']},
        catch=(RuntimeError,))
    if (matplotlib is not None) and isinstance(obj, matplotlib.axes.Axes):
        return MatplotlibSurface(obj)
    return None


__all__ = ["Surface", "MatplotlibSurface", "as_surface"]
