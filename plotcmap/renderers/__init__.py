from plotcmap.renderers.renderer import Renderer
from plotcmap.renderers.segments import SegmentRenderer
from plotcmap.renderers.points import PointRenderer, needs_marker_correction


def get_renderer_class(resolved_style):
    """Select the rendering strategy for the given ``ResolvedStyle``."""
    if needs_marker_correction(resolved_style):
        return PointRenderer
    return SegmentRenderer


__all__ = [
    "Renderer", "SegmentRenderer", "PointRenderer",
    "needs_marker_correction", "get_renderer_class"
]
