from plotcmap.drawables import PointDescriptor
from plotcmap.renderers.renderer import Renderer


def needs_marker_correction(resolved_style):
    """Return True if the style shows markers without connecting lines.

    Drawing such a style one segment at a time would show the markers of
    the internal points twice, each one with the color of a different
    segment. Instead, each point must be drawn on its own with its color.

    Parameters
    ==========
    resolved_style : ResolvedStyle
        The style used by the surface, after applying its defaults.
    """
    return (
        (resolved_style.linestyle == "none")
        and (resolved_style.marker != "none")
    )


class PointRenderer(Renderer):
    """Draw the line as ``L`` markers, each one with the color of its own
    point."""
    draw_method = "draw_point"

    def get_descriptors(self):
        descriptors = []
        for point, color in zip(self.request.get_points(), self.colors):
            descriptors.append(PointDescriptor(
                point=point,
                style=self.request.style,
                color=color,
                marker_face_color=self._marker_face_color(color)
            ))
        return descriptors
