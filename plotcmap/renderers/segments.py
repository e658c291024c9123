from plotcmap.drawables import LineDescriptor
from plotcmap.renderers.renderer import Renderer


class SegmentRenderer(Renderer):
    """Draw the line as ``L - 1`` segments. The segment connecting the
    points ``i`` and ``i + 1`` uses the color of point ``i``.

    Segments are drawn in order: where the line overlaps itself, later
    segments are shown on top of earlier ones.
    """
    draw_method = "draw_line"

    def get_descriptors(self):
        points = self.request.get_points()
        descriptors = []
        for i in range(len(points) - 1):
            color = self.colors[i]
            descriptors.append(LineDescriptor(
                start=points[i],
                end=points[i + 1],
                style=self.request.style,
                color=color,
                marker_face_color=self._marker_face_color(color)
            ))
        return descriptors
