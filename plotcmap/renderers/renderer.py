from plotcmap.defaults import cfg
from plotcmap.normalizer import colors_from_indices


class Renderer:
    """Base class for renderers. A renderer is responsible to convert a
    ``PlotRequest`` into graphical elements added to a surface.

    A renderer stores the following information:

    * ``surface``: the instance of ``Surface`` receiving the graphical
      elements.
    * ``request``: the ``PlotRequest`` with the coordinates, the palette and
      the style.
    * ``indices``: the 1-based color indices, one for each point.
    * ``handles``: a list populated by ``draw()``, containing the handles
      returned by the surface in the same order of the descriptors.

    Subclasses implement ``get_descriptors()``, returning the list of
    descriptors to be drawn, and set ``draw_method`` to the name of the
    surface's method receiving them.
    """
    draw_method = None

    def __init__(self, surface, request, indices):
        self.surface = surface
        self.request = request
        self.indices = indices
        self.colors = colors_from_indices(request.palette, indices)
        self.handles = []

    def _marker_face_color(self, color):
        return color if self.request.match_marker_face_color else None

    def get_descriptors(self):
        raise NotImplementedError

    def draw(self):
        descriptors = self.get_descriptors()
        draw = getattr(self.surface, self.draw_method)
        try:
            for d in descriptors:
                self.handles.append(draw(d))
        except Exception:
            # don't leave a partially drawn line on the surface
            self.surface.delete_drawables(self.handles)
            self.handles = []
            raise

        if self.request.is_3D:
            self.surface.set_view(cfg["view"]["azim"], cfg["view"]["elev"])
        return self.handles
