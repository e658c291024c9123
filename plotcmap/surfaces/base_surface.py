from contextlib import contextmanager


class Surface:
    """Base class for drawing surfaces. A surface wraps the object in which
    graphical elements are shown (for example, a Matplotlib ``Axes``) and
    exposes the few capabilities required by ``plotcmap``:

    * ``draw_line(descriptor)``, ``draw_point(descriptor)``: create a
      graphical element from a ``LineDescriptor`` or a ``PointDescriptor``
      and return its handle. The descriptor carries the final style and
      colors: handles are never modified after creation.
    * ``get_hold()``, ``set_hold(hold)``: whether new graphical elements are
      added to the existing ones (True) or replace them (False).
      ``hold_scope()`` is a context manager turning hold on and restoring the
      original state on exit, even if an error is raised.
    * ``delete_drawables(handles)``: remove graphical elements.
    * ``resolve_style(style)``: return the ``ResolvedStyle`` that the surface
      is going to use for the given ``StyleOptions``, defaults included.
    * ``style_keys()``: the names of the style options understood by the
      surface.
    * ``strip_color(style)``: remove any color from the style options.
    * ``set_view(azim, elev)``: camera position of 3D surfaces.
    * ``set_palette(table)``, ``set_color_range(vmin, vmax)``,
      ``show_colorbar(label)``: colorbar support.
    * ``current(dimension)``: class method returning the surface that is
      used when none is provided by the user.

    Errors raised by these methods are not handled by ``plotcmap``.
    """

    _library = ""

    @classmethod
    def current(cls, dimension=2):
        raise NotImplementedError

    @property
    def is_3D(self):
        return False

    def supports_dimension(self, dimension):
        """Return True if the surface can show a line with the given number
        of dimensions. 2D lines can be shown on 3D surfaces."""
        return (dimension == 2) or self.is_3D

    def draw_line(self, descriptor):
        raise NotImplementedError

    def draw_point(self, descriptor):
        raise NotImplementedError

    def get_hold(self):
        raise NotImplementedError

    def set_hold(self, hold):
        raise NotImplementedError

    @contextmanager
    def hold_scope(self):
        hold = self.get_hold()
        self.set_hold(True)
        try:
            yield self
        finally:
            self.set_hold(hold)

    def delete_drawables(self, handles):
        raise NotImplementedError

    @classmethod
    def resolve_style(cls, style):
        raise NotImplementedError

    @classmethod
    def style_keys(cls):
        raise NotImplementedError

    @classmethod
    def strip_color(cls, style):
        raise NotImplementedError

    def set_view(self, azim, elev):
        raise NotImplementedError

    def set_palette(self, table):
        raise NotImplementedError

    def set_color_range(self, vmin, vmax):
        raise NotImplementedError

    def show_colorbar(self, label=""):
        raise NotImplementedError

    def __repr__(self):
        return "%s surface" % self._library
