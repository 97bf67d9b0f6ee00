"""Screen parameters for `Vector3.project2D`."""
from typing import NamedTuple

from py_vec3.vector import Vector3

__all__ = ('Viewport',)


class Viewport(NamedTuple):
    """Bundle of the arguments taken by `Vector3.project2D`.

    Attributes:
        width: Screen width in pixels.
        height: Screen height in pixels.
        fov: Field-of-view scale factor.
        viewer_distance: Distance from the viewer to the projection plane.

    Examples:
        ```python
        screen = Viewport(800, 600, fov=300.0, viewer_distance=5.0)
        pixel = screen.project(Vector3(1.0, 1.0, 0.0))  # (460.0, 240.0, 0.0)
        ```
    """

    width: int = 640
    height: int = 480
    fov: float = 256.0
    viewer_distance: float = 4.0

    def project(self, v: Vector3) -> Vector3:
        """Project `v` onto this viewport; same as `v.project2D(*self)`."""
        return v.project2D(self.width, self.height, self.fov, self.viewer_distance)

    @classmethod
    def default(cls) -> 'Viewport':
        """The viewport of the active configuration."""
        from py_vec3.config import get_config  # config imports this module

        return get_config().viewport
