"""Pinhole camera model for perspective projection ray generation.

The camera sits at the origin of its own space looking toward -z, with the
canvas one unit in front of it at z = -1. The field of view spans the
longer image side; the pixel size follows from it and the canvas
resolution. A view transform (see ``whitted.core.transform.view_transform``)
places the camera in the world.

Rendering traces exactly one eye ray through the centre of every pixel and
returns a float image; nothing is clamped here.

Example:
    >>> import math
    >>> from whitted.camera.pinhole import Camera
    >>> from whitted.core.ray import point, vector
    >>> from whitted.core.transform import view_transform
    >>> from whitted.scene.presets import default_world
    >>>
    >>> camera = Camera(
    ...     hsize=160,
    ...     vsize=120,
    ...     field_of_view=math.pi / 3,
    ...     transform=view_transform(point(0, 0, -5), point(0, 0, 0), vector(0, 1, 0)),
    ... )
    >>> image = camera.render(default_world())
    >>> image.shape
    (120, 160, 3)
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Callable, Optional

import numpy as np
import numpy.typing as npt

from whitted.core.integrator import MAX_DEPTH
from whitted.core.ray import Ray, normalize, point
from whitted.core.transform import Matrix4, identity, inverse
from whitted.scene.world import World

logger = logging.getLogger(__name__)

# Called after each completed row as callback(rows_done, rows_total)
ProgressCallback = Callable[[int, int], None]


# =============================================================================
# Camera
# =============================================================================


@dataclass(frozen=True, eq=False)
class Camera:
    """A pinhole camera with a fixed resolution and field of view.

    Attributes:
        hsize: Canvas width in pixels.
        vsize: Canvas height in pixels.
        field_of_view: Angle (radians) covered by the longer image side.
        transform: World-to-camera view transform.
        half_width: Half the canvas width at z = -1.
        half_height: Half the canvas height at z = -1.
        pixel_size: Size of one pixel on the canvas at z = -1.

    Raises:
        ValueError: If either size is not positive or the field of view is
            outside (0, pi).
        SingularTransformError: If ``transform`` cannot be inverted.
    """

    hsize: int
    vsize: int
    field_of_view: float
    transform: Matrix4 = field(default_factory=identity)
    inverse_transform: Matrix4 = field(init=False, repr=False)
    half_width: float = field(init=False)
    half_height: float = field(init=False)
    pixel_size: float = field(init=False)

    def __post_init__(self) -> None:
        if self.hsize <= 0 or self.vsize <= 0:
            raise ValueError(f"Camera size must be positive, got {self.hsize}x{self.vsize}")
        if not 0.0 < self.field_of_view < math.pi:
            raise ValueError(f"Field of view must be in (0, pi), got {self.field_of_view}")

        transform = np.asarray(self.transform, dtype=np.float64)
        object.__setattr__(self, "transform", transform)
        object.__setattr__(self, "inverse_transform", inverse(transform))

        half_view = math.tan(self.field_of_view / 2.0)
        aspect = self.hsize / self.vsize
        if aspect >= 1.0:
            half_width, half_height = half_view, half_view / aspect
        else:
            half_width, half_height = half_view * aspect, half_view

        object.__setattr__(self, "half_width", half_width)
        object.__setattr__(self, "half_height", half_height)
        object.__setattr__(self, "pixel_size", half_width * 2.0 / self.hsize)

    def ray_for_pixel(self, px: int, py: int) -> Ray:
        """Generate the eye ray through the centre of pixel (px, py).

        Pixel (0, 0) is the top-left corner. Because the camera looks
        toward -z, +x in camera space is to the left of the image.

        Args:
            px: Column index, 0 at the left.
            py: Row index, 0 at the top.

        Returns:
            A world-space ray with a unit direction.
        """
        x_offset = (px + 0.5) * self.pixel_size
        y_offset = (py + 0.5) * self.pixel_size

        world_x = self.half_width - x_offset
        world_y = self.half_height - y_offset

        pixel = self.inverse_transform @ point(world_x, world_y, -1.0)
        origin = self.inverse_transform @ point(0.0, 0.0, 0.0)
        return Ray(origin, normalize(pixel - origin))

    def render(
        self,
        world: World,
        depth: int = MAX_DEPTH,
        callback: Optional[ProgressCallback] = None,
    ) -> npt.NDArray[np.float64]:
        """Render the world into a float image.

        Args:
            world: The scene to render.
            depth: Recursion budget for reflection and refraction.
            callback: Optional progress hook, called after every row.

        Returns:
            Array of shape (vsize, hsize, 3) with unclamped linear colors.
        """
        logger.debug(
            "Rendering %dx%d with %d objects, depth %d",
            self.hsize,
            self.vsize,
            len(world.objects),
            depth,
        )

        image = np.zeros((self.vsize, self.hsize, 3), dtype=np.float64)
        for y in range(self.vsize):
            for x in range(self.hsize):
                image[y, x] = world.color_at(self.ray_for_pixel(x, y), depth)
            if callback is not None:
                callback(y + 1, self.vsize)

        logger.debug("Finished rendering %d rows", self.vsize)
        return image
