"""Ready-made worlds and cameras.

``default_world`` is the small two-sphere world that most shading tests are
written against. ``showcase_world`` puts every primitive and pattern in one
scene, lit by a single point light, with a glass and a mirror sphere to
exercise refraction and reflection.

Example:
    >>> from whitted.scene.presets import showcase_camera, showcase_world
    >>> camera = showcase_camera(320, 180)
    >>> image = camera.render(showcase_world())
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable

from whitted.camera.pinhole import Camera
from whitted.core.color import color
from whitted.core.integrator import MAX_DEPTH
from whitted.core.ray import point, vector
from whitted.core.transform import (
    chain,
    rotation_x,
    rotation_y,
    scaling,
    translation,
    view_transform,
)
from whitted.geometry import Cone, Cube, Cylinder, Plane, Sphere
from whitted.materials import (
    GLASS_INDEX,
    CheckersPattern,
    GradientPattern,
    Material,
    RingPattern,
    StripePattern,
)
from whitted.scene.light import PointLight
from whitted.scene.object import SceneObject
from whitted.scene.world import World

# =============================================================================
# Default World
# =============================================================================

DEFAULT_LIGHT_POSITION = (-10.0, 10.0, -10.0)


def default_world() -> World:
    """Create the canonical two-sphere test world.

    A white point light at (-10, 10, -10), a unit sphere colored
    (0.8, 1.0, 0.6) with diffuse 0.7 and specular 0.2, and a concentric
    sphere scaled by 0.5 with the default material.
    """
    light = PointLight(point(*DEFAULT_LIGHT_POSITION), color(1.0, 1.0, 1.0))

    outer = SceneObject(
        Sphere(),
        material=Material(coloring=color(0.8, 1.0, 0.6), diffuse=0.7, specular=0.2),
    )
    inner = SceneObject(Sphere(), transform=scaling(0.5, 0.5, 0.5))

    return World(light=light, objects=[outer, inner])


# =============================================================================
# Showcase Scene
# =============================================================================

SHOWCASE_FROM = (0.0, 2.5, -7.0)
SHOWCASE_TO = (0.0, 0.8, 0.0)


def showcase_world() -> World:
    """Create a scene using every primitive and pattern.

    Contents:
        - Checkered, slightly reflective floor plane
        - Striped back wall (a rotated plane)
        - Glass sphere and mirror sphere
        - Cube with a gradient
        - Capped cylinder with rings
        - Truncated, capped cone
    """
    light = PointLight(point(-6.0, 8.0, -8.0), color(1.0, 1.0, 1.0))

    floor = SceneObject(
        Plane(),
        material=Material(
            coloring=CheckersPattern(color(0.9, 0.9, 0.9), color(0.15, 0.15, 0.2)),
            specular=0.0,
            reflective=0.15,
        ),
    )

    back_wall = SceneObject(
        Plane(),
        transform=chain(rotation_x(math.pi / 2), translation(0.0, 0.0, 8.0)),
        material=Material(
            coloring=StripePattern(
                color(0.55, 0.65, 0.8),
                color(0.45, 0.55, 0.7),
                transform=chain(scaling(0.5, 0.5, 0.5), rotation_y(math.pi / 4)),
            ),
            specular=0.0,
        ),
    )

    glass_sphere = SceneObject(
        Sphere(),
        transform=translation(-0.6, 1.0, 0.2),
        material=Material(
            coloring=color(0.05, 0.05, 0.08),
            diffuse=0.1,
            specular=1.0,
            shininess=300.0,
            reflective=0.9,
            transparency=0.9,
            refractive_index=GLASS_INDEX,
        ),
    )

    mirror_sphere = SceneObject(
        Sphere(),
        transform=chain(scaling(0.7, 0.7, 0.7), translation(1.6, 0.7, 1.6)),
        material=Material(
            coloring=color(0.1, 0.1, 0.1),
            diffuse=0.3,
            specular=1.0,
            reflective=0.8,
        ),
    )

    cube = SceneObject(
        Cube(),
        transform=chain(
            scaling(0.45, 0.45, 0.45),
            rotation_y(math.pi / 5),
            translation(2.4, 0.45, -0.8),
        ),
        material=Material(
            coloring=GradientPattern(
                color(0.9, 0.3, 0.2),
                color(0.9, 0.8, 0.2),
                transform=chain(scaling(2.0, 1.0, 1.0), translation(-1.0, 0.0, 0.0)),
            ),
            diffuse=0.8,
            specular=0.3,
        ),
    )

    cylinder = SceneObject(
        Cylinder(minimum=0.0, maximum=1.5, closed=True),
        transform=chain(scaling(0.4, 1.0, 0.4), translation(-2.6, 0.0, 0.6)),
        material=Material(
            coloring=RingPattern(
                color(0.3, 0.7, 0.4),
                color(0.9, 0.95, 0.9),
                transform=scaling(0.2, 0.2, 0.2),
            ),
            specular=0.4,
        ),
    )

    cone = SceneObject(
        Cone(minimum=-1.0, maximum=0.0, closed=True),
        transform=chain(scaling(0.5, 1.2, 0.5), translation(-1.8, 1.2, -1.4)),
        material=Material(coloring=color(0.6, 0.3, 0.8), diffuse=0.8, specular=0.5),
    )

    return World(
        light=light,
        objects=[floor, back_wall, glass_sphere, mirror_sphere, cube, cylinder, cone],
    )


def showcase_camera(hsize: int, vsize: int, field_of_view: float = math.pi / 3) -> Camera:
    """Create a camera framing ``showcase_world`` at the given resolution."""
    return Camera(
        hsize,
        vsize,
        field_of_view,
        transform=view_transform(point(*SHOWCASE_FROM), point(*SHOWCASE_TO), vector(0.0, 1.0, 0.0)),
    )


def default_camera(hsize: int, vsize: int, field_of_view: float = math.pi / 3) -> Camera:
    """Create a camera looking at ``default_world`` from (0, 0, -5)."""
    return Camera(
        hsize,
        vsize,
        field_of_view,
        transform=view_transform(point(0.0, 0.0, -5.0), point(0.0, 0.0, 0.0), vector(0.0, 1.0, 0.0)),
    )


# Scene name -> (world factory, camera factory)
SCENES: dict[str, tuple[Callable[[], World], Callable[..., Camera]]] = {
    "default": (default_world, default_camera),
    "showcase": (showcase_world, showcase_camera),
}


# =============================================================================
# Render Configuration
# =============================================================================


@dataclass
class RenderConfig:
    """Settings for rendering one of the preset scenes.

    Attributes:
        scene: Key into ``SCENES``.
        width: Image width in pixels.
        height: Image height in pixels.
        field_of_view: Field of view in degrees, spanning the longer side.
        max_depth: Recursion budget for reflection and refraction.
        output: Output file path. A ``.ppm`` suffix selects PPM, anything
            else is written as PNG.

    Raises:
        ValueError: If any setting is out of range.
    """

    scene: str = "showcase"
    width: int = 400
    height: int = 225
    field_of_view: float = 60.0
    max_depth: int = MAX_DEPTH
    output: str = "render.png"

    def __post_init__(self) -> None:
        if self.scene not in SCENES:
            raise ValueError(f"Unknown scene {self.scene!r}; choose from {sorted(SCENES)}")
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Image size must be positive, got {self.width}x{self.height}")
        if not 0.0 < self.field_of_view < 180.0:
            raise ValueError(f"Field of view must be in (0, 180) degrees, got {self.field_of_view}")
        if self.max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {self.max_depth}")
        if not self.output:
            raise ValueError("An output path is required")

    def build(self) -> tuple[World, Camera]:
        """Create the configured world and a camera framing it."""
        make_world, make_camera = SCENES[self.scene]
        return make_world(), make_camera(self.width, self.height, math.radians(self.field_of_view))
