"""Scene module for objects, intersections and lighting.

Components:
    light: Point light source
    intersection: Intersection records, hit selection, shading state
    object: A shape bound to a transform and a material
    world: Light plus object list; ray queries and shadow tests
    presets: Ready-made worlds and cameras

Objects are created once and never mutated. Each gets a unique id used
for equality, which the refraction bookkeeping depends on.
"""

from .intersection import (
    Computations,
    Intersection,
    hit,
    prepare_computations,
    refractive_indices,
    sort_intersections,
)
from .light import PointLight
from .object import SceneObject
from .world import World

# Note: presets are NOT imported here; they pull in the camera, which
# depends on the integrator. Import them from whitted.scene.presets.

__all__ = [
    # Intersections
    "Intersection",
    "Computations",
    "hit",
    "prepare_computations",
    "refractive_indices",
    "sort_intersections",
    # Scene contents
    "PointLight",
    "SceneObject",
    "World",
]
