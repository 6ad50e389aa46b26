"""Geometry module for shape primitives.

Every primitive is defined in its own canonical local space and knows
nothing about transforms or materials; those belong to the scene object
that wraps it.

Components:
    sphere: Unit sphere at the origin
    plane: The infinite XZ plane
    cube: Axis-aligned cube spanning [-1, 1]
    cylinder: Unit-radius cylinder about Y, optionally truncated and capped
    cone: Double cone about Y, optionally truncated and capped

Each primitive follows the same protocol:
    ts = shape.local_intersect(local_ray)       # unordered t values
    n = shape.local_normal_at(local_point)      # local-space normal
"""

from typing import Union

from .cone import Cone
from .cube import Cube, check_axis
from .cylinder import Cylinder
from .plane import Plane
from .sphere import Sphere

# Closed set of primitives a scene object can wrap
Shape = Union[Sphere, Plane, Cube, Cylinder, Cone]

__all__ = [
    "Shape",
    "Sphere",
    "Plane",
    "Cube",
    "check_axis",
    "Cylinder",
    "Cone",
]
