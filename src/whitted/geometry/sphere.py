"""Unit sphere primitive.

The sphere lives at the origin of its local space with radius 1. World
position and size come from the owning scene object's transform.

The ray-sphere intersection solves ``|O + tD|^2 = 1`` for t:
    a = D . D
    b = 2 (D . O)
    c = O . O - 1

Example:
    >>> from whitted.core.ray import Ray, point, vector
    >>> from whitted.geometry.sphere import Sphere
    >>> Sphere().local_intersect(Ray(point(0, 0, -5), vector(0, 0, 1)))
    [4.0, 6.0]
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from whitted.core.ray import EPSILON, Ray, Tuple4, dot, point, vector


@dataclass(frozen=True)
class Sphere:
    """A unit sphere centred at the local origin."""

    def local_intersect(self, ray: Ray) -> list[float]:
        """Intersect a local-space ray with the unit sphere.

        Args:
            ray: The ray, already transformed into the sphere's local space.

        Returns:
            Both roots in ascending order, or an empty list on a miss. A
            tangent ray yields two equal roots.
        """
        # Vector from sphere center to ray origin (w becomes 0)
        sphere_to_ray = ray.origin - point(0.0, 0.0, 0.0)

        a = dot(ray.direction, ray.direction)
        b = 2.0 * dot(ray.direction, sphere_to_ray)
        c = dot(sphere_to_ray, sphere_to_ray) - 1.0

        discriminant = b * b - 4.0 * a * c
        if a < EPSILON or discriminant < 0.0:
            return []

        sqrt_d = math.sqrt(discriminant)
        t0 = (-b - sqrt_d) / (2.0 * a)
        t1 = (-b + sqrt_d) / (2.0 * a)
        return [t0, t1]

    def local_normal_at(self, local_point: Tuple4) -> Tuple4:
        """Outward normal: the point itself, measured from the origin."""
        return vector(local_point[0], local_point[1], local_point[2])
