"""Cylinder primitive with optional truncation and end caps.

The cylinder has radius 1 around the local Y axis. ``minimum`` and
``maximum`` truncate it (both exclusive for the wall); by default it is
infinite. A closed cylinder adds flat end caps at the two bounds.

Wall intersection solves the quadratic for ``x^2 + z^2 = 1`` with Y
ignored:
    a = Dx^2 + Dz^2
    b = 2 Ox Dx + 2 Oz Dz
    c = Ox^2 + Oz^2 - 1

Example:
    >>> from whitted.core.ray import Ray, point, vector
    >>> from whitted.geometry.cylinder import Cylinder
    >>> Cylinder().local_intersect(Ray(point(0, 0, -5), vector(0, 0, 1)))
    [4.0, 6.0]
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from whitted.core.ray import EPSILON, Ray, Tuple4, vector


@dataclass(frozen=True)
class Cylinder:
    """A unit-radius cylinder about the local Y axis.

    Attributes:
        minimum: Lower Y bound (exclusive). Default -inf.
        maximum: Upper Y bound (exclusive). Default +inf.
        closed: Whether the ends are capped. Caps are only meaningful on a
            truncated cylinder.
    """

    minimum: float = -math.inf
    maximum: float = math.inf
    closed: bool = False

    def __post_init__(self) -> None:
        if self.minimum > self.maximum:
            raise ValueError(
                f"Cylinder minimum ({self.minimum}) is greater than maximum ({self.maximum})"
            )

    def local_intersect(self, ray: Ray) -> list[float]:
        return self._intersect_walls(ray) + self._intersect_caps(ray)

    def _intersect_walls(self, ray: Ray) -> list[float]:
        dx, dy, dz = ray.direction[0], ray.direction[1], ray.direction[2]
        ox, oy, oz = ray.origin[0], ray.origin[1], ray.origin[2]

        a = dx * dx + dz * dz
        # Ray is parallel to the y axis, so it cannot cross the wall
        if a < EPSILON:
            return []

        b = 2.0 * ox * dx + 2.0 * oz * dz
        c = ox * ox + oz * oz - 1.0

        discriminant = b * b - 4.0 * a * c
        if discriminant < 0.0:
            return []

        sqrt_d = math.sqrt(discriminant)
        t0 = (-b - sqrt_d) / (2.0 * a)
        t1 = (-b + sqrt_d) / (2.0 * a)
        if t0 > t1:
            t0, t1 = t1, t0

        ts = []
        for t in (t0, t1):
            y = oy + t * dy
            if self.minimum < y < self.maximum:
                ts.append(t)
        return ts

    def _intersect_caps(self, ray: Ray) -> list[float]:
        # Caps only matter on a closed cylinder the ray could reach
        if not self.closed or abs(ray.direction[1]) < EPSILON:
            return []

        ts = []
        for bound in (self.minimum, self.maximum):
            if math.isinf(bound):
                continue
            t = (bound - ray.origin[1]) / ray.direction[1]
            if _within_radius(ray, t, 1.0):
                ts.append(t)
        return ts

    def local_normal_at(self, local_point: Tuple4) -> Tuple4:
        x, y, z = local_point[0], local_point[1], local_point[2]
        dist = x * x + z * z

        if self.closed and dist <= 1.0:
            if y >= self.maximum - EPSILON:
                return vector(0.0, 1.0, 0.0)
            if y <= self.minimum + EPSILON:
                return vector(0.0, -1.0, 0.0)
        return vector(x, 0.0, z)


def _within_radius(ray: Ray, t: float, radius_squared: float) -> bool:
    """Check whether the ray at ``t`` lies within a disk about the Y axis."""
    x = ray.origin[0] + t * ray.direction[0]
    z = ray.origin[2] + t * ray.direction[2]
    return x * x + z * z <= radius_squared
