"""Infinite plane primitive.

The plane is the local XZ plane, so its normal is +Y everywhere.
"""

from __future__ import annotations

from dataclasses import dataclass

from whitted.core.ray import EPSILON, Ray, Tuple4, vector


@dataclass(frozen=True)
class Plane:
    """The infinite local XZ plane (y = 0)."""

    def local_intersect(self, ray: Ray) -> list[float]:
        """Return the single crossing of y = 0.

        A ray whose direction has no Y component (within EPSILON) is
        parallel to the plane, including coplanar rays, and misses.
        """
        if abs(ray.direction[1]) < EPSILON:
            return []
        return [-ray.origin[1] / ray.direction[1]]

    def local_normal_at(self, local_point: Tuple4) -> Tuple4:
        return vector(0.0, 1.0, 0.0)
