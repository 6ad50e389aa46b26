"""Axis-aligned cube primitive.

The cube spans [-1, 1] on every local axis. Intersection uses the slab
method: each axis contributes the interval of t where the ray lies between
the two parallel faces, and the ray is inside the cube on the overlap of
the three intervals.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from whitted.core.ray import EPSILON, Ray, Tuple4, vector


def check_axis(origin: float, direction: float) -> tuple[float, float]:
    """Compute the [tmin, tmax] interval for one pair of slab faces.

    Args:
        origin: The ray origin component along this axis.
        direction: The ray direction component along this axis.

    Returns:
        Tuple (tmin, tmax) with tmin <= tmax. When the direction component
        is close to zero the interval is unbounded (signed infinities), so
        the ray is either always or never between the faces.
    """
    tmin_numerator = -1.0 - origin
    tmax_numerator = 1.0 - origin

    if abs(direction) >= EPSILON:
        tmin = tmin_numerator / direction
        tmax = tmax_numerator / direction
    else:
        tmin = math.copysign(math.inf, tmin_numerator)
        tmax = math.copysign(math.inf, tmax_numerator)

    if tmin > tmax:
        tmin, tmax = tmax, tmin
    return tmin, tmax


@dataclass(frozen=True)
class Cube:
    """An axis-aligned cube spanning [-1, 1] in x, y and z."""

    def local_intersect(self, ray: Ray) -> list[float]:
        xtmin, xtmax = check_axis(ray.origin[0], ray.direction[0])
        ytmin, ytmax = check_axis(ray.origin[1], ray.direction[1])
        ztmin, ztmax = check_axis(ray.origin[2], ray.direction[2])

        tmin = max(xtmin, ytmin, ztmin)
        tmax = min(xtmax, ytmax, ztmax)

        # A zero-length direction leaves every slab unbounded
        if tmin > tmax or not (math.isfinite(tmin) and math.isfinite(tmax)):
            return []
        return [tmin, tmax]

    def local_normal_at(self, local_point: Tuple4) -> Tuple4:
        """Normal of the face whose axis has the largest absolute coordinate.

        Ties (edges and corners) resolve in x, y, z order.
        """
        ax, ay, az = abs(local_point[0]), abs(local_point[1]), abs(local_point[2])
        maxc = max(ax, ay, az)

        if maxc == ax:
            return vector(local_point[0], 0.0, 0.0)
        if maxc == ay:
            return vector(0.0, local_point[1], 0.0)
        return vector(0.0, 0.0, local_point[2])
