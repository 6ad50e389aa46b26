"""Double-napped cone primitive with optional truncation and end caps.

The cone's implicit surface is ``x^2 - y^2 + z^2 = 0``: two nappes meeting
at the local origin, radius ``|y|`` at height ``y``. Truncation and caps
work as for the cylinder except that a cap's radius is ``|bound|``.

Wall intersection:
    a = Dx^2 - Dy^2 + Dz^2
    b = 2 Ox Dx - 2 Oy Dy + 2 Oz Dz
    c = Ox^2 - Oy^2 + Oz^2

When ``a`` vanishes the ray is parallel to one nappe; if ``b`` does not also
vanish the ray still crosses the other nappe once at ``t = -c / 2b``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from whitted.core.ray import EPSILON, Ray, Tuple4, vector
from whitted.geometry.cylinder import _within_radius


@dataclass(frozen=True)
class Cone:
    """A double cone about the local Y axis with its apex at the origin.

    Attributes:
        minimum: Lower Y bound (exclusive). Default -inf.
        maximum: Upper Y bound (exclusive). Default +inf.
        closed: Whether the ends are capped.
    """

    minimum: float = -math.inf
    maximum: float = math.inf
    closed: bool = False

    def __post_init__(self) -> None:
        if self.minimum > self.maximum:
            raise ValueError(
                f"Cone minimum ({self.minimum}) is greater than maximum ({self.maximum})"
            )

    def local_intersect(self, ray: Ray) -> list[float]:
        return self._intersect_walls(ray) + self._intersect_caps(ray)

    def _in_bounds(self, ray: Ray, t: float) -> bool:
        y = ray.origin[1] + t * ray.direction[1]
        return self.minimum < y < self.maximum

    def _intersect_walls(self, ray: Ray) -> list[float]:
        dx, dy, dz = ray.direction[0], ray.direction[1], ray.direction[2]
        ox, oy, oz = ray.origin[0], ray.origin[1], ray.origin[2]

        a = dx * dx - dy * dy + dz * dz
        b = 2.0 * ox * dx - 2.0 * oy * dy + 2.0 * oz * dz
        c = ox * ox - oy * oy + oz * oz

        if abs(a) < EPSILON:
            if abs(b) < EPSILON:
                return []
            t = -c / (2.0 * b)
            return [t] if self._in_bounds(ray, t) else []

        discriminant = b * b - 4.0 * a * c
        if discriminant < 0.0:
            return []

        sqrt_d = math.sqrt(discriminant)
        t0 = (-b - sqrt_d) / (2.0 * a)
        t1 = (-b + sqrt_d) / (2.0 * a)
        if t0 > t1:
            t0, t1 = t1, t0

        return [t for t in (t0, t1) if self._in_bounds(ray, t)]

    def _intersect_caps(self, ray: Ray) -> list[float]:
        if not self.closed or abs(ray.direction[1]) < EPSILON:
            return []

        ts = []
        for bound in (self.minimum, self.maximum):
            if math.isinf(bound):
                continue
            t = (bound - ray.origin[1]) / ray.direction[1]
            # Cap radius equals |bound|, so compare against bound^2
            if _within_radius(ray, t, bound * bound):
                ts.append(t)
        return ts

    def local_normal_at(self, local_point: Tuple4) -> Tuple4:
        """Surface normal on a cap or on the lateral surface.

        On the lateral surface the normal is ``(x, -sign(y) r, z)`` with
        ``r = sqrt(x^2 + z^2)``. Cap points include the rim; on a closed cone
        bounded at 0 the apex belongs to that cap. On an open cone the apex
        normal degenerates to the zero vector.
        """
        x, y, z = local_point[0], local_point[1], local_point[2]
        dist = x * x + z * z

        if self.closed:
            if y >= self.maximum - EPSILON and dist <= self.maximum * self.maximum:
                return vector(0.0, 1.0, 0.0)
            if y <= self.minimum + EPSILON and dist <= self.minimum * self.minimum:
                return vector(0.0, -1.0, 0.0)

        radial = math.sqrt(dist)
        if y > 0.0:
            radial = -radial
        return vector(x, radial, z)
