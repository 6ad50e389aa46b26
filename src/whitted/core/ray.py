"""Ray data structure and tuple utilities.

Points and vectors are homogeneous 4-component numpy arrays. The ``w``
component tags the kind of tuple: ``w == 1`` for a point and ``w == 0`` for a
vector. Vector operations never look at ``w`` beyond that tag.

All approximate comparisons in the package go through :data:`EPSILON` so that
intersection, normal and color checks share a single tolerance.

Example:
    >>> from whitted.core.ray import Ray, point, vector
    >>> ray = Ray(origin=point(0.0, 0.0, -5.0), direction=vector(0.0, 0.0, 1.0))
    >>> ray.position(5.0)
    array([0., 0., 0., 1.])
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np
import numpy.typing as npt

# Tolerance for every "is this close enough to zero/equal" decision
EPSILON = 1e-5

Tuple4 = npt.NDArray[np.float64]


def point(x: float, y: float, z: float) -> Tuple4:
    """Create a point (w = 1)."""
    return np.array([x, y, z, 1.0], dtype=np.float64)


def vector(x: float, y: float, z: float) -> Tuple4:
    """Create a vector (w = 0)."""
    return np.array([x, y, z, 0.0], dtype=np.float64)


def is_point(t: Tuple4) -> bool:
    return is_equal(float(t[3]), 1.0)


def is_vector(t: Tuple4) -> bool:
    return is_equal(float(t[3]), 0.0)


# =============================================================================
# Scalar / Tuple Comparisons
# =============================================================================


def is_equal(a: float, b: float) -> bool:
    """Return True when two floats differ by less than EPSILON."""
    return abs(a - b) < EPSILON


def tuples_equal(a: npt.ArrayLike, b: npt.ArrayLike) -> bool:
    """Component-wise epsilon comparison of two tuples (or colors)."""
    diff = np.abs(np.asarray(a, dtype=np.float64) - np.asarray(b, dtype=np.float64))
    return bool(np.all(diff < EPSILON))


# =============================================================================
# Vector Utility Functions
# =============================================================================


def dot(a: Tuple4, b: Tuple4) -> float:
    """Compute the dot product of two tuples."""
    return float(np.dot(a, b))


def cross(a: Tuple4, b: Tuple4) -> Tuple4:
    """Compute the cross product of two vectors.

    Only the xyz components take part; the result is always a vector.
    """
    c = np.cross(a[:3], b[:3])
    return vector(float(c[0]), float(c[1]), float(c[2]))


def magnitude(v: Tuple4) -> float:
    """Compute the Euclidean length of a vector."""
    return math.sqrt(dot(v, v))


def normalize(v: Tuple4) -> Tuple4:
    """Normalize a vector to unit length.

    A zero-length vector is returned unchanged rather than producing NaNs.
    """
    length = magnitude(v)
    if length < EPSILON:
        return v.copy()
    return v / length


def reflect(incident: Tuple4, normal: Tuple4) -> Tuple4:
    """Reflect an incident vector about a normal.

    Computes ``d - 2 (d . n) n``. The normal should be unit length.

    Args:
        incident: The incoming direction vector (pointing toward the surface).
        normal: The surface normal.

    Returns:
        The reflected direction vector.
    """
    return incident - normal * 2.0 * dot(incident, normal)


# =============================================================================
# Ray
# =============================================================================


@dataclass(frozen=True, eq=False)
class Ray:
    """A ray with an origin point and direction vector.

    Rays are transient and never mutated; transforming a ray produces a new
    one.

    Attributes:
        origin: The starting point of the ray (point tuple).
        direction: The direction of the ray (vector tuple). It is not
            normalized by the constructor; ``t`` values are measured in units
            of this vector's length.
    """

    origin: Tuple4
    direction: Tuple4

    def position(self, t: float) -> Tuple4:
        """Compute the point along the ray at parameter t."""
        return self.origin + self.direction * t

    def transform(self, matrix: npt.NDArray[np.float64]) -> Ray:
        """Return a new ray with origin and direction multiplied by ``matrix``."""
        return Ray(origin=matrix @ self.origin, direction=matrix @ self.direction)

    def is_close(self, other: Ray) -> bool:
        """Epsilon comparison of origin and direction."""
        return tuples_equal(self.origin, other.origin) and tuples_equal(
            self.direction, other.direction
        )
