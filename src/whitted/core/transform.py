"""4x4 affine transforms built on numpy.

Every object, pattern and camera in the scene carries a transform matrix and
its cached inverse. Matrices are plain ``numpy`` arrays of shape (4, 4).

Transforms compose right to left under matrix multiplication, so
``translation(...) @ scaling(...)`` scales first. :func:`chain` offers the
left-to-right reading order used when describing a scene.

Example:
    >>> import math
    >>> from whitted.core.transform import chain, rotation_x, scaling, translation
    >>> m = chain(rotation_x(math.pi / 2), scaling(5, 5, 5), translation(10, 5, 7))
"""

from __future__ import annotations

import math

import numpy as np
import numpy.typing as npt

from whitted.core.ray import EPSILON, Tuple4, normalize, cross

Matrix4 = npt.NDArray[np.float64]


class SingularTransformError(ValueError):
    """Raised when a transform with a zero determinant is inverted."""


def identity() -> Matrix4:
    return np.eye(4, dtype=np.float64)


def translation(x: float, y: float, z: float) -> Matrix4:
    m = identity()
    m[0, 3] = x
    m[1, 3] = y
    m[2, 3] = z
    return m


def scaling(x: float, y: float, z: float) -> Matrix4:
    return np.diag([x, y, z, 1.0]).astype(np.float64)


def rotation_x(radians: float) -> Matrix4:
    c, s = math.cos(radians), math.sin(radians)
    m = identity()
    m[1, 1] = c
    m[1, 2] = -s
    m[2, 1] = s
    m[2, 2] = c
    return m


def rotation_y(radians: float) -> Matrix4:
    c, s = math.cos(radians), math.sin(radians)
    m = identity()
    m[0, 0] = c
    m[0, 2] = s
    m[2, 0] = -s
    m[2, 2] = c
    return m


def rotation_z(radians: float) -> Matrix4:
    c, s = math.cos(radians), math.sin(radians)
    m = identity()
    m[0, 0] = c
    m[0, 1] = -s
    m[1, 0] = s
    m[1, 1] = c
    return m


def shearing(xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> Matrix4:
    """Shear each axis in proportion to the other two."""
    m = identity()
    m[0, 1] = xy
    m[0, 2] = xz
    m[1, 0] = yx
    m[1, 2] = yz
    m[2, 0] = zx
    m[2, 1] = zy
    return m


def chain(*transforms: Matrix4) -> Matrix4:
    """Compose transforms in the order they are applied.

    ``chain(a, b, c)`` is equivalent to ``c @ b @ a``.
    """
    result = identity()
    for t in transforms:
        result = t @ result
    return result


def view_transform(from_point: Tuple4, to_point: Tuple4, up: Tuple4) -> Matrix4:
    """Orient the world relative to an eye at ``from_point`` looking at ``to_point``.

    Args:
        from_point: Eye position.
        to_point: Point the eye looks at.
        up: Approximate up direction; it need not be perpendicular to the
            viewing direction.

    Returns:
        The world-to-camera transform.
    """
    forward = normalize(to_point - from_point)
    left = cross(forward, normalize(up))
    true_up = cross(left, forward)
    orientation = np.array(
        [
            [left[0], left[1], left[2], 0.0],
            [true_up[0], true_up[1], true_up[2], 0.0],
            [-forward[0], -forward[1], -forward[2], 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ],
        dtype=np.float64,
    )
    return orientation @ translation(-from_point[0], -from_point[1], -from_point[2])


def inverse(m: Matrix4) -> Matrix4:
    """Invert a transform.

    Raises:
        SingularTransformError: If the matrix is not invertible.
    """
    if abs(float(np.linalg.det(m))) < EPSILON:
        raise SingularTransformError(
            "Transform is not invertible (determinant is zero); "
            "object geometry would be undefined."
        )
    return np.linalg.inv(m)


def transform_tuple(m: Matrix4, t: Tuple4) -> Tuple4:
    """Multiply a point or vector by a transform."""
    return m @ t


def matrices_equal(a: Matrix4, b: Matrix4) -> bool:
    """Epsilon comparison of two matrices."""
    return bool(np.all(np.abs(a - b) < EPSILON))
