"""Core rendering module.

This module contains the fundamental building blocks for ray tracing:

Components:
    ray: Points, vectors, the shared tolerance, and the Ray type
    color: RGB colors as numpy arrays
    transform: 4x4 affine transforms and their inverses
    integrator: Recursive Whitted-style shading (reflection, refraction)

Points and vectors are 4-component numpy arrays distinguished by ``w``
(1 for points, 0 for vectors), so a single 4x4 matrix transforms both.
"""

from .color import BLACK, WHITE, Color, color, colors_equal
from .ray import (
    EPSILON,
    Ray,
    Tuple4,
    cross,
    dot,
    is_equal,
    is_point,
    is_vector,
    magnitude,
    normalize,
    point,
    reflect,
    tuples_equal,
    vector,
)
from .transform import (
    Matrix4,
    SingularTransformError,
    chain,
    identity,
    inverse,
    matrices_equal,
    rotation_x,
    rotation_y,
    rotation_z,
    scaling,
    shearing,
    transform_tuple,
    translation,
    view_transform,
)

# Note: integrator is NOT imported here; it depends on the scene package.
# Import it directly from whitted.core.integrator.

__all__ = [
    # Tuples and rays
    "EPSILON",
    "Tuple4",
    "Ray",
    "point",
    "vector",
    "is_point",
    "is_vector",
    "is_equal",
    "tuples_equal",
    "dot",
    "cross",
    "magnitude",
    "normalize",
    "reflect",
    # Colors
    "Color",
    "color",
    "colors_equal",
    "BLACK",
    "WHITE",
    # Transforms
    "Matrix4",
    "SingularTransformError",
    "identity",
    "translation",
    "scaling",
    "rotation_x",
    "rotation_y",
    "rotation_z",
    "shearing",
    "chain",
    "view_transform",
    "inverse",
    "transform_tuple",
    "matrices_equal",
]
