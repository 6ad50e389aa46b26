"""Scene objects: a shape bound to a transform and a material.

A :class:`SceneObject` is the unit the rest of the renderer works with. It
converts world-space rays and points into the shape's local space, lets the
shape do the math, and converts normals back to world space.

Each object receives a unique, stable ``object_id`` when it is created.
Equality and hashing use that id, so two objects sharing the same
transform are still distinct when tracking which media a ray is inside.

Example:
    >>> from whitted.core.transform import scaling, translation
    >>> from whitted.geometry import Sphere
    >>> from whitted.materials import Material
    >>> from whitted.scene.object import SceneObject
    >>> glass_ball = SceneObject(
    ...     Sphere(),
    ...     transform=translation(0, 1, 0) @ scaling(0.5, 0.5, 0.5),
    ...     material=Material(transparency=1.0, refractive_index=1.5),
    ... )
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field

import numpy as np

from whitted.core.ray import Ray, Tuple4, normalize
from whitted.core.transform import Matrix4, identity, inverse
from whitted.geometry import Shape
from whitted.materials.material import DEFAULT_MATERIAL, Material
from whitted.scene.intersection import Intersection

_object_ids = itertools.count()


@dataclass(frozen=True, eq=False)
class SceneObject:
    """A shape placed in the world with a material.

    Attributes:
        shape: The local-space primitive.
        transform: Object-to-world transform. Must be invertible.
        material: Surface material.
        inverse_transform: Cached inverse of ``transform``.
        object_id: Unique identifier assigned at construction.

    Raises:
        SingularTransformError: If ``transform`` cannot be inverted.
    """

    shape: Shape
    transform: Matrix4 = field(default_factory=identity)
    material: Material = DEFAULT_MATERIAL
    inverse_transform: Matrix4 = field(init=False, repr=False)
    object_id: int = field(init=False)

    def __post_init__(self) -> None:
        transform = np.asarray(self.transform, dtype=np.float64)
        object.__setattr__(self, "transform", transform)
        object.__setattr__(self, "inverse_transform", inverse(transform))
        object.__setattr__(self, "object_id", next(_object_ids))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SceneObject):
            return NotImplemented
        return self.object_id == other.object_id

    def __hash__(self) -> int:
        return hash(self.object_id)

    def intersect(self, world_ray: Ray) -> list[Intersection]:
        """Intersect a world-space ray with this object.

        Args:
            world_ray: The ray in world space.

        Returns:
            One Intersection per root reported by the shape, unordered and
            possibly including negative t values.
        """
        local_ray = world_ray.transform(self.inverse_transform)
        return [Intersection(t, self) for t in self.shape.local_intersect(local_ray)]

    def normal_at(self, world_point: Tuple4) -> Tuple4:
        """Compute the unit world-space normal at a point on the surface.

        Normals transform by the transpose of the inverse transform; the
        ``w`` component is cleared afterwards because translation leaks into
        it.
        """
        local_point = self.inverse_transform @ world_point
        local_normal = self.shape.local_normal_at(local_point)
        world_normal = self.inverse_transform.T @ local_normal
        world_normal[3] = 0.0
        return normalize(world_normal)
