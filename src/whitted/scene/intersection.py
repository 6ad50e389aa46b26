"""Ray-object intersection records and per-hit shading state.

An :class:`Intersection` pairs a ray parameter ``t`` with the object that was
hit. :func:`prepare_computations` turns the chosen hit into a
:class:`Computations` snapshot holding everything shading needs: the hit
point, eye and normal vectors, the reflection direction, points nudged to
either side of the surface, and the refractive indices on each side.

Refractive indices (n1, n2) come from replaying the ray's intersections in
order and tracking which objects the ray is currently inside. Entering an
object pushes it, leaving it removes it; the most recently entered object
is the medium the ray travels through. This relies on every surface
crossing toggling containment exactly once.

Example:
    >>> from whitted.core.ray import Ray, point, vector
    >>> from whitted.geometry import Sphere
    >>> from whitted.scene.intersection import hit, prepare_computations
    >>> from whitted.scene.object import SceneObject
    >>> ray = Ray(point(0, 0, -5), vector(0, 0, 1))
    >>> xs = SceneObject(Sphere()).intersect(ray)
    >>> comps = prepare_computations(hit(xs), ray, xs)
    >>> comps.inside
    False
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Optional, Sequence

from whitted.core.ray import EPSILON, Ray, Tuple4, dot, reflect
from whitted.materials.material import VACUUM_INDEX

if TYPE_CHECKING:
    from whitted.scene.object import SceneObject


@dataclass(frozen=True)
class Intersection:
    """A ray parameter paired with the object hit there.

    Attributes:
        t: Distance along the ray in units of its direction vector.
        obj: The object that was hit. Borrowed; never copied.
    """

    t: float
    obj: SceneObject


@dataclass(frozen=True, eq=False)
class Computations:
    """Read-only geometric state at a ray/object hit.

    Attributes:
        t: Ray parameter of the hit.
        obj: The object that was hit.
        point: World-space hit point.
        eye: Unit vector from the point back toward the ray origin.
        normal: Unit surface normal, flipped to face the eye.
        inside: True if the ray hit the surface from inside the object.
        reflected: The ray direction reflected about ``normal``.
        over_point: ``point`` nudged along the normal, for shadow and
            reflection rays.
        under_point: ``point`` nudged against the normal, for refraction
            rays.
        n1: Refractive index of the medium the ray is leaving.
        n2: Refractive index of the medium the ray is entering.
    """

    t: float
    obj: SceneObject
    point: Tuple4
    eye: Tuple4
    normal: Tuple4
    inside: bool
    reflected: Tuple4
    over_point: Tuple4
    under_point: Tuple4
    n1: float
    n2: float


def sort_intersections(intersections: Iterable[Intersection]) -> list[Intersection]:
    """Sort intersections by ascending t (stable)."""
    return sorted(intersections, key=lambda i: i.t)


def hit(intersections: Iterable[Intersection]) -> Optional[Intersection]:
    """Return the visible intersection: the lowest non-negative t.

    Args:
        intersections: Intersections in any order.

    Returns:
        The first intersection with ``t >= 0`` after sorting, or None if
        every intersection lies behind the ray origin. Ties keep their
        original order.
    """
    for i in sort_intersections(intersections):
        if i.t >= 0.0:
            return i
    return None


def refractive_indices(
    hit_: Intersection, intersections: Sequence[Intersection]
) -> tuple[float, float]:
    """Compute (n1, n2) on either side of the surface at ``hit_``.

    Args:
        hit_: The intersection being shaded.
        intersections: Every intersection along the same ray.

    Returns:
        Tuple (n1, n2). Outside every object the index is vacuum (1.0).

    Raises:
        ValueError: If ``hit_`` is not one of ``intersections``.
    """
    containers: list[SceneObject] = []

    for i in sort_intersections(intersections):
        is_hit = i == hit_
        if is_hit:
            n1 = containers[-1].material.refractive_index if containers else VACUUM_INDEX

        if i.obj in containers:
            containers.remove(i.obj)
        else:
            containers.append(i.obj)

        if is_hit:
            n2 = containers[-1].material.refractive_index if containers else VACUUM_INDEX
            return n1, n2

    raise ValueError("The hit is not among the intersections for this ray")


def prepare_computations(
    hit_: Intersection,
    ray: Ray,
    intersections: Optional[Sequence[Intersection]] = None,
) -> Computations:
    """Precompute the shading state for a hit.

    Args:
        hit_: The intersection to shade.
        ray: The ray that produced it.
        intersections: All intersections along ``ray``, needed to work out
            the refractive indices. Defaults to ``[hit_]``, which is only
            correct outside of any transparent object.

    Returns:
        A Computations snapshot.
    """
    if intersections is None:
        intersections = [hit_]

    point = ray.position(hit_.t)
    eye = -ray.direction
    normal = hit_.obj.normal_at(point)

    inside = dot(normal, eye) < 0.0
    if inside:
        normal = -normal

    n1, n2 = refractive_indices(hit_, intersections)

    return Computations(
        t=hit_.t,
        obj=hit_.obj,
        point=point,
        eye=eye,
        normal=normal,
        inside=inside,
        reflected=reflect(ray.direction, normal),
        over_point=point + normal * EPSILON,
        under_point=point - normal * EPSILON,
        n1=n1,
        n2=n2,
    )
