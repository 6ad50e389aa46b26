"""The world: a point light plus an ordered collection of scene objects.

Example:
    >>> from whitted.core.ray import Ray, point, vector
    >>> from whitted.scene.presets import default_world
    >>> world = default_world()
    >>> shade = world.color_at(Ray(point(0, 0, -5), vector(0, 0, 1)))
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from whitted.core.color import Color
from whitted.core.ray import Ray, Tuple4, magnitude, normalize
from whitted.scene.intersection import Intersection, hit, sort_intersections
from whitted.scene.light import PointLight
from whitted.scene.object import SceneObject


@dataclass(eq=False)
class World:
    """A renderable scene.

    Attributes:
        light: The single point light, or None for an unlit world.
        objects: Scene objects in insertion order. The world owns them.
    """

    light: Optional[PointLight] = None
    objects: list[SceneObject] = field(default_factory=list)

    def add(self, *objects: SceneObject) -> None:
        """Append objects to the world."""
        self.objects.extend(objects)

    def __contains__(self, obj: object) -> bool:
        return obj in self.objects

    def intersect(self, ray: Ray) -> list[Intersection]:
        """Intersect a ray with every object.

        Returns:
            All intersections, including negative t values, sorted by
            ascending t.
        """
        intersections: list[Intersection] = []
        for obj in self.objects:
            intersections.extend(obj.intersect(ray))
        return sort_intersections(intersections)

    def is_shadowed(self, world_point: Tuple4) -> bool:
        """Test whether anything blocks the light from a point.

        The point counts as shadowed if the nearest hit along the ray toward
        the light lies strictly closer than the light itself. A world
        without a light shadows everything.
        """
        if self.light is None:
            return True

        to_light = self.light.position - world_point
        distance = magnitude(to_light)
        shadow_ray = Ray(world_point, normalize(to_light))

        h = hit(self.intersect(shadow_ray))
        return h is not None and h.t < distance

    def color_at(self, ray: Ray, remaining: Optional[int] = None) -> Color:
        """Trace a ray into the world and return its color.

        Args:
            ray: The ray to trace.
            remaining: Recursion budget for reflection and refraction.
                Defaults to the integrator's ``MAX_DEPTH``.
        """
        # Deferred: the integrator imports this module for type hints.
        from whitted.core import integrator

        if remaining is None:
            remaining = integrator.MAX_DEPTH
        return integrator.color_at(self, ray, remaining)
