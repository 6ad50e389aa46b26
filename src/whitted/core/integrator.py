"""Recursive Whitted-style integrator.

This module resolves the color seen along a ray. A primary ray is intersected
with the world, the nearest forward hit is shaded with Phong lighting plus a
shadow test, and reflective or transparent surfaces spawn secondary rays
that are resolved recursively.

Key features:
    - Hard shadows from a single point light
    - Mirror reflection scaled by the material's reflectivity
    - Refraction by Snell's law with total internal reflection
    - Schlick's Fresnel approximation to blend reflection and refraction
    - Recursion bounded by an explicit depth budget

Every secondary ray consumes one unit of the budget, so recursion ends even
between two parallel mirrors.

Example:
    >>> from whitted.core.integrator import MAX_DEPTH, color_at
    >>> from whitted.core.ray import Ray, point, vector
    >>> from whitted.scene.presets import default_world
    >>> world = default_world()
    >>> shade = color_at(world, Ray(point(0, 0, -5), vector(0, 0, 1)), MAX_DEPTH)
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from whitted.core.color import BLACK, Color
from whitted.core.ray import Ray, dot
from whitted.scene.intersection import Computations, hit, prepare_computations

if TYPE_CHECKING:
    from whitted.scene.world import World

# =============================================================================
# Rendering Constants
# =============================================================================

# Default recursion budget for reflected and refracted rays
MAX_DEPTH = 5


# =============================================================================
# Secondary Rays
# =============================================================================


def reflected_color(world: World, comps: Computations, remaining: int) -> Color:
    """Color arriving along the mirror direction, scaled by reflectivity.

    Args:
        world: The scene being rendered.
        comps: Shading state at the hit.
        remaining: Recursion budget left for this path.

    Returns:
        Black when the budget is exhausted or the surface is not reflective.
    """
    reflective = comps.obj.material.reflective
    if remaining <= 0 or reflective == 0.0:
        return BLACK.copy()

    reflect_ray = Ray(comps.over_point, comps.reflected)
    return color_at(world, reflect_ray, remaining - 1) * reflective


def refracted_color(world: World, comps: Computations, remaining: int) -> Color:
    """Color arriving through a transparent surface, scaled by transparency.

    Applies Snell's law with the indices on either side of the surface.
    Total internal reflection contributes black.
    """
    transparency = comps.obj.material.transparency
    if remaining <= 0 or transparency == 0.0:
        return BLACK.copy()

    n_ratio = comps.n1 / comps.n2
    cos_i = dot(comps.eye, comps.normal)
    sin2_t = n_ratio * n_ratio * (1.0 - cos_i * cos_i)
    if sin2_t > 1.0:
        return BLACK.copy()

    cos_t = math.sqrt(1.0 - sin2_t)
    direction = comps.normal * (n_ratio * cos_i - cos_t) - comps.eye * n_ratio

    refract_ray = Ray(comps.under_point, direction)
    return color_at(world, refract_ray, remaining - 1) * transparency


def schlick_reflectance(comps: Computations) -> float:
    """Schlick's approximation of the Fresnel reflectance.

    Returns:
        The fraction of light reflected at the hit, in [0, 1]. Exactly 1.0
        under total internal reflection.
    """
    cos = dot(comps.eye, comps.normal)

    if comps.n1 > comps.n2:
        n_ratio = comps.n1 / comps.n2
        sin2_t = n_ratio * n_ratio * (1.0 - cos * cos)
        if sin2_t > 1.0:
            return 1.0
        cos = math.sqrt(1.0 - sin2_t)

    r0 = ((comps.n1 - comps.n2) / (comps.n1 + comps.n2)) ** 2
    return r0 + (1.0 - r0) * (1.0 - cos) ** 5


# =============================================================================
# Shading
# =============================================================================


def shade_hit(world: World, comps: Computations, remaining: int = MAX_DEPTH) -> Color:
    """Shade a prepared hit: local lighting plus secondary contributions.

    Surfaces that are both reflective and transparent mix the two
    secondary colors with the Schlick reflectance as weight.
    """
    material = comps.obj.material

    if world.light is None:
        surface = BLACK.copy()
    else:
        shadowed = world.is_shadowed(comps.over_point)
        surface = material.lighting(
            world.light,
            comps.obj,
            comps.over_point,
            comps.eye,
            comps.normal,
            shadowed,
        )

    reflected = reflected_color(world, comps, remaining)
    refracted = refracted_color(world, comps, remaining)

    if material.reflective > 0.0 and material.transparency > 0.0:
        reflectance = schlick_reflectance(comps)
        return surface + reflected * reflectance + refracted * (1.0 - reflectance)

    return surface + reflected + refracted


def color_at(world: World, ray: Ray, remaining: int = MAX_DEPTH) -> Color:
    """Resolve the color seen along a ray.

    Args:
        world: The scene to trace against.
        ray: The ray to follow.
        remaining: Recursion budget for secondary rays.

    Returns:
        The shaded color of the nearest forward hit, or black if the ray
        escapes the scene.
    """
    intersections = world.intersect(ray)
    h = hit(intersections)
    if h is None:
        return BLACK.copy()

    comps = prepare_computations(h, ray, intersections)
    return shade_hit(world, comps, remaining)
