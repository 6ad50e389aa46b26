"""Tests for the recursive Whitted integrator.

Tests cover:
- shade_hit from outside, from inside and in shadow
- Reflection, including the recursion limit and facing mirrors
- Refraction, including total internal reflection
- Schlick reflectance and its use as a blend weight
"""

import math

import pytest

HALF_SQRT2 = math.sqrt(2) / 2


def _replace_object(world, index, **kwargs):
    """Swap one object of the world for a copy with a new material."""
    import dataclasses

    from whitted.scene.object import SceneObject

    old = world.objects[index]
    material = dataclasses.replace(old.material, **kwargs)
    new = SceneObject(old.shape, transform=old.transform, material=material)
    world.objects[index] = new
    return new


def _floor(**material):
    from whitted.core.transform import translation
    from whitted.geometry import Plane
    from whitted.materials import Material
    from whitted.scene.object import SceneObject

    return SceneObject(Plane(), transform=translation(0, -1, 0), material=Material(**material))


def _diagonal_ray():
    from whitted.core.ray import Ray, point, vector

    return Ray(point(0, 0, -3), vector(0, -HALF_SQRT2, HALF_SQRT2))


class TestShadeHit:
    """Tests for shade_hit."""

    def test_outside(self, default_world, forward_ray):
        """Test shading a hit from outside."""
        from whitted.core.integrator import shade_hit
        from whitted.scene.intersection import Intersection, prepare_computations

        i = Intersection(4, default_world.objects[0])
        comps = prepare_computations(i, forward_ray)
        result = shade_hit(default_world, comps)
        assert result == pytest.approx([0.38066, 0.47583, 0.2855], abs=1e-4)

    def test_inside(self, default_world):
        """Test shading a hit from inside."""
        from whitted.core.color import color
        from whitted.core.integrator import shade_hit
        from whitted.core.ray import Ray, point, vector
        from whitted.scene.intersection import Intersection, prepare_computations
        from whitted.scene.light import PointLight

        default_world.light = PointLight(point(0, 0.25, 0), color(1, 1, 1))
        ray = Ray(point(0, 0, 0), vector(0, 0, 1))
        i = Intersection(0.5, default_world.objects[1])
        comps = prepare_computations(i, ray)
        result = shade_hit(default_world, comps)
        assert result == pytest.approx([0.90498, 0.90498, 0.90498], abs=1e-4)

    def test_in_shadow(self):
        """Test that a shadowed hit gets ambient light only."""
        from whitted.core.color import color
        from whitted.core.integrator import shade_hit
        from whitted.core.ray import Ray, point, vector
        from whitted.core.transform import translation
        from whitted.geometry import Sphere
        from whitted.scene.intersection import Intersection, prepare_computations
        from whitted.scene.light import PointLight
        from whitted.scene.object import SceneObject
        from whitted.scene.world import World

        s1 = SceneObject(Sphere())
        s2 = SceneObject(Sphere(), transform=translation(0, 0, 10))
        world = World(PointLight(point(0, 0, -10), color(1, 1, 1)), [s1, s2])

        ray = Ray(point(0, 0, 5), vector(0, 0, 1))
        comps = prepare_computations(Intersection(4, s2), ray)
        assert shade_hit(world, comps) == pytest.approx([0.1, 0.1, 0.1])


class TestReflection:
    """Tests for reflected_color."""

    def test_non_reflective_surface(self, default_world):
        """Test a non-reflective surface reflects black."""
        from whitted.core.integrator import reflected_color
        from whitted.core.ray import Ray, point, vector
        from whitted.scene.intersection import Intersection, prepare_computations

        inner = _replace_object(default_world, 1, ambient=1.0)
        ray = Ray(point(0, 0, 0), vector(0, 0, 1))
        comps = prepare_computations(Intersection(1, inner), ray)
        assert reflected_color(default_world, comps, 5) == pytest.approx([0.0, 0.0, 0.0])

    def test_reflective_surface(self, default_world):
        """Test the color seen in a half-reflective floor."""
        from whitted.core.integrator import reflected_color
        from whitted.scene.intersection import Intersection, prepare_computations

        floor = _floor(reflective=0.5)
        default_world.add(floor)
        comps = prepare_computations(Intersection(math.sqrt(2), floor), _diagonal_ray())
        result = reflected_color(default_world, comps, 5)
        assert result == pytest.approx([0.19032, 0.2379, 0.14274], abs=1e-3)

    def test_shade_hit_adds_reflection(self, default_world):
        """Test shade_hit combines surface and reflected color."""
        from whitted.core.integrator import shade_hit
        from whitted.scene.intersection import Intersection, prepare_computations

        floor = _floor(reflective=0.5)
        default_world.add(floor)
        comps = prepare_computations(Intersection(math.sqrt(2), floor), _diagonal_ray())
        result = shade_hit(default_world, comps, 5)
        assert result == pytest.approx([0.87677, 0.92436, 0.82918], abs=1e-3)

    def test_exhausted_budget(self, default_world):
        """Test reflection stops when no recursion budget is left."""
        from whitted.core.integrator import reflected_color
        from whitted.scene.intersection import Intersection, prepare_computations

        floor = _floor(reflective=0.5)
        default_world.add(floor)
        comps = prepare_computations(Intersection(math.sqrt(2), floor), _diagonal_ray())
        assert reflected_color(default_world, comps, 0) == pytest.approx([0.0, 0.0, 0.0])

    def test_parallel_mirrors_terminate(self):
        """Test that two facing mirrors do not recurse forever."""
        import numpy as np

        from whitted.core.color import color
        from whitted.core.ray import Ray, point, vector
        from whitted.core.transform import translation
        from whitted.geometry import Plane
        from whitted.materials import Material
        from whitted.scene.light import PointLight
        from whitted.scene.object import SceneObject
        from whitted.scene.world import World

        mirror = Material(reflective=1.0)
        lower = SceneObject(Plane(), transform=translation(0, -1, 0), material=mirror)
        upper = SceneObject(Plane(), transform=translation(0, 1, 0), material=mirror)
        world = World(PointLight(point(0, 0, 0), color(1, 1, 1)), [lower, upper])

        result = world.color_at(Ray(point(0, 0, 0), vector(0, 1, 0)))
        assert np.all(np.isfinite(result))


class TestRefraction:
    """Tests for refracted_color."""

    def test_opaque_surface(self, default_world, forward_ray):
        """Test an opaque surface refracts black."""
        from whitted.core.integrator import refracted_color
        from whitted.scene.intersection import Intersection, prepare_computations

        shape = default_world.objects[0]
        xs = [Intersection(4, shape), Intersection(6, shape)]
        comps = prepare_computations(xs[0], forward_ray, xs)
        assert refracted_color(default_world, comps, 5) == pytest.approx([0.0, 0.0, 0.0])

    def test_exhausted_budget(self, default_world, forward_ray):
        """Test refraction stops when no recursion budget is left."""
        from whitted.core.integrator import refracted_color
        from whitted.scene.intersection import Intersection, prepare_computations

        shape = _replace_object(default_world, 0, transparency=1.0, refractive_index=1.5)
        xs = [Intersection(4, shape), Intersection(6, shape)]
        comps = prepare_computations(xs[0], forward_ray, xs)
        assert refracted_color(default_world, comps, 0) == pytest.approx([0.0, 0.0, 0.0])

    def test_total_internal_reflection(self, default_world):
        """Test total internal reflection contributes black, not NaN."""
        from whitted.core.integrator import refracted_color
        from whitted.core.ray import Ray, point, vector
        from whitted.scene.intersection import Intersection, prepare_computations

        shape = _replace_object(default_world, 0, transparency=1.0, refractive_index=1.5)
        ray = Ray(point(0, 0, HALF_SQRT2), vector(0, 1, 0))
        xs = [Intersection(-HALF_SQRT2, shape), Intersection(HALF_SQRT2, shape)]
        comps = prepare_computations(xs[1], ray, xs)
        assert refracted_color(default_world, comps, 5) == pytest.approx([0.0, 0.0, 0.0])

    def test_refracted_ray(self, default_world):
        """Test the refracted ray lands where Snell's law sends it."""
        from whitted.core.integrator import refracted_color
        from whitted.core.ray import Ray, point, vector
        from whitted.materials import TestPattern
        from whitted.scene.intersection import Intersection, prepare_computations

        a = _replace_object(default_world, 0, ambient=1.0, coloring=TestPattern())
        b = _replace_object(default_world, 1, transparency=1.0, refractive_index=1.5)

        ray = Ray(point(0, 0, 0.1), vector(0, 1, 0))
        xs = [
            Intersection(-0.9899, a),
            Intersection(-0.4899, b),
            Intersection(0.4899, b),
            Intersection(0.9899, a),
        ]
        comps = prepare_computations(xs[2], ray, xs)
        result = refracted_color(default_world, comps, 5)
        assert result == pytest.approx([0.0, 0.99888, 0.04725], abs=1e-3)

    def test_shade_hit_with_transparent_floor(self, default_world):
        """Test shade_hit sees a ball through a transparent floor."""
        from whitted.core.color import color
        from whitted.core.integrator import shade_hit
        from whitted.core.transform import translation
        from whitted.geometry import Sphere
        from whitted.materials import Material
        from whitted.scene.intersection import Intersection, prepare_computations
        from whitted.scene.object import SceneObject

        floor = _floor(transparency=0.5, refractive_index=1.5)
        ball = SceneObject(
            Sphere(),
            transform=translation(0, -3.5, -0.5),
            material=Material(coloring=color(1, 0, 0), ambient=0.5),
        )
        default_world.add(floor, ball)

        xs = [Intersection(math.sqrt(2), floor)]
        comps = prepare_computations(xs[0], _diagonal_ray(), xs)
        result = shade_hit(default_world, comps, 5)
        assert result == pytest.approx([0.93642, 0.68642, 0.68642], abs=1e-3)


class TestSchlick:
    """Tests for the Schlick approximation."""

    def test_total_internal_reflection(self, glass_sphere):
        """Test reflectance is exactly 1 under total internal reflection."""
        from whitted.core.integrator import schlick_reflectance
        from whitted.core.ray import Ray, point, vector
        from whitted.scene.intersection import Intersection, prepare_computations

        shape = glass_sphere()
        ray = Ray(point(0, 0, HALF_SQRT2), vector(0, 1, 0))
        xs = [Intersection(-HALF_SQRT2, shape), Intersection(HALF_SQRT2, shape)]
        comps = prepare_computations(xs[1], ray, xs)
        assert schlick_reflectance(comps) == 1.0

    def test_perpendicular_ray(self, glass_sphere):
        """Test reflectance for a ray along the normal."""
        from whitted.core.integrator import schlick_reflectance
        from whitted.core.ray import Ray, point, vector
        from whitted.scene.intersection import Intersection, prepare_computations

        shape = glass_sphere()
        ray = Ray(point(0, 0, 0), vector(0, 1, 0))
        xs = [Intersection(-1, shape), Intersection(1, shape)]
        comps = prepare_computations(xs[1], ray, xs)
        assert schlick_reflectance(comps) == pytest.approx(0.04, abs=1e-4)

    def test_small_angle_entering_denser_medium(self, glass_sphere):
        """Test reflectance at a grazing angle with n2 > n1."""
        from whitted.core.integrator import schlick_reflectance
        from whitted.core.ray import Ray, point, vector
        from whitted.scene.intersection import Intersection, prepare_computations

        shape = glass_sphere()
        ray = Ray(point(0, 0.99, -2), vector(0, 0, 1))
        xs = [Intersection(1.8589, shape)]
        comps = prepare_computations(xs[0], ray, xs)
        assert schlick_reflectance(comps) == pytest.approx(0.48873, abs=1e-3)

    def test_blend_reflective_transparent_floor(self, default_world):
        """Test shade_hit weights reflection and refraction by reflectance."""
        from whitted.core.color import color
        from whitted.core.integrator import shade_hit
        from whitted.core.transform import translation
        from whitted.geometry import Sphere
        from whitted.materials import Material
        from whitted.scene.intersection import Intersection, prepare_computations
        from whitted.scene.object import SceneObject

        floor = _floor(reflective=0.5, transparency=0.5, refractive_index=1.5)
        ball = SceneObject(
            Sphere(),
            transform=translation(0, -3.5, -0.5),
            material=Material(coloring=color(1, 0, 0), ambient=0.5),
        )
        default_world.add(floor, ball)

        xs = [Intersection(math.sqrt(2), floor)]
        comps = prepare_computations(xs[0], _diagonal_ray(), xs)
        result = shade_hit(default_world, comps, 5)
        assert result == pytest.approx([0.93391, 0.69643, 0.69243], abs=1e-3)
