"""Pytest configuration for raytracer tests.

This module provides shared fixtures for all test modules: the canonical
two-sphere world and a few frequently used objects and rays.
"""

import pytest


@pytest.fixture
def default_world():
    """The two-sphere world most shading tests are written against."""
    from whitted.scene.presets import default_world as make_default_world

    return make_default_world()


@pytest.fixture
def glass_sphere():
    """Factory for unit glass spheres (transparency 1.0, index 1.5)."""
    from whitted.core.transform import identity
    from whitted.geometry import Sphere
    from whitted.materials import Material
    from whitted.scene.object import SceneObject

    def _make(transform=None, refractive_index=1.5):
        return SceneObject(
            Sphere(),
            transform=identity() if transform is None else transform,
            material=Material(transparency=1.0, refractive_index=refractive_index),
        )

    return _make


@pytest.fixture
def forward_ray():
    """Ray from (0, 0, -5) toward +z, aimed at the origin."""
    from whitted.core.ray import Ray, point, vector

    return Ray(point(0.0, 0.0, -5.0), vector(0.0, 0.0, 1.0))
