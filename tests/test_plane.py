"""Unit tests for the plane primitive."""

import pytest


class TestPlane:
    """Tests for ray-plane intersection and normals."""

    def test_normal_is_constant(self):
        """Test that the normal is +y everywhere."""
        from whitted.core.ray import point, tuples_equal, vector
        from whitted.geometry import Plane

        plane = Plane()
        for p in (point(0, 0, 0), point(10, 0, -10), point(-5, 0, 150)):
            assert tuples_equal(plane.local_normal_at(p), vector(0, 1, 0))

    def test_parallel_ray_misses(self):
        """Test ray parallel to the plane."""
        from whitted.core.ray import Ray, point, vector
        from whitted.geometry import Plane

        assert Plane().local_intersect(Ray(point(0, 10, 0), vector(0, 0, 1))) == []

    def test_coplanar_ray_misses(self):
        """Test ray lying in the plane."""
        from whitted.core.ray import Ray, point, vector
        from whitted.geometry import Plane

        assert Plane().local_intersect(Ray(point(0, 0, 0), vector(0, 0, 1))) == []

    @pytest.mark.parametrize("origin_y,direction_y", [(1.0, -1.0), (-1.0, 1.0)])
    def test_ray_from_either_side(self, origin_y, direction_y):
        """Test ray hitting the plane from above and from below."""
        from whitted.core.ray import Ray, point, vector
        from whitted.geometry import Plane

        ray = Ray(point(0, origin_y, 0), vector(0, direction_y, 0))
        assert Plane().local_intersect(ray) == pytest.approx([1.0])
