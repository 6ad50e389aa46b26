"""Unit tests for procedural patterns.

Tests cover:
- Stripe, gradient, ring and checkers rules
- The world -> object -> pattern transform chain
- Pattern construction errors
"""

import pytest


@pytest.fixture
def sphere_object():
    """Factory for sphere objects with an optional transform."""
    from whitted.core.transform import identity
    from whitted.geometry import Sphere
    from whitted.scene.object import SceneObject

    def _make(transform=None):
        return SceneObject(Sphere(), transform=identity() if transform is None else transform)

    return _make


class TestStripePattern:
    """Tests for the stripe pattern."""

    def test_default_colors(self):
        """Test that patterns default to white and black."""
        from whitted.core.color import BLACK, WHITE, colors_equal
        from whitted.materials import StripePattern

        stripes = StripePattern()
        assert colors_equal(stripes.a, WHITE)
        assert colors_equal(stripes.b, BLACK)

    @pytest.mark.parametrize(
        "p,is_white",
        [
            ((0, 0, 0), True),
            ((0, 1, 0), True),
            ((0, 2, 0), True),
            ((0, 0, 1), True),
            ((0, 0, 2), True),
            ((0.9, 0, 0), True),
            ((1, 0, 0), False),
            ((-0.1, 0, 0), False),
            ((-1, 0, 0), False),
            ((-1.1, 0, 0), True),
        ],
    )
    def test_stripes_alternate_in_x_only(self, p, is_white):
        """Test the stripe rule along each axis, including negative x."""
        from whitted.core.color import BLACK, WHITE, colors_equal
        from whitted.core.ray import point
        from whitted.materials import StripePattern

        expected = WHITE if is_white else BLACK
        assert colors_equal(StripePattern(WHITE, BLACK).pattern_at(point(*p)), expected)

    def test_object_transform(self, sphere_object):
        """Test stripes follow the object's transform."""
        from whitted.core.color import WHITE, colors_equal
        from whitted.core.ray import point
        from whitted.core.transform import scaling
        from whitted.materials import StripePattern

        obj = sphere_object(scaling(2, 2, 2))
        assert colors_equal(StripePattern().color_at(obj, point(1.5, 0, 0)), WHITE)

    def test_pattern_transform(self, sphere_object):
        """Test stripes follow their own transform."""
        from whitted.core.color import WHITE, colors_equal
        from whitted.core.ray import point
        from whitted.core.transform import scaling
        from whitted.materials import StripePattern

        stripes = StripePattern(transform=scaling(2, 2, 2))
        assert colors_equal(stripes.color_at(sphere_object(), point(1.5, 0, 0)), WHITE)

    def test_object_and_pattern_transform(self, sphere_object):
        """Test both transforms apply together."""
        from whitted.core.color import WHITE, colors_equal
        from whitted.core.ray import point
        from whitted.core.transform import scaling, translation
        from whitted.materials import StripePattern

        obj = sphere_object(scaling(2, 2, 2))
        stripes = StripePattern(transform=translation(0.5, 0, 0))
        assert colors_equal(stripes.color_at(obj, point(2.5, 0, 0)), WHITE)


class TestTransformChain:
    """Tests for the world -> object -> pattern point conversion."""

    def test_object_transform(self, sphere_object):
        """Test a pattern sees points in object space."""
        from whitted.core.color import color, colors_equal
        from whitted.core.ray import point
        from whitted.core.transform import scaling
        from whitted.materials import TestPattern

        obj = sphere_object(scaling(2, 2, 2))
        result = TestPattern().color_at(obj, point(2, 3, 4))
        assert colors_equal(result, color(1, 1.5, 2))

    def test_pattern_transform(self, sphere_object):
        """Test a pattern transform applies after the object transform."""
        from whitted.core.color import color, colors_equal
        from whitted.core.ray import point
        from whitted.core.transform import scaling
        from whitted.materials import TestPattern

        result = TestPattern(transform=scaling(2, 2, 2)).color_at(sphere_object(), point(2, 3, 4))
        assert colors_equal(result, color(1, 1.5, 2))

    def test_both_transforms(self, sphere_object):
        """Test an object and a pattern transform together."""
        from whitted.core.color import color, colors_equal
        from whitted.core.ray import point
        from whitted.core.transform import scaling, translation
        from whitted.materials import TestPattern

        obj = sphere_object(scaling(2, 2, 2))
        pattern = TestPattern(transform=translation(0.5, 1, 1.5))
        result = pattern.color_at(obj, point(2.5, 3, 3.5))
        assert colors_equal(result, color(0.75, 0.5, 0.25))


class TestOtherPatterns:
    """Tests for gradient, ring and checkers."""

    @pytest.mark.parametrize(
        "x,expected",
        [(0.0, 1.0), (0.25, 0.75), (0.5, 0.5), (0.75, 0.25)],
    )
    def test_gradient_interpolates(self, x, expected):
        """Test the gradient blends linearly from a to b."""
        from whitted.core.color import BLACK, WHITE, color, colors_equal
        from whitted.core.ray import point
        from whitted.materials import GradientPattern

        result = GradientPattern(WHITE, BLACK).pattern_at(point(x, 0, 0))
        assert colors_equal(result, color(expected, expected, expected))

    def test_gradient_repeats(self):
        """Test the gradient restarts at every integer x."""
        from whitted.core.color import BLACK, WHITE, colors_equal
        from whitted.core.ray import point
        from whitted.materials import GradientPattern

        gradient = GradientPattern(WHITE, BLACK)
        assert colors_equal(gradient.pattern_at(point(1.25, 0, 0)), gradient.pattern_at(point(0.25, 0, 0)))
        assert colors_equal(gradient.pattern_at(point(-0.75, 0, 0)), gradient.pattern_at(point(0.25, 0, 0)))

    @pytest.mark.parametrize(
        "p,is_white",
        [
            ((0, 0, 0), True),
            ((1, 0, 0), False),
            ((0, 0, 1), False),
            ((0.708, 0, 0.708), False),
        ],
    )
    def test_ring_extends_in_x_and_z(self, p, is_white):
        """Test rings alternate with distance from the y axis."""
        from whitted.core.color import BLACK, WHITE, colors_equal
        from whitted.core.ray import point
        from whitted.materials import RingPattern

        expected = WHITE if is_white else BLACK
        assert colors_equal(RingPattern(WHITE, BLACK).pattern_at(point(*p)), expected)

    @pytest.mark.parametrize(
        "p,is_white",
        [
            ((0, 0, 0), True),
            ((0.99, 0, 0), True),
            ((1.01, 0, 0), False),
            ((0, 0.99, 0), True),
            ((0, 1.01, 0), False),
            ((0, 0, 0.99), True),
            ((0, 0, 1.01), False),
        ],
    )
    def test_checkers_repeat_in_each_dimension(self, p, is_white):
        """Test checkers alternate along x, y and z."""
        from whitted.core.color import BLACK, WHITE, colors_equal
        from whitted.core.ray import point
        from whitted.materials import CheckersPattern

        expected = WHITE if is_white else BLACK
        assert colors_equal(CheckersPattern(WHITE, BLACK).pattern_at(point(*p)), expected)

    def test_solid_pattern(self):
        """Test the solid pattern ignores the point."""
        from whitted.core.color import color, colors_equal
        from whitted.core.ray import point
        from whitted.materials import SolidPattern

        solid = SolidPattern(color(0.2, 0.4, 0.6))
        assert colors_equal(solid.pattern_at(point(13, -7, 0.5)), color(0.2, 0.4, 0.6))


class TestPatternErrors:
    """Tests for pattern construction and the abstract base."""

    def test_singular_transform_rejected(self):
        """Test that a non-invertible pattern transform is rejected."""
        from whitted.core.transform import SingularTransformError, scaling
        from whitted.materials import StripePattern

        with pytest.raises(SingularTransformError):
            StripePattern(transform=scaling(0, 1, 1))

    def test_base_pattern_is_abstract(self):
        """Test that the base class has no rule of its own."""
        from whitted.core.ray import point
        from whitted.materials import Pattern

        with pytest.raises(NotImplementedError):
            Pattern().pattern_at(point(0, 0, 0))
