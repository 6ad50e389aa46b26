"""Procedural surface patterns.

A pattern maps a point to a color. Patterns are evaluated in their own
local space, nested inside the local space of the object they decorate:

    world point --(object inverse)--> object point --(pattern inverse)--> pattern point

so that moving, scaling or rotating an object carries its pattern along,
while the pattern's own transform moves the pattern across the surface.

Every rule is a pure function of the pattern-space point.

Example:
    >>> from whitted.core.color import BLACK, WHITE
    >>> from whitted.core.ray import point
    >>> from whitted.materials.pattern import StripePattern
    >>> stripes = StripePattern(WHITE, BLACK)
    >>> stripes.pattern_at(point(1.5, 0, 0))
    array([0., 0., 0.])
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np

from whitted.core.color import BLACK, WHITE, Color, color
from whitted.core.ray import Tuple4
from whitted.core.transform import Matrix4, identity, inverse

if TYPE_CHECKING:
    from whitted.scene.object import SceneObject


@dataclass(frozen=True, eq=False)
class Pattern:
    """Base class for two-color procedural patterns.

    Attributes:
        a: First color.
        b: Second color.
        transform: Pattern-to-object transform.
        inverse_transform: Cached inverse of ``transform`` (computed once).
    """

    a: Color = field(default_factory=lambda: WHITE.copy())
    b: Color = field(default_factory=lambda: BLACK.copy())
    transform: Matrix4 = field(default_factory=identity)
    inverse_transform: Matrix4 = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "a", np.asarray(self.a, dtype=np.float64))
        object.__setattr__(self, "b", np.asarray(self.b, dtype=np.float64))
        object.__setattr__(self, "inverse_transform", inverse(self.transform))

    def pattern_at(self, pattern_point: Tuple4) -> Color:
        """Evaluate the pattern at a point already in pattern space."""
        raise NotImplementedError("pattern_at() must be implemented by subclasses.")

    def color_at(self, obj: SceneObject, world_point: Tuple4) -> Color:
        """Evaluate the pattern for a world-space point on ``obj``.

        Args:
            obj: The scene object the pattern decorates.
            world_point: A point in world space.

        Returns:
            The pattern color at that point.
        """
        object_point = obj.inverse_transform @ world_point
        pattern_point = self.inverse_transform @ object_point
        return self.pattern_at(pattern_point)


@dataclass(frozen=True, eq=False)
class SolidPattern(Pattern):
    """A single flat color (``a``); useful when nesting patterns is not needed."""

    def pattern_at(self, pattern_point: Tuple4) -> Color:
        return self.a


@dataclass(frozen=True, eq=False)
class StripePattern(Pattern):
    """Alternates between ``a`` and ``b`` every unit along x."""

    def pattern_at(self, pattern_point: Tuple4) -> Color:
        if math.floor(pattern_point[0]) % 2 == 0:
            return self.a
        return self.b


@dataclass(frozen=True, eq=False)
class GradientPattern(Pattern):
    """Linear blend from ``a`` to ``b`` over the fractional part of x."""

    def pattern_at(self, pattern_point: Tuple4) -> Color:
        x = pattern_point[0]
        fraction = x - math.floor(x)
        return self.a + (self.b - self.a) * fraction


@dataclass(frozen=True, eq=False)
class RingPattern(Pattern):
    """Concentric rings in the xz plane, one unit wide."""

    def pattern_at(self, pattern_point: Tuple4) -> Color:
        x, z = pattern_point[0], pattern_point[2]
        if math.floor(math.sqrt(x * x + z * z)) % 2 == 0:
            return self.a
        return self.b


@dataclass(frozen=True, eq=False)
class CheckersPattern(Pattern):
    """Three-dimensional checkerboard of unit cubes."""

    def pattern_at(self, pattern_point: Tuple4) -> Color:
        total = (
            math.floor(pattern_point[0])
            + math.floor(pattern_point[1])
            + math.floor(pattern_point[2])
        )
        if total % 2 == 0:
            return self.a
        return self.b


@dataclass(frozen=True, eq=False)
class TestPattern(Pattern):
    """Returns the pattern-space point itself as a color.

    Used to check that points reach ``pattern_at`` in the right space.
    """

    __test__ = False  # not a pytest test class

    def pattern_at(self, pattern_point: Tuple4) -> Color:
        return color(pattern_point[0], pattern_point[1], pattern_point[2])
