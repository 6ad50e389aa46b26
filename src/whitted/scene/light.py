"""Point light source."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from whitted.core.color import WHITE, Color
from whitted.core.ray import Tuple4


@dataclass(frozen=True, eq=False)
class PointLight:
    """A light with no size emitting from a single point.

    Attributes:
        position: World-space position (point tuple).
        intensity: Light color and brightness (RGB, unclamped).
    """

    position: Tuple4
    intensity: Color = field(default_factory=lambda: WHITE.copy())

    def __post_init__(self) -> None:
        object.__setattr__(self, "position", np.asarray(self.position, dtype=np.float64))
        object.__setattr__(self, "intensity", np.asarray(self.intensity, dtype=np.float64))
