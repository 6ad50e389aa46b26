"""Materials module for surface appearance.

Components:
    material: Phong material with reflectivity, transparency and refraction
    pattern: Procedural patterns (solid, stripe, gradient, ring, checkers)

Materials are immutable value objects shared by reference between scene
objects. Pattern evaluation needs the decorated object because patterns
live in object space.
"""

from .material import (
    AIR_INDEX,
    DEFAULT_MATERIAL,
    DIAMOND_INDEX,
    GLASS_INDEX,
    VACUUM_INDEX,
    WATER_INDEX,
    Material,
)
from .pattern import (
    CheckersPattern,
    GradientPattern,
    Pattern,
    RingPattern,
    SolidPattern,
    StripePattern,
    TestPattern,
)

__all__ = [
    # Material
    "Material",
    "DEFAULT_MATERIAL",
    "VACUUM_INDEX",
    "AIR_INDEX",
    "WATER_INDEX",
    "GLASS_INDEX",
    "DIAMOND_INDEX",
    # Patterns
    "Pattern",
    "SolidPattern",
    "StripePattern",
    "GradientPattern",
    "RingPattern",
    "CheckersPattern",
    "TestPattern",
]
