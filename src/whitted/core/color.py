"""RGB color helpers.

Colors are 3-component float64 numpy arrays. Addition, scaling and the
Hadamard (component-wise) product are the plain numpy operators. Components
are unclamped real numbers; clamping happens only when an image is exported.
"""

import numpy as np
import numpy.typing as npt

from whitted.core.ray import tuples_equal

Color = npt.NDArray[np.float64]


def color(r: float, g: float, b: float) -> Color:
    """Create a color from its red, green and blue components."""
    return np.array([r, g, b], dtype=np.float64)


def colors_equal(a: Color, b: Color) -> bool:
    """Epsilon comparison of two colors."""
    return tuples_equal(a, b)


# Treat these as read-only; copy before mutating
BLACK = color(0.0, 0.0, 0.0)
WHITE = color(1.0, 1.0, 1.0)
BLACK.flags.writeable = False
WHITE.flags.writeable = False
