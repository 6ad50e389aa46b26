"""Preview module for image output.

Components:
    export: PPM and PNG export, 8-bit conversion, image comparison
"""

from .export import (
    compute_rmse,
    image_to_uint8,
    ppm_string,
    save_png_from_array,
    save_ppm,
)

__all__ = [
    "image_to_uint8",
    "ppm_string",
    "save_ppm",
    "save_png_from_array",
    "compute_rmse",
]
