"""Camera module for view and ray generation.

Components:
    pinhole: Pinhole (perspective) camera, one ray per pixel centre

Pixel coordinates start at the top-left corner: x grows to the right and
y grows downward, matching the row-major layout of the rendered image.
"""

from .pinhole import Camera, ProgressCallback

__all__ = [
    "Camera",
    "ProgressCallback",
]
