"""Image export utilities for rendered images.

Rendered images are float arrays of shape (H, W, 3) holding unclamped
linear colors. Export clamps every component to [0, 1] and scales it to
an 8-bit value.

Supported formats:
    - PPM (plain-text P3)
    - PNG (8-bit via Pillow)

Example:
    >>> from whitted.preview.export import save_png_from_array, save_ppm
    >>> save_ppm(image, "output.ppm")
    >>> save_png_from_array(image, "output.png")
"""

from __future__ import annotations

import os
from typing import Union

import numpy as np
import numpy.typing as npt
from PIL import Image as PILImage

PathLike = Union[str, "os.PathLike[str]"]

# Plain PPM readers expect lines no longer than this
PPM_MAX_LINE_WIDTH = 70


def _check_image(image: npt.NDArray[np.floating]) -> None:
    if image.ndim != 3 or image.shape[2] != 3:
        raise ValueError(f"Expected an image of shape (H, W, 3), got {image.shape}")


def image_to_uint8(image: npt.NDArray[np.floating]) -> npt.NDArray[np.uint8]:
    """Convert a float image to uint8.

    Components are clamped to [0, 1], scaled to 0..255 and rounded to the
    nearest integer.

    Args:
        image: Float image array of shape (H, W, 3).

    Returns:
        8-bit image array of shape (H, W, 3) with dtype uint8.
    """
    image = np.asarray(image, dtype=np.float64)
    _check_image(image)
    return np.rint(np.clip(image, 0.0, 1.0) * 255.0).astype(np.uint8)


def _ppm_row_lines(row: npt.NDArray[np.uint8]) -> list[str]:
    """Lay out one image row as PPM body lines, wrapping long lines."""
    lines = []
    current = ""
    for value in row.reshape(-1):
        token = str(int(value))
        if not current:
            current = token
        elif len(current) + 1 + len(token) > PPM_MAX_LINE_WIDTH:
            lines.append(current)
            current = token
        else:
            current = f"{current} {token}"
    lines.append(current)
    return lines


def ppm_string(image: npt.NDArray[np.floating]) -> str:
    """Encode a float image as plain P3 PPM text.

    The header is ``P3``, the width and height, then the maximum value 255.
    Each image row starts on a new line and no line exceeds 70 characters.
    The text ends with a newline.
    """
    pixels = image_to_uint8(image)
    height, width = pixels.shape[:2]

    lines = ["P3", f"{width} {height}", "255"]
    for row in pixels:
        lines.extend(_ppm_row_lines(row))
    return "\n".join(lines) + "\n"


def save_ppm(image: npt.NDArray[np.floating], filepath: PathLike) -> None:
    """Save a float image as a plain-text P3 PPM file.

    Args:
        image: Float image array of shape (H, W, 3).
        filepath: Output file path (should end in .ppm).
    """
    with open(filepath, "w", encoding="ascii", newline="\n") as f:
        f.write(ppm_string(image))


def save_png_from_array(image: npt.NDArray[np.floating], filepath: PathLike) -> None:
    """Save a float image as an 8-bit PNG file.

    Args:
        image: Float image array of shape (H, W, 3).
        filepath: Output file path (should end in .png).
    """
    image_uint8 = image_to_uint8(image)

    # Save using Pillow
    pil_image = PILImage.fromarray(image_uint8)
    pil_image.save(filepath)


def compute_rmse(
    image_a: npt.NDArray[np.floating],
    image_b: npt.NDArray[np.floating],
) -> float:
    """Compute root mean squared error between two images.

    Args:
        image_a: First image array.
        image_b: Second image array (must have same shape as image_a).

    Returns:
        RMSE value (lower is more similar).

    Raises:
        ValueError: If image shapes don't match.
    """
    if image_a.shape != image_b.shape:
        raise ValueError(f"Image shapes must match: {image_a.shape} vs {image_b.shape}")

    diff = image_a.astype(np.float64) - image_b.astype(np.float64)
    return float(np.sqrt(np.mean(diff**2)))
