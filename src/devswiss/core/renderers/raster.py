"""Raster rendering of QR matrices with Pillow."""

from __future__ import annotations

import logging

from PIL import Image

from ..colors import ColorPair
from ..matrix import Matrix

logger = logging.getLogger(__name__)

# Raster output always carries a one-module light border
RASTER_QUIET_ZONE = 1


def raster_size(matrix: Matrix, scale: int) -> int:
    """Edge length in pixels of :func:`render_raster` output."""
    return (matrix.size + 2 * RASTER_QUIET_ZONE) * scale


def render_raster(matrix: Matrix, scale: int = 8, colors: ColorPair | None = None) -> Image.Image:
    """Render a matrix to an RGB image.

    The matrix is first drawn at one pixel per module (quiet zone included)
    and then enlarged with nearest-neighbour resampling, so every module
    becomes an exact ``scale x scale`` block.

    Args:
        matrix: Matrix to draw
        scale: Pixels per module edge, at least 1
        colors: Dark and light colors (black on white by default)

    Returns:
        ``RGB`` image of ``raster_size(matrix, scale)`` pixels square

    Raises:
        ValueError: If ``scale`` is less than 1
    """
    if scale < 1:
        raise ValueError(f"Scale must be at least 1, got {scale}")

    colors = colors or ColorPair()
    border = RASTER_QUIET_ZONE
    side = matrix.size + 2 * border

    pixels = [colors.light] * (side * border)
    for row in matrix.modules:
        pixels.extend([colors.light] * border)
        pixels.extend(colors.dark if dark else colors.light for dark in row)
        pixels.extend([colors.light] * border)
    pixels.extend([colors.light] * (side * border))

    image = Image.new("RGB", (side, side), colors.light)
    image.putdata(pixels)

    if scale > 1:
        image = image.resize((side * scale, side * scale), Image.Resampling.NEAREST)

    logger.debug(f"Rendered {matrix.size}-module matrix at scale {scale}: {image.size}")
    return image
