"""Fit a QR raster onto a user-supplied background image."""

from __future__ import annotations

import logging
from pathlib import Path

from PIL import Image

from ..colors import ColorPair
from ..errors import BackgroundTooSmall
from ..matrix import Matrix
from ..renderers.raster import render_raster
from .logo import centered_offset, load_image

logger = logging.getLogger(__name__)

BACKGROUND_MARGIN = 20

# Codes drawn at one pixel per module do not scan reliably
MIN_MODULE_SCALE = 2


def module_scale(background_size: tuple[int, int], matrix: Matrix, margin: int) -> int:
    """Pixels per module that fit the matrix inside the background's shorter side."""
    available = max(0, min(background_size) - 2 * margin)
    return available // matrix.size


def paste_centered(background: Image.Image, raster: Image.Image) -> Image.Image:
    """Paste ``raster`` over the centre of ``background`` and return the background."""
    background.paste(raster, centered_offset(background.size, raster.size))
    return background


def overlay_on_background(
    matrix: Matrix,
    background_path: str | Path,
    colors: ColorPair | None = None,
) -> Image.Image:
    """Render a matrix as large as it fits and centre it on a background image.

    The scale is ``(min(width, height) - 2 * 20) // matrix.size``.

    Args:
        matrix: Matrix to draw
        background_path: Background image file
        colors: Dark and light module colors

    Returns:
        The background image (RGB) with the QR raster pasted in the centre

    Raises:
        InvalidLogoPath: If the background cannot be loaded
        BackgroundTooSmall: If the computed scale is below 2 pixels per module
    """
    background = load_image(background_path).convert("RGB")

    scale = module_scale(background.size, matrix, BACKGROUND_MARGIN)
    if scale < MIN_MODULE_SCALE:
        logger.warning(
            f"Background {background.size[0]}x{background.size[1]} leaves {scale} px "
            f"per module for a {matrix.size}-module matrix"
        )
        raise BackgroundTooSmall()

    raster = render_raster(matrix, scale, colors)
    logger.info(f"Fitting {raster.size[0]}px QR at scale {scale} onto {background_path}")
    return paste_centered(background, raster)
