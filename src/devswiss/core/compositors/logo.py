"""Centred logo overlay for rendered QR rasters.

A logo hides the modules underneath it, so the code only stays scannable when
the error-correction level leaves enough redundancy. This module does not
check that: it draws the logo at the requested size and leaves the choice of
level to the caller (the CLI upgrades to ``high`` when a logo is requested).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from PIL import Image

from ..errors import ImageProcessingFailed, InvalidLogoPath, LogoTooLarge

logger = logging.getLogger(__name__)

MIN_LOGO_PERCENT = 5
MAX_LOGO_PERCENT = 30


@dataclass(frozen=True)
class LogoSpec:
    """Logo image and its size relative to the QR raster.

    Attributes:
        path: Logo image file (any format Pillow can open)
        size_percent: Logo edge length as a percentage of the raster width (5-30)
    """

    path: str | Path
    size_percent: int = 20


def load_image(path: str | Path) -> Image.Image:
    """Open and fully decode an image file.

    Raises:
        InvalidLogoPath: If the file is missing or is not a decodable image
    """
    try:
        with Image.open(path) as img:
            img.load()
            return img.copy()
    except (OSError, ValueError, Image.DecompressionBombError) as e:
        logger.error(f"Failed to load image {path}: {e}")
        raise InvalidLogoPath(f"{path}: {e}") from e


def fit_within(size: tuple[int, int], edge: int) -> tuple[int, int]:
    """Largest ``(width, height)`` with the same aspect ratio that fits an edge x edge box."""
    width, height = size
    ratio = min(edge / width, edge / height)
    return max(1, round(width * ratio)), max(1, round(height * ratio))


def centered_offset(outer: tuple[int, int], inner: tuple[int, int]) -> tuple[int, int]:
    """Top-left offset that centres ``inner`` over ``outer``."""
    return (outer[0] - inner[0]) // 2, (outer[1] - inner[1]) // 2


def overlay_logo(image: Image.Image, logo: LogoSpec) -> None:
    """Draw a logo centred over a QR raster, in place.

    The size is validated before the logo file is touched. The logo is
    scaled (up or down) with LANCZOS resampling to fit a square whose edge is
    ``size_percent`` of the raster width, then pasted using its own alpha
    channel as the mask.

    Args:
        image: Rendered QR raster, modified in place
        logo: Logo file and relative size

    Raises:
        LogoTooLarge: If ``size_percent`` is outside 5-30
        InvalidLogoPath: If the logo cannot be loaded
        ImageProcessingFailed: If the logo cannot be resized or composited
    """
    if not MIN_LOGO_PERCENT <= logo.size_percent <= MAX_LOGO_PERCENT:
        raise LogoTooLarge()

    source = load_image(logo.path)

    width, height = image.size
    edge = max(1, width * logo.size_percent // 100)

    try:
        resized = source.convert("RGBA").resize(
            fit_within(source.size, edge), Image.Resampling.LANCZOS
        )
        image.paste(resized, centered_offset(image.size, resized.size), resized)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to overlay logo {logo.path}: {e}")
        raise ImageProcessingFailed(f"Failed to overlay logo: {e}") from e

    logger.info(f"Overlaid logo {logo.path} at {resized.size[0]}x{resized.size[1]} px")
