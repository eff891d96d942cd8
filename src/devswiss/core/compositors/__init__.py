"""Compositors that combine a QR raster with other images.

- logo.py: centred logo over a rendered raster
- background.py: raster fitted onto a background image file
- art.py: raster fitted onto an AI-generated background
"""

from devswiss.core.compositors.art import StabilityArtClient, build_art_prompt, generate_styled
from devswiss.core.compositors.background import overlay_on_background
from devswiss.core.compositors.logo import LogoSpec, overlay_logo

__all__ = [
    "LogoSpec",
    "StabilityArtClient",
    "build_art_prompt",
    "generate_styled",
    "overlay_logo",
    "overlay_on_background",
]
