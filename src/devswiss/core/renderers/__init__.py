"""Matrix renderers: terminal glyphs, Pillow rasters and SVG markup."""

from devswiss.core.renderers.raster import RASTER_QUIET_ZONE, raster_size, render_raster
from devswiss.core.renderers.terminal import TERMINAL_QUIET_ZONE, RenderStyle, render_terminal
from devswiss.core.renderers.vector import render_svg

__all__ = [
    "RASTER_QUIET_ZONE",
    "TERMINAL_QUIET_ZONE",
    "RenderStyle",
    "raster_size",
    "render_raster",
    "render_svg",
    "render_terminal",
]
