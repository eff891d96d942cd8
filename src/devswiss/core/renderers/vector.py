"""SVG rendering of QR matrices.

The document uses module units: ``viewBox`` is one unit per module, so the
output scales to any size without a scale parameter. Dark modules are drawn
as a single ``<path>`` in which horizontal runs of dark modules are merged
into one rectangle each.
"""

from __future__ import annotations

from ..colors import ColorPair, to_hex
from ..matrix import Matrix
from .raster import RASTER_QUIET_ZONE


def _dark_runs(row: tuple[bool, ...]):
    """Yield ``(start, length)`` for each run of dark modules in a row."""
    start = None
    for col, dark in enumerate(row):
        if dark and start is None:
            start = col
        elif not dark and start is not None:
            yield start, col - start
            start = None
    if start is not None:
        yield start, len(row) - start


def render_svg(matrix: Matrix, colors: ColorPair | None = None) -> str:
    """Render a matrix as a standalone SVG document.

    Args:
        matrix: Matrix to draw
        colors: Dark and light colors, written as ``#rrggbb``

    Returns:
        SVG markup
    """
    colors = colors or ColorPair()
    border = RASTER_QUIET_ZONE
    side = matrix.size + 2 * border

    segments = []
    for y, row in enumerate(matrix.modules, start=border):
        for x, length in _dark_runs(row):
            segments.append(f"M{x + border},{y}h{length}v1h-{length}z")

    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        f'<svg xmlns="http://www.w3.org/2000/svg" version="1.1" '
        f'viewBox="0 0 {side} {side}" shape-rendering="crispEdges">\n'
        f'<rect x="0" y="0" width="{side}" height="{side}" fill="{to_hex(colors.light)}"/>\n'
        f'<path d="{"".join(segments)}" fill="{to_hex(colors.dark)}"/>\n'
        "</svg>\n"
    )
