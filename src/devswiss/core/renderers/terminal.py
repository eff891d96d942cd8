"""Unicode half-block rendering for terminals.

Terminal cells are roughly twice as tall as they are wide, so each printed
character covers two module rows: the upper and lower halves of the cell are
drawn independently with the block glyphs below.

    ============  ============  =====
    upper module  lower module  glyph
    ============  ============  =====
    dark          dark          █
    dark          light         ▀
    light         dark          ▄
    light         light         (space)
    ============  ============  =====
"""

from __future__ import annotations

from dataclasses import dataclass

from ..matrix import Matrix

TERMINAL_QUIET_ZONE = 4

_GLYPHS = {
    (True, True): "█",
    (True, False): "▀",
    (False, True): "▄",
    (False, False): " ",
}


@dataclass(frozen=True)
class RenderStyle:
    """Terminal rendering options.

    Attributes:
        quiet_zone: Surround the matrix with a border of light modules
        invert: Swap the dark and light glyph assignment
    """

    quiet_zone: bool = True
    invert: bool = False


def _padded_rows(matrix: Matrix, border: int) -> list[list[bool]]:
    width = matrix.size + 2 * border
    blank = [False] * width
    rows = [list(blank) for _ in range(border)]
    for row in matrix.modules:
        rows.append([False] * border + list(row) + [False] * border)
    rows.extend(list(blank) for _ in range(border))
    return rows


def render_terminal(matrix: Matrix, style: RenderStyle | None = None) -> str:
    """Render a matrix as rows of half-block glyphs.

    Args:
        matrix: Matrix to draw
        style: Quiet zone and polarity options (defaults to ``RenderStyle()``)

    Returns:
        Rendered text, rows separated by ``\\n`` without a trailing newline
    """
    style = style or RenderStyle()
    border = TERMINAL_QUIET_ZONE if style.quiet_zone else 0
    rows = _padded_rows(matrix, border)
    if len(rows) % 2:
        rows.append([False] * len(rows[0]))

    lines = []
    for upper, lower in zip(rows[0::2], rows[1::2]):
        lines.append(
            "".join(
                _GLYPHS[(top != style.invert, bottom != style.invert)]
                for top, bottom in zip(upper, lower)
            )
        )
    return "\n".join(lines)
