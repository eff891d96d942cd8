"""Color parsing for raster and vector output."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import InvalidColor

RGB = tuple[int, int, int]

NAMED_COLORS: dict[str, RGB] = {
    "black": (0, 0, 0),
    "white": (255, 255, 255),
    "red": (255, 0, 0),
    "green": (0, 255, 0),
    "blue": (0, 0, 255),
}

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def parse_color(value: str) -> RGB:
    """Resolve a color name or hex triplet into an RGB tuple.

    Accepted forms are the names in :data:`NAMED_COLORS` (case-insensitive)
    and six hex digits with an optional leading ``#``.

    Args:
        value: Color as typed by the user, e.g. ``"Black"`` or ``"#ff5500"``

    Returns:
        ``(red, green, blue)`` with each channel in 0-255

    Raises:
        InvalidColor: If the value is neither a known name nor a hex triplet
    """
    color = value.strip()

    named = NAMED_COLORS.get(color.lower())
    if named is not None:
        return named

    hex_part = color[1:] if color.startswith("#") else color
    # int(..., 16) alone would accept "0x", "_" and surrounding spaces
    if len(hex_part) != 6 or not set(hex_part) <= _HEX_DIGITS:
        raise InvalidColor(color)

    return (int(hex_part[0:2], 16), int(hex_part[2:4], 16), int(hex_part[4:6], 16))


def to_hex(rgb: RGB) -> str:
    """Format an RGB tuple as a lowercase ``#rrggbb`` string."""
    return "#{:02x}{:02x}{:02x}".format(*rgb)


@dataclass(frozen=True)
class ColorPair:
    """Dark and light module colors.

    The two colors are resolved independently. Nothing forces them to
    contrast; picking a scannable pair is left to the caller.
    """

    dark: RGB = (0, 0, 0)
    light: RGB = (255, 255, 255)

    @classmethod
    def parse(cls, dark: str, light: str) -> "ColorPair":
        """Build a pair from two user-supplied color strings.

        Raises:
            InvalidColor: If either color cannot be parsed
        """
        return cls(dark=parse_color(dark), light=parse_color(light))

    def inverted(self) -> "ColorPair":
        """Return the pair with dark and light swapped."""
        return ColorPair(dark=self.light, light=self.dark)
