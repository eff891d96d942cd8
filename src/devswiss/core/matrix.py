"""QR matrix generation.

This module wraps the ``qrcode`` library as an opaque encode capability and
exposes the two types every renderer consumes:

- :class:`ErrorCorrectionLevel` - redundancy tier of the encoded data
- :class:`Matrix` - immutable square grid of dark/light modules

Only :func:`generate_matrix` should be called by application code. It
validates the content, delegates to an encoder (the qrcode-backed
:func:`encode` by default) and maps encoder failures into the
:mod:`devswiss.core.errors` taxonomy through :func:`classify_encode_error`.

Usage Example
-------------
    >>> from devswiss.core.matrix import ErrorCorrectionLevel, generate_matrix
    >>> matrix = generate_matrix("https://example.com", ErrorCorrectionLevel.MEDIUM)
    >>> matrix.size
    25

Error Correction and Logos
--------------------------
Higher levels tolerate more damage, which is what keeps a code scannable
under a centred logo. Choosing the level is the caller's job: this module
encodes at exactly the level it is given.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from enum import Enum

import qrcode
from qrcode.exceptions import DataOverflowError

from .errors import ContentTooLarge, EmptyContent, EncodingFailed, QrError

logger = logging.getLogger(__name__)

# Substrings encoders use when the data does not fit in the largest version
_CAPACITY_MARKERS = ("data too long", "overflow")


class ErrorCorrectionLevel(str, Enum):
    """QR error-correction level, ordered by redundancy (L < M < Q < H)."""

    LOW = "low"
    MEDIUM = "medium"
    QUARTILE = "quartile"
    HIGH = "high"

    @classmethod
    def parse(cls, value: "str | ErrorCorrectionLevel") -> "ErrorCorrectionLevel":
        """Parse a level name or its single-letter form (L, M, Q, H).

        Raises:
            ValueError: If the value names no level
        """
        if isinstance(value, cls):
            return value
        text = str(value).strip().lower()
        for level in cls:
            if text in (level.value, level.value[0]):
                return level
        raise ValueError(f"Unknown error correction level: {value!r}")

    @property
    def qrcode_constant(self) -> int:
        """Matching ``qrcode.constants.ERROR_CORRECT_*`` value."""
        return {
            ErrorCorrectionLevel.LOW: qrcode.constants.ERROR_CORRECT_L,
            ErrorCorrectionLevel.MEDIUM: qrcode.constants.ERROR_CORRECT_M,
            ErrorCorrectionLevel.QUARTILE: qrcode.constants.ERROR_CORRECT_Q,
            ErrorCorrectionLevel.HIGH: qrcode.constants.ERROR_CORRECT_H,
        }[self]


@dataclass(frozen=True)
class Matrix:
    """Square grid of QR modules without any quiet zone.

    Attributes:
        modules: Rows of booleans, ``True`` for a dark module
    """

    modules: tuple[tuple[bool, ...], ...]

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[bool]]) -> "Matrix":
        """Build a matrix from any iterable of rows.

        Raises:
            ValueError: If the grid is empty or not square
        """
        modules = tuple(tuple(bool(cell) for cell in row) for row in rows)
        size = len(modules)
        if size == 0 or any(len(row) != size for row in modules):
            raise ValueError("Matrix must be a non-empty square grid")
        return cls(modules)

    @property
    def size(self) -> int:
        """Number of modules along each side."""
        return len(self.modules)

    @property
    def version(self) -> int:
        """QR version implied by the side length (21 modules = version 1)."""
        return (self.size - 17) // 4

    def is_dark(self, row: int, col: int) -> bool:
        return self.modules[row][col]


Encoder = Callable[[str, ErrorCorrectionLevel], Matrix]


def encode(content: str, level: ErrorCorrectionLevel) -> Matrix:
    """Encode ``content`` with the qrcode library at the smallest fitting version.

    Raises:
        qrcode.exceptions.DataOverflowError: If no version can hold the data
    """
    qr = qrcode.QRCode(version=None, error_correction=level.qrcode_constant, border=0)
    qr.add_data(content)
    try:
        qr.make(fit=True)
    except ValueError as e:
        # Newer qrcode releases report overflow as an out-of-range version
        if "invalid version" in str(e).lower():
            raise DataOverflowError() from e
        raise
    return Matrix.from_rows(qr.get_matrix())


def classify_encode_error(exc: Exception) -> QrError:
    """Map an encoder failure onto the error taxonomy.

    The qrcode library signals capacity problems with ``DataOverflowError``.
    Encoders that only report a message are classified by looking for a
    capacity marker in the text.
    """
    if isinstance(exc, DataOverflowError):
        return ContentTooLarge()
    message = str(exc)
    if any(marker in message.lower() for marker in _CAPACITY_MARKERS):
        return ContentTooLarge()
    return EncodingFailed(message or type(exc).__name__)


def generate_matrix(
    content: str,
    level: ErrorCorrectionLevel = ErrorCorrectionLevel.MEDIUM,
    encoder: Encoder = encode,
) -> Matrix:
    """Encode text into a QR matrix.

    Args:
        content: Text or URL to encode (must not be empty)
        level: Error-correction level to encode at
        encoder: Encode capability, the qrcode-backed :func:`encode` by default

    Returns:
        Immutable :class:`Matrix`

    Raises:
        EmptyContent: If ``content`` is empty (the encoder is not called)
        ContentTooLarge: If the content does not fit at ``level``
        EncodingFailed: If the encoder fails for any other reason
    """
    if not content:
        raise EmptyContent()

    level = ErrorCorrectionLevel.parse(level)

    try:
        matrix = encoder(content, level)
    except Exception as e:
        error = classify_encode_error(e)
        logger.error(f"Failed to encode {len(content)} characters at level {level.value}: {e}")
        raise error from e

    logger.info(f"Encoded {len(content)} characters as a {matrix.size}x{matrix.size} matrix")
    return matrix
