"""Exception taxonomy for the QR rendering pipeline.

Every failure the pipeline can report is a subclass of :class:`QrError`.
Components raise the most specific subclass they can detect; third-party
exceptions (qrcode, Pillow, requests) are wrapped with ``raise ... from exc``
so the original cause stays available for diagnosis.

Error Kinds
-----------
Input errors are detected before any I/O happens and are always correctable
by the user:

- :class:`EmptyContent`
- :class:`ContentTooLarge`
- :class:`InvalidColor`
- :class:`LogoTooLarge`

External-library errors wrap the message of the failing capability:

- :class:`EncodingFailed`
- :class:`InvalidLogoPath`
- :class:`ImageProcessingFailed`
- :class:`BackgroundTooSmall`

Output errors:

- :class:`QrIoError` wraps filesystem failures while saving an artifact.

Build errors:

- :class:`CapabilityUnavailable` is raised when a renderer or compositor has
  been disabled in the active :class:`~devswiss.core.capabilities.CapabilitySet`.

Nothing in :mod:`devswiss.core` terminates the process. The CLI and the HTTP
API are the only places that catch :class:`QrError` and turn it into an exit
code or a status code.
"""

from __future__ import annotations


class QrError(Exception):
    """Base class for all QR pipeline errors.

    The message is intended to be displayed directly to the user.

    Attributes:
        is_input_error: ``True`` for errors caused by user input that are
            detected before any I/O is attempted.
    """

    is_input_error: bool = False


class EmptyContent(QrError):
    """Raised when the content to encode is the empty string."""

    is_input_error = True

    def __init__(self) -> None:
        super().__init__("Content cannot be empty")


class ContentTooLarge(QrError):
    """Raised when the content exceeds the capacity of the chosen level."""

    is_input_error = True

    def __init__(self) -> None:
        super().__init__("Content is too large for QR code encoding")


class EncodingFailed(QrError):
    """Raised when the encoder fails for a reason other than capacity."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"QR code encoding failed: {detail}")


class InvalidColor(QrError):
    """Raised when a color is neither a known name nor a 6-digit hex triplet."""

    is_input_error = True

    def __init__(self, color: str) -> None:
        self.color = color
        super().__init__(f"Invalid color format: {color}")


class LogoTooLarge(QrError):
    """Raised when the requested logo size is outside the 5-30% range."""

    is_input_error = True

    def __init__(self) -> None:
        super().__init__("Logo size must be between 5% and 30% of QR code")


class InvalidLogoPath(QrError):
    """Raised when a logo or background image cannot be loaded."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Failed to load logo image: {detail}")


class ImageProcessingFailed(QrError):
    """Raised when resizing, decoding or art generation fails."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Image processing failed: {detail}")


class BackgroundTooSmall(QrError):
    """Raised when a background cannot hold the matrix at a scannable scale."""

    def __init__(self) -> None:
        super().__init__("Background image is too small for QR code")


class QrIoError(QrError):
    """Raised when an artifact cannot be written to disk."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"I/O error: {detail}")


class CapabilityUnavailable(QrError):
    """Raised when a disabled renderer or compositor is requested."""

    def __init__(self, capability: str) -> None:
        self.capability = capability
        super().__init__(f"{capability} output is not available in this build")
