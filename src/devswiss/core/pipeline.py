"""Capability-checked facade over the QR rendering core.

:class:`QrPipeline` is what the CLI and the HTTP API talk to. It holds the
configuration and the :class:`~devswiss.core.capabilities.CapabilitySet`,
refuses outputs that are disabled, and owns the final save step. The
rendering and compositing functions it calls stay pure and configuration-free.

Usage
-----
::

    from devswiss.core.pipeline import QrPipeline

    pipeline = QrPipeline()
    matrix = pipeline.generate("https://example.com")
    image = pipeline.render_png(matrix, scale=8)
    pipeline.add_logo(image, LogoSpec("logo.png", 20))
    pipeline.save_image(image, "qr.png")
"""

from __future__ import annotations

import logging
from pathlib import Path

from PIL import Image

from .capabilities import Capability, CapabilitySet
from .colors import ColorPair
from .compositors.art import StabilityArtClient, generate_styled
from .compositors.background import overlay_on_background
from .compositors.logo import LogoSpec, overlay_logo
from .config import DevSwissConfig
from .config import config as default_config
from .errors import QrIoError
from .matrix import ErrorCorrectionLevel, Matrix, generate_matrix
from .renderers.raster import render_raster
from .renderers.terminal import RenderStyle, render_terminal
from .renderers.vector import render_svg

logger = logging.getLogger(__name__)


class QrPipeline:
    """Entry point for generating, rendering and saving QR codes.

    Attributes
    ----------
    config : DevSwissConfig
        Source of defaults (level, scale, colors, art endpoint)
    capabilities : CapabilitySet
        Outputs this pipeline may produce
    art_client : StabilityArtClient
        Client used for AI backgrounds
    """

    def __init__(
        self,
        config: DevSwissConfig | None = None,
        capabilities: CapabilitySet | None = None,
        art_client: StabilityArtClient | None = None,
    ) -> None:
        self.config = config or default_config
        self.capabilities = capabilities or CapabilitySet.from_config(self.config)
        self.art_client = art_client or StabilityArtClient(
            endpoint=self.config.art_endpoint,
            timeout=self.config.art_timeout,
        )

    def default_colors(self) -> ColorPair:
        """Color pair configured by ``dark_color`` / ``light_color``.

        Raises:
            InvalidColor: If a configured color cannot be parsed
        """
        return ColorPair.parse(self.config.dark_color, self.config.light_color)

    def generate(
        self, content: str, level: ErrorCorrectionLevel | str | None = None
    ) -> Matrix:
        """Encode content at ``level`` (the configured default if omitted)."""
        if level is None:
            level = self.config.default_error_correction
        return generate_matrix(content, ErrorCorrectionLevel.parse(level))

    def render_terminal(self, matrix: Matrix, style: RenderStyle | None = None) -> str:
        self.capabilities.require(Capability.TERMINAL)
        return render_terminal(matrix, style)

    def render_png(
        self, matrix: Matrix, scale: int | None = None, colors: ColorPair | None = None
    ) -> Image.Image:
        self.capabilities.require(Capability.PNG)
        return render_raster(
            matrix,
            scale if scale is not None else self.config.default_scale,
            colors or self.default_colors(),
        )

    def render_svg(self, matrix: Matrix, colors: ColorPair | None = None) -> str:
        self.capabilities.require(Capability.SVG)
        return render_svg(matrix, colors or self.default_colors())

    def add_logo(self, image: Image.Image, logo: LogoSpec) -> None:
        self.capabilities.require(Capability.LOGO)
        overlay_logo(image, logo)

    def on_background(
        self, matrix: Matrix, background_path: str | Path, colors: ColorPair | None = None
    ) -> Image.Image:
        self.capabilities.require(Capability.BACKGROUND)
        return overlay_on_background(matrix, background_path, colors or self.default_colors())

    def ai_styled(
        self,
        matrix: Matrix,
        prompt: str,
        api_key: str,
        colors: ColorPair | None = None,
    ) -> Image.Image:
        self.capabilities.require(Capability.AI_ART)
        return generate_styled(
            matrix, prompt, api_key, colors or self.default_colors(), self.art_client
        )

    def save_image(self, image: Image.Image, path: str | Path) -> Path:
        """Save a raster, inferring the format from the file extension.

        Raises:
            QrIoError: If the file cannot be written or the extension is unknown
        """
        path = Path(path)
        try:
            image.save(path)
        except (OSError, ValueError) as e:
            logger.error(f"Failed to save image to {path}: {e}")
            raise QrIoError(f"Failed to save image: {e}") from e
        logger.info(f"Image saved to: {path}")
        return path

    def save_svg(self, markup: str, path: str | Path) -> Path:
        """Write SVG markup to ``path``.

        Raises:
            QrIoError: If the file cannot be written
        """
        path = Path(path)
        try:
            path.write_text(markup, encoding="utf-8")
        except OSError as e:
            logger.error(f"Failed to write SVG to {path}: {e}")
            raise QrIoError(f"Failed to write file: {e}") from e
        logger.info(f"SVG saved to: {path}")
        return path
