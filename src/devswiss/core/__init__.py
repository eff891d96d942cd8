"""Core functionality for QR code rendering.

This module provides the core components of dev-swiss:

- **generate_matrix**: Encode text into an immutable :class:`Matrix`
- **Renderers**: Terminal glyphs, Pillow rasters and SVG markup
- **Compositors**: Logo overlay, background fitting and AI-generated backgrounds
- **QrPipeline**: Capability-checked facade used by the CLI and the API
- **DevSwissConfig**: Configuration management using Pydantic Settings
- **config**: Global configuration instance (loads from environment variables)

Architecture Overview
---------------------
The core module follows a layered architecture:

1. **Configuration Layer** (config.py, capabilities.py):
   - Environment-based configuration using Pydantic Settings
   - All settings prefixed with DEVSWISS_ in .env files
   - Runtime capability set deciding which outputs are available

2. **Matrix Layer** (matrix.py, colors.py):
   - qrcode-backed encoder behind a single error-classification seam
   - Color names and hex triplets resolved to RGB

3. **Rendering Layer** (renderers/):
   - Pure functions from a Matrix to text, an image or markup

4. **Compositing Layer** (compositors/):
   - Logo, background and AI art, all centred with the same offset rule

5. **Auxiliary Tools**:
   - password.py: Secure random passwords
   - convert.py: PDF to DOCX conversion

Usage Example
-------------
    from devswiss.core import QrPipeline, ErrorCorrectionLevel

    pipeline = QrPipeline()
    matrix = pipeline.generate("https://example.com", ErrorCorrectionLevel.HIGH)
    image = pipeline.render_png(matrix, scale=8)
    pipeline.save_image(image, "qr.png")
"""

from devswiss.core.capabilities import Capability, CapabilitySet
from devswiss.core.colors import ColorPair, parse_color
from devswiss.core.config import DevSwissConfig, config
from devswiss.core.matrix import ErrorCorrectionLevel, Matrix, generate_matrix
from devswiss.core.pipeline import QrPipeline

__all__ = [
    "Capability",
    "CapabilitySet",
    "ColorPair",
    "DevSwissConfig",
    "ErrorCorrectionLevel",
    "Matrix",
    "QrPipeline",
    "config",
    "generate_matrix",
    "parse_color",
]
