"""dev-swiss - QR code rendering and compositing, plus small developer tools."""

__version__ = "0.3.0"

from devswiss.core.config import DevSwissConfig, config
from devswiss.core.pipeline import QrPipeline

__all__ = [
    "DevSwissConfig",
    "QrPipeline",
    "config",
]
