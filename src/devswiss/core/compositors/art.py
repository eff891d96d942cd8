"""AI-generated backgrounds for styled QR codes.

The background comes from the Stability AI "stable image core" endpoint. The
user's prompt is wrapped with an instruction to keep the code scannable, the
generated PNG is decoded, and the QR raster is centred on it.

Request Format
--------------
    POST https://api.stability.ai/v2beta/stable-image/generate/core
    Authorization: Bearer <api key>
    Accept: application/json
    multipart/form-data: prompt, output_format=png, aspect_ratio=1:1

A successful response is ``{"image": "<base64 png>"}``.

Margins
-------
This path uses a 40 pixel margin and does not apply the minimum-scale guard
of :mod:`devswiss.core.compositors.background`. Generated backgrounds are
1024 px or more on each side, so the computed scale is always usable.

Usage Example
-------------
    >>> client = StabilityArtClient(timeout=60)
    >>> image = generate_styled(matrix, "a watercolor forest", api_key, ColorPair(), client)
    >>> image.save("styled.png")
"""

from __future__ import annotations

import base64
import binascii
import io
import logging

import requests
from PIL import Image

from ..colors import ColorPair
from ..config import STABILITY_CORE_ENDPOINT
from ..errors import ImageProcessingFailed
from ..matrix import Matrix
from ..renderers.raster import render_raster
from .background import paste_centered

logger = logging.getLogger(__name__)

# Subtracted once from the shorter side, not per edge
ART_MARGIN = 40


def build_art_prompt(prompt: str) -> str:
    """Wrap a user prompt with the instruction to keep the code scannable."""
    return (
        f"A QR code with artistic styling: {prompt}. "
        "The QR code pattern should remain scannable."
    )


class StabilityArtClient:
    """Blocking client for the Stability AI image generation endpoint.

    Attributes
    ----------
    endpoint : str
        Generation endpoint URL
    timeout : float | None
        Request timeout in seconds; ``None`` waits as long as requests does
    session : requests.Session
        HTTP session used for the request
    """

    def __init__(
        self,
        endpoint: str = STABILITY_CORE_ENDPOINT,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.endpoint = endpoint
        self.timeout = timeout
        self.session = session or requests.Session()

    def generate(self, prompt: str, api_key: str) -> Image.Image:
        """Generate a square PNG for ``prompt``.

        Raises:
            ImageProcessingFailed: On transport errors, non-2xx responses,
                malformed JSON, bad base64 or undecodable image data
        """
        logger.info(f"Requesting generated background from {self.endpoint}")
        try:
            response = self.session.post(
                self.endpoint,
                headers={
                    "Authorization": f"Bearer {api_key}",
                    "Accept": "application/json",
                },
                # An empty file part makes requests send multipart/form-data
                files={"none": ""},
                data={
                    "prompt": prompt,
                    "output_format": "png",
                    "aspect_ratio": "1:1",
                },
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error(f"Art request failed: {e}")
            raise ImageProcessingFailed(f"API request failed: {e}") from e

        if not 200 <= response.status_code < 300:
            logger.error(f"Art API returned {response.status_code}")
            raise ImageProcessingFailed(f"API error {response.status_code}: {response.text}")

        try:
            payload = response.json()["image"]
        except (ValueError, KeyError, TypeError) as e:
            raise ImageProcessingFailed(f"Failed to parse response: {e}") from e

        try:
            image_bytes = base64.b64decode(payload, validate=True)
        except (binascii.Error, ValueError, TypeError) as e:
            raise ImageProcessingFailed(f"Failed to decode image: {e}") from e

        try:
            with Image.open(io.BytesIO(image_bytes)) as img:
                img.load()
                return img.copy()
        except (OSError, ValueError, Image.DecompressionBombError) as e:
            raise ImageProcessingFailed(f"Failed to load image: {e}") from e


def generate_styled(
    matrix: Matrix,
    prompt: str,
    api_key: str,
    colors: ColorPair | None = None,
    client: StabilityArtClient | None = None,
) -> Image.Image:
    """Generate an AI background and centre the QR raster on it.

    Args:
        matrix: Matrix to draw
        prompt: User's description of the artistic style
        api_key: Stability AI API key
        colors: Dark and light module colors
        client: Art client (a default :class:`StabilityArtClient` if omitted)

    Returns:
        The generated background (RGB) with the QR raster pasted in the centre

    Raises:
        ImageProcessingFailed: If generation fails or the background cannot
            hold the matrix at one pixel per module
    """
    client = client or StabilityArtClient()
    background = client.generate(build_art_prompt(prompt), api_key).convert("RGB")

    scale = max(0, min(background.size) - ART_MARGIN) // matrix.size
    try:
        raster = render_raster(matrix, scale, colors)
    except ValueError as e:
        raise ImageProcessingFailed(f"Generated background is unusable: {e}") from e

    logger.info(f"Fitting {raster.size[0]}px QR at scale {scale} onto generated background")
    return paste_centered(background, raster)
