"""dev-swiss - FastAPI Application.

This module defines the FastAPI ``app`` instance, the REST routes, and the
``main()`` CLI function that launches the uvicorn server.

Architecture
------------
The application is stateless:

- **Rendering** is delegated to :class:`~devswiss.core.pipeline.QrPipeline`,
  created once at startup and stored on ``app.state``.  The pipeline holds
  no per-request state, so it is shared across requests.
- **Capabilities** disabled in configuration answer with 501 instead of
  being attempted.
- Rendering routes are plain ``def`` handlers: FastAPI runs them in its
  threadpool so CPU-bound image work does not block the event loop.

Endpoints
---------
========  ====================  ==========================================
Method    Path                  Purpose
========  ====================  ==========================================
GET       ``/api/config``       Version, capabilities, rendering defaults
POST      ``/api/qrcode``       Render a QR code as text, PNG or SVG
POST      ``/api/password``     Generate passwords
========  ====================  ==========================================

Usage
-----
CLI (installed entry point)::

    devswiss-api

Direct invocation::

    python -m devswiss.api.main
"""

from __future__ import annotations

import io
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.responses import PlainTextResponse, Response

from devswiss import __version__
from devswiss.api.models import PasswordRequest, QrCodeRequest
from devswiss.core.colors import ColorPair
from devswiss.core.config import config
from devswiss.core.errors import CapabilityUnavailable, QrError
from devswiss.core.password import PasswordConfig, PasswordError, generate_password
from devswiss.core.pipeline import QrPipeline
from devswiss.core.renderers.terminal import RenderStyle
from devswiss.logging_config import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Create the shared :class:`QrPipeline` on startup.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control back to the application for the duration of its lifetime.
    """
    app.state.pipeline = QrPipeline(config)
    logger.info(f"QrPipeline initialised with {app.state.pipeline.capabilities!r}")
    yield


app = FastAPI(
    title="dev-swiss",
    description="QR code rendering and developer utilities.",
    version=__version__,
    lifespan=lifespan,
)


def get_pipeline(request: Request) -> QrPipeline:
    """Dependency returning the pipeline created at startup."""
    return request.app.state.pipeline


def _http_error(error: QrError) -> HTTPException:
    """Translate a pipeline error into an HTTP error.

    Input errors are the client's fault (400), a disabled capability is
    "not implemented" in this deployment (501), everything else is a
    server-side failure (500).
    """
    if isinstance(error, CapabilityUnavailable):
        status = 501
    elif error.is_input_error:
        status = 400
    else:
        status = 500
    if status == 500:
        logger.error(f"QR rendering failed: {error}")
    return HTTPException(status_code=status, detail=str(error))


def _request_colors(req: QrCodeRequest, pipeline: QrPipeline) -> ColorPair:
    colors = ColorPair.parse(
        req.dark_color or pipeline.config.dark_color,
        req.light_color or pipeline.config.light_color,
    )
    return colors.inverted() if req.invert else colors


@app.get("/api/config")
async def get_config(pipeline: QrPipeline = Depends(get_pipeline)) -> dict:
    """Return version, enabled capabilities and rendering defaults."""
    cfg = pipeline.config
    return {
        "version": __version__,
        "capabilities": pipeline.capabilities.names(),
        "defaults": {
            "error_correction": cfg.default_error_correction,
            "scale": cfg.default_scale,
            "dark_color": cfg.dark_color,
            "light_color": cfg.light_color,
        },
    }


@app.post("/api/qrcode")
def create_qrcode(req: QrCodeRequest, pipeline: QrPipeline = Depends(get_pipeline)) -> Response:
    """Render a QR code.

    Returns:
        ``text/plain`` for terminal output, ``image/png`` or
        ``image/svg+xml`` otherwise.

    Raises:
        HTTPException: 400 for invalid input, 501 for a disabled output
            format, 500 for rendering failures.
    """
    try:
        matrix = pipeline.generate(req.content, req.error_correction)

        if req.format == "terminal":
            style = RenderStyle(quiet_zone=req.quiet_zone, invert=req.invert)
            return PlainTextResponse(pipeline.render_terminal(matrix, style))

        colors = _request_colors(req, pipeline)
        if req.format == "svg":
            return Response(pipeline.render_svg(matrix, colors), media_type="image/svg+xml")

        image = pipeline.render_png(matrix, req.scale, colors)
    except QrError as e:
        raise _http_error(e) from e

    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return Response(buffer.getvalue(), media_type="image/png")


@app.post("/api/password")
async def create_passwords(req: PasswordRequest) -> dict:
    """Generate ``count`` passwords.

    Raises:
        HTTPException: 400 if the options leave no characters to draw from.
    """
    options = PasswordConfig(**req.model_dump(exclude={"count"}))
    try:
        passwords = [generate_password(options) for _ in range(req.count)]
    except PasswordError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    return {"passwords": passwords}


def main() -> None:
    """Launch the uvicorn ASGI server.

    Reads host and port from :data:`~devswiss.core.config.config` (which
    loads from ``DEVSWISS_SERVER_HOST`` and ``DEVSWISS_SERVER_PORT``
    environment variables).  Defaults to ``127.0.0.1:8000``.
    """
    import uvicorn

    configure_logging(config.log_level)
    uvicorn.run(
        "devswiss.api.main:app",
        host=config.server_host,
        port=config.server_port,
        reload=False,
    )


if __name__ == "__main__":
    main()
