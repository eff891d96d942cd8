"""Pydantic request models for the dev-swiss API.

These models define the JSON schema for every API endpoint.  FastAPI uses
them for automatic request validation and OpenAPI documentation generation.

Models
------
QrCodeRequest
    Payload for ``POST /api/qrcode`` - content plus rendering options.
PasswordRequest
    Payload for ``POST /api/password`` - password options and count.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class QrCodeRequest(BaseModel):
    """Request body for the ``POST /api/qrcode`` endpoint.

    Attributes:
        content: Text or URL to encode.  Emptiness is checked by the
            pipeline so the response carries the pipeline's own message.
        format: ``"terminal"`` (plain text), ``"png"`` or ``"svg"``.
        error_correction: Error-correction level.  ``None`` uses the
            configured default.
        scale: Pixels per module for PNG output.  ``None`` uses the
            configured default.
        dark_color: Dark module color (name or hex).  ``None`` uses the
            configured default.
        light_color: Light module color (name or hex).  ``None`` uses the
            configured default.
        quiet_zone: Draw the quiet zone in terminal output.
        invert: Swap dark and light (glyphs for terminal, colors otherwise).
    """

    content: str = Field(..., description="Text or URL to encode.")
    format: Literal["terminal", "png", "svg"] = Field(
        default="png",
        description="Output format.",
    )
    error_correction: Literal["low", "medium", "quartile", "high"] | None = Field(
        default=None,
        description="Error-correction level (None = configured default).",
    )
    scale: int | None = Field(
        default=None,
        ge=1,
        le=100,
        description="Pixels per module for PNG output (None = configured default).",
    )
    dark_color: str | None = Field(default=None, description="Dark module color.")
    light_color: str | None = Field(default=None, description="Light module color.")
    quiet_zone: bool = Field(default=True, description="Quiet zone in terminal output.")
    invert: bool = Field(default=False, description="Swap dark and light.")


class PasswordRequest(BaseModel):
    """Request body for the ``POST /api/password`` endpoint.

    Attributes:
        length: Characters per password.
        count: Number of passwords to generate (1–100 inclusive).
        uppercase / lowercase / numbers / symbols: Character classes to draw from.
        exclude_ambiguous: Drop ``0O1lI`` from the pool.
        exclude_chars: Additional characters to drop from the pool.
    """

    length: int = Field(default=16, ge=0, le=4096)
    count: int = Field(default=1, ge=1, le=100)
    uppercase: bool = True
    lowercase: bool = True
    numbers: bool = True
    symbols: bool = True
    exclude_ambiguous: bool = False
    exclude_chars: str = ""
