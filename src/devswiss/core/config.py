"""Configuration management for dev-swiss.

This module provides centralized configuration management using Pydantic Settings.
All configuration is loaded from environment variables with the DEVSWISS_ prefix,
allowing easy customization without code changes.

Environment Variable Loading
-----------------------------
Configuration values are loaded in the following priority order:
1. Environment variables (DEVSWISS_* prefix)
2. .env file in the working directory
3. Default values defined in DevSwissConfig

Example .env file:
    DEVSWISS_DEFAULT_ERROR_CORRECTION=high
    DEVSWISS_DEFAULT_SCALE=10
    DEVSWISS_DARK_COLOR=#1a1a2e
    DEVSWISS_CAPABILITIES=["terminal", "png", "svg"]
    STABILITY_API_KEY=sk-...

The Stability AI key is also read from the un-prefixed ``STABILITY_API_KEY``
variable, which is the name the Stability tooling documents.

Global Configuration Instance
------------------------------
A global `config` instance is created automatically at module import time.
The CLI and the HTTP API read their defaults from it; the rendering core never
reads it directly and only receives explicit arguments.

Usage Example
-------------
    from devswiss.core.config import config

    print(config.default_scale)
    print(config.capabilities)

Capability Gating
-----------------
``capabilities`` enumerates which renderers and compositors are available.
Removing an entry (e.g. ``ai_art``) makes the pipeline raise
:class:`~devswiss.core.errors.CapabilityUnavailable` for that output instead
of attempting it.
"""

from typing import Literal

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .capabilities import Capability

STABILITY_CORE_ENDPOINT = "https://api.stability.ai/v2beta/stable-image/generate/core"


class DevSwissConfig(BaseSettings):
    """Main configuration for dev-swiss.

    Values are loaded from environment variables with the DEVSWISS_ prefix,
    with fallback to the defaults defined here.

    Attributes
    ----------
    Rendering Defaults:
        default_error_correction : Literal["low", "medium", "quartile", "high"]
            Error-correction level used when the caller does not pick one
        default_format : Literal["terminal", "png", "svg"]
            Output format used by the CLI when ``--format`` is omitted
        default_scale : int
            Pixels per module for raster output (1-100)
        dark_color : str
            Dark module color (name or hex triplet)
        light_color : str
            Light module color (name or hex triplet)
        logo_size_percent : int
            Logo edge length as a percentage of the raster width

    Art Generation:
        stability_api_key : str | None
            Bearer token for the Stability AI endpoint
        art_endpoint : str
            URL of the styled image generation endpoint
        art_timeout : float | None
            Request timeout in seconds (None leaves it to requests' default)

    Build:
        capabilities : list[Capability]
            Renderers and compositors available at runtime

    Logging:
        log_level : str
            Root logging level for the CLI and the API server

    API Server:
        server_host : str
            Bind address for the uvicorn server
        server_port : int
            Port for the uvicorn server (1024-65535)

    Examples
    --------
    Create a custom configuration:

        >>> custom_config = DevSwissConfig(
        ...     default_scale=4,
        ...     capabilities=["terminal", "svg"],
        ... )
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="DEVSWISS_",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )

    # Rendering defaults
    default_error_correction: Literal["low", "medium", "quartile", "high"] = Field(
        default="medium",
        description="Error-correction level used when none is requested",
    )
    default_format: Literal["terminal", "png", "svg"] = Field(
        default="terminal",
        description="Output format used by the CLI when none is requested",
    )
    default_scale: int = Field(
        default=8,
        description="Pixels per module for raster output",
        ge=1,
        le=100,
    )
    dark_color: str = Field(default="black", description="Dark module color")
    light_color: str = Field(default="white", description="Light module color")
    logo_size_percent: int = Field(
        default=20,
        description="Logo size as a percentage of the QR code (5-30)",
    )

    # Art generation
    stability_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("DEVSWISS_STABILITY_API_KEY", "STABILITY_API_KEY"),
        description="Stability AI API key",
    )
    art_endpoint: str = Field(
        default=STABILITY_CORE_ENDPOINT,
        description="Styled image generation endpoint",
    )
    art_timeout: float | None = Field(
        default=None,
        description="Art request timeout in seconds (None = transport default)",
        gt=0,
    )

    # Build
    capabilities: list[Capability] = Field(
        default_factory=lambda: list(Capability),
        description="Renderers and compositors available at runtime",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Root logging level",
    )

    # API server
    server_host: str = Field(default="127.0.0.1", description="API bind address")
    server_port: int = Field(default=8000, description="API port", ge=1024, le=65535)

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        if isinstance(value, str):
            return value.upper()
        return value


# Global configuration instance
# Loaded once from DEVSWISS_* environment variables and the .env file.
config = DevSwissConfig()
