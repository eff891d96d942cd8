"""Shared pytest fixtures for dev-swiss tests."""

import shutil
import tempfile
from pathlib import Path
from typing import Callable, Generator

import pytest
from PIL import Image

from devswiss.core.capabilities import CapabilitySet
from devswiss.core.config import DevSwissConfig
from devswiss.core.matrix import ErrorCorrectionLevel, Matrix, generate_matrix
from devswiss.core.pipeline import QrPipeline


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files.

    Yields:
        Path to temporary directory

    Cleanup:
        Directory is removed after test completes
    """
    temp_path = Path(tempfile.mkdtemp())
    try:
        yield temp_path
    finally:
        shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def test_config() -> DevSwissConfig:
    """Create a configuration isolated from the environment and .env files.

    Returns:
        DevSwissConfig with every capability enabled and no API key
    """
    return DevSwissConfig(
        _env_file=None,
        default_error_correction="medium",
        default_scale=8,
        dark_color="black",
        light_color="white",
        stability_api_key=None,
        art_endpoint="https://art.invalid/generate",
    )


@pytest.fixture
def pipeline(test_config: DevSwissConfig) -> QrPipeline:
    """Pipeline with every capability enabled."""
    return QrPipeline(test_config, CapabilitySet.all())


@pytest.fixture
def version1_matrix() -> Matrix:
    """A 21x21 (version 1) matrix encoding "test" at the lowest level."""
    return generate_matrix("test", ErrorCorrectionLevel.LOW)


@pytest.fixture
def url_matrix() -> Matrix:
    """Matrix for https://example.com at the default level."""
    return generate_matrix("https://example.com", ErrorCorrectionLevel.MEDIUM)


@pytest.fixture
def tiny_matrix() -> Matrix:
    """A hand-made 3x3 grid for exact glyph and path assertions.

    Layout (``#`` dark, ``.`` light)::

        #.#
        .#.
        ##.
    """
    return Matrix.from_rows(
        [
            [True, False, True],
            [False, True, False],
            [True, True, False],
        ]
    )


@pytest.fixture
def make_image(temp_dir: Path) -> Callable[..., Path]:
    """Factory writing a solid-color image to the temp directory.

    Returns:
        ``make_image(name, size, color, mode="RGB") -> Path``
    """

    def _make(
        name: str,
        size: tuple[int, int],
        color: tuple[int, ...],
        mode: str = "RGB",
    ) -> Path:
        path = temp_dir / name
        Image.new(mode, size, color).save(path)
        return path

    return _make
