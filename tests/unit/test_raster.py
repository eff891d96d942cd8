"""Unit tests for raster (PNG) rendering."""

import pytest

from devswiss.core.colors import ColorPair
from devswiss.core.renderers.raster import RASTER_QUIET_ZONE, raster_size, render_raster


class TestRenderRaster:
    def test_dimensions_include_quiet_zone(self, version1_matrix):
        image = render_raster(version1_matrix, 8)
        assert image.size == (184, 184)
        assert raster_size(version1_matrix, 8) == 184

    def test_mode_is_rgb(self, tiny_matrix):
        assert render_raster(tiny_matrix, 4).mode == "RGB"

    def test_scale_one(self, tiny_matrix):
        image = render_raster(tiny_matrix, 1)
        assert image.size == (5, 5)
        assert image.getpixel((0, 0)) == (255, 255, 255)
        assert image.getpixel((1, 1)) == (0, 0, 0)
        assert image.getpixel((2, 1)) == (255, 255, 255)
        assert image.getpixel((2, 3)) == (0, 0, 0)

    def test_modules_are_solid_blocks(self, tiny_matrix):
        image = render_raster(tiny_matrix, 10)
        # Module (0, 0) is dark and covers pixels 10..19 in both axes
        block = image.crop((10, 10, 20, 20))
        assert block.getcolors() == [(100, (0, 0, 0))]
        # Module (0, 1) is light
        block = image.crop((20, 10, 30, 20))
        assert block.getcolors() == [(100, (255, 255, 255))]

    def test_border_is_one_module(self, version1_matrix):
        scale = 6
        image = render_raster(version1_matrix, scale)
        assert RASTER_QUIET_ZONE == 1
        top = image.crop((0, 0, image.width, scale))
        assert top.getcolors() == [(image.width * scale, (255, 255, 255))]
        assert image.getpixel((scale, scale)) == (0, 0, 0)

    def test_custom_colors(self, tiny_matrix):
        colors = ColorPair(dark=(10, 20, 30), light=(200, 210, 220))
        image = render_raster(tiny_matrix, 2, colors)
        assert image.getpixel((0, 0)) == (200, 210, 220)
        assert image.getpixel((2, 2)) == (10, 20, 30)

    def test_only_two_colors(self, url_matrix):
        colors = {color for _, color in render_raster(url_matrix, 3).getcolors()}
        assert colors == {(0, 0, 0), (255, 255, 255)}

    @pytest.mark.parametrize("scale", [0, -1])
    def test_invalid_scale(self, tiny_matrix, scale):
        with pytest.raises(ValueError):
            render_raster(tiny_matrix, scale)
