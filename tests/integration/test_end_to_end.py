"""End-to-end tests: content in, saved artifact out, through the real pipeline."""

from __future__ import annotations

import xml.etree.ElementTree as ET

from PIL import Image

from devswiss.core.compositors.logo import LogoSpec
from devswiss.core.matrix import ErrorCorrectionLevel

WHITE = (255, 255, 255)


class TestPngEndToEnd:
    def test_url_png_at_scale_8(self, pipeline, temp_dir):
        matrix = pipeline.generate("https://example.com", ErrorCorrectionLevel.MEDIUM)
        path = pipeline.save_image(pipeline.render_png(matrix, 8), temp_dir / "qr.png")

        with Image.open(path) as img:
            rgb = img.convert("RGB")

        width, height = rgb.size
        assert width == height == (matrix.size + 2) * 8
        assert width % 8 == 0

        # The outermost 8 pixels on every side are the light quiet zone
        for box in [
            (0, 0, width, 8),
            (0, height - 8, width, height),
            (0, 0, 8, height),
            (width - 8, 0, width, height),
        ]:
            region = rgb.crop(box)
            assert region.getcolors() == [(region.width * region.height, WHITE)]

    def test_logo_over_high_level_code(self, pipeline, make_image, temp_dir):
        matrix = pipeline.generate("https://example.com", ErrorCorrectionLevel.HIGH)
        image = pipeline.render_png(matrix, 8)
        pipeline.add_logo(image, LogoSpec(make_image("logo.png", (64, 64), (0, 0, 255)), 20))
        path = pipeline.save_image(image, temp_dir / "qr.png")

        with Image.open(path) as img:
            rgb = img.convert("RGB")
            center = (rgb.width // 2, rgb.height // 2)
            r, g, b = rgb.getpixel(center)
            assert b > 250 and r < 5 and g < 5
            assert rgb.getpixel((0, 0)) == WHITE


class TestSvgEndToEnd:
    def test_svg_file_parses(self, pipeline, temp_dir):
        matrix = pipeline.generate("https://example.com")
        path = pipeline.save_svg(pipeline.render_svg(matrix), temp_dir / "qr.svg")

        root = ET.parse(path).getroot()
        side = matrix.size + 2
        assert root.attrib["viewBox"] == f"0 0 {side} {side}"
