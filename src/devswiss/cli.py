"""Command-line interface for dev-swiss.

Subcommands
-----------
``qrcode``    Render text or a URL as a QR code (terminal, PNG or SVG)
``password``  Generate random passwords
``convert``   Convert a PDF into a DOCX document

Defaults for the ``qrcode`` options come from
:data:`devswiss.core.config.config`, so they can be changed with DEVSWISS_*
environment variables. Errors are printed to stderr as ``Error: <message>``
and the command exits with status 1.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from devswiss import __version__
from devswiss.core.colors import ColorPair
from devswiss.core.compositors.logo import LogoSpec
from devswiss.core.config import DevSwissConfig
from devswiss.core.config import config as default_config
from devswiss.core.convert import ConvertConfig, ConvertError, DocumentFormat, convert
from devswiss.core.errors import QrError
from devswiss.core.matrix import ErrorCorrectionLevel
from devswiss.core.password import PasswordConfig, PasswordError, generate_password
from devswiss.core.pipeline import QrPipeline
from devswiss.core.renderers.terminal import RenderStyle
from devswiss.logging_config import configure_logging

logger = logging.getLogger(__name__)

# Levels too weak to survive a logo covering the centre of the code
_LOGO_UPGRADE_LEVELS = (ErrorCorrectionLevel.LOW, ErrorCorrectionLevel.MEDIUM)


def _non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be 0 or greater, got {number}")
    return number


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be 1 or greater, got {number}")
    return number


def build_parser(cfg: DevSwissConfig | None = None) -> argparse.ArgumentParser:
    cfg = cfg or default_config
    parser = argparse.ArgumentParser(
        prog="devswiss",
        description="A Swiss Army knife CLI toolkit for developers",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--log-level",
        default=cfg.log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="Logging level (default: %(default)s)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    qr = sub.add_parser("qrcode", help="Generate QR codes from URLs or text")
    qr.add_argument("content", help="URL or text content to encode in the QR code")
    qr.add_argument(
        "-f", "--format", choices=["terminal", "png", "svg"], default=cfg.default_format
    )
    qr.add_argument("-o", "--output", help="Output file path (required for png/svg formats)")
    qr.add_argument(
        "-e",
        "--error-correction",
        choices=[level.value for level in ErrorCorrectionLevel],
        default=cfg.default_error_correction,
    )
    qr.add_argument(
        "-s",
        "--scale",
        type=_positive_int,
        default=cfg.default_scale,
        help="Pixels per module for image output (default: %(default)s)",
    )
    qr.add_argument("--invert", action="store_true", help="Invert colors (dark <-> light)")
    qr.add_argument(
        "--no-quiet-zone", action="store_true", help="Hide the border around the QR code"
    )
    qr.add_argument("--logo", help="Path to logo image to embed in the centre")
    qr.add_argument(
        "--logo-size",
        type=int,
        default=cfg.logo_size_percent,
        help="Logo size as percentage of QR code, 5-30 (default: %(default)s)",
    )
    qr.add_argument("--background", help="Path to background image")
    qr.add_argument("--dark-color", default=cfg.dark_color, help="Dark module color")
    qr.add_argument("--light-color", default=cfg.light_color, help="Light module color")
    qr.add_argument("--ai-prompt", help="Prompt for an AI-generated background")
    qr.add_argument(
        "--api-key",
        default=cfg.stability_api_key,
        help="Stability AI API key (or set STABILITY_API_KEY)",
    )

    pw = sub.add_parser("password", help="Generate secure random passwords")
    pw.add_argument("-l", "--length", type=_non_negative_int, default=16)
    pw.add_argument("-n", "--count", type=_non_negative_int, default=1)
    pw.add_argument("--no-uppercase", action="store_true", help="Exclude uppercase letters")
    pw.add_argument("--no-lowercase", action="store_true", help="Exclude lowercase letters")
    pw.add_argument("--no-numbers", action="store_true", help="Exclude numbers")
    pw.add_argument("--no-symbols", action="store_true", help="Exclude symbols")
    pw.add_argument(
        "--no-ambiguous", action="store_true", help="Exclude ambiguous characters (0O1lI)"
    )
    pw.add_argument("--exclude", default="", help="Custom characters to exclude")

    cv = sub.add_parser("convert", help="Convert files between formats")
    formats = [f.value for f in DocumentFormat]
    cv.add_argument("-f", "--from", dest="source", choices=formats, required=True)
    cv.add_argument("-t", "--to", dest="target", choices=formats, required=True)
    cv.add_argument("input", help="Input file path")
    cv.add_argument("output", help="Output file path")
    cv.add_argument("--force", action="store_true", help="Overwrite the output file")
    cv.add_argument("-v", "--verbose", action="store_true", help="Show pages and warnings")

    return parser


def run_qrcode(args: argparse.Namespace, pipeline: QrPipeline) -> int:
    level = ErrorCorrectionLevel.parse(args.error_correction)
    if args.logo and level in _LOGO_UPGRADE_LEVELS:
        print("Note: Using high error correction for logo overlay", file=sys.stderr)
        level = ErrorCorrectionLevel.HIGH

    try:
        matrix = pipeline.generate(args.content, level)

        if args.format == "terminal":
            style = RenderStyle(quiet_zone=not args.no_quiet_zone, invert=args.invert)
            print(pipeline.render_terminal(matrix, style))
            return 0

        if not args.output:
            print(
                f"Error: Output path required for {args.format} format. Use -o <path>",
                file=sys.stderr,
            )
            return 1

        colors = ColorPair.parse(args.dark_color, args.light_color)
        if args.invert:
            colors = colors.inverted()

        if args.format == "svg":
            pipeline.save_svg(pipeline.render_svg(matrix, colors), args.output)
            print(f"Saved SVG to {args.output}")
            return 0

        if args.ai_prompt:
            if not args.api_key:
                print(
                    "Error: API key required for AI generation. "
                    "Use --api-key or set STABILITY_API_KEY",
                    file=sys.stderr,
                )
                return 1
            image = pipeline.ai_styled(matrix, args.ai_prompt, args.api_key, colors)
            pipeline.save_image(image, args.output)
            print(f"Saved AI-styled QR to {args.output}")
            return 0

        if args.background:
            image = pipeline.on_background(matrix, args.background, colors)
            pipeline.save_image(image, args.output)
            print(f"Saved QR with background to {args.output}")
            return 0

        image = pipeline.render_png(matrix, args.scale, colors)
        if args.logo:
            pipeline.add_logo(image, LogoSpec(args.logo, args.logo_size))
        pipeline.save_image(image, args.output)
        print(f"Saved PNG to {args.output}")
        return 0

    except QrError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def run_password(args: argparse.Namespace) -> int:
    config = PasswordConfig(
        length=args.length,
        uppercase=not args.no_uppercase,
        lowercase=not args.no_lowercase,
        numbers=not args.no_numbers,
        symbols=not args.no_symbols,
        exclude_ambiguous=args.no_ambiguous,
        exclude_chars=args.exclude,
    )
    try:
        for _ in range(args.count):
            print(generate_password(config))
    except PasswordError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


def run_convert(args: argparse.Namespace) -> int:
    config = ConvertConfig(
        input_path=args.input,
        output_path=args.output,
        source_format=DocumentFormat(args.source),
        target_format=DocumentFormat(args.target),
        force=args.force,
    )
    try:
        result = convert(config)
    except ConvertError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.verbose:
        print(f"Converted {result.pages_processed} page(s)")
        for warning in result.warnings:
            print(f"Warning: {warning}", file=sys.stderr)
    print(f"Successfully converted to {args.output}")
    return 0


def main(argv: Sequence[str] | None = None, pipeline: QrPipeline | None = None) -> int:
    parser = build_parser(pipeline.config if pipeline else None)
    args = parser.parse_args(list(argv) if argv is not None else None)
    configure_logging(args.log_level)
    logger.debug(f"Running command: {args.command}")

    if args.command == "qrcode":
        return run_qrcode(args, pipeline or QrPipeline())

    if args.command == "password":
        return run_password(args)

    if args.command == "convert":
        return run_convert(args)

    raise AssertionError(f"Unhandled command: {args.command}")


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main(sys.argv[1:]))
