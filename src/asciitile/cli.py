import argparse
import logging
import sys
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from asciitile.charsets import parse_charset
from asciitile.config import OUTPUTS, ConversionConfig
from asciitile.converter import image_to_ascii
from asciitile.errors import AsciiTileError
from asciitile.output import to_text, write_html
from asciitile.palette import Palette
from asciitile.terminal import fit_to_terminal, terminal_columns
from asciitile.tiling import pad_to_power_of_two

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render an image as ASCII art by matching tile brightness")
    parser.add_argument("image", help="Path to input image")
    parser.add_argument(
        "-r",
        "--resolution",
        type=int,
        default=None,
        help="Characters per row; must split the padded image into whole square tiles (default: 128)",
    )
    parser.add_argument(
        "-c",
        "--charset",
        nargs="+",
        default=None,
        help="Characters to draw with: single characters, ranges like a-z, 'space' or 'all' (default: 0-9)",
    )
    parser.add_argument("-o", "--output", choices=OUTPUTS, default=None, help="Where to send the result")
    parser.add_argument("--html-file", default=None, help="Destination for html output (default: out.html)")
    parser.add_argument("-v", "--verbose", action="store_true", default=False, help="Log debug information")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = ConversionConfig.from_env().with_overrides(
            resolution=args.resolution,
            charset=tuple(args.charset) if args.charset else None,
            output=args.output,
            html_file=args.html_file,
        )
    except ValueError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1

    image_path = Path(args.image)
    if not image_path.exists():
        print(f"File not found: {image_path}", file=sys.stderr)
        return 1

    try:
        image = Image.open(image_path).convert("RGB")
    except (OSError, UnidentifiedImageError) as e:
        print(f"Could not read image {image_path}: {e}", file=sys.stderr)
        return 1

    resolution = config.resolution
    if args.resolution is None and config.output == "console":
        resolution = fit_to_terminal(pad_to_power_of_two(image), resolution, terminal_columns())
        logger.debug("Using resolution %d", resolution)

    try:
        palette = Palette()
        palette.add_many("".join(parse_charset(arg) for arg in config.charset))
        grid = image_to_ascii(image, resolution, palette)
    except (AsciiTileError, ValueError) as e:
        print(f"Did not execute: {e}", file=sys.stderr)
        return 1

    if config.output == "html":
        path = write_html(grid, config.html_file, config.font_name)
        logger.info("Wrote %s", path)
    else:
        print(to_text(grid))
    return 0


if __name__ == "__main__":
    sys.exit(main())
