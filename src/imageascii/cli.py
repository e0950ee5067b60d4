import argparse
import logging
import sys
from pathlib import Path

from PIL import Image

from imageascii.charsets import CHARSETS
from imageascii.config import DEFAULT_SCALE, CopyFromImage, ImageBackground, SolidBackground, SolidColor, parse_hex_color
from imageascii.generator import ImageGenerator, TextGenerator

LOG = logging.getLogger("imageascii")


def setup_logging(debug: bool) -> None:
    level = logging.DEBUG if debug else logging.WARNING
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(name)s: %(message)s"))
    LOG.setLevel(level)
    LOG.handlers[:] = [handler]
    LOG.propagate = False


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render an image as ASCII art text or as an image of glyphs")
    parser.add_argument("image", help="Path to input image")
    parser.add_argument("--no-alpha", action="store_true", help="Ignore pixel transparency when picking glyphs")
    chars = parser.add_mutually_exclusive_group()
    chars.add_argument(
        "--charset", default="default", choices=sorted(CHARSETS), help="Built-in density ramp (default: default)"
    )
    chars.add_argument("--chars", default=None, help="Custom density ramp, darkest first (1-256 characters)")
    parser.add_argument("-o", "--output", default=None, help="Write an image here instead of printing text")
    parser.add_argument("-f", "--font", default=None, help="TrueType font used for --output")
    parser.add_argument("--scale-x", type=int, default=DEFAULT_SCALE, help="Cell width in pixels (default: 24)")
    parser.add_argument("--scale-y", type=int, default=DEFAULT_SCALE, help="Cell height in pixels (default: 24)")
    colour = parser.add_mutually_exclusive_group()
    colour.add_argument("--text-color", default="#ffffff", help="Glyph colour as #rrggbb[aa] (default: #ffffff)")
    colour.add_argument("--copy-color", action="store_true", help="Paint glyphs in their source pixel's colour")
    background = parser.add_mutually_exclusive_group()
    background.add_argument("--background-color", default="#000000", help="Background as #rrggbb[aa]")
    background.add_argument("--background-image", default=None, help="Composite glyphs over this image")
    parser.add_argument("--debug", action="store_true", help="Log progress to stderr")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.debug)

    image_path = Path(args.image)
    if not image_path.exists():
        print(f"File not found: {image_path}", file=sys.stderr)
        return 1
    if args.output is not None and args.font is None:
        parser.error("--output requires --font")

    chars = args.chars if args.chars is not None else CHARSETS[args.charset]
    try:
        image = Image.open(image_path)
        if args.output is None:
            text = TextGenerator(image).set_include_alpha(not args.no_alpha).set_density_chars(chars).generate()
            print(text)
            return 0

        generator = (
            ImageGenerator(image, args.font)
            .set_include_alpha(not args.no_alpha)
            .set_density_chars(chars)
            .set_scale_x(args.scale_x)
            .set_scale_y(args.scale_y)
            .set_text_color(CopyFromImage() if args.copy_color else SolidColor(parse_hex_color(args.text_color)))
        )
        if args.background_image is not None:
            generator.set_background(ImageBackground(Image.open(args.background_image)))
        else:
            generator.set_background(SolidBackground(parse_hex_color(args.background_color)))
        result = generator.generate()
        result.save(args.output)
    except (ValueError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    LOG.debug("Wrote %dx%d image to %s", result.width, result.height, args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
