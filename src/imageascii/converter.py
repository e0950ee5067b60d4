from collections.abc import Iterable
from pathlib import Path

from PIL import Image, ImageFont

from imageascii.charsets import DEFAULT_DENSITY_CHARS
from imageascii.compositor import compose
from imageascii.config import RenderConfig
from imageascii.glyphs import GlyphFont
from imageascii.palette import bind_palette
from imageascii.quantizer import image_to_text


def _open(image: Image.Image | str | Path) -> Image.Image:
    if not isinstance(image, Image.Image):
        image = Image.open(image)
    return image


def generate_text(image: Image.Image | str | Path, include_alpha: bool = True) -> str:
    """Render an image as text with the default density palette."""
    return image_to_text(_open(image), DEFAULT_DENSITY_CHARS, include_alpha)


def generate_text_with_density_chars(
    image: Image.Image | str | Path,
    include_alpha: bool,
    palette: Iterable[str],
) -> str:
    """Render an image as text with a caller-supplied palette.

    Raises PaletteSizeError if the palette is empty or longer than 256 characters.
    """
    return image_to_text(_open(image), bind_palette(palette), include_alpha)


def generate_image(
    image: Image.Image | str | Path,
    font: GlyphFont | ImageFont.FreeTypeFont | str | Path,
    config: RenderConfig | None = None,
) -> Image.Image:
    """Render an image as an RGBA picture made of glyphs."""
    image = _open(image)
    config = config or RenderConfig()
    text = image_to_text(image, config.palette, config.include_alpha)
    return compose(text, image, config, GlyphFont.coerce(font))
