import logging
from collections.abc import Iterable
from pathlib import Path

from PIL import Image, ImageFont

from imageascii.charsets import DEFAULT_DENSITY_CHARS
from imageascii.compositor import compose
from imageascii.config import (
    DEFAULT_SCALE,
    Background,
    RenderConfig,
    SolidBackground,
    SolidColor,
    TextColor,
)
from imageascii.glyphs import GlyphFont
from imageascii.palette import bind_palette
from imageascii.quantizer import image_to_text

LOG = logging.getLogger(__name__)


class TextGenerator:
    """Fluent generator of ASCII art strings.

    Setters return the generator so calls can be chained::

        TextGenerator(image).set_include_alpha(False).set_density_chars(".:#").generate()
    """

    def __init__(self, image: Image.Image):
        self.image = image
        self.include_alpha = True
        self.density_chars: tuple[str, ...] = DEFAULT_DENSITY_CHARS

    def set_include_alpha(self, value: bool) -> "TextGenerator":
        """Whether pixel alpha weights the luminance used to pick a glyph."""
        self.include_alpha = value
        return self

    def set_density_chars(self, value: Iterable[str]) -> "TextGenerator":
        """Replace the palette. Raises PaletteSizeError outside 1..256 characters."""
        self.density_chars = bind_palette(value)
        return self

    def generate(self) -> str:
        LOG.debug(
            "Generating text for %dx%d image with %d-character palette",
            self.image.width,
            self.image.height,
            len(self.density_chars),
        )
        return image_to_text(self.image, self.density_chars, self.include_alpha)


class ImageGenerator:
    """Fluent generator of ASCII art images.

    Each pixel of the source becomes one glyph cell of ``scale_x`` by
    ``scale_y`` pixels. With an image background the rendered glyphs are
    resized to the background's dimensions before being composited onto it.
    """

    def __init__(self, image: Image.Image, font: GlyphFont | ImageFont.FreeTypeFont | str | Path):
        self.image = image
        self.font = GlyphFont.coerce(font)
        self.include_alpha = True
        self.density_chars: tuple[str, ...] = DEFAULT_DENSITY_CHARS
        self.background: Background = SolidBackground()
        self.text_color: TextColor = SolidColor()
        self.scale_x = DEFAULT_SCALE
        self.scale_y = DEFAULT_SCALE

    def set_include_alpha(self, value: bool) -> "ImageGenerator":
        self.include_alpha = value
        return self

    def set_density_chars(self, value: Iterable[str]) -> "ImageGenerator":
        """Replace the palette. Raises PaletteSizeError outside 1..256 characters."""
        self.density_chars = bind_palette(value)
        return self

    def set_background(self, value: Background) -> "ImageGenerator":
        self.background = value
        return self

    def set_text_color(self, value: TextColor) -> "ImageGenerator":
        self.text_color = value
        return self

    def set_scale_x(self, value: int) -> "ImageGenerator":
        self.scale_x = value
        return self

    def set_scale_y(self, value: int) -> "ImageGenerator":
        self.scale_y = value
        return self

    def config(self) -> RenderConfig:
        """Freeze the current settings. Raises ValueError for invalid scales or policies."""
        return RenderConfig(
            include_alpha=self.include_alpha,
            palette=self.density_chars,
            scale_x=self.scale_x,
            scale_y=self.scale_y,
            text_color=self.text_color,
            background=self.background,
        )

    def generate(self) -> Image.Image:
        config = self.config()
        text = image_to_text(self.image, config.palette, config.include_alpha)
        return compose(text, self.image, config, self.font)
