import logging
from collections.abc import Iterator

from PIL import Image

from imageascii.config import TRANSPARENT, CopyFromImage, ImageBackground, RenderConfig
from imageascii.glyphs import GlyphFont
from imageascii.quantizer import ROW_SEPARATOR

LOG = logging.getLogger(__name__)


def iter_cells(text: str, width: int, height: int) -> Iterator[tuple[int, int, str]]:
    """Yield (x, y, char) for every cell, stepping over row separators.

    ``text`` must hold exactly width * height glyphs laid out by the quantizer.
    """
    chars = iter(text)
    for y in range(height):
        for x in range(width):
            char = next(chars)
            if char == ROW_SEPARATOR:
                char = next(chars)
            yield x, y, char


def compose(text: str, image: Image.Image, config: RenderConfig, font: GlyphFont) -> Image.Image:
    """Draw ``text`` glyph by glyph onto a new RGBA canvas sized to the image times the cell scale."""
    sx, sy = config.scale_x, config.scale_y
    size = (image.width * sx, image.height * sy)
    background = config.background

    if isinstance(background, ImageBackground):
        canvas = Image.new("RGBA", size, TRANSPARENT)
    else:
        canvas = Image.new("RGBA", size, background.color)

    source = image.convert("RGBA").load() if isinstance(config.text_color, CopyFromImage) else None
    LOG.debug("Compositing %dx%d cells onto a %dx%d canvas", image.width, image.height, *size)

    for x, y, char in iter_cells(text, image.width, image.height):
        color = source[x, y] if source is not None else config.text_color.color
        font.draw(canvas, char, (x * sx + sx // 2, y * sy), sx, sy, color)

    if not isinstance(background, ImageBackground):
        return canvas

    # Catmull-Rom resample to the background's size, then alpha-composite on a copy
    target = background.image.size
    LOG.debug("Resampling canvas from %dx%d to background size %dx%d", *size, *target)
    resized = canvas.resize(target, Image.Resampling.BICUBIC)
    result = background.image.convert("RGBA")
    result.alpha_composite(resized, (0, 0))
    return result
