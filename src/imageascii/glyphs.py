from pathlib import Path

from PIL import Image, ImageDraw, ImageFont

from imageascii.config import RGBA


class GlyphFont:
    """Rasterizes single characters into coverage masks and draws them onto canvases.

    A glyph's render scale is its pixel height; when the horizontal scale
    differs the mask is stretched by ``scale_x / scale_y``.
    """

    def __init__(self, font: ImageFont.FreeTypeFont):
        self.font = font
        # Sized font variants and rendered masks, keyed by scale
        self._sized: dict[int, ImageFont.FreeTypeFont] = {}
        self._masks: dict[tuple[str, int, int], Image.Image] = {}

    @classmethod
    def load(cls, path: str | Path, size: int = 24) -> "GlyphFont":
        return cls(ImageFont.truetype(str(path), size))

    @classmethod
    def coerce(cls, font: "GlyphFont | ImageFont.FreeTypeFont | str | Path") -> "GlyphFont":
        if isinstance(font, GlyphFont):
            return font
        if isinstance(font, ImageFont.FreeTypeFont):
            return cls(font)
        return cls.load(font)

    def _font_at(self, size: int) -> ImageFont.FreeTypeFont:
        if size not in self._sized:
            self._sized[size] = self.font.font_variant(size=size)
        return self._sized[size]

    def mask(self, char: str, scale_x: int, scale_y: int) -> Image.Image:
        """Return an "L" coverage mask of the character, top-left at the pen origin."""
        key = (char, scale_x, scale_y)
        if key in self._masks:
            return self._masks[key]

        font = self._font_at(scale_y)
        _, _, right, bottom = font.getbbox(char)
        width = max(right, 1)
        height = max(bottom, 1)
        img = Image.new("L", (width, height), 0)
        ImageDraw.Draw(img).text((0, 0), char, fill=255, font=font)
        if scale_x != scale_y:
            stretched = max(1, round(width * scale_x / scale_y))
            img = img.resize((stretched, height), Image.Resampling.BICUBIC)

        self._masks[key] = img
        return img

    def draw(
        self,
        canvas: Image.Image,
        char: str,
        origin: tuple[int, int],
        scale_x: int,
        scale_y: int,
        color: RGBA,
    ) -> None:
        """Blend ``color`` into ``canvas`` through the glyph's mask. Out-of-bounds parts are clipped."""
        mask = self.mask(char, scale_x, scale_y)
        canvas.paste(color, origin, mask)
