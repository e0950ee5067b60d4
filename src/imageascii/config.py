from __future__ import annotations

from dataclasses import dataclass, field

from PIL import Image

from imageascii.charsets import DEFAULT_DENSITY_CHARS
from imageascii.palette import bind_palette

RGBA = tuple[int, int, int, int]

WHITE: RGBA = (255, 255, 255, 255)
BLACK: RGBA = (0, 0, 0, 255)
TRANSPARENT: RGBA = (0, 0, 0, 0)
DEFAULT_SCALE = 24


def to_rgba(color) -> RGBA:
    """Normalise an RGB or RGBA tuple of 0-255 ints to RGBA."""
    values = tuple(color)
    if len(values) == 3:
        values += (255,)
    if len(values) != 4 or not all(isinstance(v, int) and 0 <= v <= 255 for v in values):
        raise ValueError(f"Expected an RGB or RGBA tuple of 0-255 ints, got {color!r}")
    return values


def parse_hex_color(value: str) -> RGBA:
    """Parse ``#rrggbb`` or ``#rrggbbaa``."""
    digits = value.lstrip("#")
    if len(digits) not in (6, 8):
        raise ValueError(f"Expected #rrggbb or #rrggbbaa, got {value!r}")
    try:
        return to_rgba(tuple(int(digits[i : i + 2], 16) for i in range(0, len(digits), 2)))
    except ValueError:
        raise ValueError(f"Expected #rrggbb or #rrggbbaa, got {value!r}") from None


@dataclass(frozen=True)
class SolidColor:
    """Paint every glyph in the same colour."""

    color: RGBA = WHITE

    def __post_init__(self):
        object.__setattr__(self, "color", to_rgba(self.color))


@dataclass(frozen=True)
class CopyFromImage:
    """Paint every glyph in the colour of its source pixel."""


TextColor = SolidColor | CopyFromImage


@dataclass(frozen=True)
class SolidBackground:
    color: RGBA = BLACK

    def __post_init__(self):
        object.__setattr__(self, "color", to_rgba(self.color))


@dataclass(frozen=True)
class ImageBackground:
    """Overlay the glyphs on a custom image, resizing them to its dimensions."""

    image: Image.Image = field(compare=False)


Background = SolidBackground | ImageBackground


@dataclass(frozen=True)
class RenderConfig:
    include_alpha: bool = True
    palette: tuple[str, ...] = DEFAULT_DENSITY_CHARS
    scale_x: int = DEFAULT_SCALE
    scale_y: int = DEFAULT_SCALE
    text_color: TextColor = field(default_factory=SolidColor)
    background: Background = field(default_factory=SolidBackground)

    def __post_init__(self):
        object.__setattr__(self, "palette", bind_palette(self.palette))
        for name in ("scale_x", "scale_y"):
            value = getattr(self, name)
            if not isinstance(value, int) or value < 1:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")
        if not isinstance(self.text_color, (SolidColor, CopyFromImage)):
            raise ValueError(f"Unsupported text colour policy: {self.text_color!r}")
        if not isinstance(self.background, (SolidBackground, ImageBackground)):
            raise ValueError(f"Unsupported background policy: {self.background!r}")
