import logging
from collections.abc import Iterable

from imageascii.charsets import DEFAULT_DENSITY_CHARS
from imageascii.quantizer import ROW_SEPARATOR

LOG = logging.getLogger(__name__)

MAX_PALETTE_SIZE = 256
# The lenient path keeps one fewer glyph than the strict upper bound allows.
TRUNCATED_PALETTE_SIZE = 255


class PaletteSizeError(ValueError):
    """Raised when a density palette is empty or longer than MAX_PALETTE_SIZE."""

    def __init__(self, size: int):
        self.size = size
        super().__init__(f"Density palette must hold 1..{MAX_PALETTE_SIZE} characters, got {size}")


def _normalise(chars: Iterable[str]) -> tuple[str, ...]:
    palette = tuple(chars)
    for char in palette:
        if not isinstance(char, str) or len(char) != 1:
            raise ValueError(f"Density palette entries must be single characters, got {char!r}")
        if char == ROW_SEPARATOR:
            raise ValueError("Density palette entries must not include the row separator")
    return palette


def bind_palette(chars: Iterable[str]) -> tuple[str, ...]:
    """Validate a palette for the strict entry points.

    Empty or oversized palettes are rejected with PaletteSizeError; nothing
    is substituted or truncated.
    """
    palette = _normalise(chars)
    if not 1 <= len(palette) <= MAX_PALETTE_SIZE:
        raise PaletteSizeError(len(palette))
    return palette


def coerce_palette(chars: Iterable[str] | None) -> tuple[str, ...]:
    """Normalise a palette for the lenient builder entry point.

    None or an empty palette falls back to DEFAULT_DENSITY_CHARS, and a
    palette longer than MAX_PALETTE_SIZE keeps only its first
    TRUNCATED_PALETTE_SIZE glyphs.
    """
    if chars is None:
        return DEFAULT_DENSITY_CHARS
    palette = _normalise(chars)
    if not palette:
        LOG.warning("Empty density palette, using the default")
        return DEFAULT_DENSITY_CHARS
    if len(palette) > MAX_PALETTE_SIZE:
        LOG.warning("Density palette of %d characters truncated to %d", len(palette), TRUNCATED_PALETTE_SIZE)
        return palette[:TRUNCATED_PALETTE_SIZE]
    return palette
