from collections.abc import Sequence

import numpy as np
from PIL import Image

ROW_SEPARATOR = "\n"


def sample_grid(image: Image.Image) -> tuple[np.ndarray, np.ndarray]:
    """Return (luminance, alpha) as two uint8 arrays of shape (height, width)."""
    arr = np.asarray(image.convert("LA"), dtype=np.uint8)
    return arr[:, :, 0], arr[:, :, 1]


def effective_luminance(lum: np.ndarray, alpha: np.ndarray | None = None) -> np.ndarray:
    """Weight luminance by opacity: ``lum / (255 / alpha)``.

    Evaluated as ``lum * alpha / 255`` so a fully transparent pixel yields 0,
    the limit of the division, instead of dividing by zero.
    """
    lum = np.asarray(lum, dtype=np.float64)
    if alpha is None:
        return lum
    alpha = np.asarray(alpha, dtype=np.float64)
    return np.where(alpha > 0, lum * alpha / 255.0, 0.0)


def quantize(
    lum: np.ndarray,
    alpha: np.ndarray,
    palette_size: int,
    include_alpha: bool = True,
) -> np.ndarray:
    """Map each sample to a palette index in [0, palette_size - 1]."""
    if palette_size < 1:
        raise ValueError(f"palette_size must be positive, got {palette_size}")
    eff = effective_luminance(lum, alpha if include_alpha else None)
    scaled = eff * ((palette_size - 1) / 255.0)
    # Round half away from zero; scaled is never negative
    indices = np.floor(scaled + 0.5).astype(np.intp)
    return np.clip(indices, 0, palette_size - 1)


def render_text(indices: np.ndarray, palette: Sequence[str]) -> str:
    """Look up each index and join rows with ROW_SEPARATOR (none after the last row)."""
    lookup = np.asarray(tuple(palette), dtype=object)
    if indices.size and (indices.min() < 0 or indices.max() >= len(lookup)):
        raise IndexError(f"Palette index out of range for a palette of {len(lookup)} characters")
    chars = lookup[indices]
    return ROW_SEPARATOR.join("".join(row) for row in chars)


def image_to_text(image: Image.Image, palette: Sequence[str], include_alpha: bool = True) -> str:
    if image.width == 0 or image.height == 0:
        return ""
    lum, alpha = sample_grid(image)
    indices = quantize(lum, alpha, len(palette), include_alpha)
    return render_text(indices, palette)
