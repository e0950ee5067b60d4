import numpy as np
import pytest
from PIL import Image

from imageascii.charsets import DEFAULT_DENSITY_CHARS
from imageascii.quantizer import effective_luminance, image_to_text, quantize, render_text, sample_grid


def make_la(pixels):
    """Build an "LA" image from rows of (luminance, alpha) pairs."""
    arr = np.array(pixels, dtype=np.uint8)
    return Image.fromarray(arr)


def random_image(width, height, seed=0):
    rng = np.random.default_rng(seed)
    arr = rng.integers(0, 256, size=(height, width, 4), dtype=np.uint8)
    return Image.fromarray(arr)


def test_black_and_white_pixels_map_to_palette_ends():
    img = make_la([[(0, 255), (255, 255)]])
    assert image_to_text(img, DEFAULT_DENSITY_CHARS, include_alpha=True) == ".@"


def test_output_has_one_glyph_per_pixel_and_separators_between_rows():
    img = random_image(7, 5)
    text = image_to_text(img, DEFAULT_DENSITY_CHARS)
    assert text.count("\n") == 4
    assert len(text.replace("\n", "")) == 35
    assert not text.endswith("\n")
    assert all(len(line) == 7 for line in text.split("\n"))


def test_single_row_has_no_separator():
    img = random_image(12, 1)
    text = image_to_text(img, DEFAULT_DENSITY_CHARS)
    assert "\n" not in text
    assert len(text) == 12


def test_single_column_puts_separator_after_every_row_but_the_last():
    img = random_image(1, 4)
    text = image_to_text(img, DEFAULT_DENSITY_CHARS)
    assert len(text) == 7
    assert text[1::2] == "\n\n\n"


@pytest.mark.parametrize("size", [1, 2, 9, 70, 256])
@pytest.mark.parametrize("include_alpha", [True, False])
def test_indices_stay_within_palette(size, include_alpha):
    lum, alpha = sample_grid(random_image(32, 16, seed=size))
    indices = quantize(lum, alpha, size, include_alpha)
    assert indices.min() >= 0
    assert indices.max() <= size - 1


@pytest.mark.parametrize("alpha", [1, 64, 128, 255])
@pytest.mark.parametrize("size", [2, 9, 256])
def test_index_never_decreases_as_luminance_rises(alpha, size):
    lum = np.arange(256, dtype=np.uint8)[None, :]
    alphas = np.full_like(lum, alpha)
    indices = quantize(lum, alphas, size, include_alpha=True)
    assert np.all(np.diff(indices[0]) >= 0)


def test_full_palette_maps_luminance_to_itself():
    lum = np.arange(256, dtype=np.uint8)[None, :]
    alpha = np.full_like(lum, 255)
    np.testing.assert_array_equal(quantize(lum, alpha, 256)[0], np.arange(256))


def test_single_glyph_palette_always_picks_it():
    img = random_image(5, 5)
    assert image_to_text(img, ("#",)).replace("\n", "") == "#" * 25


def test_fully_transparent_pixels_resolve_to_first_glyph():
    lum = np.array([[0, 128, 255]], dtype=np.uint8)
    alpha = np.zeros_like(lum)
    with np.errstate(all="raise"):
        indices = quantize(lum, alpha, 9, include_alpha=True)
    np.testing.assert_array_equal(indices, [[0, 0, 0]])


def test_transparency_ignored_without_alpha_weighting():
    img = make_la([[(255, 0), (255, 128)]])
    assert image_to_text(img, DEFAULT_DENSITY_CHARS, include_alpha=False) == "@@"


def test_partial_alpha_scales_luminance():
    # 255 * 128 / 255 = 128 -> round(128 * 8 / 255) = 4
    img = make_la([[(255, 128)]])
    assert image_to_text(img, DEFAULT_DENSITY_CHARS, include_alpha=True) == "*"


def test_effective_luminance_without_alpha_is_luminance():
    lum = np.array([0, 10, 255], dtype=np.uint8)
    np.testing.assert_array_equal(effective_luminance(lum), [0.0, 10.0, 255.0])


def test_generation_is_deterministic():
    img = random_image(20, 10, seed=3)
    assert image_to_text(img, DEFAULT_DENSITY_CHARS) == image_to_text(img, DEFAULT_DENSITY_CHARS)


def test_render_text_rejects_index_past_palette():
    with pytest.raises(IndexError):
        render_text(np.array([[0, 3]]), (".", "#"))


def test_empty_image_gives_empty_text():
    assert image_to_text(Image.new("L", (0, 0)), DEFAULT_DENSITY_CHARS) == ""


def test_quantize_rejects_empty_palette():
    lum = np.zeros((1, 1), dtype=np.uint8)
    with pytest.raises(ValueError):
        quantize(lum, lum, 0)


def test_string_palette_is_accepted():
    img = make_la([[(0, 255), (255, 255)], [(255, 255), (0, 255)]])
    assert image_to_text(img, ".@") == ".@\n@."
