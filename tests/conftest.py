import shutil
import subprocess

import pytest
from PIL import Image

from imageascii.glyphs import GlyphFont

_FONT_CANDIDATES = [
    "/usr/share/fonts/truetype/dejavu/DejaVuSansMono.ttf",
    "/usr/share/fonts/truetype/liberation/LiberationMono-Regular.ttf",
    "/usr/share/fonts/TTF/DejaVuSansMono.ttf",
    "/usr/share/fonts/dejavu-sans-mono-fonts/DejaVuSansMono.ttf",
]


def _find_monospace_font():
    """Find a monospace font on the system."""
    for path in _FONT_CANDIDATES:
        if shutil.os.path.exists(path):
            return path
    result = shutil.which("fc-match")
    if result:
        out = subprocess.run(["fc-match", "-f", "%{file}", "monospace"], capture_output=True, text=True)
        if out.returncode == 0 and out.stdout.strip():
            return out.stdout.strip()
    return None


FONT_PATH = _find_monospace_font()


class BlockFont(GlyphFont):
    """Paints a solid block over the right half of each cell; spaces paint nothing."""

    def __init__(self):
        self._sized = {}
        self._masks = {}

    def mask(self, char, scale_x, scale_y):
        fill = 0 if char == " " else 255
        return Image.new("L", (scale_x - scale_x // 2, scale_y), fill)


@pytest.fixture
def font_path():
    if FONT_PATH is None:
        pytest.skip("No monospace font found on system")
    return FONT_PATH


@pytest.fixture
def block_font():
    return BlockFont()
