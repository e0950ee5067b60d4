from collections.abc import Iterable
from dataclasses import dataclass

from PIL import Image

from imageascii.palette import coerce_palette
from imageascii.quantizer import image_to_text


@dataclass(frozen=True)
class AsciiImage:
    image: Image.Image
    density_chars: tuple[str, ...]
    include_alpha: bool = True

    def __post_init__(self):
        object.__setattr__(self, "density_chars", tuple(self.density_chars))

    @staticmethod
    def builder(image: Image.Image) -> "AsciiImageBuilder":
        return AsciiImageBuilder(image)

    def generate_text(self) -> str:
        return image_to_text(self.image, self.density_chars, self.include_alpha)


class AsciiImageBuilder:
    """Collects optional settings; build() fills in defaults.

    Unlike the fluent generators this never rejects a palette: an empty one
    becomes the default and an oversized one is truncated to 255 characters.
    """

    def __init__(self, image: Image.Image):
        self.image = image
        self._density_chars: tuple[str, ...] | None = None
        self._include_alpha: bool | None = None

    def density_chars(self, chars: Iterable[str]) -> "AsciiImageBuilder":
        self._density_chars = tuple(chars)
        return self

    def include_alpha(self, value: bool) -> "AsciiImageBuilder":
        self._include_alpha = value
        return self

    def build(self) -> AsciiImage:
        return AsciiImage(
            image=self.image,
            density_chars=coerce_palette(self._density_chars),
            include_alpha=True if self._include_alpha is None else self._include_alpha,
        )
