"""Raw RGBA textures, their conversion to images and glyph lookup in the font atlas."""

from __future__ import annotations

from dataclasses import dataclass, field

from fdfkit.chars import is_print
from fdfkit.image import BPP, Image, Scene

__all__ = ["Texture", "texture_to_image", "glyph_offset", "FONT_WIDTH"]

FONT_WIDTH = 10
_GLYPH_SEPARATOR = 2


@dataclass
class Texture:
    """Pixel data held outside any scene, ``bytes_per_pixel`` bytes per pixel."""

    width: int
    height: int
    pixels: bytearray = field(default_factory=bytearray)
    bytes_per_pixel: int = BPP

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("texture dimensions must not be negative")
        if self.bytes_per_pixel <= 0:
            raise ValueError("bytes_per_pixel must be positive")
        self.pixels = bytearray(self.pixels)
        expected = self.width * self.height * self.bytes_per_pixel
        if len(self.pixels) != expected:
            raise ValueError(
                f"texture holds {len(self.pixels)} bytes, expected {expected}"
            )


def texture_to_image(scene: Scene, texture: Texture) -> Image:
    """Create an image in ``scene`` holding a copy of the texture's pixels."""
    if texture.bytes_per_pixel != BPP:
        raise ValueError(f"only {BPP} bytes per pixel can be turned into an image")
    image = scene.new_image(texture.width, texture.height)
    image.pixels[:] = texture.pixels
    return image


def glyph_offset(char: str | int) -> int:
    """Return the x offset of a character's glyph in the font atlas, or -1.

    Characters that are not printable ASCII have no glyph.
    """
    code = ord(char) if isinstance(char, str) else char
    if not is_print(code):
        return -1
    return (FONT_WIDTH + _GLYPH_SEPARATOR) * (code - 32)