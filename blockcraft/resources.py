"""Loading of shader sources and texture images from disk."""

from __future__ import annotations

from dataclasses import dataclass

from PIL import Image

_CHANNELS = {"L": 1, "LA": 2, "RGB": 3, "RGBA": 4}


@dataclass(frozen=True)
class TextureData:
    """Decoded 8-bit pixels, rows packed top to bottom unless flipped."""

    width: int
    height: int
    channels: int
    pixels: bytes

    def __post_init__(self):
        if len(self.pixels) != self.width * self.height * self.channels:
            raise ValueError("pixel buffer does not match the image size")


def load_shader(path):
    """Return the text of a shader source file; missing files raise OSError."""
    with open(path, encoding="utf-8") as source:
        return source.read()


def _native_mode(image):
    mode = image.mode
    if mode in _CHANNELS:
        return mode
    if mode == "1":
        return "L"
    if mode == "P":
        return "RGBA" if "transparency" in image.info else "RGB"
    if mode == "PA":
        return "RGBA"
    if "A" in image.getbands():
        return "RGBA"
    return "RGB"


def load_texture(path, flip_vertically=False):
    """Decode an image file keeping its own channel count (1 to 4)."""
    with Image.open(path) as image:
        image.load()
        mode = _native_mode(image)
        converted = image if image.mode == mode else image.convert(mode)
        if flip_vertically:
            converted = converted.transpose(Image.Transpose.FLIP_TOP_BOTTOM)
        width, height = converted.size
        return TextureData(width, height, _CHANNELS[mode], converted.tobytes())