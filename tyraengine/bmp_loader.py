"""Reader for uncompressed 24-bit ``.bmp`` textures."""

from __future__ import annotations

import logging
from pathlib import Path

from .texture import Texture, TextureType

logger = logging.getLogger(__name__)

_HEADER_SIZE = 54
_BITS_PER_PIXEL = 24


class BmpFormatError(ValueError):
    """Raised when a ``.bmp`` buffer cannot be read as a 24-bit texture."""


def parse_bmp(data: bytes) -> Texture:
    """Build an RGB texture from the contents of a 24-bit ``.bmp`` file.

    Only the low byte of the width, height, depth and pixel offset fields
    is read. Rows are kept in file order and BGR is converted to RGB.
    """
    if len(data) < _HEADER_SIZE:
        raise BmpFormatError("Truncated .bmp header!")
    width = data[18]
    height = data[22]
    bits = data[28]
    data_offset = data[10]

    if bits != _BITS_PER_PIXEL:
        raise BmpFormatError("Invalid bits per pixel in .bmp file - expected 24!")

    texture = Texture()
    texture.set_size(width, height, TextureType.RGB)
    logger.debug("BMPLoader - width: %d | height: %d | bits: %d", width, height, bits)

    row_bytes = width * 3
    row_padded = (row_bytes + 3) & ~3
    if len(data) < data_offset + row_padded * height:
        raise BmpFormatError("Truncated .bmp pixel data!")

    pixels = bytearray()
    for row_index in range(height):
        start = data_offset + row_index * row_padded
        bgr = data[start:start + row_bytes]
        rgb = bytearray(row_bytes)
        rgb[0::3] = bgr[2::3]
        rgb[1::3] = bgr[1::3]
        rgb[2::3] = bgr[0::3]
        pixels += rgb
    texture.data = pixels
    return texture


def load_bmp(subfolder: str, name: str, extension: str = ".bmp") -> Texture:
    """Read the texture at ``subfolder + name + extension``."""
    return parse_bmp(Path(f"{subfolder}{name}{extension}").read_bytes())