"""Reader for ``.png`` textures in RGB or RGBA form."""

from __future__ import annotations

import io
import logging
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from .texture import Texture, TextureType

logger = logging.getLogger(__name__)

# Alpha is stored in the 0..128 range the GS expects.
_ALPHA_TABLE = bytes(value * 128 // 255 for value in range(256))


class PngFormatError(ValueError):
    """Raised when a ``.png`` buffer cannot be decoded as an RGB/RGBA texture."""


def _target_type(image: Image.Image) -> TextureType:
    has_transparency = "transparency" in image.info
    if image.mode == "RGBA":
        return TextureType.RGBA
    if image.mode in ("RGB", "P"):
        return TextureType.RGBA if has_transparency else TextureType.RGB
    raise PngFormatError("This png format is not supported! RGB/RGBA only.")


def decode_png(data: bytes) -> Texture:
    """Build a texture from the contents of a ``.png`` file.

    Palette images are expanded, transparency becomes an alpha channel and
    alpha values are scaled from 0..255 to 0..128. Grey images are rejected.
    """
    try:
        image = Image.open(io.BytesIO(data))
        image.load()
    except (UnidentifiedImageError, OSError) as exc:
        raise PngFormatError("PNG reader fatal error!") from exc
    if image.format != "PNG":
        raise PngFormatError("PNG reader fatal error!")

    texture_type = _target_type(image)
    width, height = image.size
    texture = Texture()
    texture.set_size(width, height, texture_type)
    logger.debug("PNGLoader - width: %d | height: %d", width, height)

    if texture_type is TextureType.RGBA:
        pixels = bytearray(image.convert("RGBA").tobytes())
        pixels[3::4] = bytes(pixels[3::4]).translate(_ALPHA_TABLE)
    else:
        pixels = bytearray(image.convert("RGB").tobytes())
    texture.data = pixels
    return texture


def load_png(subfolder: str, name: str, extension: str = ".png") -> Texture:
    """Read the texture at ``subfolder + name + extension``."""
    return decode_png(Path(f"{subfolder}{name}{extension}").read_bytes())