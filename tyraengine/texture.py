"""Texture pixels, wrap settings and the objects that use the texture."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import IntEnum

_ID_RANGE = 1_000_000
_MAX_SIZE = 256


class TextureType(IntEnum):
    RGBA = 0
    RGB = 1

    @property
    def bytes_per_pixel(self) -> int:
        return 4 if self is TextureType.RGBA else 3


class WrapMode(IntEnum):
    REPEAT = 0
    CLAMP = 1
    REGION_CLAMP = 2
    REGION_REPEAT = 3


@dataclass
class WrapSettings:
    horizontal: WrapMode = WrapMode.REPEAT
    vertical: WrapMode = WrapMode.REPEAT
    minu: int = 0
    maxu: int = 0
    minv: int = 0
    maxv: int = 0


class Texture:
    """Pixel data of a texture, linked to the sprites or materials using it."""

    def __init__(self) -> None:
        self.id = random.randrange(_ID_RANGE)
        self.width = 0
        self.height = 0
        self.type: TextureType | None = None
        self.data = bytearray()
        self.name: str | None = None
        self.links: list[int] = []
        self.wrap_settings = WrapSettings()
        self.set_default_wrap_settings()

    @property
    def data_size(self) -> int:
        if self.type is None:
            return 0
        return self.width * self.height * self.type.bytes_per_pixel

    def set_size(self, width: int, height: int, texture_type: TextureType) -> None:
        """Set the dimensions and allocate zeroed pixel data."""
        if self.type is not None:
            raise RuntimeError("Can't set size, because was already set!")
        if width > _MAX_SIZE or height > _MAX_SIZE:
            raise ValueError(
                "Given texture can be too big. Please strict to 256x256 max. Prefer 128x128."
            )
        self.width = width
        self.height = height
        self.type = TextureType(texture_type)
        self.data = bytearray(self.data_size)

    def set_name(self, name: str) -> None:
        if self.name is not None:
            raise RuntimeError("Can't set name, because was already set!")
        self.name = name

    def set_default_wrap_settings(self) -> None:
        self.wrap_settings = WrapSettings()

    def set_wrap_settings(self, horizontal: WrapMode, vertical: WrapMode) -> None:
        self.wrap_settings.horizontal = horizontal
        self.wrap_settings.vertical = vertical

    def add_link(self, link_id: int) -> None:
        """Record that the sprite or material ``link_id`` uses this texture."""
        self.links.append(link_id)