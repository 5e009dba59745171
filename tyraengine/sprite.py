"""Textured 2D rectangle drawn on screen."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import IntEnum

from .mesh_material import Color
from .point import Point

_ID_RANGE = 1_000_000

CLUT_STORAGE_MODE1 = 0
CLUT_NO_LOAD = 0


class SpriteMode(IntEnum):
    REPEAT = 0
    STRETCH = 1


@dataclass
class Clut:
    """Colour lookup table settings of a textured object."""

    storage_mode: int = CLUT_STORAGE_MODE1
    start: int = 0
    psm: int = 0
    load_method: int = CLUT_NO_LOAD
    address: int = 0


class Sprite:
    """Position, size, flipping and colour of an on-screen sprite."""

    def __init__(self) -> None:
        self.id = random.randrange(_ID_RANGE)
        self.position = Point()
        self.size = Point()
        self.flip_horizontally = False
        self.flip_vertically = False
        self.scale = 1.0
        self.mode = SpriteMode.REPEAT
        self.color = Color()
        self.clut = Clut()
        self.set_default_color()
        self.set_default_lod_and_clut()

    def set_default_color(self) -> None:
        """Neutral grey with no transparency."""
        self.color = Color(0x80, 0x80, 0x80, 0x80, 0.0)

    def set_default_lod_and_clut(self) -> None:
        self.clut = Clut()