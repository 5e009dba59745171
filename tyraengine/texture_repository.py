"""Textures loaded for sprites and mesh materials."""

from __future__ import annotations

import logging
from enum import Enum

from .bmp_loader import load_bmp
from .mesh import Mesh
from .png_loader import load_png
from .texture import Texture

logger = logging.getLogger(__name__)


class TextureFormat(Enum):
    BMP = "bmp"
    PNG = "png"


def _load(subfolder: str, name: str, texture_format: TextureFormat) -> Texture:
    if texture_format is TextureFormat.BMP:
        return load_bmp(subfolder, name, ".bmp")
    return load_png(subfolder, name, ".png")


class TextureRepository:
    """Holds loaded textures and finds them by the objects linked to them."""

    def __init__(self) -> None:
        self.textures: list[Texture] = []

    def __len__(self) -> int:
        return len(self.textures)

    def add(
        self, subfolder: str, name: str, texture_format: TextureFormat = TextureFormat.BMP
    ) -> Texture:
        """Load ``subfolder + name`` with the format's extension and keep it."""
        texture = _load(subfolder, name, texture_format)
        texture.set_name(name)
        self.textures.append(texture)
        return texture

    def add_by_mesh(
        self, path: str, mesh: Mesh, texture_format: TextureFormat = TextureFormat.BMP
    ) -> None:
        """Load one texture per material, named after it and linked to it."""
        for material in mesh.materials:
            if material.name is None:
                raise ValueError("Material has no name to load a texture by!")
            texture = _load(path, material.name, texture_format)
            texture.set_name(material.name)
            texture.add_link(material.id)
            self.textures.append(texture)

    def get_by_sprite_or_mesh(self, link_id: int) -> Texture | None:
        """Texture linked to the given sprite or material id, if any."""
        return next(
            (texture for texture in self.textures if link_id in texture.links), None
        )