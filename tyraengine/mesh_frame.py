"""One animation frame of a mesh: geometry plus its materials."""

from __future__ import annotations

import random
from collections.abc import Sequence

from .bounding_box import BoundingBox
from .mesh_material import MeshMaterial
from .point import Point
from .vector3 import Vector3

_ID_RANGE = 1_000_000


def _bounding_box_of(points: Sequence[Vector3]) -> BoundingBox:
    xs = [p.x for p in points]
    ys = [p.y for p in points]
    zs = [p.z for p in points]
    return BoundingBox(
        [
            Vector3(x, y, z)
            for x in (min(xs), max(xs))
            for y in (min(ys), max(ys))
            for z in (min(zs), max(zs))
        ]
    )


class MeshFrame:
    """Vertices, texture coordinates, normals and materials of a frame."""

    def __init__(self) -> None:
        self.id = random.randrange(_ID_RANGE)
        self.vertices: list[Vector3] = []
        self.sts: list[Point] = []
        self.normals: list[Vector3] = []
        self.materials: list[MeshMaterial] = []
        self._vertices_allocated = False
        self._sts_allocated = False
        self._normals_allocated = False
        self._materials_allocated = False
        self.bounding_box: BoundingBox | None = None
        self.is_mother = True

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    @property
    def sts_count(self) -> int:
        return len(self.sts)

    @property
    def normals_count(self) -> int:
        return len(self.normals)

    @property
    def materials_count(self) -> int:
        return len(self.materials)

    def allocate_sts(self, count: int) -> None:
        if self._sts_allocated:
            raise RuntimeError("Can't allocate STs, because were already set!")
        self.sts = [Point() for _ in range(count)]
        self._sts_allocated = True

    def allocate_vertices(self, count: int) -> None:
        if self._vertices_allocated:
            raise RuntimeError("Can't allocate vertices, because were already set!")
        self.vertices = [Vector3() for _ in range(count)]
        self._vertices_allocated = True

    def allocate_normals(self, count: int) -> None:
        if self._normals_allocated:
            raise RuntimeError("Can't allocate normals, because were already set!")
        self.normals = [Vector3() for _ in range(count)]
        self._normals_allocated = True

    def allocate_materials(self, count: int) -> None:
        if self._materials_allocated:
            raise RuntimeError("Can't allocate materials, because were already set!")
        self.materials = [MeshMaterial() for _ in range(count)]
        self._materials_allocated = True

    def calculate_bounding_boxes(self) -> None:
        """Compute the bounds of every material and of the whole frame."""
        if not self._vertices_allocated:
            raise RuntimeError(
                "Can't calculate bounding box, because vertices were not allocated!"
            )
        if not self.vertices:
            raise RuntimeError("Can't calculate bounding box of a frame without vertices!")
        for material in self.materials:
            material.calculate_bounding_box(self.vertices)
        self.bounding_box = _bounding_box_of(self.vertices)

    def copy_from(self, other: "MeshFrame") -> None:
        """Share the geometry of ``other`` and copy its materials."""
        materials = []
        for source in other.materials:
            material = MeshMaterial()
            material.copy_from(source)
            materials.append(material)
        self.materials = materials
        self.vertices = other.vertices
        self.sts = other.sts
        self.normals = other.normals
        self._sts_allocated = True
        self._vertices_allocated = True
        self._normals_allocated = True
        self._materials_allocated = True
        self.bounding_box = other.bounding_box
        self.is_mother = False