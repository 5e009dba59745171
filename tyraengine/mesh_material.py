"""Per-material face lists of a mesh frame, with colour and bounds."""

from __future__ import annotations

import random
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from .bounding_box import BoundingBox
from .plane import Plane
from .vector3 import Vector3

_ID_RANGE = 1_000_000


@dataclass
class Color:
    """RGBA colour with the extra ``q`` component the GS expects."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 0
    q: float = 0.0


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


class MeshMaterial:
    """Vertex, texture-coordinate and normal indices of one material.

    Faces are stored flat: every three consecutive indices form a triangle.
    """

    def __init__(self) -> None:
        self.id = random.randrange(_ID_RANGE)
        self.name: str | None = None
        self.vertex_faces: list[int] = []
        self.st_faces: list[int] = []
        self.normal_faces: list[int] = []
        self._faces_allocated = False
        self.bounding_box: BoundingBox | None = None
        self.sts_present = False
        self.normals_present = False
        self.is_mother = True
        self.color = Color()
        self.set_default_color()

    @property
    def faces_count(self) -> int:
        return len(self.vertex_faces)

    def allocate_faces(self, count: int) -> None:
        """Create zeroed index lists for ``count`` face indices."""
        if self._faces_allocated:
            raise RuntimeError("Can't allocate faces, because were already set!")
        self.vertex_faces = [0] * count
        self.st_faces = [0] * count
        self.normal_faces = [0] * count
        self._faces_allocated = True

    def set_name(self, name: str) -> None:
        if self.name is not None:
            raise RuntimeError("Can't set name, because was already set!")
        self.name = name

    def is_in_frustum(self, planes: Iterable[Plane], position: Vector3) -> bool:
        """Tell whether the bounding box, moved to ``position``, meets the frustum."""
        if self.bounding_box is None:
            raise RuntimeError("Bounding box was not calculated!")
        corners = [corner + position for corner in self.bounding_box.vertices]
        for plane in planes:
            if all(plane.distance_to(corner) < 0 for corner in corners):
                return False
        return True

    def calculate_bounding_box(self, vertices: Sequence[Vector3]) -> None:
        """Compute the box around the vertices this material's faces use."""
        if not self.vertex_faces:
            raise RuntimeError("Can't calculate bounding box, because there are no faces!")
        self.bounding_box = _bounding_box_of([vertices[i] for i in self.vertex_faces])

    def copy_from(self, other: "MeshMaterial") -> None:
        """Share the faces, name and bounds of ``other``."""
        self.name = other.name
        self.bounding_box = other.bounding_box
        self.vertex_faces = other.vertex_faces
        self.st_faces = other.st_faces
        self.normal_faces = other.normal_faces
        self.sts_present = other.sts_present
        self.normals_present = other.normals_present
        self._faces_allocated = True
        self.is_mother = False

    def set_default_color(self) -> None:
        """Neutral grey with no transparency."""
        self.color = Color(0x80, 0x80, 0x80, 0x80, 1.0)