"""Axis-aligned bounding box described by its eight corners."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .vector3 import Vector3


@dataclass
class BoundingBoxFace:
    """One face of a box: two opposite corners and its position on the axis."""

    min_corner: Vector3
    max_corner: Vector3
    axis_position: float


class BoundingBox:
    """Box built from eight corners ordered low/high on X, then Y, then Z."""

    def __init__(self, vertices: Sequence[Vector3]) -> None:
        if len(vertices) != 8:
            raise ValueError(f"a bounding box needs 8 vertices, got {len(vertices)}")
        self.vertices: list[Vector3] = [vertex.copy() for vertex in vertices]
        v = self.vertices

        self.height = v[0].y - v[2].y
        self.width = v[0].x - v[4].x
        self.depth = v[0].z - v[1].z

        self.center = Vector3(
            v[0].x + self.width / 2,
            v[0].y + self.height / 2,
            v[0].z + self.depth / 2,
        )

        self.front_face = BoundingBoxFace(v[1], v[7], v[1].z)
        self.back_face = BoundingBoxFace(v[0], v[6], v[0].z)
        self.left_face = BoundingBoxFace(v[0], v[3], v[0].x)
        self.right_face = BoundingBoxFace(v[4], v[7], v[4].x)
        self.top_face = BoundingBoxFace(v[2], v[7], v[2].y)
        self.bottom_face = BoundingBoxFace(v[0], v[5], v[0].y)

    def vertex(self, index: int) -> Vector3:
        """Return one of the eight corners."""
        return self.vertices[index]