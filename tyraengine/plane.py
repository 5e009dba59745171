"""Plane given by a unit normal and a distance from the origin."""

from __future__ import annotations

from dataclasses import dataclass, field

from .vector3 import Vector3


@dataclass
class Plane:
    """Plane satisfying ``normal . p + distance == 0``."""

    normal: Vector3 = field(default_factory=Vector3)
    distance: float = 0.0

    @classmethod
    def from_points(cls, a: Vector3, b: Vector3, c: Vector3) -> "Plane":
        """Build a plane through three points given counter-clockwise."""
        plane = cls()
        plane.update(a, b, c)
        return plane

    def update(self, a: Vector3, b: Vector3, c: Vector3) -> None:
        """Reset the plane to pass through three counter-clockwise points."""
        normal = (c - b).cross(a - b)
        normal.normalize()
        self.normal = normal
        self.distance = -normal.inner_product(b)

    def distance_to(self, point: Vector3) -> float:
        """Signed distance from the plane to ``point``."""
        return self.normal.inner_product(point) + self.distance

    def __str__(self) -> str:
        n = self.normal
        return f"Plane(Vector3({n.x:f}, {n.y:f}, {n.z:f}), {self.distance:f})"