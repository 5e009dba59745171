"""Three-component vector with the operations the renderer needs."""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass


@dataclass
class Vector3:
    """Mutable 3D vector. ``a * b`` between vectors is the cross product."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: "Vector3 | float") -> "Vector3":
        if isinstance(other, Vector3):
            return self.cross(other)
        return Vector3(self.x * other, self.y * other, self.z * other)

    def __rmul__(self, scalar: float) -> "Vector3":
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __truediv__(self, scalar: float) -> "Vector3":
        return Vector3(self.x / scalar, self.y / scalar, self.z / scalar)

    def __iadd__(self, other: "Vector3") -> "Vector3":
        self.x += other.x
        self.y += other.y
        self.z += other.z
        return self

    def __imul__(self, scalar: float) -> "Vector3":
        self.x *= scalar
        self.y *= scalar
        self.z *= scalar
        return self

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def cross(self, other: "Vector3") -> "Vector3":
        """Cross product ``self x other``."""
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def inner_product(self, other: "Vector3") -> float:
        """Dot product."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def length(self) -> float:
        return math.sqrt(self.inner_product(self))

    def normalize(self) -> None:
        """Scale to unit length in place; a zero vector stays zero."""
        length = self.length()
        if length == 0.0:
            return
        self.x /= length
        self.y /= length
        self.z /= length

    def distance_to(self, other: "Vector3") -> float:
        return (self - other).length()

    def copy(self) -> "Vector3":
        return Vector3(self.x, self.y, self.z)


def should_be_backface_culled(
    camera_pos: Vector3, v0: Vector3, v1: Vector3, v2: Vector3
) -> bool:
    """Tell whether the triangle faces away from the camera."""
    normal = (v2 - v0).cross(v1 - v0)
    return (v0 - camera_pos).inner_product(normal) <= 0.0


def lerp(v1: Vector3, v2: Vector3, interpolation: float, scale: float) -> Vector3:
    """Interpolate from ``v1`` to ``v2`` and scale the result."""
    return (v1 + (v2 - v1) * interpolation) * scale