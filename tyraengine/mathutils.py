"""Numeric helpers shared by the engine's math types."""

from __future__ import annotations

import math
from collections.abc import Iterable

from .vector3 import Vector3

ANG2RAD = math.pi / 180.0
HALF_ANG2RAD = ANG2RAD / 2.0


def mod(x: float, y: float) -> float:
    """Floating remainder of ``x / y``; zero when ``y`` is zero."""
    if y == 0.0:
        return 0.0
    f = x - math.floor(x / y) * y
    if (x < 0.0) != (y < 0.0):
        f -= y
    return f


def inv_sqrt(x: float) -> float:
    """Return ``1 / sqrt(x)``."""
    return 1.0 / math.sqrt(x)


def vec3_to_native(vec: Vector3, fourth: float) -> tuple[float, float, float, float]:
    """Widen a vector to a four-component tuple."""
    return (vec.x, vec.y, vec.z, fourth)


def many_vec3_to_native(
    vectors: Iterable[Vector3], fourth: float
) -> list[tuple[float, float, float, float]]:
    """Widen every vector to a four-component tuple."""
    return [vec3_to_native(vec, fourth) for vec in vectors]