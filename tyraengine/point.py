"""Two-component point, used for texture coordinates."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass
class Point:
    """Mutable 2D point."""

    x: float = 0.0
    y: float = 0.0

    def rotate(self, angle: float, x: float, y: float) -> None:
        """Rotate in place by ``angle`` radians around the centre ``(x, y)``."""
        s = math.sin(angle)
        c = math.cos(angle)
        dx = self.x - x
        dy = self.y - y
        self.x = dx * c - dy * s + x
        self.y = dx * s + dy * c + y