"""Screen and projection settings used by the renderer and cameras."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ScreenSettings:
    """Dimensions, clip planes and field of view of the output screen."""

    near_plane_dist: float
    far_plane_dist: float
    fov: float
    width: float
    height: float
    aspect_ratio: float
    projection_scale: float

    @classmethod
    def default(cls) -> "ScreenSettings":
        """Return the standard 640x480 setup with a 60 degree field of view."""
        width = 640.0
        height = 480.0
        return cls(
            near_plane_dist=2.0,
            far_plane_dist=2000.0,
            fov=60.0,
            width=width,
            height=height,
            aspect_ratio=width / height,
            projection_scale=4096.0,  # the drawing area is 4096 units wide
        )