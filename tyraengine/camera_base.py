"""Camera frustum and view matrix shared by concrete cameras."""

from __future__ import annotations

import math

from .mathutils import HALF_ANG2RAD
from .matrix import Matrix
from .plane import Plane
from .screen_settings import ScreenSettings
from .vector3 import Vector3


class CameraBase:
    """Keeps the view matrix and the six frustum planes of a camera.

    ``position`` is held by reference, so moving it moves the camera.
    """

    def __init__(self, screen: ScreenSettings, position: Vector3) -> None:
        self.screen = screen
        self.far_plane_dist = screen.far_plane_dist
        self.near_plane_dist = screen.near_plane_dist
        tang = math.tan(screen.fov * HALF_ANG2RAD)
        self.near_height = tang * self.near_plane_dist
        self.near_width = self.near_height * screen.aspect_ratio
        self.far_height = tang * self.far_plane_dist
        self.far_width = self.far_height * screen.aspect_ratio
        self.position = position
        self.up = Vector3(0.0, 1.0, 0.0)
        self.view = Matrix()
        self.planes: list[Plane] = [Plane() for _ in range(6)]
        self.ntl = Vector3()
        self.ntr = Vector3()
        self.nbl = Vector3()
        self.nbr = Vector3()
        self.ftl = Vector3()
        self.ftr = Vector3()
        self.fbl = Vector3()
        self.fbr = Vector3()

    def look_at(self, target: Vector3) -> None:
        """Aim the camera at ``target``, updating frustum and view."""
        self.update_planes(target)
        self.view.look_at(self.position, target)

    def update_planes(self, target: Vector3) -> None:
        """Recompute the frustum corners and planes for ``target``."""
        position = self.position
        z_axis = position - target
        z_axis.normalize()
        x_axis = self.up.cross(z_axis)
        x_axis.normalize()
        y_axis = z_axis.cross(x_axis)

        near_center = position - z_axis * self.near_plane_dist
        far_center = position - z_axis * self.far_plane_dist

        near_up = y_axis * self.near_height
        near_side = x_axis * self.near_width
        far_up = y_axis * self.far_height
        far_side = x_axis * self.far_width

        self.ntl = near_center + near_up - near_side
        self.ntr = near_center + near_up + near_side
        self.nbl = near_center - near_up - near_side
        self.nbr = near_center - near_up + near_side

        self.ftl = far_center + far_up - far_side
        self.fbr = far_center - far_up + far_side
        self.ftr = far_center + far_up + far_side
        self.fbl = far_center - far_up - far_side

        top, bottom, left, right, near, far = self.planes
        top.update(self.ntr, self.ntl, self.ftl)
        bottom.update(self.nbl, self.nbr, self.fbr)
        left.update(self.ntl, self.nbl, self.fbl)
        right.update(self.nbr, self.ntr, self.fbr)
        near.update(self.ntl, self.ntr, self.nbr)
        far.update(self.ftr, self.ftl, self.fbl)