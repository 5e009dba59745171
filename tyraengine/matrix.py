"""4x4 transformation matrix stored as sixteen floats, row by row.

Vectors are treated as rows: transforming ``v`` yields ``v . M`` with an
implicit fourth component of one, so the translation lives in elements
12, 13 and 14. ``a * b`` between matrices composes them so that
``(a * b) * v`` applies ``b`` first and then ``a``.
"""

from __future__ import annotations

import math
from collections.abc import Iterable

from .mathutils import HALF_ANG2RAD
from .screen_settings import ScreenSettings
from .vector3 import Vector3


class Matrix:
    """Mutable 4x4 matrix; a new matrix is all zeros."""

    __slots__ = ("data",)

    def __init__(self, *values: float) -> None:
        if not values:
            self.data: list[float] = [0.0] * 16
        elif len(values) == 16:
            self.data = [float(value) for value in values]
        else:
            raise ValueError(f"a matrix needs 16 values, got {len(values)}")

    @classmethod
    def from_values(cls, values: Iterable[float]) -> "Matrix":
        """Build a matrix from sixteen values in row order."""
        return cls(*values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.data == other.data

    def __repr__(self) -> str:
        return f"Matrix({', '.join(repr(value) for value in self.data)})"

    def __str__(self) -> str:
        rows = (
            ", ".join(f"{value:f}" for value in self.data[row * 4 : row * 4 + 4])
            for row in range(4)
        )
        return "MATRIX(\n" + "\n".join(rows) + "\n)"

    def __mul__(self, other: "Matrix | Vector3") -> "Matrix | Vector3":
        if isinstance(other, Vector3):
            vec = (other.x, other.y, other.z, 1.0)
            res = [
                sum(vec[i] * self.data[4 * i + j] for i in range(4))
                for j in range(3)
            ]
            return Vector3(*res)
        if isinstance(other, Matrix):
            a = self.data
            b = other.data
            return Matrix(
                *(
                    sum(b[4 * row + k] * a[4 * k + col] for k in range(4))
                    for row in range(4)
                    for col in range(4)
                )
            )
        return NotImplemented

    def copy(self) -> "Matrix":
        return Matrix(*self.data)

    def identity(self) -> None:
        """Reset to the identity matrix."""
        self.data = [1.0 if row == col else 0.0 for row in range(4) for col in range(4)]

    def set_perspective(self, screen: ScreenSettings) -> None:
        """Fill in the projection for the given screen settings."""
        half_fov = HALF_ANG2RAD * screen.fov
        cot_fov = 1.0 / (math.sin(half_fov) / math.cos(half_fov))
        w = cot_fov * (screen.width / screen.projection_scale) / screen.aspect_ratio
        h = cot_fov * (screen.height / screen.projection_scale)
        far = screen.far_plane_dist
        near = screen.near_plane_dist
        self.data = [
            w, 0.0, 0.0, 0.0,
            0.0, -h, 0.0, 0.0,
            0.0, 0.0, (far + near) / (far - near), -1.0,
            0.0, 0.0, (2.0 * far * near) / (far - near), 0.0,
        ]

    def look_at(self, position: Vector3, target: Vector3) -> None:
        """Become the view matrix of a camera at ``position`` facing ``target``."""
        view_vec = position - target
        up_vec = Vector3(0.0, 1.0, 0.0)
        camera = Matrix()
        camera.set_camera(position, view_vec, up_vec)
        self.data = list(camera.data)

    def rotation_x(self, radians: float) -> None:
        """Write the rotation about X into the matching elements."""
        c = math.cos(radians)
        s = math.sin(radians)
        self.data[5] = c
        self.data[6] = s
        self.data[9] = -s
        self.data[10] = c

    def rotation_y(self, radians: float) -> None:
        """Write the rotation about Y into the matching elements."""
        c = math.cos(radians)
        s = math.sin(radians)
        self.data[0] = c
        self.data[2] = -s
        self.data[8] = s
        self.data[10] = c

    def rotation_z(self, radians: float) -> None:
        """Write the rotation about Z into the matching elements."""
        c = math.cos(radians)
        s = math.sin(radians)
        self.data[0] = c
        self.data[1] = s
        self.data[4] = -s
        self.data[5] = c

    def rotation_by_angle(self, angle: float, axis: Vector3) -> None:
        """Become a rotation of ``angle`` radians about ``axis``."""
        local_axis = axis.copy()
        local_axis.normalize()
        x, y, z = local_axis
        c = math.cos(angle)
        s = math.sin(angle)
        t = 1.0 - c
        self.data = [
            x * x * t + c, y * x * t + z * s, x * z * t - y * s, 0.0,
            x * y * t - z * s, y * y * t + c, y * z * t + x * s, 0.0,
            x * z * t + y * s, y * z * t - x * s, z * z * t + c, 0.0,
            0.0, 0.0, 0.0, 1.0,
        ]

    def translation(self, value: Vector3) -> None:
        """Write the translation elements."""
        self.data[12] = value.x
        self.data[13] = value.y
        self.data[14] = value.z

    def set_scale(self, value: Vector3) -> None:
        """Write the scale elements of the diagonal."""
        self.data[0] = value.x
        self.data[5] = value.y
        self.data[10] = value.z
        self.data[15] = 1.0

    def set_camera(self, position: Vector3, vz: Vector3, vy: Vector3) -> None:
        """Become the view matrix from a position, a back axis and an up hint."""
        x_axis = vy.cross(vz)
        x_axis.normalize()
        z_axis = vz.copy()
        z_axis.normalize()
        y_axis = z_axis.cross(x_axis)
        self.data = [
            x_axis.x, y_axis.x, z_axis.x, 0.0,
            x_axis.y, y_axis.y, z_axis.y, 0.0,
            x_axis.z, y_axis.z, z_axis.z, 0.0,
            -x_axis.inner_product(position),
            -y_axis.inner_product(position),
            -z_axis.inner_product(position),
            1.0,
        ]