"""Ambient and point-bulb lighting fed to the per-vertex light pass."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import IntEnum

from .vector3 import Vector3

_ADDITIONAL_LIGHTS = 1  # the ambient light
_LIGHT_MAX = 255.0
_LIGHT_DIS_MOD = 4.0

Vec4 = tuple[float, float, float, float]


class LightType(IntEnum):
    NONE = 0
    AMBIENT = 1
    DIRECTIONAL = 2


@dataclass
class LightBulb:
    """A point light with an intensity in the range 0..255."""

    position: Vector3 = field(default_factory=Vector3)
    intensity: float = 0.0


class Light:
    """Builds the light table: ambient first, then one entry per bulb."""

    def __init__(self) -> None:
        self.ambient_light = Vector3()

    def set_ambient_light(self, rgb: Vector3) -> None:
        self.ambient_light = rgb.copy()

    def lights_count(self, bulbs_count: int) -> int:
        """Number of table entries for the given number of bulbs."""
        return bulbs_count + _ADDITIONAL_LIGHTS

    def calculate_light(
        self, bulbs: Sequence[LightBulb], object_position: Vector3
    ) -> tuple[list[Vec4], list[Vec4], list[LightType]]:
        """Return light directions, colours and types for an object."""
        ambient = self.ambient_light
        directions: list[Vec4] = [(0.0, 0.0, 0.0, 1.0)]
        colors: list[Vec4] = [(ambient.x, ambient.y, ambient.z, 1.0)]
        types: list[LightType] = [LightType.AMBIENT]

        for bulb in bulbs:
            direction = object_position - bulb.position
            direction.normalize()
            directions.append((direction.x, direction.y, direction.z, 1.0))

            intensity = bulb.intensity / _LIGHT_MAX
            distance = bulb.position.distance_to(object_position)
            if distance > (_LIGHT_MAX - _LIGHT_DIS_MOD) * _LIGHT_DIS_MOD:
                distance = _LIGHT_MAX - _LIGHT_DIS_MOD
            intensity /= 1.0 + distance / _LIGHT_DIS_MOD
            intensity /= 3.0
            colors.append((intensity, intensity, intensity, 1.0))
            types.append(LightType.DIRECTIONAL)

        return directions, colors, types