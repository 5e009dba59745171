"""3D model made of one or more animation frames."""

from __future__ import annotations

import random
from collections.abc import Sequence
from dataclasses import dataclass
from enum import IntEnum

from .dff_loader import load_dff
from .mesh_frame import MeshFrame
from .mesh_material import MeshMaterial
from .obj_loader import load_obj
from .plane import Plane
from .sprite import Clut
from .strings import with_leading_zeros
from .vector3 import Vector3, lerp, should_be_backface_culled

_ID_RANGE = 1_000_000

Vec4 = tuple[float, float, float, float]


class LodCalculation(IntEnum):
    USE_K = 0
    USE_FORMULA = 1


LOD_MAG_NEAREST = 0
LOD_MIN_NEAREST = 0


@dataclass
class AnimState:
    """Playback state of a frame animation."""

    start_frame: int = 0
    end_frame: int = 0
    interpolation: float = 0.0
    anim_type: int = 0
    current_frame: int = 0
    stay_frame: int = 0
    is_stay_frame_set: bool = False
    next_frame: int = 0
    speed: float = 0.1


@dataclass
class Lod:
    """Texture level-of-detail settings."""

    calculation: LodCalculation = LodCalculation.USE_K
    max_level: int = 0
    mag_filter: int = LOD_MAG_NEAREST
    min_filter: int = LOD_MIN_NEAREST
    l: int = 0
    k: float = 0.0


class Mesh:
    """Frames of a model together with its placement and animation state."""

    def __init__(self) -> None:
        self.id = random.randrange(_ID_RANGE)
        self.position = Vector3()
        self.rotation = Vector3()
        self.should_be_frustum_culled = True
        self.should_be_backface_culled = False
        self.should_be_lighted = False
        self.is_mother = False
        self.scale = 1.0
        self.frames: list[MeshFrame] = []
        self.anim_state = AnimState()
        self.lod = Lod()
        self.clut = Clut()
        self.set_default_lod_and_clut()

    @property
    def frames_count(self) -> int:
        return len(self.frames)

    @property
    def is_data_loaded(self) -> bool:
        return bool(self.frames)

    @property
    def materials(self) -> list[MeshMaterial]:
        """Materials of the first frame."""
        if not self.frames:
            raise RuntimeError("No mesh data was loaded!")
        return self.frames[0].materials

    @property
    def materials_count(self) -> int:
        return len(self.materials)

    def load_obj(
        self,
        subfolder: str,
        obj_file: str,
        scale: float = 1.0,
        invert_t: bool = False,
        frames_count: int = 1,
    ) -> None:
        """Load ``obj_file`` or, for several frames, ``obj_file_000001`` onwards."""
        if frames_count == 0:
            raise ValueError("Frames count cannot be 0!")
        base = f"{subfolder}{obj_file}"
        if frames_count == 1:
            paths = [f"{base}.obj"]
        else:
            paths = [
                f"{base}_{with_leading_zeros(str(index + 1))}.obj"
                for index in range(frames_count)
            ]
        self.frames = [load_obj(path, scale, invert_t) for path in paths]
        self.is_mother = True

    def load_dff(
        self, subfolder: str, dff_file: str, scale: float = 1.0, invert_t: bool = False
    ) -> None:
        """Load the single frame stored in ``subfolder + dff_file + '.dff'``."""
        self.frames = [load_dff(f"{subfolder}{dff_file}.dff", scale, invert_t)]
        self.is_mother = True

    def load_from(self, other: "Mesh") -> None:
        """Share the geometry of ``other`` through copied frames."""
        frames = []
        for source in other.frames:
            frame = MeshFrame()
            frame.copy_from(source)
            frames.append(frame)
        self.frames = frames

    def play_animation(
        self, start_frame: int, end_frame: int, stay_frame: int | None = None
    ) -> None:
        """Loop between two frames, or play once and then hold ``stay_frame``."""
        if not self.frames:
            raise RuntimeError("Cant play animation, because no mesh data was loaded!")
        if len(self.frames) == 1:
            raise RuntimeError(
                "Cant play animation, because this mesh have only one frame."
            )
        if end_frame >= len(self.frames):
            raise ValueError(
                "End frame value is too high. Valid range: (0, frames_count-1)"
            )
        state = self.anim_state
        state.start_frame = start_frame
        state.end_frame = end_frame
        if stay_frame is None:
            state.next_frame = end_frame if state.current_frame == start_frame else start_frame
        else:
            state.is_stay_frame_set = True
            state.stay_frame = stay_frame
            state.next_frame = start_frame

    def animate(self) -> None:
        """Advance the interpolation and step frames when it completes."""
        state = self.anim_state
        state.interpolation += state.speed
        if state.interpolation < 1.0:
            return
        state.interpolation = 0.0
        state.current_frame = state.next_frame
        state.next_frame += 1
        if state.next_frame > state.end_frame:
            if state.is_stay_frame_set:
                state.is_stay_frame_set = False
                state.next_frame = state.stay_frame
                state.start_frame = state.stay_frame
                state.end_frame = state.stay_frame
            else:
                state.next_frame = state.start_frame

    def get_draw_data(
        self, material_index: int, camera_position: Vector3
    ) -> tuple[list[Vec4], list[Vec4], list[Vec4]]:
        """Return vertices, normals and texture coordinates of visible triangles.

        Vertices are interpolated towards the next animation frame. Vertices
        and normals get ``w = 1``; texture coordinates get ``z = w = 1``.
        """
        state = self.anim_state
        current = self.frames[state.current_frame]
        upcoming = self.frames[state.next_frame]
        material = current.materials[material_index]
        faces = material.vertex_faces
        animating = state.current_frame != state.next_frame

        vertices: list[Vec4] = []
        normals: list[Vec4] = []
        coordinates: list[Vec4] = []

        for start in range(0, material.faces_count - 2, 3):
            corners = range(start, start + 3)
            if animating:
                calc = [
                    lerp(
                        current.vertices[faces[i]],
                        upcoming.vertices[faces[i]],
                        state.interpolation,
                        1.0,
                    )
                    for i in corners
                ]
            else:
                calc = [current.vertices[faces[i]].copy() for i in corners]

            if self.should_be_backface_culled and should_be_backface_culled(
                camera_position, calc[2], calc[1], calc[0]
            ):
                continue

            for vertex, i in zip(calc, corners):
                vertices.append((vertex.x, vertex.y, vertex.z, 1.0))
                if material.normals_present:
                    normal = current.normals[material.normal_faces[i]]
                    normals.append((normal.x, normal.y, normal.z, 1.0))
                else:
                    normals.append((0.0, 0.0, 0.0, 1.0))
                if material.sts_present:
                    st = current.sts[material.st_faces[i]]
                    coordinates.append((st.x, st.y, 1.0, 1.0))
                else:
                    coordinates.append((0.0, 0.0, 1.0, 1.0))

        return vertices, normals, coordinates

    def is_in_frustum(self, planes: Sequence[Plane]) -> bool:
        """Tell whether the current frame's box, at ``position``, meets the frustum."""
        frame = self.frames[self.anim_state.current_frame]
        if frame.bounding_box is None:
            raise RuntimeError("Bounding box was not calculated!")
        corners = [corner + self.position for corner in frame.bounding_box.vertices]
        for plane in planes:
            if all(plane.distance_to(corner) < 0 for corner in corners):
                return False
        return True

    def set_default_lod_and_clut(self) -> None:
        self.lod = Lod()
        self.clut = Clut()