"""Reader for RenderWare ``.dff`` model files (single geometry, single frame)."""

from __future__ import annotations

import logging
import struct
from dataclasses import dataclass
from os import PathLike
from pathlib import Path

from .mesh_frame import MeshFrame
from .point import Point
from .vector3 import Vector3

logger = logging.getLogger(__name__)

RW_OBJECT_VERTEX_TEXTURED = 0x04
RW_OBJECT_VERTEX_PRELIT = 0x08

_DWORD = 4


class DffFormatError(ValueError):
    """Raised when a ``.dff`` buffer does not have the expected layout."""


@dataclass(frozen=True)
class _SectionHeader:
    section_type: int
    size: int
    version: int


class _Reader:
    """Little-endian cursor over the file contents."""

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self.pos = 0

    def _unpack(self, fmt: str):
        try:
            values = struct.unpack_from(fmt, self._data, self.pos)
        except struct.error as exc:
            raise DffFormatError(f"unexpected end of data at offset {self.pos}") from exc
        self.pos += struct.calcsize(fmt)
        return values

    def skip(self, count: int) -> None:
        self.pos += count

    def skip_dwords(self, count: int) -> None:
        self.skip(count * _DWORD)

    def u16(self) -> int:
        return self._unpack("<H")[0]

    def u32(self) -> int:
        return self._unpack("<I")[0]

    def floats(self, count: int) -> tuple[float, ...]:
        return self._unpack(f"<{count}f")

    def section_header(self) -> _SectionHeader:
        return _SectionHeader(*self._unpack("<3I"))

    def skip_section(self) -> None:
        self.skip(self.section_header().size)

    def string(self, size: int) -> str:
        """Read a zero-terminated string, then advance by ``size`` bytes."""
        if self.pos >= len(self._data):
            raise DffFormatError(f"unexpected end of data at offset {self.pos}")
        end = self._data.find(b"\0", self.pos)
        if end < 0:
            raise DffFormatError(f"unterminated string at offset {self.pos}")
        text = self._data[self.pos:end].decode("latin-1")
        self.pos += size
        return text


def _read_geometry(
    reader: _Reader, frame: MeshFrame, scale: float, invert_t: bool
) -> None:
    flags = reader.u16()
    reader.u16()  # unknown
    triangle_count = reader.u32()
    vertex_count = reader.u32()
    reader.u32()  # morph target count

    if flags & RW_OBJECT_VERTEX_PRELIT:
        reader.skip(4 * vertex_count)  # r, g, b, a per vertex

    if flags & RW_OBJECT_VERTEX_TEXTURED:
        frame.allocate_sts(vertex_count)
        for index in range(vertex_count):
            u, v = reader.floats(2)
            frame.sts[index] = Point(u, 1.0 - v if invert_t else v)

    reader.skip(8 * triangle_count)  # vert2, vert1, flags, vert3
    reader.skip_dwords(6)  # bounding sphere, has-position, has-normals

    frame.allocate_vertices(vertex_count)
    for index in range(vertex_count):
        x, y, z = reader.floats(3)
        frame.vertices[index] = Vector3(x * scale, y * scale, z * scale)

    frame.allocate_normals(vertex_count)
    for index in range(vertex_count):
        frame.normals[index] = Vector3(*reader.floats(3))


def _read_material_names(reader: _Reader) -> list[str]:
    material_count = reader.u32()
    reader.skip_dwords(material_count)

    names: list[str] = []
    for _ in range(material_count):
        reader.skip_dwords(3)  # material header
        reader.skip_section()  # material data
        reader.skip_dwords(6)  # texture header and its data header
        reader.skip_dwords(1)  # texture filter flags
        name_header = reader.section_header()
        names.append(reader.string(name_header.size))
        reader.skip_section()  # alpha texture name
        reader.skip_section()  # texture extension
        reader.skip_section()  # material extension
    return names


def _read_material_split(reader: _Reader, frame: MeshFrame, names: list[str]) -> None:
    reader.skip_dwords(3)
    reader.u32()  # triangle strip flag
    split_count = reader.u32()
    reader.u32()  # total face count

    frame.allocate_materials(split_count)
    for material in frame.materials:
        faces_count = reader.u32()
        material_index = reader.u32()
        if material_index >= len(names):
            raise DffFormatError(
                f"material index {material_index} out of range ({len(names)} materials)"
            )
        material.sts_present = True
        material.normals_present = True
        material.allocate_faces(faces_count)
        material.set_name(names[material_index])
        # Stored in reverse so that the winding suits backface culling.
        indices = [reader.u32() for _ in range(faces_count)]
        indices.reverse()
        material.vertex_faces[:] = indices
        material.normal_faces[:] = indices
        material.st_faces[:] = indices


def parse_dff(data: bytes, scale: float = 1.0, invert_t: bool = False) -> MeshFrame:
    """Build a mesh frame from the contents of a ``.dff`` file."""
    reader = _Reader(data)
    frame = MeshFrame()

    reader.skip_dwords(3 * 3)  # clump header, clump data header, clump data
    reader.skip_section()  # frame list
    reader.skip_dwords(2 * 3)  # geometry list headers
    reader.skip_dwords(1)  # geometry count
    reader.skip_dwords(2 * 3)  # geometry headers

    _read_geometry(reader, frame, scale, invert_t)

    reader.skip_dwords(2 * 3)  # material list headers
    names = _read_material_names(reader)

    reader.skip_dwords(3)  # geometry extension header
    _read_material_split(reader, frame, names)

    frame.calculate_bounding_boxes()
    return frame


def load_dff(
    path: str | PathLike[str], scale: float = 1.0, invert_t: bool = False
) -> MeshFrame:
    """Read and parse a ``.dff`` file."""
    logger.debug("Loading dff file %s", path)
    frame = parse_dff(Path(path).read_bytes(), scale, invert_t)
    logger.debug("Dff file loaded!")
    return frame