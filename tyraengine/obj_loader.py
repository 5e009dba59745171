"""Reader for Wavefront ``.obj`` models made of triangles."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path

from .mesh_frame import MeshFrame
from .point import Point
from .vector3 import Vector3

logger = logging.getLogger(__name__)

_INT = r"(-?\d+)"
# Face corner layouts, tried against the first corner of every face.
_FACE_FORMATS = (
    re.compile(rf"{_INT}/{_INT}/{_INT}"),  # v/vt/vn
    re.compile(rf"{_INT}/{_INT}/"),  # v/vt/
    re.compile(rf"{_INT}//"),  # v//
    re.compile(rf"{_INT}//{_INT}"),  # v//vn
)


class ObjFormatError(ValueError):
    """Raised when ``.obj`` text cannot be read as a triangle mesh."""


@dataclass(frozen=True)
class _Corner:
    vertex: int
    st: int | None
    normal: int | None


@dataclass
class _MaterialRecord:
    name: str
    corners: list[_Corner] = field(default_factory=list)


def _floats(parts: list[str], count: int, line_no: int) -> list[float]:
    if len(parts) < count + 1:
        raise ObjFormatError(f"line {line_no}: expected {count} numbers after {parts[0]!r}")
    try:
        return [float(value) for value in parts[1:count + 1]]
    except ValueError as exc:
        raise ObjFormatError(f"line {line_no}: invalid number") from exc


def _corner_from(groups: tuple[str | None, ...], layout: int) -> _Corner:
    numbers = [int(value) - 1 for value in groups if value is not None]
    if layout == 0:
        return _Corner(numbers[0], numbers[1], numbers[2])
    if layout == 1:
        return _Corner(numbers[0], numbers[1], None)
    if layout == 2:
        return _Corner(numbers[0], None, None)
    return _Corner(numbers[0], None, numbers[1])


def _parse_face(parts: list[str], line_no: int) -> list[_Corner]:
    tokens = parts[1:4]
    if len(tokens) < 3:
        raise ObjFormatError(f"line {line_no}: a face needs three corners")
    layout = next(
        (index for index, pattern in enumerate(_FACE_FORMATS) if pattern.fullmatch(tokens[0])),
        None,
    )
    if layout is None:
        raise ObjFormatError(f"line {line_no}: Unknown faces format in .obj file!")
    corners = []
    for token in tokens:
        match = _FACE_FORMATS[layout].fullmatch(token)
        if match is None:
            raise ObjFormatError(f"line {line_no}: Unknown .obj face for .obj file!")
        corners.append(_corner_from(match.groups(), layout))
    return corners


def _check_index(index: int, size: int, kind: str, name: str) -> None:
    if not 0 <= index < size:
        raise ObjFormatError(
            f"material {name!r}: {kind} index {index + 1} out of range (1..{size})"
        )


def parse_obj(text: str, scale: float = 1.0, invert_t: bool = False) -> MeshFrame:
    """Build a mesh frame from ``.obj`` text.

    Vertices are multiplied by ``scale``; with ``invert_t`` the second
    texture coordinate becomes ``1 - t``. Faces must follow a ``usemtl``.
    """
    vertices: list[Vector3] = []
    sts: list[Point] = []
    normals: list[Vector3] = []
    materials: list[_MaterialRecord] = []

    for line_no, line in enumerate(text.splitlines(), start=1):
        parts = line.split()
        if not parts:
            continue
        keyword = parts[0]
        if keyword == "v":
            x, y, z = _floats(parts, 3, line_no)
            vertices.append(Vector3(x * scale, y * scale, z * scale))
        elif keyword == "vt":
            s, t = _floats(parts, 2, line_no)
            sts.append(Point(s, 1.0 - t if invert_t else t))
        elif keyword == "vn":
            normals.append(Vector3(*_floats(parts, 3, line_no)))
        elif keyword == "usemtl":
            if len(parts) < 2:
                raise ObjFormatError(f"line {line_no}: usemtl needs a name")
            materials.append(_MaterialRecord(parts[1]))
        elif keyword == "f":
            if not materials:
                raise ObjFormatError(f"line {line_no}: face defined before any usemtl")
            materials[-1].corners.extend(_parse_face(parts, line_no))

    if not vertices:
        raise ObjFormatError("The .obj file has no vertices!")

    frame = MeshFrame()
    frame.allocate_vertices(len(vertices))
    frame.vertices[:] = vertices
    frame.allocate_normals(len(normals))
    frame.normals[:] = normals
    frame.allocate_sts(len(sts))
    frame.sts[:] = sts
    frame.allocate_materials(len(materials))

    for material, record in zip(frame.materials, materials):
        if not record.corners:
            raise ObjFormatError(f"material {record.name!r} has no faces")
        material.set_name(record.name)
        material.allocate_faces(len(record.corners))
        for position, corner in enumerate(record.corners):
            _check_index(corner.vertex, len(vertices), "vertex", record.name)
            material.vertex_faces[position] = corner.vertex
            if corner.st is not None:
                _check_index(corner.st, len(sts), "texture coordinate", record.name)
                material.st_faces[position] = corner.st
                material.sts_present = True
            if corner.normal is not None:
                _check_index(corner.normal, len(normals), "normal", record.name)
                material.normal_faces[position] = corner.normal
                material.normals_present = True

    frame.calculate_bounding_boxes()
    return frame


def load_obj(
    path: str | PathLike[str], scale: float = 1.0, invert_t: bool = False
) -> MeshFrame:
    """Read and parse a ``.obj`` file."""
    logger.debug("Loading obj file %s", path)
    return parse_obj(Path(path).read_text(encoding="latin-1"), scale, invert_t)