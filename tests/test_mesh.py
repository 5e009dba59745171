import struct

import pytest

from tyraengine.mesh import AnimState, Lod, LodCalculation, Mesh
from tyraengine.plane import Plane
from tyraengine.vector3 import Vector3

TRIANGLE_OBJ = """\
v 0 0 0
v 1 0 0
v 0 1 0
vt 0 0
vt 1 0
vt 0 1
vn 0 0 1
usemtl wood
f 1/1/1 2/2/1 3/3/1
"""

SHIFTED_OBJ = """\
v 2 0 0
v 3 0 0
v 2 1 0
vt 0 0
vt 1 0
vt 0 1
vn 0 0 1
usemtl wood
f 1/1/1 2/2/1 3/3/1
"""


def _folder(tmp_path):
    return f"{tmp_path}/"


def _single(tmp_path):
    (tmp_path / "tri.obj").write_text(TRIANGLE_OBJ)
    mesh = Mesh()
    mesh.load_obj(_folder(tmp_path), "tri")
    return mesh


def _animated(tmp_path, count):
    texts = [TRIANGLE_OBJ, SHIFTED_OBJ]
    for index in range(count):
        (tmp_path / f"anim_{index + 1:06d}.obj").write_text(texts[index % 2])
    mesh = Mesh()
    mesh.load_obj(_folder(tmp_path), "anim", 1.0, False, count)
    return mesh


def test_defaults():
    mesh = Mesh()
    assert mesh.should_be_frustum_culled is True
    assert mesh.should_be_backface_culled is False
    assert mesh.should_be_lighted is False
    assert mesh.scale == 1.0
    assert mesh.frames_count == 0
    assert mesh.anim_state == AnimState()
    assert mesh.anim_state.speed == pytest.approx(0.1)
    assert mesh.lod == Lod()
    assert mesh.lod.calculation is LodCalculation.USE_K
    assert not mesh.is_data_loaded


def test_set_default_lod_and_clut_resets():
    mesh = Mesh()
    mesh.lod.k = 5.0
    mesh.clut.address = 7
    mesh.set_default_lod_and_clut()
    assert mesh.lod.k == 0.0
    assert mesh.clut.address == 0


def test_load_obj_single_frame(tmp_path):
    mesh = _single(tmp_path)
    assert mesh.frames_count == 1
    assert mesh.is_mother
    assert mesh.frames[0].vertices[1] == Vector3(1.0, 0.0, 0.0)
    assert mesh.materials[0].name == "wood"
    assert mesh.materials_count == 1


def test_load_obj_many_frames(tmp_path):
    mesh = _animated(tmp_path, 2)
    assert mesh.frames_count == 2
    assert mesh.frames[1].vertices[0] == Vector3(2.0, 0.0, 0.0)


def test_load_obj_zero_frames(tmp_path):
    with pytest.raises(ValueError):
        Mesh().load_obj(_folder(tmp_path), "tri", 1.0, False, 0)


def test_load_obj_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        Mesh().load_obj(_folder(tmp_path), "missing")


def _header(size):
    return struct.pack("<3I", 0, size, 0)


def _build_dff():
    out = bytearray(36)
    out += _header(0)
    out += bytes(13 * 4)
    out += struct.pack("<HHIII", 0, 0, 0, 3, 1)
    out += bytes(24)
    for vertex in ((0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (0.0, 1.0, 0.0)):
        out += struct.pack("<3f", *vertex)
    for _ in range(3):
        out += struct.pack("<3f", 0.0, 0.0, 1.0)
    out += bytes(24)
    out += struct.pack("<II", 1, 0)
    out += bytes(12) + _header(0) + bytes(24) + bytes(4)
    out += _header(8) + b"tex\0\0\0\0\0"
    out += _header(0) * 3
    out += bytes(12) + bytes(12)
    out += struct.pack("<III", 0, 1, 3)
    out += struct.pack("<II", 3, 0)
    out += struct.pack("<3I", 0, 1, 2)
    return bytes(out)


def test_load_dff(tmp_path):
    (tmp_path / "model.dff").write_bytes(_build_dff())
    mesh = Mesh()
    mesh.load_dff(_folder(tmp_path), "model", 2.0)
    assert mesh.frames_count == 1
    assert mesh.materials[0].name == "tex"
    assert mesh.materials[0].vertex_faces == [2, 1, 0]
    assert mesh.frames[0].vertices[1] == Vector3(2.0, 0.0, 0.0)


def test_load_from_shares_geometry(tmp_path):
    source = _animated(tmp_path, 2)
    copy = Mesh()
    copy.load_from(source)
    assert copy.frames_count == source.frames_count
    assert copy.frames[1].vertices is source.frames[1].vertices
    assert copy.frames[0].is_mother is False
    assert copy.materials[0].name == "wood"


def test_play_animation_without_data():
    with pytest.raises(RuntimeError):
        Mesh().play_animation(0, 1)


def test_play_animation_single_frame(tmp_path):
    with pytest.raises(RuntimeError):
        _single(tmp_path).play_animation(0, 0)


def test_play_animation_end_too_high(tmp_path):
    mesh = _animated(tmp_path, 3)
    with pytest.raises(ValueError):
        mesh.play_animation(0, 3)


def test_play_animation_loops(tmp_path):
    mesh = _animated(tmp_path, 3)
    mesh.anim_state.speed = 0.5
    mesh.play_animation(0, 2)
    assert mesh.anim_state.next_frame == 2
    mesh.animate()
    assert mesh.anim_state.current_frame == 0
    mesh.animate()
    assert mesh.anim_state.current_frame == 2
    assert mesh.anim_state.next_frame == 0
    assert mesh.anim_state.interpolation == 0.0


def test_play_animation_when_current_differs(tmp_path):
    mesh = _animated(tmp_path, 3)
    mesh.anim_state.current_frame = 1
    mesh.play_animation(0, 2)
    assert mesh.anim_state.next_frame == 0


def test_play_animation_with_stay_frame(tmp_path):
    mesh = _animated(tmp_path, 3)
    mesh.anim_state.speed = 0.5
    mesh.play_animation(0, 1, 2)
    state = mesh.anim_state
    assert state.is_stay_frame_set
    assert state.next_frame == 0
    for _ in range(4):
        mesh.animate()
    assert state.current_frame == 1
    assert state.next_frame == 2
    assert (state.start_frame, state.end_frame) == (2, 2)
    assert not state.is_stay_frame_set


def test_get_draw_data_static(tmp_path):
    mesh = _single(tmp_path)
    vertices, normals, coordinates = mesh.get_draw_data(0, Vector3(0.0, 0.0, 5.0))
    assert vertices == [(0.0, 0.0, 0.0, 1.0), (1.0, 0.0, 0.0, 1.0), (0.0, 1.0, 0.0, 1.0)]
    assert normals == [(0.0, 0.0, 1.0, 1.0)] * 3
    assert coordinates == [(0.0, 0.0, 1.0, 1.0), (1.0, 0.0, 1.0, 1.0), (0.0, 1.0, 1.0, 1.0)]


def test_get_draw_data_backface_culling(tmp_path):
    mesh = _single(tmp_path)
    mesh.should_be_backface_culled = True
    front = mesh.get_draw_data(0, Vector3(0.0, 0.0, 5.0))[0]
    back = mesh.get_draw_data(0, Vector3(0.0, 0.0, -5.0))[0]
    assert sorted([len(front), len(back)]) == [0, 3]


def test_get_draw_data_interpolates(tmp_path):
    mesh = _animated(tmp_path, 2)
    mesh.play_animation(0, 1)
    mesh.anim_state.interpolation = 0.5
    vertices, _, _ = mesh.get_draw_data(0, Vector3())
    assert vertices[0] == pytest.approx((1.0, 0.0, 0.0, 1.0))
    assert vertices[1] == pytest.approx((2.0, 0.0, 0.0, 1.0))


def test_is_in_frustum(tmp_path):
    mesh = _single(tmp_path)
    planes = [Plane(Vector3(0.0, 0.0, 1.0), 0.0)]
    assert mesh.is_in_frustum(planes) is True
    mesh.position = Vector3(0.0, 0.0, -10.0)
    assert mesh.is_in_frustum(planes) is False