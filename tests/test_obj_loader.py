import pytest

from tyraengine.obj_loader import ObjFormatError, load_obj, parse_obj

HEADER = """\
# a comment line
v 0.0 0.0 0.0
v 1.0 0.0 0.0
v 0.0 2.0 -1.0
vt 0.0 0.25
vt 1.0 0.0
vt 0.5 1.0
vn 0.0 0.0 1.0
usemtl stone
"""


def test_full_face_format():
    frame = parse_obj(HEADER + "f 1/3/1 2/2/1 3/1/1\n")
    assert frame.vertex_count == 3
    assert frame.sts_count == 3
    assert frame.normals_count == 1
    material = frame.materials[0]
    assert material.name == "stone"
    assert material.vertex_faces == [0, 1, 2]
    assert material.st_faces == [2, 1, 0]
    assert material.normal_faces == [0, 0, 0]
    assert material.sts_present and material.normals_present


def test_scale_applies_to_vertices_only():
    frame = parse_obj(HEADER + "f 1/1/1 2/2/1 3/3/1\n", scale=2.0)
    assert (frame.vertices[2].x, frame.vertices[2].y, frame.vertices[2].z) == (0.0, 4.0, -2.0)
    assert frame.normals[0].z == 1.0


def test_invert_t():
    plain = parse_obj(HEADER + "f 1/1/1 2/2/1 3/3/1\n")
    inverted = parse_obj(HEADER + "f 1/1/1 2/2/1 3/3/1\n", invert_t=True)
    for a, b in zip(plain.sts, inverted.sts):
        assert a.x == b.x
        assert b.y == pytest.approx(1.0 - a.y)


def test_vertex_normal_format():
    material = parse_obj(HEADER + "f 1//1 2//1 3//1\n").materials[0]
    assert material.vertex_faces == [0, 1, 2]
    assert material.normals_present
    assert not material.sts_present


def test_vertex_only_slashes_format():
    material = parse_obj(HEADER + "f 1// 2// 3//\n").materials[0]
    assert material.vertex_faces == [0, 1, 2]
    assert not material.normals_present
    assert not material.sts_present


def test_vertex_texture_format():
    material = parse_obj(HEADER + "f 1/1/ 2/2/ 3/3/\n").materials[0]
    assert material.st_faces == [0, 1, 2]
    assert material.sts_present
    assert not material.normals_present


def test_faces_split_between_materials():
    text = HEADER + "f 1//1 2//1 3//1\nusemtl grass\nf 3//1 2//1 1//1\nf 1//1 2//1 3//1\n"
    frame = parse_obj(text)
    assert [m.name for m in frame.materials] == ["stone", "grass"]
    assert frame.materials[0].faces_count == 3
    assert frame.materials[1].faces_count == 6
    assert frame.materials[1].vertex_faces[:3] == [2, 1, 0]


def test_bounding_box_covers_vertices():
    frame = parse_obj(HEADER + "f 1//1 2//1 3//1\n")
    low = frame.bounding_box.vertices[0]
    high = frame.bounding_box.vertices[7]
    assert (low.x, low.y, low.z) == (0.0, 0.0, -1.0)
    assert (high.x, high.y, high.z) == (1.0, 2.0, 0.0)


def test_plain_vertex_faces_are_rejected():
    with pytest.raises(ObjFormatError):
        parse_obj(HEADER + "f 1 2 3\n")


def test_mixed_face_formats_are_rejected():
    with pytest.raises(ObjFormatError):
        parse_obj(HEADER + "f 1/1/1 2//1 3/3/1\n")


def test_face_before_material_is_rejected():
    with pytest.raises(ObjFormatError):
        parse_obj("v 0 0 0\nv 1 0 0\nv 0 1 0\nf 1// 2// 3//\n")


def test_out_of_range_index_is_rejected():
    with pytest.raises(ObjFormatError):
        parse_obj(HEADER + "f 1// 2// 9//\n")


def test_no_vertices_is_rejected():
    with pytest.raises(ObjFormatError):
        parse_obj("usemtl stone\n")


def test_load_obj_reads_file(tmp_path):
    path = tmp_path / "tri.obj"
    path.write_text(HEADER + "f 1/1/1 2/2/1 3/3/1\n")
    frame = load_obj(path)
    assert frame.materials[0].name == "stone"
    assert frame.vertex_count == 3