# tyraengine

Building blocks of a small 3D game engine: vector and matrix math, planes
and view frustums, meshes with keyframe animation, materials with bounding
boxes, textures and sprites. It also loads Wavefront OBJ, RenderWare DFF,
24-bit BMP and PNG assets.

## Installation

```
pip install .
```

To install the test tools as well:

```
pip install ".[test]"
```

## Overview

| Module | Contents |
| --- | --- |
| `tyraengine.vector3` | `Vector3` with `+`, `-`, `*` (cross product with a vector, scaling with a number), `/`, `inner_product`, `length`, `normalize`, `distance_to`, `copy`; the functions `should_be_backface_culled` and `lerp` |
| `tyraengine.point` | `Point` (a 2D texture coordinate) with `rotate` |
| `tyraengine.plane` | `Plane`, built with `Plane.from_points` or `update`, with `distance_to` |
| `tyraengine.matrix` | 4×4 `Matrix`: `identity`, `set_perspective`, `look_at`, `set_camera`, `rotation_x/y/z`, `rotation_by_angle`, `translation`, `set_scale`, and `*` with a matrix or a `Vector3` |
| `tyraengine.mathutils` | `mod`, `inv_sqrt`, `vec3_to_native`, `many_vec3_to_native` |
| `tyraengine.strings` | `with_leading_zeros`, `without_extension` |
| `tyraengine.screen_settings` | `ScreenSettings`; `ScreenSettings.default()` gives 640×480, a 60° field of view, near plane 2 and far plane 2000 |
| `tyraengine.camera_base` | `CameraBase`, which keeps the view matrix and the six frustum planes up to date |
| `tyraengine.light` | `Light`, `LightBulb`, `LightType`: an ambient light plus one directional light per bulb |
| `tyraengine.bounding_box` | `BoundingBox` and `BoundingBoxFace` |
| `tyraengine.mesh_material` | `MeshMaterial` (face indices, colour, bounds, frustum test) and `Color` |
| `tyraengine.mesh_frame` | `MeshFrame`: vertices, texture coordinates, normals and materials of one frame |
| `tyraengine.mesh` | `Mesh`, `AnimState`, `Lod`: animated meshes loaded from OBJ or DFF files |
| `tyraengine.texture` | `Texture`, `TextureType`, `WrapMode`, `WrapSettings` |
| `tyraengine.sprite` | `Sprite`, `SpriteMode`, `Clut` |
| `tyraengine.texture_repository` | `TextureRepository` and `TextureFormat`: loads textures and finds them by linked id |
| `tyraengine.file_service` | `FileService` and `FileServiceTask`: a queue of file reads polled by task id |
| `tyraengine.obj_loader`, `dff_loader`, `bmp_loader`, `png_loader` | `parse_obj`/`load_obj`, `parse_dff`/`load_dff`, `parse_bmp`/`load_bmp`, `decode_png`/`load_png` |

## Example

```python
from tyraengine.camera_base import CameraBase
from tyraengine.mesh import Mesh
from tyraengine.screen_settings import ScreenSettings
from tyraengine.vector3 import Vector3

screen = ScreenSettings.default()
camera = CameraBase(screen, Vector3(0.0, 0.0, 50.0))
camera.look_at(Vector3(0.0, 0.0, 0.0))

mesh = Mesh()
mesh.load_obj("assets/", "cube", 1.0, True, 1)
print(mesh.is_in_frustum(camera.planes))

vertices, normals, coordinates = mesh.get_draw_data(0, camera.position)
```

## Animation

An animated mesh is stored as numbered OBJ files, `name_000001.obj`,
`name_000002.obj` and so on. Pass the frame count to `Mesh.load_obj`, then
call `play_animation(start, end)` to loop between two frames, or
`play_animation(start, end, stay)` to play once and hold `stay`. Call
`animate()` once per tick; `get_draw_data` interpolates vertices between the
current and the next frame.

## Asset formats

- OBJ: triangles only; every face must come after a `usemtl` line. Corners
  may be `v/vt/vn`, `v/vt/`, `v//` or `v//vn`. `scale` multiplies the
  vertices and `invert_t` turns each `t` coordinate into `1 - t`.
- DFF: a single geometry in a single frame, with its material split and
  the texture name of every material.
- BMP: uncompressed 24-bit images; only the low byte of the width, height
  and pixel offset fields is read, and rows are kept in file order.
- PNG: RGB, RGBA and palette images; transparency becomes an alpha channel
  and alpha is scaled from 0..255 to 0..128. Grey images are rejected.

Textures may be at most 256×256. Loaders raise `ObjFormatError`,
`DffFormatError`, `BmpFormatError` or `PngFormatError` when a file is
malformed or uses a layout they do not support.

`TextureRepository.add` does not link a texture to anything; to find a
sprite's texture with `get_by_sprite_or_mesh`, call
`texture.add_link(sprite.id)` yourself. `add_by_mesh` links each texture to
its material.

## What the package does not do

It prepares data for drawing but draws nothing: there is no renderer,
window, game loop, audio playback or controller input. `get_draw_data` and
`Light.calculate_light` return plain lists of tuples for whatever renderer
you put them into.