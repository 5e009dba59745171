import io

import pytest
from PIL import Image

from tyraengine.png_loader import PngFormatError, decode_png, load_png
from tyraengine.texture import TextureType


def _png_bytes(image):
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()


def test_rgb_image_round_trip():
    image = Image.new("RGB", (2, 2))
    colors = [(10, 20, 30), (40, 50, 60), (70, 80, 90), (100, 110, 120)]
    image.putdata(colors)
    texture = decode_png(_png_bytes(image))
    assert texture.type is TextureType.RGB
    assert (texture.width, texture.height) == (2, 2)
    assert bytes(texture.data) == bytes(c for color in colors for c in color)


def test_rgba_alpha_is_scaled():
    image = Image.new("RGBA", (3, 1))
    image.putdata([(1, 2, 3, 255), (4, 5, 6, 0), (7, 8, 9, 255)])
    texture = decode_png(_png_bytes(image))
    assert texture.type is TextureType.RGBA
    assert list(texture.data[3::4]) == [128, 0, 128]
    assert bytes(texture.data[0:3]) == bytes([1, 2, 3])


def test_data_size_matches_texture_type():
    image = Image.new("RGBA", (4, 3), (9, 9, 9, 255))
    texture = decode_png(_png_bytes(image))
    assert len(texture.data) == texture.data_size == 4 * 3 * 4


def test_palette_without_transparency_becomes_rgb():
    image = Image.new("RGB", (2, 1))
    image.putdata([(255, 0, 0), (0, 0, 255)])
    texture = decode_png(_png_bytes(image.convert("P")))
    assert texture.type is TextureType.RGB
    assert bytes(texture.data) == bytes([255, 0, 0, 0, 0, 255])


def test_grey_image_is_rejected():
    with pytest.raises(PngFormatError):
        decode_png(_png_bytes(Image.new("L", (2, 2))))


def test_garbage_is_rejected():
    with pytest.raises(PngFormatError):
        decode_png(b"definitely not an image")


def test_too_large_texture_is_rejected():
    with pytest.raises(ValueError):
        decode_png(_png_bytes(Image.new("RGB", (300, 4))))


def test_load_png_builds_path(tmp_path):
    image = Image.new("RGB", (1, 1), (5, 6, 7))
    (tmp_path / "skin.png").write_bytes(_png_bytes(image))
    texture = load_png(str(tmp_path) + "/", "skin")
    assert bytes(texture.data) == bytes([5, 6, 7])