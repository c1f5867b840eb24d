from __future__ import annotations

import pytest
from PIL import Image

from posbitimage import decode_bitmap
from posbitimage.rendering import image_to_bitmap, load_bitmap, to_monochrome


def dots(image):
    matrix = image.dot_matrix()
    return sorted((c, r) for c in range(image.width) for r in range(image.height) if matrix[c][r])


def test_rgb_image_is_thresholded_without_resizing():
    img = Image.new("RGB", (10, 9), (255, 255, 255))
    img.putpixel((2, 4), (0, 0, 0))
    img.putpixel((9, 8), (40, 40, 40))
    img.putpixel((0, 0), (200, 200, 200))
    image = decode_bitmap(image_to_bitmap(img))
    assert (image.x_size, image.y_size) == (2, 2)
    assert dots(image) == [(2, 4), (9, 8)]


def test_threshold_is_configurable():
    img = Image.new("L", (8, 8), 100)
    assert len(dots(decode_bitmap(image_to_bitmap(img)))) == 64
    assert dots(decode_bitmap(image_to_bitmap(img, threshold=50))) == []


def test_transparent_pixels_become_white():
    img = Image.new("RGBA", (8, 8), (0, 0, 0, 0))
    img.putpixel((1, 1), (0, 0, 0, 255))
    assert dots(decode_bitmap(image_to_bitmap(img))) == [(1, 1)]


def test_to_monochrome_keeps_size():
    img = to_monochrome(Image.new("RGB", (13, 5), (0, 0, 0)))
    assert img.mode == "1"
    assert img.size == (13, 5)


def test_load_bitmap_passes_bmp_through(tmp_path, make_bmp):
    data = make_bmp(8, [bytes([0x0F])] * 8)
    path = tmp_path / "in.bmp"
    path.write_bytes(data)
    assert load_bitmap(path) == data


def test_load_bitmap_converts_other_formats(tmp_path):
    path = tmp_path / "in.png"
    img = Image.new("L", (16, 8), 255)
    img.putpixel((15, 7), 0)
    img.save(path)
    assert dots(decode_bitmap(load_bitmap(path))) == [(15, 7)]


def test_load_bitmap_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_bitmap(tmp_path / "missing.png")
