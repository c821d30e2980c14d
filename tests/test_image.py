import pytest

from fildefer.image import Image
from fildefer.visual import convert_color, mask_shifts

IM1_SX = 42
IM1_SY = 42
IM3_SX = 242
IM3_SY = 242


def _color_map(x, y, w, h, kind):
    if kind == 2:
        return (y * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)
    return (x * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)


@pytest.mark.parametrize("size", [(IM1_SX, IM1_SY), (IM3_SX, IM3_SY)])
def test_new_image_layout(size):
    width, height = size
    img = Image(width, height)
    assert img.bpp == 32
    assert img.size_line >= width * img.bpp // 8
    assert img.size_line % 4 == 0
    assert len(img.data) == img.size_line * height
    assert not any(img.data)


@pytest.mark.parametrize("kind", [1, 2])
def test_fill_with_colour_map_and_read_back(kind):
    img = Image(IM1_SX, IM1_SY)
    shifts = mask_shifts(0xFF0000, 0xFF00, 0xFF)
    expected = {
        (x, y): convert_color(_color_map(x, y, IM1_SX, IM1_SY, kind), 24, shifts)
        for y in range(IM1_SY)
        for x in range(IM1_SX)
    }
    for (x, y), color in expected.items():
        img.write_pixel(x, y, color)
    assert all(img.get_pixel(x, y) == color for (x, y), color in expected.items())


def test_little_endian_byte_layout():
    img = Image(2, 1, endian=0)
    img.write_pixel(1, 0, 0x11223344)
    assert bytes(img.data[4:8]) == b"\x44\x33\x22\x11"


def test_big_endian_byte_layout():
    img = Image(2, 1, endian=1)
    img.write_pixel(1, 0, 0x11223344)
    assert bytes(img.data[4:8]) == b"\x11\x22\x33\x44"


def test_three_byte_pixels():
    img = Image(3, 2, bpp=24, endian=1)
    img.write_pixel(2, 1, 0x112233)
    offset = img.size_line + 2 * 3
    assert bytes(img.data[offset:offset + 3]) == b"\x11\x22\x33"
    assert img.get_pixel(2, 1) == 0x112233


def test_colour_is_masked_to_pixel_width():
    img = Image(1, 1)
    img.write_pixel(0, 0, -1)
    assert img.get_pixel(0, 0) == 0xFFFFFFFF


@pytest.mark.parametrize("point", [(-1, 0), (0, -1), (4, 0), (0, 3)])
def test_put_pixel_ignores_points_outside(point):
    img = Image(4, 3)
    assert img.put_pixel(*point, 0xFFFFFF) is False
    assert not any(img.data)


def test_put_pixel_inside():
    img = Image(4, 3)
    assert img.put_pixel(3, 2, 0xABCDEF) is True
    assert img.get_pixel(3, 2) == 0xABCDEF


@pytest.mark.parametrize("point", [(4, 0), (0, 3), (-1, -1)])
def test_get_and_write_outside_raise(point):
    img = Image(4, 3)
    with pytest.raises(IndexError):
        img.get_pixel(*point)
    with pytest.raises(IndexError):
        img.write_pixel(*point, 0)


def test_clear_zeroes_everything():
    img = Image(5, 5)
    img.write_pixel(2, 2, 0xFFFFFF)
    img.write_pixel(4, 4, 0x123456)
    img.clear()
    assert not any(img.data)
    assert len(img.data) == img.size_line * 5


@pytest.mark.parametrize(
    "kwargs",
    [
        {"width": 0, "height": 5},
        {"width": 5, "height": -1},
        {"width": 5, "height": 5, "bpp": 12},
        {"width": 5, "height": 5, "endian": 2},
    ],
)
def test_invalid_images_rejected(kwargs):
    with pytest.raises(ValueError):
        Image(**kwargs)