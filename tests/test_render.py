import pytest

from fildefer.fdfmap import Map, Point
from fildefer.image import Image
from fildefer.render import draw_line, draw_map, iso_projection, line_points


def _flat_map(width, height, z=0, color=0xFFFFFF):
    return Map(
        width,
        height,
        [[Point(x, y, z, color) for x in range(width)] for y in range(height)],
    )


SEGMENTS = [
    ((0, 0), (5, 0)),
    ((0, 0), (0, -4)),
    ((2, 3), (9, 5)),
    ((9, 5), (2, 3)),
    ((-3, 4), (6, -8)),
    ((1, 1), (4, 4)),
]


@pytest.mark.parametrize("p0, p1", SEGMENTS)
def test_line_points_endpoints_and_length(p0, p1):
    points = list(line_points(p0, p1))
    assert points[0] == p0
    assert points[-1] == p1
    assert len(points) == max(abs(p1[0] - p0[0]), abs(p1[1] - p0[1])) + 1


@pytest.mark.parametrize("p0, p1", SEGMENTS)
def test_line_points_steps_are_adjacent(p0, p1):
    points = list(line_points(p0, p1))
    for (ax, ay), (bx, by) in zip(points, points[1:]):
        assert max(abs(bx - ax), abs(by - ay)) == 1


def test_line_points_single_point():
    assert list(line_points((5, 5), (5, 5))) == [(5, 5)]


def test_line_points_horizontal():
    assert list(line_points((0, 0), (3, 0))) == [(0, 0), (1, 0), (2, 0), (3, 0)]


def test_iso_projection_centre_maps_to_window_centre():
    fdf_map = _flat_map(2, 2)
    assert iso_projection(1, 1, 0, fdf_map, 800, 600) == (400, 300)


def test_iso_projection_height_raises_point():
    fdf_map = _flat_map(4, 4)
    low = iso_projection(2, 2, 0, fdf_map, 800, 600)
    high = iso_projection(2, 2, 10, fdf_map, 800, 600)
    assert high[0] == low[0]
    assert high[1] < low[1]


def test_iso_projection_diagonal_keeps_x():
    fdf_map = _flat_map(4, 4)
    a = iso_projection(1, 1, 0, fdf_map, 800, 600)
    b = iso_projection(3, 3, 0, fdf_map, 800, 600)
    assert a[0] == b[0]
    assert a[1] < b[1]


def test_iso_projection_empty_map():
    with pytest.raises(ValueError):
        iso_projection(0, 0, 0, Map(0, 0, []), 800, 600)


def test_draw_line_colours_every_point():
    image = Image(10, 10)
    draw_line(image, (1, 1), (8, 4), 0x00FF00)
    assert all(image.get_pixel(x, y) == 0x00FF00 for x, y in line_points((1, 1), (8, 4)))


def test_draw_line_clips_outside_points():
    image = Image(5, 5)
    draw_line(image, (-3, 2), (10, 2), 0x123456)
    assert [image.get_pixel(x, 2) for x in range(5)] == [0x123456] * 5
    assert image.get_pixel(0, 0) == 0


def test_draw_map_marks_vertices():
    fdf_map = Map(
        2,
        2,
        [
            [Point(0, 0, 0, 0xFF0000), Point(1, 0, 0, 0x00FF00)],
            [Point(0, 1, 0, 0x0000FF), Point(1, 1, 0, 0xFFFFFF)],
        ],
    )
    image = Image(200, 100)
    draw_map(image, fdf_map)
    start = iso_projection(0, 0, 0, fdf_map, 200, 100)
    right = iso_projection(1, 0, 0, fdf_map, 200, 100)
    assert image.get_pixel(*start) == 0xFF0000
    assert image.get_pixel(*right) == 0x00FF00


def test_draw_map_empty_map_leaves_image_blank():
    image = Image(20, 20)
    draw_map(image, Map(0, 0, []))
    pixels = [image.get_pixel(x, y) for y in range(20) for x in range(20)]
    assert pixels == [0] * 400


def test_draw_map_single_row_draws_only_horizontal_edges():
    fdf_map = _flat_map(3, 1, color=0xABCDEF)
    image = Image(300, 300)
    draw_map(image, fdf_map)
    ends = [iso_projection(x, 0, 0, fdf_map, 300, 300) for x in range(3)]
    expected = {p for a, b in zip(ends, ends[1:]) for p in line_points(a, b)}
    drawn = {
        (x, y)
        for y in range(300)
        for x in range(300)
        if image.get_pixel(x, y)
    }
    assert drawn == expected