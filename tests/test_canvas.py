import pytest

from circumdraw.canvas import BLACK, WHITE, GrayImage, Marker
from circumdraw.geometry import Point, Rect


def test_new_image_is_white():
    img = GrayImage(7, 5)
    assert all(img.get(x, y) == WHITE for x in range(7) for y in range(5))


def test_invalid_dimensions():
    with pytest.raises(ValueError):
        GrayImage(0, 5)


def test_get_out_of_range():
    img = GrayImage(4, 3)
    with pytest.raises(IndexError):
        img.get(4, 0)
    with pytest.raises(IndexError):
        img.get(0, -1)


def test_fill_disk_clips_at_edges():
    img = GrayImage(10, 10)
    img.fill_disk(0, 0, 4, BLACK)
    img.fill_disk(12, 12, 5, BLACK)
    assert img.get(0, 0) == BLACK
    assert img.get(9, 9) == BLACK
    assert img.get(5, 5) == WHITE


def test_clear_restores_white():
    img = GrayImage(8, 8)
    img.fill_disk(4, 4, 3, BLACK)
    img.clear()
    assert set(img.pixels) == {WHITE}


def test_to_pgm():
    img = GrayImage(4, 3)
    data = img.to_pgm()
    header = b"P5\n4 3\n255\n"
    assert data.startswith(header)
    assert data[len(header):] == bytes([WHITE]) * 12


def test_marker_create_applies_offset():
    m = Marker()
    m.create(Rect(10, 20, 110, 120), Point(15, 25))
    assert m.created
    assert m.click_point == Point(5, 5)
    m.hold(Point(30, 40))
    assert m.click_point == Point(20, 20)


def test_marker_contains_uses_offset_and_radius():
    m = Marker(radius=5)
    m.create(Rect(10, 10, 100, 100), Point(50, 50))
    assert m.contains(Point(50, 50))
    assert m.contains(Point(45, 45))
    assert not m.contains(Point(55, 50))
    assert not m.contains(Point(44, 50))


def test_marker_reset():
    m = Marker()
    m.create(Rect(0, 0, 50, 50), Point(10, 10))
    m.moving = True
    m.reset()
    assert not m.created
    assert not m.moving
    assert m.click_point == Point(0, 0)


def test_marker_draw():
    img = GrayImage(30, 30)
    m = Marker(radius=4)
    m.create(Rect(0, 0, 30, 30), Point(15, 15))
    m.draw(img)
    assert img.get(15, 15) == BLACK
    assert img.get(19, 15) == WHITE
    assert img.get(0, 0) == WHITE