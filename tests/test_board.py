import random

from circumdraw.board import MAX_MARKERS, Board
from circumdraw.canvas import BLACK, WHITE
from circumdraw.geometry import Point, Rect

TRIANGLE = [Point(50, 20), Point(80, 50), Point(50, 80)]


def _full_board(border=4):
    board = Board(Rect(0, 0, 100, 100), radius=5, border=border)
    for p in TRIANGLE:
        board.press(p)
    return board


def test_press_places_up_to_three_markers():
    board = _full_board()
    assert board.count == MAX_MARKERS
    assert [m.click_point for m in board.markers] == TRIANGLE
    board.press(Point(10, 10))
    assert board.count == MAX_MARKERS
    assert all(m.click_point != Point(10, 10) for m in board.markers)


def test_press_outside_area_ignored():
    board = Board(Rect(10, 10, 110, 110))
    board.press(Point(5, 5))
    assert board.count == 0


def test_press_uses_area_offset():
    board = Board(Rect(10, 10, 110, 110))
    board.press(Point(20, 30))
    assert board.markers[0].click_point == Point(10, 20)


def test_drag_marker():
    board = _full_board()
    board.press(Point(51, 21))
    assert board.markers[0].moving
    assert board.count == MAX_MARKERS
    board.move(Point(40, 30))
    assert board.markers[0].click_point == Point(40, 30)
    board.release(Point(40, 30))
    assert not any(m.moving for m in board.markers)
    board.move(Point(60, 60))
    assert board.markers[0].click_point == Point(40, 30)


def test_render_draws_ring():
    board = _full_board(border=4)
    image = board.render()
    assert image.get(20, 50) == BLACK
    assert image.get(50, 50) == WHITE
    assert image.get(50, 20) == BLACK
    assert image.get(2, 2) == WHITE


def test_border_changes_ring_thickness():
    board = _full_board(border=2)
    assert board.render().get(19, 50) == WHITE
    board.set_border(8)
    assert board.render().get(19, 50) == BLACK


def test_no_ring_before_third_marker():
    board = Board(Rect(0, 0, 100, 100), radius=5)
    board.press(TRIANGLE[0])
    board.press(TRIANGLE[1])
    image = board.render()
    assert image.get(20, 50) == WHITE
    assert image.get(50, 20) == BLACK


def test_set_radius_updates_markers():
    board = _full_board()
    board.set_radius(12)
    assert all(m.radius == 12 for m in board.markers)
    assert board.render().get(50, 31) == BLACK


def test_reset_clears_everything():
    board = _full_board()
    board.reset()
    assert board.count == 0
    assert not any(m.created for m in board.markers)
    assert set(board.image.pixels) == {WHITE}
    assert board.position_info() == "X[0] : 0, Y[0]: 0\r\nX[1] : 0, Y[1]: 0\r\nX[2] : 0, Y[2]: 0\r\n"


def test_position_info_lists_points():
    board = _full_board()
    info = board.position_info()
    assert info.startswith("X[0] : 50, Y[0]: 20\r\n")
    assert info.count("\r\n") == 3


def test_randomize_needs_three_markers():
    board = Board(Rect(0, 0, 100, 100))
    board.press(Point(10, 10))
    assert board.randomize(random.Random(1)) is False
    assert board.markers[0].click_point == Point(10, 10)


def test_randomize_is_deterministic_for_seed():
    a = _full_board()
    b = _full_board()
    assert a.randomize(random.Random(7)) is True
    assert b.randomize(random.Random(7)) is True
    assert [m.click_point for m in a.markers] == [m.click_point for m in b.markers]
    assert all(0 <= m.click_point.x < 100 and 0 <= m.click_point.y < 100 for m in a.markers)
    assert a.image.pixels == b.image.pixels