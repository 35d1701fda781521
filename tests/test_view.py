import math

import pytest

from wireframe.view import DEPTH_SCALE, Direction, ViewState, scale_for


@pytest.mark.parametrize(
    "size, expected",
    [(1, 24), (9, 24), (10, 16), (39, 16), (40, 5), (299, 5), (300, 1), (1000, 1)],
)
def test_scale_for_thresholds(size, expected):
    assert scale_for(size) == expected


def test_direction_key_codes():
    assert Direction(123) is Direction.LEFT
    assert Direction(126) is Direction.UP


def test_for_map_square():
    view = ViewState.for_map(3, 3)
    assert view.scale_x == scale_for(3)
    assert view.scale_y == scale_for(3)
    assert view.scale_z == DEPTH_SCALE
    assert view.offset_x == view.window_width // 2
    assert view.offset_y == view.window_height // 2
    assert (view.horizontal, view.vertical) == (0.0, 0.0)


def test_for_map_wide_uses_width_scale():
    view = ViewState.for_map(50, 5)
    assert view.scale_x == scale_for(50)
    assert view.scale_y == view.scale_x


def test_for_map_tall_uses_height_scale():
    view = ViewState.for_map(5, 50)
    assert view.scale_y == scale_for(50)
    assert view.scale_x == view.scale_y


def test_window_grows_with_map():
    small = ViewState.for_map(20, 20)
    large = ViewState.for_map(30, 30)
    assert large.window_width > small.window_width
    assert large.window_height > small.window_height


def test_pan_round_trip():
    view = ViewState.for_map(10, 10)
    start = (view.offset_x, view.offset_y)
    view.pan(5, Direction.LEFT)
    assert view.offset_x == start[0] - 5
    view.pan(5, Direction.RIGHT)
    view.pan(5, Direction.DOWN)
    assert view.offset_y == start[1] + 5
    view.pan(5, Direction.UP)
    assert (view.offset_x, view.offset_y) == start


def test_pan_accepts_key_code():
    view = ViewState.for_map(10, 10)
    before = view.offset_x
    view.pan(5, 124)
    assert view.offset_x == before + 5


def test_pan_rejects_unknown_code():
    view = ViewState.for_map(10, 10)
    with pytest.raises(ValueError):
        view.pan(5, 99)


def test_change_depth_adds_and_clamps():
    view = ViewState.for_map(4, 4)
    view.change_depth(0.1)
    assert view.scale_z == pytest.approx(DEPTH_SCALE + 0.1)
    view.change_depth(-100)
    assert view.scale_z == 0.0


def test_zoom_scales_all_axes():
    view = ViewState.for_map(4, 4)
    before = (view.scale_x, view.scale_y, view.scale_z)
    view.zoom(0.1)
    assert (view.scale_x, view.scale_y, view.scale_z) == pytest.approx(
        tuple(value * 1.1 for value in before)
    )
    window = (view.window_width, view.window_height)
    view.zoom(-0.1)
    assert (view.window_width, view.window_height) == window


def test_rotate_accumulates():
    view = ViewState.for_map(4, 4)
    view.rotate(0.1, 0)
    view.rotate(0.1, -0.1)
    assert view.horizontal == pytest.approx(0.2)
    assert view.vertical == pytest.approx(-0.1)


def test_reset_restores_initial_state():
    view = ViewState.for_map(12, 7)
    initial = ViewState.for_map(12, 7)
    view.zoom(0.5)
    view.rotate(1, 1)
    view.pan(20, Direction.UP)
    view.change_depth(3)
    view.reset()
    assert view == initial


def test_side_view_sets_isometric_angles():
    view = ViewState.for_map(8, 8)
    view.zoom(0.3)
    view.pan(15, Direction.LEFT)
    view.side_view()
    assert view.horizontal == pytest.approx(math.pi / 4)
    assert view.vertical == pytest.approx(-math.pi / 6)
    assert view.scale_x == scale_for(8)
    assert view.offset_x == view.window_width // 2


def test_side_view_keeps_window_size():
    view = ViewState.for_map(8, 8)
    window = (view.window_width, view.window_height)
    view.zoom(1.0)
    view.side_view()
    assert (view.window_width, view.window_height) == window