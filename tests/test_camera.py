import pytest

from implicitplot.camera import Action, Camera, Key, MouseButton


def test_default_view():
    camera = Camera()
    assert camera.zoom == 1.0
    assert (camera.position.x, camera.position.y) == (0.0, 0.0)
    assert camera.dragging is False


@pytest.mark.parametrize("value", [-30.0, 0.0, 12.5, 400.0])
def test_coordinate_round_trip(value):
    camera = Camera()
    camera.on_scroll(0, 3)
    camera.on_key(Key.RIGHT, Action.PRESS)
    camera.on_key(Key.UP, Action.PRESS)
    assert camera.world_to_camera_x(camera.camera_to_world_x(value)) == pytest.approx(value)
    assert camera.world_to_camera_y(camera.camera_to_world_y(value)) == pytest.approx(value)


def test_camera_position_maps_to_screen_origin():
    camera = Camera()
    camera.on_key(Key.LEFT, Action.PRESS)
    camera.on_key(Key.DOWN, Action.REPEAT)
    assert camera.world_to_camera_x(camera.position.x) == 0
    assert camera.world_to_camera_y(-camera.position.y) == 0


def test_drag_keeps_world_point_under_cursor():
    camera = Camera()
    camera.on_scroll(0, 2)
    before = camera.camera_to_world_x(150.0)
    camera.on_mouse_button(MouseButton.LEFT, Action.PRESS, 150.0, 80.0)
    camera.on_cursor_move(310.0, 40.0)
    assert camera.camera_to_world_x(310.0) == pytest.approx(before)


def test_drag_back_to_origin_restores_position():
    camera = Camera()
    camera.on_mouse_button(MouseButton.LEFT, Action.PRESS, 100.0, 100.0)
    camera.on_cursor_move(250.0, -40.0)
    assert camera.position.x != 0.0
    camera.on_cursor_move(100.0, 100.0)
    assert camera.position.x == pytest.approx(0.0)
    assert camera.position.y == pytest.approx(0.0)


def test_release_stops_dragging():
    camera = Camera()
    camera.on_mouse_button(MouseButton.LEFT, Action.PRESS, 10.0, 10.0)
    camera.on_mouse_button(MouseButton.LEFT, Action.RELEASE, 10.0, 10.0)
    camera.on_cursor_move(500.0, 500.0)
    assert camera.dragging is False
    assert (camera.position.x, camera.position.y) == (0.0, 0.0)


def test_right_button_does_not_drag():
    camera = Camera()
    camera.on_mouse_button(MouseButton.RIGHT, Action.PRESS, 10.0, 10.0)
    camera.on_cursor_move(500.0, 500.0)
    assert camera.dragging is False
    assert camera.position.x == 0.0


def test_scroll_changes_zoom_direction():
    camera = Camera()
    camera.on_scroll(0, 1)
    assert camera.zoom > 1.0
    camera = Camera()
    camera.on_scroll(0, -1)
    assert camera.zoom < 1.0


def test_horizontal_scroll_is_ignored():
    camera = Camera()
    camera.on_scroll(5, 0)
    assert camera.zoom == 1.0


def test_arrow_keys_cancel_out():
    camera = Camera()
    camera.on_scroll(0, 4)
    camera.on_key(Key.LEFT, Action.PRESS)
    camera.on_key(Key.RIGHT, Action.REPEAT)
    camera.on_key(Key.UP, Action.PRESS)
    camera.on_key(Key.DOWN, Action.PRESS)
    assert camera.position.x == pytest.approx(0.0)
    assert camera.position.y == pytest.approx(0.0)


def test_key_step_shrinks_with_zoom():
    near = Camera()
    near.on_scroll(0, 10)
    near.on_key(Key.RIGHT, Action.PRESS)
    far = Camera()
    far.on_key(Key.RIGHT, Action.PRESS)
    assert 0 < near.position.x < far.position.x


def test_up_key_increases_y():
    camera = Camera()
    camera.on_key(Key.UP, Action.PRESS)
    assert camera.position.y > 0


def test_key_release_and_other_keys_do_nothing():
    camera = Camera()
    camera.on_key(Key.LEFT, Action.RELEASE)
    camera.on_key(65, Action.PRESS)
    assert (camera.position.x, camera.position.y) == (0.0, 0.0)