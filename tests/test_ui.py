import pytest

from racecar.checkpoint import Vec2
from racecar.ui import DISABLED_COLOR, Button, Color, MouseButton, UIManager


@pytest.fixture
def button():
    return Button("Go", 10.0, 20.0, 100.0, 50.0)


INSIDE = Vec2(50.0, 40.0)
OUTSIDE = Vec2(500.0, 500.0)


def test_new_button_uses_base_color(button):
    assert button.fill_color == Color(100, 100, 100)
    assert button.fill_color == button.base_color
    assert button.label == "Go"


def test_hover_changes_color(button):
    button.update(INSIDE)
    assert button.is_hovered
    assert button.fill_color == Color(120, 120, 120)
    button.update(OUTSIDE)
    assert not button.is_hovered
    assert button.fill_color == button.base_color


def test_full_click_fires_callback(button):
    clicks = []
    button.on_click = lambda: clicks.append(1)
    button.press(MouseButton.LEFT, INSIDE)
    assert button.is_pressed
    assert button.release(MouseButton.LEFT, INSIDE) is True
    assert clicks == [1]
    assert not button.is_pressed


def test_press_outside_does_not_press(button):
    clicks = []
    button.on_click = lambda: clicks.append(1)
    button.press(MouseButton.LEFT, OUTSIDE)
    assert not button.is_pressed
    assert button.release(MouseButton.LEFT, INSIDE) is False
    assert clicks == []


def test_right_button_is_ignored(button):
    button.press(MouseButton.RIGHT, INSIDE)
    assert not button.is_pressed


def test_release_outside_cancels_click(button):
    clicks = []
    button.on_click = lambda: clicks.append(1)
    button.press(MouseButton.LEFT, INSIDE)
    assert button.release(MouseButton.LEFT, OUTSIDE) is False
    assert clicks == []
    assert not button.is_pressed


def test_any_release_clears_pressed_state(button):
    button.press(MouseButton.LEFT, INSIDE)
    assert button.release(MouseButton.RIGHT, INSIDE) is False
    assert not button.is_pressed


def test_pressed_color_on_update(button):
    button.press(MouseButton.LEFT, INSIDE)
    button.update(INSIDE)
    assert button.fill_color == Color(80, 80, 80)


def test_set_enabled(button):
    button.set_enabled(False)
    assert button.fill_color == DISABLED_COLOR
    button.set_enabled(True)
    assert button.fill_color == button.base_color


def test_set_colors_keeps_disabled(button):
    button.set_enabled(False)
    button.set_colors(Color(1, 2, 3), Color(4, 5, 6), Color(7, 8, 9))
    assert button.fill_color == DISABLED_COLOR
    assert button.base_color == Color(1, 2, 3)


def test_set_colors_updates_enabled(button):
    button.update(INSIDE)
    button.set_colors(Color(1, 2, 3), Color(4, 5, 6), Color(7, 8, 9))
    assert button.fill_color == Color(4, 5, 6)


def test_set_position_and_size_move_bounds(button):
    button.set_position(300.0, 300.0)
    button.set_size(10.0, 10.0)
    assert button.bounds.contains(Vec2(305.0, 305.0))
    assert not button.bounds.contains(INSIDE)
    assert not button.bounds.contains(Vec2(310.0, 305.0))


def test_manager_initialize_layout():
    manager = UIManager()
    manager.initialize()
    assert len(manager.buttons) == 3
    assert [label.text for label in manager.labels] == ["Start", "Pause", "Save"]
    assert manager.buttons[0].fill_color == Color(50, 150, 50)
    assert manager.buttons[1].fill_color == DISABLED_COLOR
    assert manager.buttons[2].fill_color == DISABLED_COLOR
    assert [b.position.x for b in manager.buttons] == [10.0, 100.0, 190.0]


def test_manager_initialize_twice_keeps_three_buttons():
    manager = UIManager()
    manager.initialize()
    manager.initialize()
    assert len(manager.buttons) == 3
    assert len(manager.labels) == 3


def test_manager_callbacks_before_initialize_are_dropped():
    manager = UIManager()
    manager.set_start_callback(lambda: None)
    manager.set_save_enabled(True)
    assert manager.buttons == []


def test_manager_routes_clicks_to_right_callback():
    manager = UIManager()
    manager.initialize()
    events = []
    manager.set_start_callback(lambda: events.append("start"))
    manager.set_stop_callback(lambda: events.append("stop"))
    manager.set_save_callback(lambda: events.append("save"))
    for x in (20.0, 110.0, 200.0):
        point = Vec2(x, 20.0)
        manager.press(MouseButton.LEFT, point)
        manager.release(MouseButton.LEFT, point)
    assert events == ["start", "stop", "save"]


def test_manager_update_hover_and_enable():
    manager = UIManager()
    manager.initialize()
    manager.update(Vec2(110.0, 20.0))
    assert manager.buttons[1].fill_color == Color(170, 70, 70)
    assert manager.buttons[0].fill_color == Color(50, 150, 50)
    manager.set_start_enabled(False)
    assert manager.buttons[0].fill_color == DISABLED_COLOR
    manager.set_stop_enabled(True)
    manager.update(OUTSIDE)
    assert manager.buttons[1].fill_color == Color(150, 50, 50)