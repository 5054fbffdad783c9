"""On-screen buttons and the control panel that holds them."""

from __future__ import annotations

import enum
from collections.abc import Callable
from dataclasses import dataclass

from racecar.checkpoint import Rect, Vec2

Callback = Callable[[], None]


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255

    def as_tuple(self) -> tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)


BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)
DISABLED_COLOR = Color(60, 60, 60)

_DEFAULT_BASE = Color(100, 100, 100)
_DEFAULT_HOVER = Color(120, 120, 120)
_DEFAULT_PRESSED = Color(80, 80, 80)


class MouseButton(enum.Enum):
    """Mouse buttons a control can receive."""

    LEFT = "left"
    RIGHT = "right"
    MIDDLE = "middle"


class Button:
    """A clickable rectangle that fires its callback on a full left click.

    A click is a left press inside the button followed by a left release
    still inside it. Any release ends the pressed state.
    """

    def __init__(self, label: str, x: float, y: float, width: float, height: float) -> None:
        self.label = label
        self.position = Vec2(x, y)
        self.size = Vec2(width, height)
        self.on_click: Callback | None = None
        self.is_hovered = False
        self.is_pressed = False
        self.base_color = _DEFAULT_BASE
        self.hover_color = _DEFAULT_HOVER
        self.pressed_color = _DEFAULT_PRESSED
        self.fill_color = self.base_color
        self.outline_color = BLACK
        self.outline_thickness = 2.0

    def __repr__(self) -> str:
        return (
            f"Button(label={self.label!r}, position={self.position!r}, size={self.size!r}, "
            f"fill_color={self.fill_color!r})"
        )

    @property
    def bounds(self) -> Rect:
        return Rect(self.position.x, self.position.y, self.size.x, self.size.y)

    def _state_color(self) -> Color:
        if self.is_pressed:
            return self.pressed_color
        if self.is_hovered:
            return self.hover_color
        return self.base_color

    def press(self, mouse_button: MouseButton, mouse_pos: Vec2) -> None:
        """Handle a mouse-button press at the given position."""
        if mouse_button is MouseButton.LEFT and self.bounds.contains(mouse_pos):
            self.is_pressed = True

    def release(self, mouse_button: MouseButton, mouse_pos: Vec2) -> bool:
        """Handle a mouse-button release; return whether it completed a click."""
        clicked = (
            mouse_button is MouseButton.LEFT
            and self.is_pressed
            and self.bounds.contains(mouse_pos)
        )
        self.is_pressed = False
        if clicked and self.on_click is not None:
            self.on_click()
        return clicked

    def update(self, mouse_pos: Vec2) -> None:
        """Refresh the hover state and the fill colour."""
        self.is_hovered = self.bounds.contains(mouse_pos)
        self.fill_color = self._state_color()

    def set_position(self, x: float, y: float) -> None:
        self.position = Vec2(x, y)

    def set_size(self, width: float, height: float) -> None:
        self.size = Vec2(width, height)

    def set_enabled(self, enabled: bool) -> None:
        """Show the button as enabled (base colour) or disabled (grey)."""
        self.fill_color = self.base_color if enabled else DISABLED_COLOR

    def set_colors(self, base: Color, hover: Color, pressed: Color) -> None:
        """Replace the state colours; a disabled button stays grey."""
        self.base_color = base
        self.hover_color = hover
        self.pressed_color = pressed
        if self.fill_color != DISABLED_COLOR:
            self.fill_color = self._state_color()


@dataclass(frozen=True)
class ButtonLabel:
    """Text drawn over a button."""

    text: str
    position: Vec2
    size: int = 14
    fill_color: Color = WHITE
    outline_color: Color = BLACK
    outline_thickness: float = 1.0


_BUTTON_WIDTH = 80.0
_BUTTON_HEIGHT = 30.0
_BUTTON_Y = 10.0

# (label, x, label x, base, hover, pressed)
_LAYOUT = (
    ("Start", 10.0, 25.0, Color(50, 150, 50), Color(70, 170, 70), Color(30, 130, 30)),
    ("Pause", 100.0, 115.0, Color(150, 50, 50), Color(170, 70, 70), Color(130, 30, 30)),
    ("Save", 190.0, 205.0, Color(50, 50, 150), Color(70, 70, 170), Color(30, 30, 130)),
)
_LABEL_Y = 18.0

_START, _STOP, _SAVE = range(3)


class UIManager:
    """The Start / Pause / Save button panel."""

    def __init__(self) -> None:
        self.buttons: list[Button] = []
        self.labels: list[ButtonLabel] = []

    def initialize(self) -> None:
        """Create the three buttons and their labels; Pause and Save start disabled."""
        self.buttons = []
        self.labels = []
        for text, x, label_x, base, hover, pressed in _LAYOUT:
            button = Button("", x, _BUTTON_Y, _BUTTON_WIDTH, _BUTTON_HEIGHT)
            button.set_colors(base, hover, pressed)
            self.buttons.append(button)
            self.labels.append(ButtonLabel(text, Vec2(label_x, _LABEL_Y)))
        self.set_stop_enabled(False)
        self.set_save_enabled(False)

    def press(self, mouse_button: MouseButton, mouse_pos: Vec2) -> None:
        for button in self.buttons:
            button.press(mouse_button, mouse_pos)

    def release(self, mouse_button: MouseButton, mouse_pos: Vec2) -> None:
        for button in self.buttons:
            button.release(mouse_button, mouse_pos)

    def update(self, mouse_pos: Vec2) -> None:
        for button in self.buttons:
            button.update(mouse_pos)

    def _button(self, index: int) -> Button | None:
        return self.buttons[index] if index < len(self.buttons) else None

    def _set_callback(self, index: int, callback: Callback | None) -> None:
        button = self._button(index)
        if button is not None:
            button.on_click = callback

    def _set_enabled(self, index: int, enabled: bool) -> None:
        button = self._button(index)
        if button is not None:
            button.set_enabled(enabled)

    def set_start_callback(self, callback: Callback | None) -> None:
        self._set_callback(_START, callback)

    def set_stop_callback(self, callback: Callback | None) -> None:
        self._set_callback(_STOP, callback)

    def set_save_callback(self, callback: Callback | None) -> None:
        self._set_callback(_SAVE, callback)

    def set_start_enabled(self, enabled: bool) -> None:
        self._set_enabled(_START, enabled)

    def set_stop_enabled(self, enabled: bool) -> None:
        self._set_enabled(_STOP, enabled)

    def set_save_enabled(self, enabled: bool) -> None:
        self._set_enabled(_SAVE, enabled)