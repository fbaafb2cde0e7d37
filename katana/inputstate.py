"""Keyboard, mouse and game pad state for the current and previous frame."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum, IntFlag, auto
from typing import Any

import pygame

from katana.point import Point

__all__ = [
    "MAX_NUM_GAMEPADSTATES",
    "MouseButton",
    "Button",
    "ButtonState",
    "GamePadState",
    "InputState",
]

MAX_NUM_GAMEPADSTATES = 4


class MouseButton(IntFlag):
    """Mouse buttons as bits of the button state."""

    LEFT = 1
    RIGHT = 2
    MIDDLE = 4


class Button(Enum):
    """Buttons of an Xbox-style game pad."""

    A = auto()
    B = auto()
    X = auto()
    Y = auto()
    LEFT_SHOULDER = auto()
    RIGHT_SHOULDER = auto()
    LEFT_STICK = auto()
    RIGHT_STICK = auto()
    BACK = auto()
    START = auto()
    DPAD_UP = auto()
    DPAD_DOWN = auto()
    DPAD_LEFT = auto()
    DPAD_RIGHT = auto()


class ButtonState(Enum):
    """Whether a game pad button is held."""

    RELEASED = 0
    PRESSED = 1


# Joystick button numbers as reported for an XInput pad.
_BUTTON_LAYOUT: dict[int, Button] = {
    0: Button.A,
    1: Button.B,
    2: Button.X,
    3: Button.Y,
    4: Button.RIGHT_SHOULDER,
    5: Button.LEFT_SHOULDER,
    6: Button.RIGHT_STICK,
    7: Button.LEFT_STICK,
    8: Button.BACK,
    9: Button.START,
    10: Button.DPAD_RIGHT,
    11: Button.DPAD_LEFT,
    12: Button.DPAD_DOWN,
    13: Button.DPAD_UP,
}

# Flat joystick axis numbers mapped to (stick, axis): sticks 0 and 1 are the
# thumbsticks, 2 and 3 the left and right triggers.
_AXIS_LAYOUT: dict[int, tuple[int, int]] = {
    0: (0, 0),
    1: (0, 1),
    2: (1, 0),
    3: (1, 1),
    4: (2, 0),
    5: (3, 0),
}

_MOUSE_BUTTONS: dict[int, MouseButton] = {
    1: MouseButton.LEFT,
    2: MouseButton.MIDDLE,
    3: MouseButton.RIGHT,
}


def _released_buttons() -> dict[Button, ButtonState]:
    return {button: ButtonState.RELEASED for button in Button}


@dataclass
class GamePadState:
    """The buttons, thumbsticks and triggers of one game pad."""

    joystick_id: int | None = None
    is_connected: bool = False
    buttons: dict[Button, ButtonState] = field(default_factory=_released_buttons)
    left_thumbstick: pygame.math.Vector2 = field(default_factory=pygame.math.Vector2)
    right_thumbstick: pygame.math.Vector2 = field(default_factory=pygame.math.Vector2)
    left_trigger: float = 0.0
    right_trigger: float = 0.0

    def reset(self) -> None:
        """Release every button and centre the sticks and triggers."""
        self.buttons = _released_buttons()
        self.left_thumbstick = pygame.math.Vector2()
        self.right_thumbstick = pygame.math.Vector2()
        self.left_trigger = 0.0
        self.right_trigger = 0.0

    def is_button_down(self, button: Button) -> bool:
        """Whether button is held."""
        return self.buttons[button] is ButtonState.PRESSED

    def is_button_up(self, button: Button) -> bool:
        """Whether button is not held."""
        return not self.is_button_down(button)

    def copy(self) -> GamePadState:
        """An independent copy of the state."""
        return replace(
            self,
            buttons=dict(self.buttons),
            left_thumbstick=pygame.math.Vector2(self.left_thumbstick),
            right_thumbstick=pygame.math.Vector2(self.right_thumbstick),
        )


class InputState:
    """Input from every device, fed by events and snapshotted once per frame."""

    def __init__(self) -> None:
        self._keys: set[int] = set()
        self._previous_keys: frozenset[int] = frozenset()
        self._mouse_position = Point()
        self._mouse_buttons = MouseButton(0)
        self._previous_mouse_buttons = MouseButton(0)
        self._pads = [GamePadState() for _ in range(MAX_NUM_GAMEPADSTATES)]
        self._previous_pads = [pad.copy() for pad in self._pads]
        self._index_by_id: dict[int, int] = {}
        self._joysticks: dict[int, Any] = {}

    def update(self) -> None:
        """Make the current state the previous one; call once per frame after use."""
        self._previous_keys = frozenset(self._keys)
        self._previous_mouse_buttons = self._mouse_buttons
        self._previous_pads = [pad.copy() for pad in self._pads]

    def handle_event(self, event: pygame.event.Event) -> None:
        """Apply one pygame event to the current state."""
        kind = event.type
        if kind == pygame.KEYDOWN:
            self._keys.add(event.key)
        elif kind == pygame.KEYUP:
            self._keys.discard(event.key)
        elif kind == pygame.MOUSEMOTION:
            self._mouse_position = Point(*event.pos)
        elif kind in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
            if hasattr(event, "pos"):
                self._mouse_position = Point(*event.pos)
            button = _MOUSE_BUTTONS.get(event.button)
            if button is not None:
                if kind == pygame.MOUSEBUTTONDOWN:
                    self._mouse_buttons |= button
                else:
                    self._mouse_buttons &= ~button
        elif kind == pygame.JOYDEVICEADDED:
            joystick = pygame.joystick.Joystick(event.device_index)
            instance_id = joystick.get_instance_id()
            self._joysticks[instance_id] = joystick
            self.add_game_pad(instance_id)
        elif kind == pygame.JOYDEVICEREMOVED:
            self._remove_game_pad(event.instance_id)
        elif kind == pygame.JOYAXISMOTION:
            layout = _AXIS_LAYOUT.get(event.axis)
            if layout is not None:
                self.update_axis(event.instance_id, layout[0], layout[1], event.value)
        elif kind == pygame.JOYBUTTONDOWN:
            self.update_button(event.instance_id, event.button, ButtonState.PRESSED)
        elif kind == pygame.JOYBUTTONUP:
            self.update_button(event.instance_id, event.button, ButtonState.RELEASED)

    def add_game_pad(self, joystick_id: int) -> int | None:
        """Give a joystick the first free slot; return its index, or None if all are taken."""
        if joystick_id in self._index_by_id:
            return self._index_by_id[joystick_id]
        for index, pad in enumerate(self._pads):
            if pad.joystick_id is None:
                pad.joystick_id = joystick_id
                pad.is_connected = True
                pad.reset()
                self._previous_pads[index] = pad.copy()
                self._index_by_id[joystick_id] = index
                return index
        return None

    def _remove_game_pad(self, joystick_id: int) -> None:
        index = self._index_by_id.pop(joystick_id, None)
        self._joysticks.pop(joystick_id, None)
        if index is None:
            return
        pad = self._pads[index]
        pad.reset()
        pad.joystick_id = None
        pad.is_connected = False

    def update_axis(self, joystick_id: int, stick: int, axis: int, position: float) -> None:
        """Record a stick or trigger position for a known joystick."""
        index = self._index_by_id.get(joystick_id)
        if index is None:
            return
        pad = self._pads[index]
        if stick == 0 and axis == 0:
            pad.left_thumbstick.x = position
        elif stick == 0 and axis == 1:
            pad.left_thumbstick.y = position
        elif stick == 1 and axis == 0:
            pad.right_thumbstick.x = position
        elif stick == 1 and axis == 1:
            pad.right_thumbstick.y = position
        elif stick == 2:
            pad.left_trigger = position
        elif stick == 3:
            pad.right_trigger = position

    def update_button(self, joystick_id: int, button: int, state: ButtonState) -> None:
        """Record a button change, by joystick button number, for a known joystick."""
        index = self._index_by_id.get(joystick_id)
        mapped = _BUTTON_LAYOUT.get(button)
        if index is None or mapped is None:
            return
        self._pads[index].buttons[mapped] = state

    def is_key_down(self, key: int) -> bool:
        """Whether key is held."""
        return key in self._keys

    def is_key_up(self, key: int) -> bool:
        """Whether key is not held."""
        return key not in self._keys

    def is_new_key_press(self, key: int) -> bool:
        """Whether key went down this frame."""
        return self.is_key_down(key) and key not in self._previous_keys

    def is_new_key_release(self, key: int) -> bool:
        """Whether key came up this frame."""
        return self.is_key_up(key) and key in self._previous_keys

    @property
    def mouse_position(self) -> Point:
        """The latest mouse cursor position."""
        return Point(self._mouse_position.x, self._mouse_position.y)

    def is_mouse_button_down(self, button: MouseButton) -> bool:
        """Whether the mouse button is held."""
        return bool(self._mouse_buttons & button)

    def is_mouse_button_up(self, button: MouseButton) -> bool:
        """Whether the mouse button is not held."""
        return not self.is_mouse_button_down(button)

    def was_mouse_button_down(self, button: MouseButton) -> bool:
        """Whether the mouse button was held last frame."""
        return bool(self._previous_mouse_buttons & button)

    def was_mouse_button_up(self, button: MouseButton) -> bool:
        """Whether the mouse button was not held last frame."""
        return not self.was_mouse_button_down(button)

    def is_new_mouse_button_press(self, button: MouseButton) -> bool:
        """Whether the mouse button went down this frame."""
        return self.is_mouse_button_down(button) and self.was_mouse_button_up(button)

    def is_new_mouse_button_release(self, button: MouseButton) -> bool:
        """Whether the mouse button came up this frame."""
        return self.was_mouse_button_down(button) and self.is_mouse_button_up(button)

    def _first_index(self, controlling_index: int, test) -> int | None:
        if 0 <= controlling_index < MAX_NUM_GAMEPADSTATES:
            return controlling_index if test(controlling_index) else None
        return next((i for i in range(MAX_NUM_GAMEPADSTATES) if test(i)), None)

    def button_up_index(self, button: Button, controlling_index: int = -1) -> int | None:
        """Index of the pad whose button is up; any pad if the index is out of range."""
        return self._first_index(
            controlling_index, lambda i: self._pads[i].is_button_up(button)
        )

    def button_down_index(self, button: Button, controlling_index: int = -1) -> int | None:
        """Index of the pad whose button is down; any pad if the index is out of range."""
        return self._first_index(
            controlling_index, lambda i: self._pads[i].is_button_down(button)
        )

    def new_button_press_index(self, button: Button, controlling_index: int = -1) -> int | None:
        """Index of the pad whose button went down this frame, or None."""
        return self._first_index(
            controlling_index,
            lambda i: self._pads[i].is_button_down(button)
            and self._previous_pads[i].is_button_up(button),
        )

    def new_button_release_index(
        self, button: Button, controlling_index: int = -1
    ) -> int | None:
        """Index of the pad whose button came up this frame, or None."""
        return self._first_index(
            controlling_index,
            lambda i: self._pads[i].is_button_up(button)
            and self._previous_pads[i].is_button_down(button),
        )

    def game_pad_state(self, index: int) -> GamePadState:
        """A copy of the current state of the pad at index."""
        return self._pads[index].copy()