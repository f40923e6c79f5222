"""Keyboard and mouse state tracked frame by frame."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum

from .module import WINDOW_SIZE, Module, UpdateStatus

MAX_KEYS = 300
MAX_MOUSE_BUTTONS = 5

SCANCODE_A = 4
SCANCODE_D = 7
SCANCODE_F = 9
SCANCODE_S = 22
SCANCODE_W = 26
SCANCODE_ESCAPE = 41
SCANCODE_LSHIFT = 225
SCANCODE_LALT = 226

BUTTON_LEFT = 1
BUTTON_MIDDLE = 2
BUTTON_RIGHT = 3


class KeyState(IntEnum):
    IDLE = 0
    DOWN = 1
    REPEAT = 2
    UP = 3


class EventType(Enum):
    MOUSE_WHEEL = "mouse_wheel"
    MOUSE_MOTION = "mouse_motion"
    QUIT = "quit"
    DROP_FILE = "drop_file"
    WINDOW_RESIZED = "window_resized"


@dataclass(frozen=True)
class InputEvent:
    """One window-system event; only the fields that fit its type are used."""

    type: EventType
    x: int = 0
    y: int = 0
    xrel: int = 0
    yrel: int = 0
    wheel: int = 0
    path: str = ""
    width: int = 0
    height: int = 0


def next_key_state(state, pressed) -> KeyState:
    """The state of a key or button after one frame, given whether it is held."""
    state = KeyState(state)
    if pressed:
        return KeyState.DOWN if state is KeyState.IDLE else KeyState.REPEAT
    if state in (KeyState.DOWN, KeyState.REPEAT):
        return KeyState.UP
    return KeyState.IDLE


class Input(Module):
    """Tracks key and mouse button states, the mouse position, motion and wheel."""

    def __init__(self, app=None, start_enabled=True) -> None:
        super().__init__(app, start_enabled)
        self.keyboard = [KeyState.IDLE] * MAX_KEYS
        self.mouse_buttons = [KeyState.IDLE] * MAX_MOUSE_BUTTONS
        self.mouse_x = 0
        self.mouse_y = 0
        self.mouse_z = 0
        self.mouse_x_motion = 0
        self.mouse_y_motion = 0

    @property
    def mouse_wheel(self) -> int:
        return self.mouse_z

    def init(self) -> bool:
        self._log("Input Initialization")
        self.keyboard = [KeyState.IDLE] * MAX_KEYS
        self.mouse_buttons = [KeyState.IDLE] * MAX_MOUSE_BUTTONS
        return True

    def process(
        self, pressed_keys=(), pressed_buttons=(), mouse_x=0, mouse_y=0, events=()
    ) -> UpdateStatus:
        """Advance one frame from the held keys and buttons, the mouse and the events.

        Returns STOP when a quit event arrives or escape is released.
        """
        held_keys = set(pressed_keys)
        self.keyboard = [
            next_key_state(state, code in held_keys) for code, state in enumerate(self.keyboard)
        ]

        self.mouse_x = int(mouse_x) // WINDOW_SIZE
        self.mouse_y = int(mouse_y) // WINDOW_SIZE
        self.mouse_z = 0

        held_buttons = set(pressed_buttons)
        self.mouse_buttons = [
            next_key_state(state, button in held_buttons)
            for button, state in enumerate(self.mouse_buttons)
        ]

        self.mouse_x_motion = self.mouse_y_motion = 0

        quit_requested = False
        for event in events:
            if event.type is EventType.MOUSE_WHEEL:
                self.mouse_z = event.wheel
            elif event.type is EventType.MOUSE_MOTION:
                self.mouse_x = event.x // WINDOW_SIZE
                self.mouse_y = event.y // WINDOW_SIZE
                self.mouse_x_motion = event.xrel // WINDOW_SIZE
                self.mouse_y_motion = event.yrel // WINDOW_SIZE
            elif event.type is EventType.QUIT:
                quit_requested = True
            elif event.type is EventType.DROP_FILE:
                if self.app is not None:
                    self.app.gengine.create_dropped_file(event.path)
            elif event.type is EventType.WINDOW_RESIZED:
                if self.app is not None:
                    self.app.window.resize_window(event.width, event.height)

        if quit_requested or self.keyboard[SCANCODE_ESCAPE] is KeyState.UP:
            return UpdateStatus.STOP
        return UpdateStatus.CONTINUE

    def key(self, key_id) -> KeyState:
        if not 0 <= key_id < MAX_KEYS:
            raise IndexError(f"key {key_id} out of range")
        return self.keyboard[key_id]

    def mouse_button(self, button_id) -> KeyState:
        if not 0 <= button_id < MAX_MOUSE_BUTTONS:
            raise IndexError(f"mouse button {button_id} out of range")
        return self.mouse_buttons[button_id]

    def clean_up(self) -> bool:
        self._log("Quitting SDL input event subsystem")
        self.keyboard = [KeyState.IDLE] * MAX_KEYS
        return True