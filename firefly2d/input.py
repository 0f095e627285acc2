"""Keyboard and mouse state, gathered from events one frame at a time."""

from __future__ import annotations

import threading
from enum import Enum
from typing import Protocol

__all__ = [
    "NUM_SCANCODES",
    "NUM_MOUSE_BUTTONS",
    "SCANCODE_BACKSPACE",
    "SCANCODE_DELETE",
    "SCANCODE_RIGHT",
    "SCANCODE_LEFT",
    "InputEvent",
    "TextEditor",
    "InputState",
]

NUM_SCANCODES = 512
NUM_MOUSE_BUTTONS = 10

SCANCODE_BACKSPACE = 42
SCANCODE_DELETE = 76
SCANCODE_RIGHT = 79
SCANCODE_LEFT = 80


class InputEvent(Enum):
    START_TEXT_INPUT = "start_text_input"
    STOP_TEXT_INPUT = "stop_text_input"
    QUIT_APP = "quit_app"


class TextEditor(Protocol):
    """What receives typed text and editing keys while text input is on."""

    def insert_text(self, text: str) -> None: ...
    def backspace(self) -> None: ...
    def cancel(self) -> None: ...
    def increment_cursor(self) -> None: ...
    def decrement_cursor(self) -> None: ...


def _check_scancode(scancode: int) -> int:
    if not 0 <= scancode < NUM_SCANCODES:
        raise ValueError(f"scancode {scancode} out of range 0..{NUM_SCANCODES - 1}")
    return scancode


def _check_button(button: int) -> int:
    if not 0 <= button < NUM_MOUSE_BUTTONS:
        raise ValueError(f"mouse button {button} out of range 0..{NUM_MOUSE_BUTTONS - 1}")
    return button


class InputState:
    """Which keys and mouse buttons were pressed, released or held this frame.

    While text input is on, key events go to ``editor`` as editing commands
    instead of being recorded as key presses.
    """

    def __init__(self, editor: TextEditor | None = None) -> None:
        self.editor = editor
        self._held_keys = [False] * NUM_SCANCODES
        self._pressed_keys = [False] * NUM_SCANCODES
        self._released_keys = [False] * NUM_SCANCODES
        self._held_buttons = [False] * NUM_MOUSE_BUTTONS
        self._pressed_buttons = [False] * NUM_MOUSE_BUTTONS
        self._released_buttons = [False] * NUM_MOUSE_BUTTONS
        self._last_click = (0, 0)
        self._mouse_position = (0, 0)
        self._last_wheel = (0, 0)
        self._wheel_moved = False
        self._mouse_moved = False
        self._last_event: InputEvent | None = None
        self._text_input_active = False
        self._requests: list[InputEvent] = []
        self._request_lock = threading.Lock()

    @property
    def text_input_active(self) -> bool:
        return self._text_input_active

    @property
    def last_click_position(self) -> tuple[int, int]:
        return self._last_click

    @property
    def mouse_position(self) -> tuple[int, int]:
        return self._mouse_position

    @property
    def last_wheel_movement(self) -> tuple[int, int]:
        return self._last_wheel

    @property
    def did_mouse_wheel_move(self) -> bool:
        return self._wheel_moved

    @property
    def did_mouse_move(self) -> bool:
        return self._mouse_moved

    def begin_new_frame(self) -> None:
        """Forget the presses and releases of the last frame, then apply requests."""
        self._pressed_keys = [False] * NUM_SCANCODES
        self._released_keys = [False] * NUM_SCANCODES
        self._pressed_buttons = [False] * NUM_MOUSE_BUTTONS
        self._released_buttons = [False] * NUM_MOUSE_BUTTONS
        self._wheel_moved = False
        self._mouse_moved = False
        self.poll_requests()

    def key_down(self, scancode: int, repeat: bool = False) -> None:
        _check_scancode(scancode)
        if self._text_input_active:
            self._edit(scancode)
            return
        if repeat:
            return
        self._pressed_keys[scancode] = True
        self._held_keys[scancode] = True

    def key_up(self, scancode: int) -> None:
        _check_scancode(scancode)
        if self._text_input_active:
            return
        self._released_keys[scancode] = True
        self._held_keys[scancode] = False

    def _edit(self, scancode: int) -> None:
        if self.editor is None:
            return
        if scancode == SCANCODE_BACKSPACE:
            self.editor.backspace()
        elif scancode == SCANCODE_DELETE:
            self.editor.cancel()
        elif scancode == SCANCODE_LEFT:
            self.editor.decrement_cursor()
        elif scancode == SCANCODE_RIGHT:
            self.editor.increment_cursor()

    def text_entered(self, text: str) -> None:
        """Hand typed text to the editor, if there is one."""
        if self.editor is not None:
            self.editor.insert_text(text)

    def mouse_down(self, button: int, x: int, y: int) -> None:
        _check_button(button)
        self._pressed_buttons[button] = True
        self._held_buttons[button] = True
        self._last_click = (x, y)

    def mouse_up(self, button: int, x: int, y: int) -> None:
        _check_button(button)
        self._released_buttons[button] = True
        self._held_buttons[button] = False
        self._last_click = (x, y)

    def mouse_motion(self, x: int, y: int) -> None:
        self._mouse_position = (x, y)
        self._mouse_moved = True

    def mouse_wheel(self, x: int, y: int) -> None:
        self._wheel_moved = True
        self._last_wheel = (x, y)

    def quit(self) -> None:
        """Record that the user asked to close the application."""
        self._last_event = InputEvent.QUIT_APP

    def was_key_pressed(self, scancode: int) -> bool:
        return self._pressed_keys[_check_scancode(scancode)]

    def was_key_released(self, scancode: int) -> bool:
        return self._released_keys[_check_scancode(scancode)]

    def is_key_held(self, scancode: int) -> bool:
        return self._held_keys[_check_scancode(scancode)]

    def was_mouse_button_pressed(self, button: int) -> bool:
        return self._pressed_buttons[_check_button(button)]

    def was_mouse_button_released(self, button: int) -> bool:
        return self._released_buttons[_check_button(button)]

    def is_mouse_button_held(self, button: int) -> bool:
        return self._held_buttons[_check_button(button)]

    def start_text_input(self) -> None:
        """Ask for text input to be switched on at the next poll."""
        with self._request_lock:
            self._requests.append(InputEvent.START_TEXT_INPUT)

    def stop_text_input(self) -> None:
        """Ask for text input to be switched off at the next poll."""
        with self._request_lock:
            self._requests.append(InputEvent.STOP_TEXT_INPUT)

    def poll_requests(self) -> list[InputEvent]:
        """Apply the queued text-input requests in order and return them."""
        with self._request_lock:
            requests, self._requests = self._requests, []
        for request in requests:
            if request is InputEvent.START_TEXT_INPUT:
                self._text_input_active = True
            elif request is InputEvent.STOP_TEXT_INPUT:
                self._text_input_active = False
        return requests

    def last_event(self) -> InputEvent | None:
        """QUIT_APP once the user has asked to quit, otherwise None."""
        return self._last_event