"""A single-line edit box with a hint shown while it is empty."""

from __future__ import annotations

import string
import threading
from collections.abc import Callable, Iterable

from firefly2d.geometry import Vec2
from firefly2d.gui_element import NO_ELEMENT_CODE, GuiAction, GuiElement, PointerState
from firefly2d.gui_text import GuiText

__all__ = ["GuiEditbox"]

_TEXT_SCALE = 0.9


class GuiEditbox(GuiElement):
    """An edit box that takes text while it has focus.

    ``text_input`` is called with True when the box takes focus and with
    False when it loses it, so keyboard text input can be switched on and off.
    """

    def __init__(
        self,
        name: int,
        element_code: int,
        texture_name: int,
        hint_text: str,
        text_font: int,
        hint_font: int,
        position: Vec2 | Iterable[float],
        scale: Vec2 | Iterable[float],
        layer: int,
        text_input: Callable[[bool], None] | None = None,
    ) -> None:
        super().__init__(name, element_code, position, scale, layer)
        self.texture_name = texture_name
        self._text_input = text_input
        self._numeric = False
        self._cursor = 0
        self._lock = threading.Lock()

        pos = Vec2.of(position)
        scale = Vec2.of(scale)
        text_scale = Vec2(scale.x * _TEXT_SCALE, scale.y * _TEXT_SCALE)
        self.text_element = GuiText(0, NO_ELEMENT_CODE, text_font, pos, text_scale, layer + 1)
        self.text_element.visible = True
        self.text_element.cursor_pos = 0
        self.hint_element = GuiText(0, NO_ELEMENT_CODE, hint_font, pos, text_scale, layer + 1)
        self.hint_element.set_text(hint_text)

    @property
    def text(self) -> str:
        return self.text_element.text

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def is_digit_only(self) -> bool:
        return self._numeric

    def _notify_text_input(self, enabled: bool) -> None:
        if self._text_input is not None:
            self._text_input(enabled)

    def _move_cursor(self, position: int) -> None:
        self._cursor = position
        self.text_element.cursor_pos = position

    def set_text(self, text: str) -> None:
        self.text_element.set_text(text)
        self.hint_element.visible = text == ""

    def set_hint_text(self, hint_text: str) -> None:
        self.hint_element.set_text(hint_text)

    def digit_only(self, digit_only: bool) -> None:
        """Accept only the digits 0-9 from now on if ``digit_only`` is true."""
        with self._lock:
            self._numeric = bool(digit_only)

    def insert_text(self, text: str) -> None:
        """Insert ``text`` at the cursor and move the cursor past it."""
        with self._lock:
            if self._numeric:
                text = "".join(ch for ch in text if ch in string.digits)
            inserted = self.text_element.insert_text(text, self._cursor)
            self._move_cursor(self._cursor + inserted)
            if len(self.text_element) > 0:
                self.hint_element.visible = False

    def backspace(self) -> None:
        with self._lock:
            if self._cursor > 0:
                self.text_element.delete_char(self._cursor - 1)
                self._move_cursor(self._cursor - 1)
            if len(self.text_element) == 0:
                self.hint_element.visible = True

    def cancel(self) -> None:
        """Delete the character after the cursor."""
        with self._lock:
            if self._cursor < len(self.text_element):
                self.text_element.delete_char(self._cursor)
                self._move_cursor(self._cursor)
            if len(self.text_element) == 0:
                self.hint_element.visible = True

    def increment_cursor(self) -> None:
        with self._lock:
            if self._cursor < len(self.text_element):
                self._move_cursor(self._cursor + 1)

    def decrement_cursor(self) -> None:
        with self._lock:
            if self._cursor > 0:
                self._move_cursor(self._cursor - 1)

    def set_active(self, active: bool) -> None:
        self.active = bool(active)
        self.status = False
        self.is_pressed = False
        self.is_mouse_on = False

    def apply_action(self, action: GuiAction) -> None:
        if action is GuiAction.FOCUS:
            self.is_pressed = False
            self._notify_text_input(True)
            self.text_element.show_cursor(True)
            self.status = True
        elif action is GuiAction.REMOVE_FOCUS:
            self.status = False
            self._notify_text_input(False)
            self.text_element.show_cursor(False)
        elif action is GuiAction.LEFT_BUTTON_DOWN:
            self.is_pressed = True
        elif action in (GuiAction.MOUSE_MOVED_OVER, GuiAction.MOUSE_HOVERING):
            self.is_mouse_on = True
        elif action is GuiAction.MOUSE_MOVED_OUT:
            self.is_mouse_on = False
            self.is_pressed = False

    def update(self, elapsed: float, pointer: PointerState) -> list[GuiAction]:
        inside = self.contains(pointer.position)

        if self.status and pointer.pressed and not inside:
            self.is_mouse_on = False
            self.is_pressed = False
            return [GuiAction.REMOVE_FOCUS]

        if not self.is_mouse_on:
            return [GuiAction.MOUSE_MOVED_OVER] if inside else []

        if not inside:
            self.is_mouse_on = False
            self.is_pressed = False
            return [GuiAction.MOUSE_MOVED_OUT]

        actions = [GuiAction.MOUSE_HOVERING]
        if self.is_pressed:
            if pointer.released:
                self.is_pressed = False
                actions.append(GuiAction.FOCUS)
        elif pointer.pressed:
            actions.append(GuiAction.LEFT_BUTTON_DOWN)
        return actions