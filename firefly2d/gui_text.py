"""A line of text drawn with a font atlas, with an optional blinking cursor."""

from __future__ import annotations

from collections.abc import Iterable

from firefly2d.geometry import Vec2
from firefly2d.gui_element import GuiElement, PointerState

__all__ = ["CURSOR_BLINK_INTERVAL", "GuiText"]

CURSOR_BLINK_INTERVAL = 0.5
"""Seconds between two blinks of the text cursor."""


class GuiText(GuiElement):
    """Text shown with the font atlas ``atlas_name``."""

    def __init__(
        self,
        name: int,
        element_code: int,
        atlas_name: int,
        position: Vec2 | Iterable[float],
        scale: Vec2 | Iterable[float],
        layer: int,
    ) -> None:
        super().__init__(name, element_code, position, scale, layer)
        self.atlas_name = atlas_name
        self.cursor_pos = -1
        self._text = ""
        self._show_cursor = False
        self._cursor_blink = False
        self._time_to_blink = CURSOR_BLINK_INTERVAL

    @property
    def text(self) -> str:
        return self._text

    def __len__(self) -> int:
        return len(self._text)

    @property
    def cursor_shown(self) -> bool:
        """True if the cursor is switched on."""
        return self._show_cursor

    @property
    def cursor_visible(self) -> bool:
        """True if the cursor is on and in the lit half of its blink."""
        return self._show_cursor and self._cursor_blink

    @property
    def drawn_cursor(self) -> int:
        """The cursor index to draw this frame, or -1 for none."""
        return self.cursor_pos if self.cursor_visible else -1

    def set_text(self, text: str) -> None:
        self._text = text

    def append_text(self, text: str) -> None:
        self._text += text

    def insert_text(self, text: str, index: int) -> int:
        """Insert ``text`` before ``index`` and return how many characters went in.

        An index past the end, or a negative one, appends.
        """
        if index < 0 or index >= len(self._text):
            self._text += text
        else:
            self._text = self._text[:index] + text + self._text[index:]
        return len(text)

    def delete_char(self, index: int) -> None:
        if not 0 <= index < len(self._text):
            raise IndexError(f"character index {index} out of range")
        self._text = self._text[:index] + self._text[index + 1:]

    def show_cursor(self, show: bool) -> None:
        self._cursor_blink = True
        self._show_cursor = bool(show)

    def update(self, elapsed: float, pointer: PointerState | None = None) -> list:
        """Advance the cursor blink; text never asks for actions."""
        if self._show_cursor:
            self._time_to_blink -= elapsed
            if self._time_to_blink < 0:
                self._time_to_blink = CURSOR_BLINK_INTERVAL
                self._cursor_blink = not self._cursor_blink
        return []