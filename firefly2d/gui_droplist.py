"""A drop-down list of text entries."""

from __future__ import annotations

import threading
from collections.abc import Iterable

from firefly2d.geometry import Vec2
from firefly2d.gui_element import NO_ELEMENT_CODE, GuiAction, GuiElement, PointerState
from firefly2d.gui_panel import GuiPanel
from firefly2d.gui_text import GuiText

__all__ = ["GuiDroplist"]


class GuiDroplist(GuiElement):
    """A list that shows the selected entry and opens downwards on a click.

    Each entry takes one row as tall as the element; ``text_start_offset``
    shifts the entries' text horizontally from the element's centre.
    """

    def __init__(
        self,
        name: int,
        element_code: int,
        main_texture: int,
        background_texture: int,
        font: int,
        text_start_offset: float,
        position: Vec2 | Iterable[float],
        scale: Vec2 | Iterable[float],
        layer: int,
    ) -> None:
        super().__init__(name, element_code, position, scale, layer)
        self.texture_name = main_texture
        self.font = font
        self.text_start_offset = float(text_start_offset)
        self.panel = GuiPanel(0, NO_ELEMENT_CODE, background_texture, (0, 0), (1, 1), layer)
        self.panel.visible = False
        self._entries: list[str] = []
        self._texts: list[GuiText] = []
        self._selected = -1
        self._first_in_view = 0
        self._click_position = Vec2()
        self._lock = threading.RLock()

    @property
    def entries(self) -> tuple[str, ...]:
        return tuple(self._entries)

    @property
    def texts(self) -> tuple[GuiText, ...]:
        return tuple(self._texts)

    @property
    def selected_id(self) -> int:
        return self._selected

    def _panel_entries(self) -> int:
        count = len(self._texts)
        return count if self._selected < 0 else max(count - 1, 0)

    def _inside(self, point: Vec2) -> bool:
        pos = self.transform.position.get()
        rect = self.transform.scale.get()
        extra = self._panel_entries() * rect.y if self.status else 0.0
        return (
            pos.x - rect.x / 2.0 <= point.x <= pos.x + rect.x / 2.0
            and pos.y - rect.y / 2.0 - extra <= point.y <= pos.y + rect.y / 2.0
        )

    def _show_selected(self, index: int) -> None:
        pos = self.transform.position.get()
        text = self._texts[index]
        text.transform.position.set(Vec2(pos.x + self.text_start_offset, pos.y))
        text.visible = True
        self._selected = index

    def add_entry(self, name: str) -> None:
        with self._lock:
            self._entries.append(name)
            text = GuiText(
                0, NO_ELEMENT_CODE, self.font, (0, 0), self.transform.scale.get(), self.layer + 1
            )
            text.set_text(name)
            text.visible = False
            self._texts.append(text)

    def add_entries(self, names: Iterable[str]) -> None:
        with self._lock:
            for name in names:
                self.add_entry(name)

    def select_by_name(self, name: str) -> None:
        """Select the entry called ``name``; the last one wins if several match."""
        if self.status:
            self.close()
        with self._lock:
            for index, entry in enumerate(self._entries):
                if entry == name:
                    if 0 <= self._selected < len(self._entries):
                        self._texts[self._selected].visible = False
                    self._show_selected(index)

    def select_by_id(self, index: int) -> None:
        """Select entry ``index``; an index out of range is ignored."""
        if self.status:
            self.close()
        with self._lock:
            if 0 <= index < len(self._entries):
                if 0 <= self._selected < len(self._entries):
                    self._texts[self._selected].visible = False
                self._show_selected(index)

    def selected_name(self) -> str:
        """The selected entry, or an empty string if none is selected."""
        with self._lock:
            if 0 <= self._selected < len(self._entries):
                return self._entries[self._selected]
            return ""

    def open(self) -> None:
        """Show every entry below the element, over the background panel."""
        with self._lock:
            self.status = True
            pos = self.transform.position.get()
            rect = self.transform.scale.get()
            base = Vec2(pos.x, pos.y - rect.y)
            row = 0
            for index, text in enumerate(self._texts):
                if index == self._selected:
                    continue
                text.visible = True
                text.transform.position.set(
                    Vec2(base.x + self.text_start_offset, base.y - rect.y * row)
                )
                row += 1
            self.panel.visible = True
            panel_scale = Vec2(rect.x, self._panel_entries() * rect.y)
            self.panel.transform.scale.set(panel_scale)
            self.panel.transform.position.set(
                Vec2(pos.x, pos.y - rect.y / 2.0 - panel_scale.y / 2.0)
            )

    def close(self) -> None:
        """Hide every entry but the selected one."""
        with self._lock:
            self.status = False
            for index, text in enumerate(self._texts):
                if index != self._selected:
                    text.visible = False
            self.panel.visible = False

    def set_active(self, active: bool) -> None:
        self.active = bool(active)
        self.status = False
        self.is_pressed = False
        self.is_mouse_on = False
        self._first_in_view = 0
        if not self.active:
            self.close()

    def apply_action(self, action: GuiAction) -> None:
        if action is GuiAction.LEFT_BUTTON_UP:
            self.is_pressed = False
            if not self.status:
                self.open()
                return
            self.status = False
            pos = self.transform.position.get()
            rect = self.transform.scale.get()
            index = int((pos.y + rect.y / 2.0 - self._click_position.y) / rect.y)
            if index != 0:
                index -= 1
                if self._selected >= 0 and index >= self._selected:
                    index += 1
                with self._lock:
                    if 0 <= index < len(self._texts):
                        self._show_selected(index)
            self.close()
        elif action is GuiAction.LEFT_BUTTON_DOWN:
            self.is_pressed = True
        elif action in (GuiAction.MOUSE_MOVED_OVER, GuiAction.MOUSE_HOVERING):
            self.is_mouse_on = True

    def update(self, elapsed: float, pointer: PointerState) -> list[GuiAction]:
        inside = self._inside(pointer.position)

        if self.is_mouse_on and not inside:
            self.is_mouse_on = False
            return [GuiAction.MOUSE_MOVED_OUT]

        if self.is_pressed:
            if pointer.released:
                self.is_pressed = False
                if inside:
                    self._click_position = pointer.position
                    return [GuiAction.LEFT_BUTTON_UP]
            return []

        if pointer.pressed:
            if inside:
                return [GuiAction.LEFT_BUTTON_DOWN]
            if self.status:
                self.close()
            return []

        if inside:
            if self.is_mouse_on:
                return [GuiAction.MOUSE_HOVERING]
            return [GuiAction.MOUSE_MOVED_OVER]
        return []