"""A horizontal slider whose value follows the mouse while the button is held."""

from __future__ import annotations

import threading
from collections.abc import Iterable

from firefly2d.geometry import Vec2
from firefly2d.gui_element import GuiAction, GuiElement, PointerState

__all__ = ["GuiSlider"]


class GuiSlider(GuiElement):
    """A slider between ``min_value`` and ``max_value``.

    ``min_range`` and ``max_range`` are the fractions of the element's width
    where the sliding part starts and ends. ``frames`` is the number of
    frames of the slider's sprite animation; the frame shown follows the value.
    """

    def __init__(
        self,
        name: int,
        element_code: int,
        position: Vec2 | Iterable[float],
        scale: Vec2 | Iterable[float],
        min_value: float,
        max_value: float,
        min_range: float,
        max_range: float,
        layer: int,
        frames: int = 0,
    ) -> None:
        if max_value <= min_value:
            raise ValueError("max_value must be greater than min_value")
        if max_range == min_range:
            raise ValueError("the response range must not be empty")
        super().__init__(name, element_code, position, scale, layer)
        self.min_value = float(min_value)
        self.max_value = float(max_value)
        self.min_range = float(min_range)
        self.max_range = float(max_range)
        self.frames = frames
        self.frame = 0
        self._value = self.min_value
        self._was_changed = True
        self._last_mouse_position = Vec2()
        self._lock = threading.Lock()

    @property
    def value(self) -> float:
        return self._value

    def set_value(self, value: float) -> None:
        """Set the value, clamped to the slider's bounds."""
        with self._lock:
            value = min(max(float(value), self.min_value), self.max_value)
            self._value = value
            self._was_changed = True
            if self.frames > 0:
                fraction = (value - self.min_value) / (self.max_value - self.min_value)
                self.frame = int(fraction * (self.frames - 1))

    def value_changed(self) -> bool:
        """True if the value changed since the last call."""
        changed = self._was_changed
        self._was_changed = False
        return changed

    def update(self, elapsed: float, pointer: PointerState) -> list[GuiAction]:
        inside = self.contains(pointer.position)
        if not self.is_mouse_on:
            return [GuiAction.MOUSE_MOVED_OVER] if inside else []
        if not inside:
            self.is_mouse_on = False
            self.is_pressed = False
            return [GuiAction.MOUSE_MOVED_OUT]

        actions = [GuiAction.MOUSE_HOVERING]
        if pointer.held:
            self._last_mouse_position = pointer.position
            actions.append(GuiAction.LEFT_BUTTON_DOWN)
        return actions

    def apply_action(self, action: GuiAction) -> None:
        if action is GuiAction.LEFT_BUTTON_DOWN:
            pos = self.transform.position.get()
            rect = self.transform.scale.get()
            size = rect.x * (self.max_range - self.min_range)
            start = (pos.x - rect.x / 2) + rect.x * self.min_range
            end = start + size
            span = self.max_value - self.min_value
            self.set_value(
                self.min_value + (self._last_mouse_position.x - start) * (span / (end - start))
            )
        elif action in (GuiAction.MOUSE_MOVED_OVER, GuiAction.MOUSE_HOVERING):
            self.is_mouse_on = True
        elif action is GuiAction.MOUSE_MOVED_OUT:
            self.is_mouse_on = False
            self.is_pressed = False