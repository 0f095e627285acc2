"""A rectangular panel that catches clicks but reports nothing of its own."""

from __future__ import annotations

from collections.abc import Iterable

from firefly2d.geometry import Vec2
from firefly2d.gui_element import GuiAction, GuiElement, PointerState

__all__ = ["GuiPanel"]


class GuiPanel(GuiElement):
    """A panel drawn with one texture."""

    def __init__(
        self,
        name: int,
        element_code: int,
        texture_name: int,
        position: Vec2 | Iterable[float],
        scale: Vec2 | Iterable[float],
        layer: int,
    ) -> None:
        super().__init__(name, element_code, position, scale, layer)
        self.texture_name = texture_name

    def update(self, elapsed: float, pointer: PointerState) -> list[GuiAction]:
        if self.visible and pointer.pressed and self.contains(pointer.position):
            return [GuiAction.LEFT_BUTTON_DOWN]
        return []