"""Base class of interactive GUI elements and the actions they receive."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum, auto

from firefly2d.geometry import Vec2
from firefly2d.transform import Transform

__all__ = ["NO_ELEMENT_CODE", "GuiAction", "PointerState", "GuiElement"]

NO_ELEMENT_CODE = 0xFFFFFFFF
"""Element code given to helper elements that report nothing."""


class GuiAction(Enum):
    UNKNOWN = auto()
    LEFT_BUTTON_DOWN = auto()
    LEFT_BUTTON_UP = auto()
    RIGHT_BUTTON_DOWN = auto()
    RIGHT_BUTTON_UP = auto()
    MIDDLE_BUTTON_DOWN = auto()
    MIDDLE_BUTTON_UP = auto()
    MOUSE_HOVERING = auto()
    MOUSE_MOVED_OVER = auto()
    MOUSE_MOVED_OUT = auto()
    REMOVE_FOCUS = auto()
    FOCUS = auto()


@dataclass(frozen=True)
class PointerState:
    """The mouse as seen in one frame: position in space and the left button."""

    position: Vec2 = Vec2()
    pressed: bool = False
    released: bool = False
    held: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "position", Vec2.of(self.position))


class GuiElement:
    """A rectangular element centred on its position, sized by its scale.

    ``update`` looks at the pointer and returns the actions the element wants
    the GUI engine to deliver; ``apply_action`` is how they are delivered.
    """

    def __init__(
        self,
        name: int = 0,
        element_code: int = 0,
        position: Vec2 | Iterable[float] = Vec2(),
        scale: Vec2 | Iterable[float] = Vec2(1.0, 1.0),
        layer: int = 0,
    ) -> None:
        self.name = name
        self.element_code = element_code
        self.transform = Transform(Vec2.of(position), Vec2.of(scale), 0.0)
        self.layer = layer
        self.active = True
        self.visible = True
        self.status = False
        self.is_pressed = False
        self.is_mouse_on = False

    def contains(self, point: Vec2 | Iterable[float]) -> bool:
        """True if ``point`` lies inside the element's rectangle, edges included."""
        point = Vec2.of(point)
        pos = self.transform.position.get()
        rect = self.transform.scale.get()
        return (
            pos.x - rect.x / 2.0 <= point.x <= pos.x + rect.x / 2.0
            and pos.y - rect.y / 2.0 <= point.y <= pos.y + rect.y / 2.0
        )

    def set_active(self, active: bool) -> None:
        self.active = bool(active)
        self.is_pressed = False

    def apply_action(self, action: GuiAction) -> None:
        if action is GuiAction.LEFT_BUTTON_UP:
            self.is_pressed = False
        elif action is GuiAction.LEFT_BUTTON_DOWN:
            self.is_pressed = True
        elif action in (GuiAction.MOUSE_MOVED_OVER, GuiAction.MOUSE_HOVERING):
            self.is_mouse_on = True
        elif action is GuiAction.MOUSE_MOVED_OUT:
            self.is_mouse_on = False
            self.is_pressed = False

    def update(self, elapsed: float, pointer: PointerState) -> list[GuiAction]:
        """Look at the pointer; the plain element asks for nothing."""
        return []