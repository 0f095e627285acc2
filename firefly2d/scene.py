"""Scenes: the unit of content the engine loads and frees."""

from __future__ import annotations

from typing import Any

from firefly2d.gui_element import GuiAction
from firefly2d.options import GameEvent

__all__ = ["Scene"]


class Scene:
    """A scene identified by a number; subclasses fill in the callbacks."""

    def __init__(self, scene_id: int) -> None:
        self.id = scene_id
        self._loading_percentage = 0.0
        self._starting_tasks: int | None = None

    def scene_callback(self, event: GameEvent, time_elapsed: float) -> None:
        """Called every game frame."""

    def gui_listener(self, element: Any, action: GuiAction) -> None:
        """Called when an action happens on one of the scene's GUI elements."""

    def on_load(self) -> None:
        """Called once when the scene is loaded."""

    def on_free(self) -> None:
        """Called once when the scene is freed."""

    def init_loading_state(self, pending_tasks: int) -> None:
        """Start measuring loading progress from ``pending_tasks`` queued tasks."""
        self._starting_tasks = pending_tasks
        self._loading_percentage = 0.0

    def loading_state(self, pending_tasks: int) -> float:
        """Approximate loading percentage; it never goes backwards."""
        if self._starting_tasks is None:
            raise RuntimeError("loading state has not been initialised")
        if self._starting_tasks != 0:
            current = (self._starting_tasks - pending_tasks) / self._starting_tasks * 100.0
            if current >= self._loading_percentage:
                self._loading_percentage = current
        return self._loading_percentage